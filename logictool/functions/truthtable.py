r"""Truth-table rows and the enumeration order of variable assignments.

Row :math:`i` of a truth table over the variables :math:`v_0, \dots,
v_{n-1}` assigns to :math:`v_j` the bit :math:`(i \gg (n - 1 - j)) \mathbin{\&} 1`,
i.e., the first variable is the most significant bit:

>>> [row_values(i, 2) for i in range(4)]
[(False, False), (False, True), (True, False), (True, True)]
>>> row_index((True, False, True))
5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence


def row_values(index: int, n: int) -> tuple[bool, ...]:
    return tuple(bool((index >> (n - 1 - j)) & 1) for j in range(n))


def row_index(values: Sequence[bool]) -> int:
    """Inverse of :func:`row_values`.
    """
    index = 0
    for value in values:
        index = (index << 1) | int(value)
    return index


def assignments(variables: Sequence[str]) -> Iterator[dict[str, bool]]:
    """All assignments of `variables` in row order.

    >>> list(assignments(['a', 'b']))  # doctest: +NORMALIZE_WHITESPACE
    [{'a': False, 'b': False}, {'a': False, 'b': True},
     {'a': True, 'b': False}, {'a': True, 'b': True}]
    """
    n = len(variables)
    for i in range(1 << n):
        yield dict(zip(variables, row_values(i, n)))


def format_assignment(assignment: Mapping[str, bool]) -> str:
    """
    >>> format_assignment({'x1': True, 'x2': False})
    'x1 = true, x2 = false'
    """
    return ', '.join(f'{name} = {str(value).lower()}' for name, value in assignment.items())


@dataclass(frozen=True)
class TruthTableRow:
    """One row of a truth table. The values are stored as a vector aligned
    with the sorted variable names of the owning function.

    >>> row = TruthTableRow(('x1', 'x2', 'x3'), (True, False, True), True)
    >>> row['x2']
    False
    >>> str(row)
    'x1=1, x2=0, x3=1 → 1'
    """

    variables: tuple[str, ...]
    values: tuple[bool, ...]
    result: bool

    def __getitem__(self, name: str) -> bool:
        return self.values[self.variables.index(name)]

    def __str__(self) -> str:
        values = ', '.join(f'{name}={int(value)}' for name, value in self.assignment.items())
        return f'{values} → {int(self.result)}'

    @property
    def assignment(self) -> dict[str, bool]:
        """Name-keyed view of the values.
        """
        return dict(zip(self.variables, self.values))

    @property
    def index(self) -> int:
        """The position of this row within its truth table.
        """
        return row_index(self.values)

    def matches(self, test: Mapping[str, bool]) -> bool:
        """Check whether every variable in `test` occurs in this row with the
        same value. The row may have further variables that do not occur in
        `test`. A variable of `test` that is missing from the row makes the
        match fail.

        >>> row = TruthTableRow(('x1', 'x2', 'x3'), (True, False, True), True)
        >>> row.matches({'x1': True, 'x3': True})
        True
        >>> row.matches({'x1': True, 'x2': True})
        False
        >>> row.matches({'x1': True, 'y': True})
        False
        >>> row.matches({})
        True
        """
        assignment = self.assignment
        for name, value in test.items():
            if name not in assignment or assignment[name] != value:
                return False
        return True
