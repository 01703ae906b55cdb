r"""Boolean functions given by a function number or by a formula.

A boolean function of :math:`n` variables is determined by its truth table
with :math:`2^n` rows. Its *function number* is the integer whose binary
expansion, padded to :math:`2^n` digits, lists the results of the rows
starting with row :math:`0` as the most significant bit. For instance, the
function number :math:`11 = 00001011_2` of three variables yields:

>>> f = BooleanFunction.from_number(3, 11)
>>> [int(row.result) for row in f.truth_table]
[0, 0, 0, 0, 1, 0, 1, 1]

Hence :math:`f(x_1, x_2, x_3) = 1` exactly for :math:`x_1 x_2 x_3 \in \{100,
110, 111\}`, which is reflected in the perfect disjunctive normal form:

>>> f.dnf
'(x1 ∧ ¬x2 ∧ ¬x3) ∨ (x1 ∧ x2 ∧ ¬x3) ∨ (x1 ∧ x2 ∧ x3)'

Functions given by formulas have the variables occurring in the formula,
sorted lexicographically:

>>> g = BooleanFunction.from_formula('b → a')
>>> g.variable_names
('a', 'b')
>>> g.knf
'(a ∨ ¬b)'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Final, Mapping, Sequence, final

import sympy
from IPython.lib import pretty

from ..formulas.errors import ArgumentError
from ..formulas.evaluator import evaluate as evaluate_rpn
from ..formulas.lexer import tokenize
from ..formulas.operators import AND, FALSE, NOT, OR, TRUE, is_variable
from ..formulas.parser import to_rpn
from ..support.logging import Timer
from .metrics import FormulaMetrics
from .truthtable import TruthTableRow, format_assignment, row_values

from ..support.tracing import trace  # noqa

logger = logging.getLogger(__name__)

MAX_VARIABLES: Final = 10
"""The maximal number of variables of a function given by its number.
"""


class ComplexityLevel(Enum):
    """Advisory classification of the cost of a function by its number of
    variables. Truth tables grow exponentially with that number.

    >>> [ComplexityLevel.from_variable_count(n).name for n in (4, 5, 8, 11, 12)]
    ['LOW', 'MEDIUM', 'HIGH', 'VERY_HIGH', 'CRITICAL']
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    VERY_HIGH = 4
    CRITICAL = 5

    @classmethod
    def from_variable_count(cls, variable_count: int) -> ComplexityLevel:
        for bound, level in COMPLEXITY_BOUNDS:
            if variable_count <= bound:
                return level
        return cls.CRITICAL

    @property
    def warning(self) -> str:
        return COMPLEXITY_WARNINGS[self]


COMPLEXITY_BOUNDS: Final = (
    (4, ComplexityLevel.LOW),
    (6, ComplexityLevel.MEDIUM),
    (8, ComplexityLevel.HIGH),
    (11, ComplexityLevel.VERY_HIGH))

COMPLEXITY_WARNINGS: Final = {
    ComplexityLevel.LOW: '',
    ComplexityLevel.MEDIUM: 'note: medium computational complexity',
    ComplexityLevel.HIGH: 'warning: high computational complexity (O(2^n))',
    ComplexityLevel.VERY_HIGH: 'strong warning: very high computational complexity',
    ComplexityLevel.CRITICAL: 'critical warning: exponential complexity may '
                              'render the computation unresponsive'}


class NormalFormType(Enum):
    DNF = 1
    KNF = 2
    PERFECT_DNF = 3
    PERFECT_KNF = 4


@final
@dataclass(frozen=True)
class BooleanFunction:
    """An immutable boolean function together with its truth table and its
    perfect normal forms. Instances are created via :meth:`from_number` or
    :meth:`from_formula`.
    """

    variable_names: tuple[str, ...]
    """The variables in the order of the truth table columns.
    """

    truth_table: tuple[TruthTableRow, ...] = field(repr=False)
    """The :math:`2^n` rows in row order.
    """

    dnf: str = field(repr=False)
    """The perfect disjunctive normal form.
    """

    knf: str = field(repr=False)
    """The perfect conjunctive normal form.
    """

    original_formula: str = ''
    """The formula the function was created from, or ``''``.
    """

    function_number: int = -1
    """The function number the function was created from, or ``-1``.
    """

    complexity: ComplexityLevel = ComplexityLevel.LOW

    _rpn: tuple[str, ...] = field(default=(), repr=False, compare=False)

    @property
    def variable_count(self) -> int:
        return len(self.variable_names)

    @property
    def is_from_formula(self) -> bool:
        return self.function_number < 0

    @classmethod
    def from_number(cls, variable_count: int, function_number: int) -> BooleanFunction:
        """Create the function with number `function_number` of the variables
        ``x1``, ..., ``xn``, where ``n`` is `variable_count`.

        >>> BooleanFunction.from_number(2, 6).dnf
        '(¬x1 ∧ x2) ∨ (x1 ∧ ¬x2)'
        >>> BooleanFunction.from_number(11, 0)
        Traceback (most recent call last):
        ...
        logictool.formulas.errors.ArgumentError: number of variables must be in [1, 10], got 11
        >>> BooleanFunction.from_number(2, 16)
        Traceback (most recent call last):
        ...
        logictool.formulas.errors.ArgumentError: function number must be in [0, 15] for 2 variables, got 16
        """
        if not 1 <= variable_count <= MAX_VARIABLES:
            raise ArgumentError(f'number of variables must be in [1, {MAX_VARIABLES}], '
                                f'got {variable_count}')
        row_count = 1 << variable_count
        max_number = (1 << row_count) - 1
        if not 0 <= function_number <= max_number:
            bound = max_number if row_count <= 64 else f'2^{row_count} - 1'
            raise ArgumentError(f'function number must be in [0, {bound}] for '
                                f'{variable_count} variables, got {function_number}')
        variable_names = tuple(f'x{i}' for i in range(1, variable_count + 1))
        timer = Timer()
        truth_table = tuple(
            TruthTableRow(variable_names, row_values(i, variable_count),
                          bool((function_number >> (row_count - 1 - i)) & 1))
            for i in range(row_count))
        logger.debug(f'{row_count} rows from number {function_number} in {timer.get():.3f}s')
        return cls(variable_names, truth_table,
                   dnf=perfect_dnf(variable_names, truth_table),
                   knf=perfect_knf(variable_names, truth_table),
                   function_number=function_number,
                   complexity=ComplexityLevel.from_variable_count(variable_count))

    @classmethod
    def from_formula(cls, formula: str) -> BooleanFunction:
        """Create the function described by `formula`.

        >>> f = BooleanFunction.from_formula('x ∨ 1')
        >>> f.dnf, f.knf
        ('(¬x) ∨ (x)', '1')
        >>> BooleanFunction.from_formula('  ')
        Traceback (most recent call last):
        ...
        logictool.formulas.errors.ArgumentError: formula must not be empty
        """
        if not formula or formula.isspace():
            raise ArgumentError('formula must not be empty')
        tokens = tokenize(formula)
        rpn = to_rpn(tokens)
        variable_names = tuple(sorted({token for token in tokens if is_variable(token)}))
        n = len(variable_names)
        timer = Timer()
        truth_table = []
        for i in range(1 << n):
            values = row_values(i, n)
            result = evaluate_rpn(rpn, dict(zip(variable_names, values)))
            truth_table.append(TruthTableRow(variable_names, values, result))
        logger.debug(f'{len(truth_table)} rows from formula {formula!r} in {timer.get():.3f}s')
        return cls(variable_names, tuple(truth_table),
                   dnf=perfect_dnf(variable_names, truth_table),
                   knf=perfect_knf(variable_names, truth_table),
                   original_formula=formula,
                   complexity=ComplexityLevel.from_variable_count(n),
                   _rpn=tuple(rpn))

    def complexity_warning(self) -> str:
        """An advisory message for callers, empty for
        :attr:`ComplexityLevel.LOW`.
        """
        return self.complexity.warning

    def describe_binary_mapping(self) -> str:
        """Explain how the bits of the function number correspond to the
        rows of the truth table. Empty for functions created from formulas.

        >>> print(BooleanFunction.from_number(1, 2).describe_binary_mapping())
        binary code of the function (2 bits): 10
        rows are read from left to right in lexicographic order of the variables
        1. (x1=0) → f = 1 ↔ bit 1
        2. (x1=1) → f = 0 ↔ bit 0
        """
        if self.is_from_formula:
            return ''
        binary = format(self.function_number, 'b').zfill(len(self.truth_table))
        lines = [f'binary code of the function ({len(self.truth_table)} bits): {binary}',
                 'rows are read from left to right in lexicographic order of the variables']
        for i, row in enumerate(self.truth_table):
            values = ', '.join(f'{name}={int(value)}' for name, value in row.assignment.items())
            lines.append(f'{i + 1}. ({values}) → f = {int(row.result)} ↔ bit {binary[i]}')
        return '\n'.join(lines)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        """Evaluate the function at `assignment`.

        Functions created from formulas evaluate their formula, ignoring
        variables that do not occur in it. Functions created from numbers
        return the result of the first row of their truth table that
        :meth:`TruthTableRow.matches` `assignment`. A row never matches a
        variable it does not have.

        >>> f = BooleanFunction.from_number(2, 1)
        >>> f.evaluate({'x1': True, 'x2': True})
        True
        >>> f.evaluate({'x1': True, 'x2': True, 'y': False})
        Traceback (most recent call last):
        ...
        logictool.formulas.errors.ArgumentError: no row of the truth table matches x1 = true, x2 = true, y = false
        """
        if self.is_from_formula:
            return evaluate_rpn(self._rpn, assignment)
        for row in self.truth_table:
            if row.matches(assignment):
                return row.result
        raise ArgumentError(f'no row of the truth table matches {format_assignment(assignment)}')

    def format_truth_table(self) -> str:
        """
        >>> print(BooleanFunction.from_formula('a ∧ ¬b').format_truth_table())
        a b | f
        0 0 | 0
        0 1 | 0
        1 0 | 1
        1 1 | 0
        """
        lines = [' '.join(self.variable_names) + ' | f']
        for row in self.truth_table:
            cells = (str(int(value)).rjust(len(name))
                     for name, value in zip(self.variable_names, row.values))
            lines.append(' '.join(cells) + f' | {int(row.result)}')
        return '\n'.join(lines)

    def metrics(self) -> FormulaMetrics:
        """
        >>> str(BooleanFunction.from_number(3, 11).metrics())
        'literals: 24, conjunctions: 6, disjunctions: 10, total cost: 40'
        """
        return FormulaMetrics.from_normal_forms(self.dnf, self.knf)

    def normal_form(self, form_type: NormalFormType) -> str:
        match form_type:
            case NormalFormType.DNF | NormalFormType.PERFECT_DNF:
                return self.dnf
            case NormalFormType.KNF | NormalFormType.PERFECT_KNF:
                return self.knf
            case _:
                raise ArgumentError(f'unknown normal form type: {form_type}')

    def to_sympy(self) -> sympy.logic.boolalg.Boolean:
        """Export the perfect DNF as a SymPy boolean expression.

        >>> BooleanFunction.from_number(2, 8).to_sympy()
        ~x1 & ~x2
        """
        symbols = [sympy.Symbol(name) for name in self.variable_names]
        minterms = []
        for row in self.truth_table:
            if row.result:
                literals = (s if value else sympy.Not(s) for s, value in zip(symbols, row.values))
                minterms.append(sympy.And(*literals))
        return sympy.Or(*minterms)

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        with p.group(2, 'BooleanFunction(', ')'):
            for idx, line in enumerate(self.format_truth_table().split('\n')):
                if idx:
                    p.break_()
                p.text(line)


def perfect_dnf(variable_names: Sequence[str], truth_table: Sequence[TruthTableRow]) -> str:
    """One conjunction per true row. ``0`` if there is no true row.
    """
    true_rows = [row for row in truth_table if row.result]
    if not true_rows:
        return FALSE
    if not variable_names:
        return TRUE
    return f' {OR} '.join(_term(row, AND, negate=False) for row in true_rows)


def perfect_knf(variable_names: Sequence[str], truth_table: Sequence[TruthTableRow]) -> str:
    """One disjunction per false row. ``1`` if there is no false row.
    """
    false_rows = [row for row in truth_table if not row.result]
    if not false_rows:
        return TRUE
    if not variable_names:
        return FALSE
    return f' {AND} '.join(_term(row, OR, negate=True) for row in false_rows)


def _term(row: TruthTableRow, connective: str, negate: bool) -> str:
    literals = (name if value != negate else f'{NOT}{name}'
                for name, value in zip(row.variables, row.values))
    return '(' + f' {connective} '.join(literals) + ')'


def calculate_metrics(formula: str) -> FormulaMetrics:
    """The cost metrics of the perfect normal forms of `formula`.

    >>> calculate_metrics('a ∨ b').total_cost
    12
    """
    return BooleanFunction.from_formula(formula).metrics()
