"""Stack-based evaluation of formulas in postfix order.

>>> evaluate(['x1', 'x2', '∧'], {'x1': True, 'x2': True})
True
>>> evaluate(['x1', '¬', 'x2', 'x3', '∧', '∨'], {'x1': False, 'x2': True, 'x3': True})
True
"""

from __future__ import annotations

import operator
from typing import Callable, Final, Mapping, Sequence

from .errors import ParseError
from .operators import (AND, EQUIVALENT, FALSE, IMPLIES, NOT, OR, TRUE, XOR,
                        is_variable)

UNARY: Final[Mapping[str, Callable[[bool], bool]]] = {
    NOT: operator.not_}

BINARY: Final[Mapping[str, Callable[[bool, bool], bool]]] = {
    AND: lambda a, b: a and b,
    OR: lambda a, b: a or b,
    XOR: operator.xor,
    IMPLIES: lambda a, b: (not a) or b,
    EQUIVALENT: operator.eq}


def evaluate(rpn: Sequence[str], assignment: Mapping[str, bool]) -> bool:
    """Evaluate `rpn` with variables bound by `assignment`. Variables in
    `assignment` that do not occur in `rpn` are ignored.

    >>> evaluate(['a', 'b', '→'], {'a': True, 'b': False})
    False
    >>> evaluate(['a', 'b', '^', '1', '↔'], {'a': True, 'b': False})
    True
    >>> evaluate(['a', 'b', '∧'], {'a': True})
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: unknown variable: b
    >>> evaluate(['a', '∨'], {'a': True})
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: insufficient operands for ∨
    >>> evaluate(['a', '0'], {'a': True})
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: malformed expression: 2 values remain on the stack
    """
    stack: list[bool] = []
    for token in rpn:
        if is_variable(token):
            try:
                stack.append(bool(assignment[token]))
            except KeyError:
                raise ParseError(f'unknown variable: {token}') from None
        elif token == FALSE:
            stack.append(False)
        elif token == TRUE:
            stack.append(True)
        elif token in UNARY:
            if not stack:
                raise ParseError(f'insufficient operands for {token}')
            stack.append(UNARY[token](stack.pop()))
        elif token in BINARY:
            if len(stack) < 2:
                raise ParseError(f'insufficient operands for {token}')
            rhs = stack.pop()
            lhs = stack.pop()
            stack.append(BINARY[token](lhs, rhs))
        else:
            raise ParseError(f'unknown operator: {token}')
    if len(stack) != 1:
        raise ParseError(f'malformed expression: {len(stack)} values remain on the stack')
    return stack.pop()
