"""Conversion of infix token sequences into postfix order (Reverse Polish
Notation) using Dijkstra's shunting-yard algorithm.

>>> to_rpn(['x1', '∧', 'x2'])
['x1', 'x2', '∧']
>>> to_rpn(tokenize('(x1 ∧ x2) ∨ x3'))
['x1', 'x2', '∧', 'x3', '∨']
>>> to_rpn(tokenize('a → b ∨ ¬c'))
['a', 'b', 'c', '¬', '∨', '→']
"""

from __future__ import annotations

from typing import Sequence

from .errors import ParseError
from .operators import (Arity, LEFT_PAREN, RIGHT_PAREN, arity, is_operand,
                        is_operator, precedence)
from .lexer import tokenize  # noqa, used in doctests only


def to_rpn(tokens: Sequence[str]) -> list[str]:
    """Reorder the infix `tokens` into postfix order.

    Operands are emitted immediately. An operator first emits all operators
    on top of the stack with precedence greater than or equal to its own, so
    that operators of equal precedence associate to the left.

    >>> to_rpn(['a', '→', 'b', '→', 'c'])
    ['a', 'b', '→', 'c', '→']
    >>> to_rpn(['a', ')'])
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: unbalanced parentheses: missing opening parenthesis
    >>> to_rpn(['(', 'a'])
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: unbalanced parentheses: missing closing parenthesis
    >>> to_rpn(['a', '#', 'b'])
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: unknown token: #
    """
    output: list[str] = []
    stack: list[str] = []
    for token in tokens:
        if is_operand(token):
            output.append(token)
        elif token == LEFT_PAREN:
            stack.append(token)
        elif token == RIGHT_PAREN:
            while stack and stack[-1] != LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise ParseError('unbalanced parentheses: missing opening parenthesis')
            stack.pop()
        elif is_operator(token):
            while (stack and stack[-1] != LEFT_PAREN
                   and precedence(stack[-1]) >= precedence(token)):
                output.append(stack.pop())
            stack.append(token)
        else:
            raise ParseError(f'unknown token: {token}')
    while stack:
        token = stack.pop()
        if token == LEFT_PAREN:
            raise ParseError('unbalanced parentheses: missing closing parenthesis')
        output.append(token)
    return output


def check_arity(rpn: Sequence[str]) -> None:
    """Check that every operator in `rpn` finds its operands and that
    exactly one value remains. This simulates the stack depth of
    :func:`.evaluator.evaluate` without any variable assignment.

    >>> check_arity(['a', 'b', '∧'])
    >>> check_arity(['a', '∧'])
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: insufficient operands for ∧
    >>> check_arity(['a', 'b'])
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: malformed expression: 2 values remain on the stack
    """
    depth = 0
    for token in rpn:
        if is_operand(token):
            depth += 1
        elif is_operator(token):
            needed = 1 if arity(token) is Arity.UNARY else 2
            if depth < needed:
                raise ParseError(f'insufficient operands for {token}')
            depth -= needed - 1
        else:
            raise ParseError(f'unknown token: {token}')
    if depth != 1:
        raise ParseError(f'malformed expression: {depth} values remain on the stack')
