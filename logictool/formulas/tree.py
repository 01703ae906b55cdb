r"""Expression trees and their rewriting into the basis :math:`\{\lnot,
\land, \lor\}`.

A tree is built from a formula in postfix order. Nodes are immutable and
form a tagged union:

+-------------------+-------------------+-------------------+-------------------+
| :class:`Variable` | :class:`Constant` | :class:`Unary`    | :class:`Binary`   |
+-------------------+-------------------+-------------------+-------------------+
| ``x1``            | ``0``, ``1``      | ``¬``             | ``∧ ∨ ^ → ↔``     |
+-------------------+-------------------+-------------------+-------------------+

The derived connectives XOR, implication and equivalence are rewritten
recursively as follows:

1. :math:`a \oplus b \;\leadsto\; (a \land \lnot b) \lor (\lnot a \land b)`

2. :math:`a \longrightarrow b \;\leadsto\; \lnot a \lor b`

3. :math:`a \longleftrightarrow b \;\leadsto\; (a \land b) \lor (\lnot a
   \land \lnot b)`

>>> to_basic_basis('x1 → x2')
'(¬x1 ∨ x2)'
>>> to_basic_basis('a ^ b')
'((a ∧ ¬b) ∨ (¬a ∧ b))'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Sequence, TypeAlias

import sympy
from IPython.lib import pretty
from typing_extensions import TypeIs

from .errors import ParseError
from .operators import (AND, EQUIVALENT, FALSE, IMPLIES, NOT, OR, TRUE, XOR,
                        Arity, OPERATORS, is_variable)
from .lexer import tokenize
from .parser import to_rpn

from ..support.tracing import trace  # noqa


class ExpressionNode:
    """Common base of all nodes providing printing. Recursive passes over
    trees dispatch on the concrete node classes with ``match``.
    """

    def __str__(self) -> str:
        return format_node(self)  # type: ignore[arg-type]

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        p.text(str(self))


@dataclass(frozen=True)
class Variable(ExpressionNode):
    name: str


@dataclass(frozen=True)
class Constant(ExpressionNode):
    value: bool


@dataclass(frozen=True)
class Unary(ExpressionNode):
    """A negation. Negation is the only unary connective.
    """
    operand: Node


@dataclass(frozen=True)
class Binary(ExpressionNode):
    operator: str
    left: Node
    right: Node


Node: TypeAlias = Variable | Constant | Unary | Binary


def is_binary(node: Node) -> TypeIs[Binary]:
    """Type narrowing :func:`isinstance` test for :class:`Binary`.
    """
    return isinstance(node, Binary)


def is_unary(node: Node) -> TypeIs[Unary]:
    return isinstance(node, Unary)


def build_tree(rpn: Sequence[str]) -> Node:
    """Build a tree from `rpn` using the stack discipline of
    :func:`.evaluator.evaluate`, pushing nodes instead of values.

    >>> build_tree(['a', '¬', 'b', '∧'])
    Binary(operator='∧', left=Unary(operand=Variable(name='a')), right=Variable(name='b'))
    >>> build_tree(['a', '∧'])
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: insufficient operands for ∧
    """
    stack: list[Node] = []
    for token in rpn:
        if is_variable(token):
            stack.append(Variable(token))
        elif token == FALSE or token == TRUE:
            stack.append(Constant(token == TRUE))
        elif token in OPERATORS:
            if OPERATORS[token].arity is Arity.UNARY:
                if not stack:
                    raise ParseError(f'insufficient operands for {token}')
                stack.append(Unary(stack.pop()))
            else:
                if len(stack) < 2:
                    raise ParseError(f'insufficient operands for {token}')
                right = stack.pop()
                left = stack.pop()
                stack.append(Binary(token, left, right))
        else:
            raise ParseError(f'unknown token: {token}')
    if len(stack) != 1:
        raise ParseError('cannot build expression tree: '
                         f'{len(stack)} subexpressions remain')
    return stack.pop()


def rewrite_to_basis(node: Node) -> Node:
    """Replace XOR, implication and equivalence by ¬, ∧, ∨.

    >>> rewrite_to_basis(Binary('→', Variable('a'), Variable('b')))
    Binary(operator='∨', left=Unary(operand=Variable(name='a')), right=Variable(name='b'))
    """
    match node:
        case Variable() | Constant():
            return node
        case Unary(operand=operand):
            return Unary(rewrite_to_basis(operand))
        case Binary(operator=op, left=left, right=right):
            a = rewrite_to_basis(left)
            b = rewrite_to_basis(right)
            match op:
                case '^':
                    return Binary(OR, Binary(AND, a, Unary(b)), Binary(AND, Unary(a), b))
                case '→':
                    return Binary(OR, Unary(a), b)
                case '↔':
                    return Binary(OR, Binary(AND, a, b), Binary(AND, Unary(a), Unary(b)))
                case _:
                    return Binary(op, a, b)
        case _:
            assert False, type(node)


def format_node(node: Node) -> str:
    """Render `node` in infix notation. Every binary node is parenthesized,
    and a negated binary or negated negation receives an extra pair of
    parentheses, since the parser does not accept adjacent negations.

    >>> format_node(Unary(Binary('∨', Variable('a'), Constant(False))))
    '¬((a ∨ 0))'
    >>> format_node(Unary(Unary(Variable('a'))))
    '¬(¬a)'
    """
    match node:
        case Variable(name=name):
            return name
        case Constant(value=value):
            return TRUE if value else FALSE
        case Unary(operand=operand):
            s = format_node(operand)
            return f'{NOT}({s})' if is_binary(operand) or is_unary(operand) else f'{NOT}{s}'
        case Binary(operator=op, left=left, right=right):
            return f'({format_node(left)} {op} {format_node(right)})'
        case _:
            assert False, type(node)


def parse(formula: str) -> Node:
    """Parse `formula` into a tree.

    >>> parse('¬(a ∨ b)')
    Unary(operand=Binary(operator='∨', left=Variable(name='a'), right=Variable(name='b')))
    """
    return build_tree(to_rpn(tokenize(formula)))


def to_basic_basis(formula: str) -> str:
    """Rewrite `formula` into an equivalent formula over ¬, ∧, ∨.

    >>> to_basic_basis('a ↔ b')
    '((a ∧ b) ∨ (¬a ∧ ¬b))'
    >>> to_basic_basis('¬(a or b) and 1')
    '(¬((a ∨ b)) ∧ 1)'
    >>> to_basic_basis('(¬((a ∨ b)) ∧ 1)')
    '(¬((a ∨ b)) ∧ 1)'
    >>> to_basic_basis('')
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: formula must not be empty
    """
    if not formula or formula.isspace():
        raise ParseError('formula must not be empty')
    return format_node(rewrite_to_basis(parse(formula)))


SYMPY_OPERATORS: Final = {
    AND: sympy.And,
    OR: sympy.Or,
    XOR: sympy.Xor,
    IMPLIES: sympy.Implies,
    EQUIVALENT: sympy.Equivalent}


def to_sympy(node: Node) -> sympy.logic.boolalg.Boolean:
    """Export `node` as a SymPy boolean expression.

    >>> to_sympy(parse('a → ¬b'))
    Implies(a, ~b)
    >>> to_sympy(parse('a ∧ 1'))
    a
    """
    match node:
        case Variable(name=name):
            return sympy.Symbol(name)
        case Constant(value=value):
            return sympy.true if value else sympy.false
        case Unary(operand=operand):
            return sympy.Not(to_sympy(operand))
        case Binary(operator=op, left=left, right=right):
            return SYMPY_OPERATORS[op](to_sympy(left), to_sympy(right))
        case _:
            assert False, type(node)


def variables(node: Node) -> set[str]:
    """
    >>> sorted(variables(parse('b ∧ (a ∨ b)')))
    ['a', 'b']
    """
    match node:
        case Variable(name=name):
            return {name}
        case Constant():
            return set()
        case Unary(operand=operand):
            return variables(operand)
        case Binary(left=left, right=right):
            return variables(left) | variables(right)
        case _:
            assert False, type(node)
