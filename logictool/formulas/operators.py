"""The operator table of the formula language.

Every connective has one canonical symbol. Alternative spellings are mapped
to that symbol by the lexer, so that the parser, the evaluator and the tree
builder only ever see canonical symbols:

+-------------+--------+------------+----------------------------+
| Connective  | Symbol | Precedence | Alternative spellings      |
+=============+========+============+============================+
| negation    | ``¬``  | 4 (unary)  | ``!``, ``not``             |
+-------------+--------+------------+----------------------------+
| conjunction | ``∧``  | 3          | ``&``, ``and``             |
+-------------+--------+------------+----------------------------+
| disjunction | ``∨``  | 2          | ``|``, ``or``              |
+-------------+--------+------------+----------------------------+
| XOR         | ``^``  | 2          | ``xor``                    |
+-------------+--------+------------+----------------------------+
| implication | ``→``  | 1          | ``->``, ``impl``, ``then`` |
+-------------+--------+------------+----------------------------+
| equivalence | ``↔``  | 1          | ``=``, ``=>``, ``equ``,    |
|             |        |            | ``eq``, ``iff``            |
+-------------+--------+------------+----------------------------+

Keywords are matched case-insensitively. The constants are ``0`` and ``1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class Arity(Enum):
    UNARY = 1
    BINARY = 2


@dataclass(frozen=True)
class OperatorInfo:
    symbol: str
    precedence: int
    arity: Arity


NOT: Final = '¬'
AND: Final = '∧'
OR: Final = '∨'
XOR: Final = '^'
IMPLIES: Final = '→'
EQUIVALENT: Final = '↔'

FALSE: Final = '0'
TRUE: Final = '1'

LEFT_PAREN: Final = '('
RIGHT_PAREN: Final = ')'

OPERATORS: Final[Mapping[str, OperatorInfo]] = MappingProxyType({
    NOT: OperatorInfo(NOT, 4, Arity.UNARY),
    AND: OperatorInfo(AND, 3, Arity.BINARY),
    OR: OperatorInfo(OR, 2, Arity.BINARY),
    XOR: OperatorInfo(XOR, 2, Arity.BINARY),
    IMPLIES: OperatorInfo(IMPLIES, 1, Arity.BINARY),
    EQUIVALENT: OperatorInfo(EQUIVALENT, 1, Arity.BINARY)})
"""Canonical operator symbols with precedence and arity. Read-only.
"""

TWO_CHAR_ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    '->': IMPLIES,
    '=>': EQUIVALENT})

ONE_CHAR_ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    '!': NOT,
    '&': AND,
    '|': OR,
    '=': EQUIVALENT})

KEYWORDS: Final[Mapping[str, str]] = MappingProxyType({
    'not': NOT,
    'and': AND,
    'or': OR,
    'xor': XOR,
    'impl': IMPLIES,
    'then': IMPLIES,
    'equ': EQUIVALENT,
    'eq': EQUIVALENT,
    'iff': EQUIVALENT})
"""Keyword spellings, lower case. Lookups must lower the token first.
"""


def is_operator(token: str) -> bool:
    """
    >>> is_operator('∧'), is_operator('&'), is_operator('x1')
    (True, False, False)
    """
    return token in OPERATORS


def is_constant(token: str) -> bool:
    return token == FALSE or token == TRUE


def is_variable(token: str) -> bool:
    """A variable starts with a letter and is not an operator.

    >>> is_variable('x1'), is_variable('Var'), is_variable('1x'), is_variable('¬')
    (True, True, False, False)
    """
    return len(token) > 0 and token[0].isalpha() and token not in OPERATORS


def is_operand(token: str) -> bool:
    return is_variable(token) or is_constant(token)


def arity(symbol: str) -> Arity:
    return OPERATORS[symbol].arity


def precedence(symbol: str) -> int:
    return OPERATORS[symbol].precedence
