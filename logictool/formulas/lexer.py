"""Lexical analysis of formulas.

:func:`tokenize` splits a formula into raw token strings, normalizing all
alternative operator spellings to their canonical symbols.
:func:`tokenize_with_types` additionally classifies the tokens, which is
used for diagnostics and for highlighting in user interfaces.

>>> tokenize('x1 ∧ (x2 ∨ ¬x3)')
['x1', '∧', '(', 'x2', '∨', '¬', 'x3', ')']
>>> tokenize('not a AND b -> c')
['¬', 'a', '∧', 'b', '→', 'c']
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .errors import ParseError
from .operators import (KEYWORDS, LEFT_PAREN, ONE_CHAR_ALIASES, RIGHT_PAREN,
                        TWO_CHAR_ALIASES, is_constant, is_operator, is_variable)


class TokenType(Enum):
    VARIABLE = auto()
    OPERATOR = auto()
    CONSTANT = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()


@dataclass(frozen=True)
class Token:
    """A classified token. The `position` is the index of the token within
    the token sequence, not a character offset within the source text.

    >>> str(Token('x1', TokenType.VARIABLE, 0))
    'x1 (VARIABLE) at 0'
    """

    value: str
    kind: TokenType
    position: int

    def __str__(self) -> str:
        return f'{self.value} ({self.kind.name}) at {self.position}'


def tokenize(formula: str) -> list[str]:
    """Split `formula` into raw tokens.

    Letters and digits accumulate into one token, which supports variable
    names like ``x12`` as well as the constants ``0`` and ``1``. Keywords
    (``and``, ``Or``, ``IFF``, ...) become operator symbols. Any other
    character is a token of its own, after trying the digraphs ``->`` and
    ``=>``.

    >>> tokenize('x1&!x2|x3')
    ['x1', '∧', '¬', 'x2', '∨', 'x3']
    >>> tokenize('a => b')
    ['a', '↔', 'b']
    >>> tokenize('   ')
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: formula must not be empty
    >>> tokenize('(a ∧ b))')
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: unbalanced parentheses: unexpected closing parenthesis
    """
    if not formula or formula.isspace():
        raise ParseError('formula must not be empty')
    tokens: list[str] = []
    buffer: list[str] = []
    i = 0
    while i < len(formula):
        c = formula[i]
        if c.isspace():
            _flush(buffer, tokens)
        elif c.isalnum():
            buffer.append(c)
        else:
            _flush(buffer, tokens)
            digraph = formula[i:i + 2]
            if digraph in TWO_CHAR_ALIASES:
                tokens.append(TWO_CHAR_ALIASES[digraph])
                i += 2
                continue
            tokens.append(ONE_CHAR_ALIASES.get(c, c))
        i += 1
    _flush(buffer, tokens)
    _check_parentheses(tokens)
    return tokens


def tokenize_with_types(formula: str) -> list[Token]:
    """Tokenize `formula` and classify the tokens.

    >>> [t.kind.name for t in tokenize_with_types('¬(a ∨ 1)')]
    ['OPERATOR', 'LEFT_PAREN', 'VARIABLE', 'OPERATOR', 'CONSTANT', 'RIGHT_PAREN']
    >>> tokenize_with_types('a ∧ 2')
    Traceback (most recent call last):
    ...
    logictool.formulas.errors.ParseError: unknown token type: 2
    """
    return [Token(token, token_type(token), position)
            for position, token in enumerate(tokenize(formula))]


def token_type(token: str) -> TokenType:
    if token == LEFT_PAREN:
        return TokenType.LEFT_PAREN
    if token == RIGHT_PAREN:
        return TokenType.RIGHT_PAREN
    if is_constant(token):
        return TokenType.CONSTANT
    if is_operator(token):
        return TokenType.OPERATOR
    if is_variable(token):
        return TokenType.VARIABLE
    raise ParseError(f'unknown token type: {token}')


def _flush(buffer: list[str], tokens: list[str]) -> None:
    if buffer:
        token = ''.join(buffer)
        tokens.append(KEYWORDS.get(token.lower(), token))
        buffer.clear()


def _check_parentheses(tokens: list[str]) -> None:
    balance = 0
    for token in tokens:
        if token == LEFT_PAREN:
            balance += 1
        elif token == RIGHT_PAREN:
            balance -= 1
            if balance < 0:
                raise ParseError('unbalanced parentheses: unexpected closing parenthesis')
    if balance > 0:
        raise ParseError('unbalanced parentheses: missing closing parenthesis')
