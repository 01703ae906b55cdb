"""Validation of formula text without raising exceptions.

:func:`validate` is a total function: whatever the input, it returns a
:class:`ParsingResult`.

>>> validate('x1 ∧ (x2')  # doctest: +ELLIPSIS
ParsingResult(formula='x1 ∧ (x2', is_success=False, ...)
>>> validate('x1 ∧ (x2').error_message
'unbalanced parentheses: missing closing parenthesis'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .errors import ParseError
from .lexer import Token, tokenize_with_types
from .parser import check_arity, to_rpn
from ..support.excepthook import message


class ErrorSeverity(Enum):
    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    CRITICAL = auto()


@dataclass(frozen=True)
class ParsingResult:
    """The outcome of :func:`validate`. A success carries the typed tokens
    and the postfix form, a failure carries an error message and a
    severity.
    """

    formula: str
    is_success: bool
    tokens: tuple[Token, ...] = field(default=(), repr=False)
    rpn: tuple[str, ...] = field(default=(), repr=False)
    error_message: str = ''
    severity: ErrorSeverity = ErrorSeverity.INFO

    @classmethod
    def success(cls, formula: str, tokens: list[Token], rpn: list[str]) -> ParsingResult:
        return cls(formula, True, tuple(tokens), tuple(rpn))

    @classmethod
    def failure(cls, formula: str, error_message: str,
                severity: ErrorSeverity = ErrorSeverity.ERROR) -> ParsingResult:
        return cls(formula, False, error_message=error_message or 'unknown error',
                   severity=severity)

    def __str__(self) -> str:
        if self.is_success:
            return f'parsed {self.formula} -> {" ".join(self.rpn)}'
        return f'parse error: {self.error_message}'


def validate(formula: str) -> ParsingResult:
    """Tokenize, reorder and arity-check `formula`.

    >>> result = validate('not a or b')
    >>> result.is_success, result.rpn
    (True, ('a', '¬', 'b', '∨'))
    >>> str(result)
    'parsed not a or b -> a ¬ b ∨'
    >>> result = validate('a ∧')
    >>> result.severity, result.error_message
    (<ErrorSeverity.ERROR: 3>, 'insufficient operands for ∧')
    >>> validate(42).severity  # type: ignore[arg-type]
    <ErrorSeverity.CRITICAL: 4>
    """
    try:
        tokens = tokenize_with_types(formula)
        rpn = to_rpn([token.value for token in tokens])
        check_arity(rpn)
        return ParsingResult.success(formula, tokens, rpn)
    except ParseError as exc:
        return ParsingResult.failure(formula, message(exc), ErrorSeverity.ERROR)
    except Exception as exc:
        return ParsingResult.failure(formula, f'unexpected error: {message(exc)}',
                                     ErrorSeverity.CRITICAL)
