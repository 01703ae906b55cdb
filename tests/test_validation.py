import pytest
from logictool.formulas import ErrorSeverity, ParsingResult, TokenType, validate


def test_success(sample_formula):
    result = validate(sample_formula)
    assert result.is_success
    assert result.severity is ErrorSeverity.INFO
    assert result.error_message == ''
    assert result.rpn


def test_success_carries_tokens_and_rpn():
    result = validate('x1 ∧ x2')
    assert [t.value for t in result.tokens] == ['x1', '∧', 'x2']
    assert result.tokens[1].kind is TokenType.OPERATOR
    assert result.rpn == ('x1', 'x2', '∧')


@pytest.mark.parametrize('formula, message', [
    ('x1 ∧ (x2', 'missing closing parenthesis'),
    ('', 'must not be empty'),
    ('a ∧ 12', 'unknown token type: 12'),
    ('a ∧', 'insufficient operands for ∧'),
    ('¬¬a', 'insufficient operands for ¬'),
    ('a b', 'malformed expression'),
])
def test_failure(formula, message):
    result = validate(formula)
    assert not result.is_success
    assert result.severity is ErrorSeverity.ERROR
    assert message in result.error_message
    assert result.tokens == () and result.rpn == ()


def test_unexpected_error():
    result = validate(None)  # type: ignore[arg-type]
    assert not result.is_success
    assert result.severity is ErrorSeverity.ERROR
    result = validate(['a'])  # type: ignore[arg-type]
    assert result.severity is ErrorSeverity.CRITICAL
    assert result.error_message.startswith('unexpected error: ')


def test_failure_default_message():
    assert ParsingResult.failure('a', '').error_message == 'unknown error'
    assert str(ParsingResult.failure('a', 'oops')) == 'parse error: oops'
