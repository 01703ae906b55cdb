import pytest
from logictool.formulas import ParseError, TokenType, tokenize, tokenize_with_types


def test_conjunction_of_two_variables():
    assert tokenize('x1 ∧ x2') == ['x1', '∧', 'x2']


@pytest.mark.parametrize('formula, tokens', [
    ('a&b', ['a', '∧', 'b']),
    ('a | b', ['a', '∨', 'b']),
    ('!a', ['¬', 'a']),
    ('a -> b', ['a', '→', 'b']),
    ('a => b', ['a', '↔', 'b']),
    ('a = b', ['a', '↔', 'b']),
    ('a XOR b', ['a', '^', 'b']),
    ('a Impl b then c', ['a', '→', 'b', '→', 'c']),
    ('a equ b eq c IFF d', ['a', '↔', 'b', '↔', 'c', '↔', 'd']),
    ('NOT x12', ['¬', 'x12']),
])
def test_aliases(formula, tokens):
    assert tokenize(formula) == tokens


def test_alphanumeric_runs():
    assert tokenize('abc1(x2)') == ['abc1', '(', 'x2', ')']
    assert tokenize('x1 x2') == ['x1', 'x2']


def test_keywords_need_separation():
    # 'andb' is one identifier, not the keyword 'and' followed by 'b'
    assert tokenize('a andb') == ['a', 'andb']


def test_unknown_characters_pass_through():
    assert tokenize('a # b') == ['a', '#', 'b']


@pytest.mark.parametrize('formula', ['', ' ', '\t\n'])
def test_empty(formula):
    with pytest.raises(ParseError, match='empty'):
        tokenize(formula)


@pytest.mark.parametrize('formula', ['x1 ∧ (x2', '((a)', ')a(', 'a)'])
def test_unbalanced(formula):
    with pytest.raises(ParseError, match='unbalanced parentheses'):
        tokenize(formula)


def test_typed_tokens():
    tokens = tokenize_with_types('¬(x1 ∨ 0)')
    assert [t.kind for t in tokens] == [
        TokenType.OPERATOR, TokenType.LEFT_PAREN, TokenType.VARIABLE,
        TokenType.OPERATOR, TokenType.CONSTANT, TokenType.RIGHT_PAREN]
    assert [t.position for t in tokens] == list(range(6))
    assert tokens[2].value == 'x1'


@pytest.mark.parametrize('formula', ['a ∧ 12', 'a # b'])
def test_typed_tokens_unknown(formula):
    with pytest.raises(ParseError, match='unknown token type'):
        tokenize_with_types(formula)
