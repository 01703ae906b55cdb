import pytest
from logictool.formulas import ParseError, check_arity, evaluate, to_rpn, tokenize


def rpn(formula):
    return to_rpn(tokenize(formula))


def test_conjunction_of_two_variables():
    assert to_rpn(['x1', '∧', 'x2']) == ['x1', 'x2', '∧']


@pytest.mark.parametrize('formula, expected', [
    ('a ∨ b ∧ c', ['a', 'b', 'c', '∧', '∨']),
    ('(a ∨ b) ∧ c', ['a', 'b', '∨', 'c', '∧']),
    ('¬a ∧ b', ['a', '¬', 'b', '∧']),
    ('a ∨ b ^ c', ['a', 'b', '∨', 'c', '^']),
    ('a → b ↔ c', ['a', 'b', '→', 'c', '↔']),
    ('a ∧ ¬(b ∨ 1)', ['a', 'b', '1', '∨', '¬', '∧']),
])
def test_precedence_and_associativity(formula, expected):
    assert rpn(formula) == expected


def test_rpn_is_permutation_of_operands_and_operators(sample_formula):
    tokens = tokenize(sample_formula)
    result = to_rpn(tokens)
    assert sorted(result) == sorted(t for t in tokens if t not in ('(', ')'))


def test_missing_opening_parenthesis():
    with pytest.raises(ParseError, match='missing opening parenthesis'):
        to_rpn(['a', ')', '∧', 'b'])


def test_missing_closing_parenthesis():
    with pytest.raises(ParseError, match='missing closing parenthesis'):
        to_rpn(['(', 'a', '∧', 'b'])


def test_unknown_token():
    with pytest.raises(ParseError, match='unknown token'):
        to_rpn(['a', '#', 'b'])


def test_adjacent_negations_lack_operands():
    # An operator pops stacked operators of equal precedence, so ¬¬a is
    # reordered into ¬ a ¬.
    assert rpn('¬¬a') == ['¬', 'a', '¬']
    with pytest.raises(ParseError, match='insufficient operands'):
        check_arity(rpn('¬¬a'))
    assert evaluate(rpn('¬(¬a)'), {'a': True}) is True


def test_check_arity(sample_formula):
    check_arity(rpn(sample_formula))


@pytest.mark.parametrize('formula, message', [
    ('a ∧', 'insufficient operands for ∧'),
    ('∨ b', 'insufficient operands for ∨'),
    ('a b', 'malformed expression: 2 values remain'),
])
def test_check_arity_failures(formula, message):
    with pytest.raises(ParseError, match=message):
        check_arity(rpn(formula))
