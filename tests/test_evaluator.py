import itertools

import pytest
from logictool.formulas import ParseError, evaluate, to_rpn, tokenize


def test_conjunction_of_two_variables():
    assert evaluate(to_rpn(tokenize('x1 ∧ x2')), {'x1': True, 'x2': True}) is True


@pytest.mark.parametrize('op, table', [
    ('∧', [False, False, False, True]),
    ('∨', [False, True, True, True]),
    ('^', [False, True, True, False]),
    ('→', [True, True, False, True]),
    ('↔', [True, False, False, True]),
])
def test_binary_connectives(op, table):
    values = [evaluate(['a', 'b', op], {'a': a, 'b': b})
              for a, b in itertools.product([False, True], repeat=2)]
    assert values == table


def test_negation_and_constants():
    assert evaluate(['a', '¬'], {'a': False}) is True
    assert evaluate(['0', '¬'], {}) is True
    assert evaluate(['1', '0', '∧'], {}) is False


def test_extra_variables_are_ignored():
    assert evaluate(['a'], {'a': True, 'b': False}) is True


def test_unknown_variable():
    with pytest.raises(ParseError, match='unknown variable: b'):
        evaluate(['a', 'b', '∨'], {'a': True})


def test_insufficient_operands():
    with pytest.raises(ParseError, match='insufficient operands'):
        evaluate(['¬'], {})


def test_malformed():
    with pytest.raises(ParseError, match='malformed expression'):
        evaluate([], {})


def test_unknown_operator():
    with pytest.raises(ParseError, match='unknown operator: #'):
        evaluate(['a', 'b', '#'], {'a': True, 'b': True})
