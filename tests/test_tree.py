import pytest
from sympy.logic.inference import satisfiable
from sympy import Xor

from logictool.formulas import (Binary, Constant, ParseError, Unary, Variable,
                                build_tree, parse, rewrite_to_basis, to_basic_basis,
                                to_sympy, to_rpn, tokenize)
from logictool.formulas.tree import variables


def test_build_tree():
    tree = build_tree(to_rpn(tokenize('a ∨ ¬1')))
    assert tree == Binary('∨', Variable('a'), Unary(Constant(True)))


def test_build_tree_leftover():
    with pytest.raises(ParseError, match='2 subexpressions remain'):
        build_tree(['a', 'b'])


@pytest.mark.parametrize('formula, expected', [
    ('x1 → x2', '(¬x1 ∨ x2)'),
    ('a ↔ b', '((a ∧ b) ∨ (¬a ∧ ¬b))'),
    ('a ^ b', '((a ∧ ¬b) ∨ (¬a ∧ b))'),
    ('¬(a ∧ b)', '¬((a ∧ b))'),
    ('¬(¬a)', '¬(¬a)'),
    ('¬a ^ b', '((¬a ∧ ¬b) ∨ (¬(¬a) ∧ b))'),
    ('a', 'a'),
    ('0', '0'),
])
def test_to_basic_basis(formula, expected):
    assert to_basic_basis(formula) == expected


@pytest.mark.parametrize('formula', [
    'x1 → x2', 'a ↔ b', '¬(a or b) and 1', '(a ∧ b) ∨ ¬c', 'p ^ q',
    '¬(¬a)', '¬a ^ b', 'a ↔ ¬b'])
def test_to_basic_basis_idempotent(formula):
    basic = to_basic_basis(formula)
    assert to_basic_basis(basic) == basic


def test_basis_contains_only_basic_connectives(sample_formula):
    basic = to_basic_basis(sample_formula)
    assert not set(basic) & set('^→↔')


def test_rewriting_preserves_semantics(sample_formula):
    tree = parse(sample_formula)
    assert satisfiable(Xor(to_sympy(tree), to_sympy(rewrite_to_basis(tree)))) is False


def test_empty_formula():
    with pytest.raises(ParseError):
        to_basic_basis('  ')


def test_str_and_variables():
    tree = parse('b ∧ ¬(a ∨ b)')
    assert str(tree) == '(b ∧ ¬((a ∨ b)))'
    assert variables(tree) == {'a', 'b'}
