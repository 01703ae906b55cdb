import pytest
from logictool import BooleanFunction


# Formulas avoid adjacent negations, which the parser does not accept.
SAMPLE_FORMULAS = [
    'x1 ∧ x2',
    '(x1 & !x2) | x3',
    'a → b ∨ ¬c',
    'a ^ b ^ c',
    'p iff q',
    '!(a | b) = (!a & !b)',
    'x1 -> (x2 -> x1)',
    '1 ∧ a ∨ 0',
    'not (x and y) xor z',
]


@pytest.fixture(params=SAMPLE_FORMULAS)
def sample_formula(request):
    return request.param


@pytest.fixture
def function_11():
    return BooleanFunction.from_number(3, 11)


@pytest.fixture
def xor_function():
    return BooleanFunction.from_formula('x1 ^ x2')
