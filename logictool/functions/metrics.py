from __future__ import annotations

from dataclasses import dataclass

from ..formulas.lexer import tokenize
from ..formulas.operators import AND, OR, is_variable


@dataclass(frozen=True)
class FormulaMetrics:
    """Cost metrics of a pair of perfect normal forms.

    * `literal_count` -- the number of literals in both forms together,
      where a negated variable counts as one literal,
    * `conjunction_count` -- the number of ∧ in the DNF,
    * `disjunction_count` -- the number of ∨ in the KNF,
    * `total_cost` -- the sum of the three.

    >>> FormulaMetrics.from_normal_forms('(¬x1 ∧ x2) ∨ (x1 ∧ x2)', '(x1 ∨ x2) ∧ (¬x1 ∨ x2)')
    FormulaMetrics(literal_count=8, conjunction_count=2, disjunction_count=2, total_cost=12)
    >>> FormulaMetrics.from_normal_forms('0', '(¬a)').total_cost
    1
    """

    literal_count: int
    conjunction_count: int
    disjunction_count: int
    total_cost: int

    @classmethod
    def from_normal_forms(cls, dnf: str, knf: str) -> FormulaMetrics:
        literal_count = _count_literals(dnf) + _count_literals(knf)
        conjunction_count = dnf.count(AND)
        disjunction_count = knf.count(OR)
        return cls(literal_count, conjunction_count, disjunction_count,
                   literal_count + conjunction_count + disjunction_count)

    def __str__(self) -> str:
        return (f'literals: {self.literal_count}, '
                f'conjunctions: {self.conjunction_count}, '
                f'disjunctions: {self.disjunction_count}, '
                f'total cost: {self.total_cost}')


def _count_literals(normal_form: str) -> int:
    if not normal_form or normal_form.isspace():
        return 0
    return sum(1 for token in tokenize(normal_form) if is_variable(token))
