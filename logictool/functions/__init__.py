"""Boolean functions of finitely many variables and their comparison.

>>> f = BooleanFunction.from_formula('x1 ∧ x2')
>>> f.dnf
'(x1 ∧ x2)'
>>> compare(f, BooleanFunction.from_number(2, 1)).are_equivalent
True
"""

from .truthtable import (TruthTableRow, assignments, format_assignment,  # noqa
                         row_index, row_values)

from .metrics import FormulaMetrics  # noqa

from .function import (MAX_VARIABLES, BooleanFunction, ComplexityLevel,  # noqa
                       NormalFormType, calculate_metrics)

from .comparison import (MAX_COMPARISON_VARIABLES, Comparison,  # noqa
                         ComparisonResult, ComparisonResultType, Options,
                         compare, compare_formulas, compare_number_and_formula)


__all__ = [
    'TruthTableRow', 'FormulaMetrics',

    'MAX_VARIABLES', 'BooleanFunction', 'ComplexityLevel', 'NormalFormType',
    'calculate_metrics',

    'MAX_COMPARISON_VARIABLES', 'Comparison', 'ComparisonResult',
    'ComparisonResultType', 'Options', 'compare', 'compare_formulas',
    'compare_number_and_formula'
]
