__version__ = 0.1

___author___ = 'LogicTool developers'
___status__ = 'Prototype'

from . import formulas

from .formulas import (ArgumentError, ParseError, ParsingResult,  # noqa
                       ErrorSeverity, tokenize, tokenize_with_types, to_rpn,
                       evaluate, to_basic_basis, validate)

from . import functions

from .functions import (BooleanFunction, ComparisonResult,  # noqa
                        ComparisonResultType, ComplexityLevel, FormulaMetrics,
                        NormalFormType, calculate_metrics, compare,
                        compare_formulas, compare_number_and_formula)

__all__ = formulas.__all__ + functions.__all__
