"""Formula processing: lexical analysis, shunting-yard parsing into postfix
order, evaluation, expression trees, and validation.

The pipeline for a formula is::

    tokenize  ->  to_rpn  ->  evaluate(rpn, assignment)
                          ->  build_tree -> rewrite_to_basis -> format_node

>>> rpn = to_rpn(tokenize('x1 ∧ x2'))
>>> rpn
['x1', 'x2', '∧']
>>> evaluate(rpn, {'x1': True, 'x2': True})
True
"""

from .errors import ArgumentError, ParseError  # noqa

from .operators import (OPERATORS, Arity, OperatorInfo, is_constant,  # noqa
                        is_operator, is_variable)

from .lexer import Token, TokenType, tokenize, tokenize_with_types  # noqa

from .parser import check_arity, to_rpn  # noqa

from .evaluator import evaluate  # noqa

from .tree import (Binary, Constant, Node, Unary, Variable, build_tree,  # noqa
                   format_node, parse, rewrite_to_basis, to_basic_basis, to_sympy)

from .validation import ErrorSeverity, ParsingResult, validate  # noqa


__all__ = [
    'ArgumentError', 'ParseError',

    'OPERATORS', 'Arity', 'OperatorInfo',

    'Token', 'TokenType', 'tokenize', 'tokenize_with_types',

    'to_rpn', 'check_arity', 'evaluate',

    'to_basic_basis', 'parse', 'to_sympy',

    'ErrorSeverity', 'ParsingResult', 'validate'
]
