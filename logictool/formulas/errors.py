from ..support.excepthook import NoTraceException


class ParseError(NoTraceException):
    """Malformed formula text: unbalanced parentheses, unknown tokens,
    operators lacking operands, or variables without a value.
    """
    pass


class ArgumentError(NoTraceException, ValueError):
    """A structurally invalid parameter, e.g., a variable count outside
    ``1..10``, a function number outside its bit range, or an empty formula.
    """
    pass
