"""Short error reports for interactive use.

Importing this module installs an exception hook for the plain Python shell
and, if running inside IPython, a custom exception handler. Both print
instances of :class:`NoTraceException` as a single line without a traceback.
"""

import sys
from typing import Any, Optional
from types import TracebackType


class NoTraceException(Exception):
    """An exception that prints an error message and exits without a
    traceback. Malformed formulas and out-of-range function numbers are
    normal situations during interactive use. Exceptions derived from this
    class typically come with a short but informative message for the user.
    """
    pass


def message(exc: BaseException) -> str:
    """The user-facing message of `exc`.

    >>> message(NoTraceException('unknown variable: x3'))
    'unknown variable: x3'
    >>> message(KeyError('x3'))
    "'x3'"
    >>> message(RuntimeError())
    'RuntimeError'
    """
    text = str(exc)
    return text if text else type(exc).__name__


def handler(exc: NoTraceException, tb: Optional[TracebackType]):
    print(f'{type(exc).__name__}: {message(exc)}', file=sys.stderr, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException, tb: Optional[TracebackType]):
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


# To be executed at import:

sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython:

def ipy_custom_exec(ipy: Any, exc_type: type[NoTraceException],
                    exc: NoTraceException, tb: TracebackType, tb_offset=None):
    handler(exc, tb)


# To be executed at import:

try:
    import IPython
except ImportError:
    ipy = None
else:
    ipy = IPython.get_ipython()

if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exec)
