"""Equivalence checking of boolean functions by exhaustive enumeration of
all assignments of the union of their variables.

>>> str(compare_formulas('(x1 & !x2) | x3', '(x3) | (x1 & !x2)'))
'the functions are equivalent'
>>> str(compare_formulas('x1', '!x1'))
'the functions are not equivalent; counterexample: x1 = false'

Functions given by numbers and by formulas can be mixed. A formula may use
fewer variables than the function number, but a function given by its
number has no truth-table row for a variable it lacks:

>>> compare_number_and_formula(2, 3, 'x1').are_equivalent
True
>>> print(compare_number_and_formula(2, 1, 'x1 ∧ x2 ∧ (y ∨ ¬y)'))
cannot compare functions: no row of the truth table matches x1 = false, x2 = false, y = false

Malformed input does not raise but yields an error result:

>>> result = compare_formulas('x1 ∧', 'x1')
>>> result.result_type, result.message
(<ComparisonResultType.ERROR: 3>, 'cannot compare formulas: insufficient operands for ∧')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import time
from typing import Final, Optional, final

from ..formulas.errors import ArgumentError, ParseError
from ..support.excepthook import message
from ..support.logging import DeltaTimeFormatter, RateFilter, Timer, create_logger
from .function import BooleanFunction
from .truthtable import assignments, format_assignment

delta_time_formatter = DeltaTimeFormatter(
    f'%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

logger = create_logger(__name__, delta_time_formatter)

progress_rate_filter = RateFilter()

# Level NOTSET follows the level of logger.
progress_logger = create_logger(f'{__name__}.progress', delta_time_formatter,
                                level=logging.NOTSET, rate_filter=progress_rate_filter)

MAX_COMPARISON_VARIABLES: Final = 8
"""The default bound on the number of variables of a comparison.
"""


class ComparisonResultType(Enum):
    EQUIVALENT = 1
    NOT_EQUIVALENT = 2
    ERROR = 3


@final
@dataclass(frozen=True)
class ComparisonResult:
    """The outcome of a comparison. A counterexample is present exactly for
    :attr:`ComparisonResultType.NOT_EQUIVALENT`.

    >>> ComparisonResult.not_equivalent('a = true').are_equivalent
    False
    >>> str(ComparisonResult.error('too many variables'))
    'too many variables'
    """

    result_type: ComparisonResultType
    counter_example: str = ''
    message: str = ''

    @classmethod
    def equivalent(cls) -> ComparisonResult:
        return cls(ComparisonResultType.EQUIVALENT, message='the functions are equivalent')

    @classmethod
    def not_equivalent(cls, counter_example: str) -> ComparisonResult:
        return cls(ComparisonResultType.NOT_EQUIVALENT, counter_example,
                   'the functions are not equivalent')

    @classmethod
    def error(cls, error_message: str) -> ComparisonResult:
        return cls(ComparisonResultType.ERROR,
                   message=error_message or 'comparison of the functions failed')

    @property
    def are_equivalent(self) -> bool:
        return self.result_type is ComparisonResultType.EQUIVALENT

    def __str__(self) -> str:
        if self.counter_example:
            return f'{self.message}; counterexample: {self.counter_example}'
        return self.message


@dataclass
class Options:
    """Keyword options of :meth:`Comparison.__call__` and of the functions
    :func:`compare`, :func:`compare_formulas`, and
    :func:`compare_number_and_formula`.
    """

    log_level: int = logging.NOTSET
    """The `log_level` of the logger used by :class:`.Comparison`.
    """

    log_rate: float = 0.5
    """The minimal timespan (in s) between two progress messages during
    enumeration.
    """

    max_variables: int = MAX_COMPARISON_VARIABLES
    """Comparisons of functions with more variables in total are refused
    with an error result.
    """


@dataclass
class Comparison:
    """A callable class that compares two boolean functions. After a call,
    the instance holds statistics on that call.

    >>> comparison = Comparison()
    >>> f1 = BooleanFunction.from_formula('a → b')
    >>> f2 = BooleanFunction.from_formula('¬a ∨ b')
    >>> comparison(f1, f2).are_equivalent
    True
    >>> comparison.variables, comparison.checked
    (('a', 'b'), 4)
    >>> comparison(f1, BooleanFunction.from_formula('a ∨ ¬b')).counter_example
    'a = false, b = true'
    >>> comparison.checked
    2
    """

    options: Options = field(default_factory=Options)

    variables: tuple[str, ...] = ()
    """The sorted union of the variables of both functions.
    """

    checked: int = 0
    """The number of assignments at which both functions have been evaluated.
    """

    time_total: Optional[float] = None
    """The total time spent in :meth:`.__call__`.
    """

    def __call__(self, f1: BooleanFunction, f2: BooleanFunction, **options) -> ComparisonResult:
        """Compare `f1` and `f2`.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.

        :returns:
          :meth:`ComparisonResult.equivalent` if `f1` and `f2` agree on all
          assignments. Otherwise :meth:`ComparisonResult.not_equivalent` with
          the first assignment in row order where they differ, or
          :meth:`ComparisonResult.error` if the comparison is not feasible.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        Comparison.__init__(self)
        save_level = logger.getEffectiveLevel()
        try:
            self.options = Options(**options)
            logger.setLevel(self.options.log_level)
        except (TypeError, ValueError) as exc:
            self.time_total = timer.get()
            return ComparisonResult.error(f'invalid comparison options: {message(exc)}')
        try:
            progress_rate_filter.set_rate(self.options.log_rate)
            logger.info(f'{self.options}')
            result = self._compare(f1, f2)
            logger.info(f'{result.result_type.name} after {self.checked} assignments')
        finally:
            logger.setLevel(save_level)
        self.time_total = timer.get()
        return result

    def _compare(self, f1: BooleanFunction, f2: BooleanFunction) -> ComparisonResult:
        try:
            self.variables = tuple(sorted(set(f1.variable_names) | set(f2.variable_names)))
            n = len(self.variables)
            if n > self.options.max_variables:
                return ComparisonResult.error(
                    f'too many variables ({n}) for comparison, at most '
                    f'{self.options.max_variables} are supported')
            logger.debug(f'enumerating {1 << n} assignments of {", ".join(self.variables)}')
            for assignment in assignments(self.variables):
                self.checked += 1
                progress_logger.info(f'{self.checked} of {1 << n} assignments checked')
                if f1.evaluate(assignment) != f2.evaluate(assignment):
                    return ComparisonResult.not_equivalent(format_assignment(assignment))
            return ComparisonResult.equivalent()
        except (ParseError, ArgumentError) as exc:
            return ComparisonResult.error(f'cannot compare functions: {message(exc)}')
        except Exception as exc:
            logger.debug('unexpected error', exc_info=True)
            return ComparisonResult.error(f'unexpected error while comparing functions: '
                                          f'{message(exc)}')


def compare(f1: BooleanFunction, f2: BooleanFunction, **options) -> ComparisonResult:
    """Compare `f1` and `f2` using a fresh :class:`Comparison`.

    >>> f = BooleanFunction.from_number(3, 0)
    >>> compare(f, f, max_variables=2).message
    'too many variables (3) for comparison, at most 2 are supported'
    """
    return Comparison()(f1, f2, **options)


def compare_formulas(formula1: str, formula2: str, **options) -> ComparisonResult:
    try:
        f1 = BooleanFunction.from_formula(formula1)
        f2 = BooleanFunction.from_formula(formula2)
    except (ParseError, ArgumentError) as exc:
        return ComparisonResult.error(f'cannot compare formulas: {message(exc)}')
    except Exception as exc:
        logger.debug('unexpected error', exc_info=True)
        return ComparisonResult.error(f'unexpected error while comparing formulas: '
                                      f'{message(exc)}')
    return compare(f1, f2, **options)


def compare_number_and_formula(variable_count: int, function_number: int, formula: str,
                               **options) -> ComparisonResult:
    """
    >>> compare_number_and_formula(11, 0, 'x1').message
    'cannot compare: number of variables must be in [1, 10], got 11'
    """
    try:
        f1 = BooleanFunction.from_number(variable_count, function_number)
        f2 = BooleanFunction.from_formula(formula)
    except (ParseError, ArgumentError) as exc:
        return ComparisonResult.error(f'cannot compare: {message(exc)}')
    except Exception as exc:
        logger.debug('unexpected error', exc_info=True)
        return ComparisonResult.error(f'unexpected error while comparing: {message(exc)}')
    return compare(f1, f2, **options)
