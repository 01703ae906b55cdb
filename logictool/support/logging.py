"""Logging helpers shared by the computational modules of :mod:`logictool`.

The package uses the standard :mod:`logging` module. Modules that run
potentially long enumerations obtain a preconfigured logger via
:func:`create_logger`, whose records carry a ``delta`` field with the wall
time elapsed since the start of the current run.
"""

import datetime
import logging
import time
from typing import Optional


class DeltaTimeFormatter(logging.Formatter):
    """Allows to log the time relative to a reference time by adding an
    attribute `delta` to the :class:`.logging.LogRecord`.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('logictool.demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time())
    >>> logger.warning('enumerated 256 assignments')  # doctest: +SKIP
    0:00:00.001: enumerated 256 assignments
    >>> logger.removeHandler(stream_handler)
    """

    _time_since_start_time = time.time() - logging._startTime  # type: ignore

    def format(self, record: logging.LogRecord) -> str:
        timestamp = record.relativeCreated / 1000 - self._time_since_start_time
        delta = datetime.timedelta(seconds=timestamp)
        record.delta = str(delta)[:-3]
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`.time.time`.
        """
        return self._time_since_start_time + logging._startTime  # type: ignore

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`.
        """
        self._time_since_start_time = reference_time - logging._startTime  # type: ignore


class RateFilter(logging.Filter):
    """Drops records that arrive less than `rate` seconds after the last
    record that passed. Progress messages inside enumeration loops are
    routed through such a filter. The filter is initially on with rate 0.0.

    >>> rate_filter = RateFilter()
    >>> rate_filter.set_rate(3600.0)
    >>> record = logging.LogRecord('x', logging.INFO, '', 0, 'row', None, None)
    >>> rate_filter.filter(record)
    True
    >>> rate_filter.filter(record)
    False
    >>> rate_filter.off()
    >>> rate_filter.filter(record)
    True
    """

    def __init__(self) -> None:
        super().__init__()
        self.active = True
        self.last_log = 0.0
        self.rate = 0.0

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.active:
            return True
        now = time.time()
        if now - self.last_log >= self.rate:
            self.last_log = now
            return True
        return False

    def off(self) -> None:
        """Turn filter off.
        """
        self.active = False

    def on(self) -> None:
        """Turn filter on.
        """
        self.active = True

    def set_rate(self, rate: float) -> None:
        """Set the log rate to `rate` seconds.
        """
        self.rate = rate


class Timer:
    """A simple timer measuring the wall time in seconds relative to the last
    :meth:`.reset`. Instances are implicitly reset when they are created.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`.reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        """Reset the timer to 0.0 seconds.
        """
        self._reference_time = time.time()


def create_logger(name: str, formatter: DeltaTimeFormatter,
                  level: int = logging.WARNING,
                  rate_filter: Optional[RateFilter] = None) -> logging.Logger:
    """Attach a stream handler using `formatter` to the logger `name` and
    return the logger. The logger does not propagate to the root logger.
    Empty messages are suppressed.

    >>> formatter = DeltaTimeFormatter('%(message)s')
    >>> logger = create_logger('logictool.doctest', formatter)
    >>> logger.propagate, logger.level == logging.WARNING
    (False, True)
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.addHandler(stream_handler)
    logger.addFilter(lambda record: str(record.msg).strip() != '')
    if rate_filter is not None:
        logger.addFilter(rate_filter)
    logger.setLevel(level)
    return logger
