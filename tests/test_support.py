import logging

from logictool.formulas import ArgumentError, ParseError
from logictool.support import excepthook
from logictool.support.logging import DeltaTimeFormatter, RateFilter, create_logger


def test_errors_print_without_traceback(capsys):
    excepthook.excepthook(ParseError, ParseError('unknown token: #'), None)
    assert capsys.readouterr().err == 'ParseError: unknown token: #\n'


def test_other_exceptions_are_delegated(monkeypatch):
    seen = []
    monkeypatch.setattr(excepthook, 'sys_excepthook', lambda *args: seen.append(args[1]))
    exc = KeyError('x')
    excepthook.excepthook(KeyError, exc, None)
    assert seen == [exc]


def test_argument_error_is_value_error():
    assert issubclass(ArgumentError, ValueError)
    assert issubclass(ArgumentError, excepthook.NoTraceException)


def test_create_logger_suppresses_empty_messages(capsys):
    formatter = DeltaTimeFormatter('%(levelname)s: %(message)s')
    logger = create_logger('logictool.test_support', formatter, level=logging.INFO)
    logger.info('   ')
    logger.info('enumerating')
    logger.debug('hidden')
    assert capsys.readouterr().err == 'INFO: enumerating\n'


def test_rate_filter_limits_records(capsys):
    rate_filter = RateFilter()
    rate_filter.set_rate(3600.0)
    formatter = DeltaTimeFormatter('%(message)s')
    logger = create_logger('logictool.test_support.rate', formatter,
                           level=logging.INFO, rate_filter=rate_filter)
    for i in range(3):
        logger.info(f'row {i}')
    assert capsys.readouterr().err == 'row 0\n'
