# nosec B101


import json
import logging
import sys
from datetime import datetime
from decimal import Decimal

import pytest

from google_currency.application.services.rate_cache import RateCache
from google_currency.domain.models.currency import RateKey
from google_currency.monitoring.logger import (
    PACKAGE_LOGGER,
    JSONFormatter,
    RateJSONEncoder,
    configure_logging,
)


@pytest.fixture
def restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(package_logger.handlers), package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name='google_currency.application.services.rate_cache',
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg='Cached rate %s',
        args=('USD_TO_EUR',),
        exc_info=None,
        func='get_rate',
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_rate_json_encoder_renders_decimal_pair_and_datetime():
    encoded = json.dumps(
        {
            'rate': Decimal('1.23456'),
            'pair': RateKey('USD', 'EUR'),
            'at': datetime(2025, 11, 5, 10, 30),
        },
        cls=RateJSONEncoder,
    )

    assert json.loads(encoded) == {
        'rate': '1.23456',
        'pair': 'USD_TO_EUR',
        'at': '2025-11-05T10:30:00',
    }


def test_json_formatter_promotes_rate_event_fields():
    record = make_record(extra_data={
        'pair': RateKey('USD', 'EUR'),
        'rate': Decimal('0.85'),
        'source': 'google_finance',
        'attempt': 1,
    })

    entry = json.loads(JSONFormatter().format(record))

    assert entry['level'] == 'INFO'
    assert entry['logger'] == 'google_currency.application.services.rate_cache'
    assert entry['message'] == 'Cached rate USD_TO_EUR'
    assert entry['location'] == 'test_logger.get_rate:10'
    assert entry['pair'] == 'USD_TO_EUR'
    assert entry['rate'] == '0.85'
    assert entry['source'] == 'google_finance'
    assert entry['data'] == {'attempt': 1}


def test_json_formatter_without_extra_data_has_no_data_block():
    entry = json.loads(JSONFormatter().format(make_record()))

    assert 'data' not in entry
    assert 'rate' not in entry
    assert 'error' not in entry


def test_json_formatter_includes_error_block():
    try:
        raise ValueError('boom')
    except ValueError:
        record = make_record(exc_info=sys.exc_info())

    entry = json.loads(JSONFormatter().format(record))

    assert entry['error']['type'] == 'ValueError'
    assert entry['error']['message'] == 'boom'
    assert 'ValueError: boom' in entry['error']['traceback']


@pytest.mark.parametrize('json_output, formatter_type', [(True, JSONFormatter), (False, logging.Formatter)])
def test_configure_logging_installs_single_handler(restore_package_logger, json_output, formatter_type):
    configure_logging('debug', json_output=json_output)
    package_logger = configure_logging('debug', json_output=json_output)

    assert package_logger is restore_package_logger
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1
    assert type(package_logger.handlers[0].formatter) is formatter_type
    assert logging.getLogger('httpx').level == logging.WARNING


def test_cached_rate_is_logged_as_json_line(restore_package_logger, capsys):
    class StubFetcher:
        name = 'stub'

        def fetch_rate(self, from_currency, to_currency):
            return Decimal('1.10')

    configure_logging('INFO', json_output=True)
    RateCache(StubFetcher()).get_rate('EUR', 'USD')

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    cached = [line for line in lines if line['message'].startswith('Cached rate')]
    assert cached[0]['pair'] == 'EUR_TO_USD'
    assert cached[0]['rate'] == '1.10'
    assert cached[0]['source'] == 'stub'
