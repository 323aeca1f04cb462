import json
import logging
import sys
import traceback
from datetime import datetime
from decimal import Decimal

from google_currency.domain.models.currency import RateKey

PACKAGE_LOGGER = 'google_currency'

# Fields of a rate event lifted to the top level of a JSON line
RATE_EVENT_FIELDS = ('pair', 'rate', 'source')


class RateJSONEncoder(json.JSONEncoder):
    """Keeps rates as exact decimal strings; pairs render as USD_TO_EUR."""

    def default(self, o):
        if isinstance(o, Decimal):
            return str(o)
        if isinstance(o, RateKey):
            return str(o)
        if isinstance(o, datetime):
            return o.isoformat()
        return super().default(o)


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record. Rate events passed as ``extra_data`` get their
    pair, rate and source promoted next to the message; other keys stay under
    ``data``.
    """
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f'{record.module}.{record.funcName}:{record.lineno}',
        }

        extra_data = dict(getattr(record, 'extra_data', None) or {})
        for field in RATE_EVENT_FIELDS:
            if field in extra_data:
                entry[field] = extra_data.pop(field)
        if extra_data:
            entry['data'] = extra_data

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, tb = record.exc_info
            entry['error'] = {
                'type': exc_type.__name__,
                'message': str(exc),
                'traceback': ''.join(traceback.format_exception(exc_type, exc, tb)),
            }

        return json.dumps(entry, ensure_ascii=False, cls=RateJSONEncoder)


def configure_logging(level: str = 'INFO', json_output: bool = False) -> logging.Logger:
    """Send the package's records to stdout, as plain text or JSON lines."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(level.upper())

    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JSONFormatter() if json_output
        else logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s | %(message)s', datefmt='%H:%M:%S')
    )
    package_logger.addHandler(handler)
    return package_logger
