"""
Response shapes understood by the Google Finance converter fetcher.

The converter answers with loosely structured text rather than a versioned
format, so parsing walks an ordered table of known shapes. The first shape
that recognizes the body decides the outcome; a body no shape recognizes is
an error, never a guessed number.
"""

import json
import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from google_currency.domain.exceptions.currency import RateFetchError, UnknownRateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedRate:
	rate: Decimal
	# ISO code printed next to the rate; None when the shape only carries a name
	currency: str | None = None


@dataclass(frozen=True)
class ResponsePattern:
	name: str
	# Returns None when the body is not this shape, raises UnknownRateError
	# when the shape says the pair cannot be converted
	match: Callable[[str], ParsedRate | None]


_RESULT_SPAN = re.compile(r'<span class=bld>(\d+\.?\d*) ([A-Z]{3})</span>')
_COULD_NOT_CONVERT = re.compile(r'Could not convert\.')
_LEGACY_PAYLOAD = re.compile(r'^\s*\{.*\brhs\s*:', re.DOTALL)
_LEGACY_KEYS = re.compile(r'\b(lhs|rhs|error|icc)\s*:')
_LEGACY_ESCAPES = re.compile(r'(\\x26#160;|\\x..|\\240)')
_DIGIT_GROUPING = re.compile(r'(?<=\d)(?:,|&#160;|\xa0|\u202f)(?=\d{3}(?!\d))')
# Amount followed by the currency name; anything else is not trusted
_RHS_AMOUNT = re.compile(r'^\s*(\d+(?:\.\d+)?)\s+[^\W\d_]')


def _to_decimal(text: str) -> Decimal:
	try:
		return Decimal(text)
	except InvalidOperation as e:
		raise RateFetchError(f'Invalid rate value: {text!r}') from e


def match_result_span(body: str) -> ParsedRate | None:
	found = _RESULT_SPAN.search(body)
	if not found:
		return None
	return ParsedRate(rate=_to_decimal(found.group(1)), currency=found.group(2))


def match_could_not_convert(body: str) -> ParsedRate | None:
	if _COULD_NOT_CONVERT.search(body):
		raise UnknownRateError('Rate source could not convert the requested pair')
	return None


def fix_legacy_payload(data: str) -> dict:
	"""Quote the bare keys of the old calculator payload and decode it."""
	data = _LEGACY_KEYS.sub(r'"\1":', data)
	data = _LEGACY_ESCAPES.sub('', data)
	return json.loads(data)


def match_legacy_payload(body: str) -> ParsedRate | None:
	"""Old calculator shape: {lhs: "1 U.S. dollar",rhs: "0.7763 Euros",error: "",icc: true}"""
	if not _LEGACY_PAYLOAD.search(body):
		return None
	try:
		payload = fix_legacy_payload(body)
	except ValueError:
		logger.debug('Legacy calculator payload could not be decoded')
		return None
	if not isinstance(payload, dict):
		return None

	if payload.get('error'):
		raise UnknownRateError(f"Rate source could not convert: {payload['error']}")

	rhs = _DIGIT_GROUPING.sub('', str(payload.get('rhs', '')))
	found = _RHS_AMOUNT.match(rhs)
	if not found:
		logger.debug(f'Legacy calculator amount not recognized: {rhs!r}')
		return None
	return ParsedRate(rate=_to_decimal(found.group(1)))


RESPONSE_PATTERNS: tuple[ResponsePattern, ...] = (
	ResponsePattern('result_span', match_result_span),
	ResponsePattern('could_not_convert', match_could_not_convert),
	ResponsePattern('legacy_payload', match_legacy_payload),
)


def extract_rate(body: str, patterns: Sequence[ResponsePattern] = RESPONSE_PATTERNS) -> ParsedRate:
	for pattern in patterns:
		parsed = pattern.match(body)
		if parsed is not None:
			logger.debug(f'Response matched {pattern.name}: {parsed.rate}')
			return parsed

	raise RateFetchError(f'Unrecognized response from rate source: {body[:200]!r}')
