from .base import RateFetcher
from .google_finance import GoogleFinanceRateFetcher
from .responses import RESPONSE_PATTERNS, ParsedRate, ResponsePattern, extract_rate

__all__ = [
	'GoogleFinanceRateFetcher',
	'ParsedRate',
	'RESPONSE_PATTERNS',
	'RateFetcher',
	'ResponsePattern',
	'extract_rate',
]
