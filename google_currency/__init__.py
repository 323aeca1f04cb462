from google_currency.application.services import RateCache, build_rate_cache
from google_currency.domain.exceptions.currency import (
	CurrencyException,
	InvalidCurrencyError,
	RateFetchError,
	UnknownRateError,
)
from google_currency.domain.models.currency import Currency, RateKey, normalize_currency
from google_currency.infrastructure.providers import GoogleFinanceRateFetcher

__all__ = [
	'Currency',
	'CurrencyException',
	'GoogleFinanceRateFetcher',
	'InvalidCurrencyError',
	'RateCache',
	'RateFetchError',
	'RateKey',
	'UnknownRateError',
	'build_rate_cache',
	'normalize_currency',
]
