from dataclasses import dataclass

from google_currency.domain.exceptions.currency import InvalidCurrencyError
from google_currency.domain.models.iso4217 import ISO_4217


@dataclass(frozen=True)
class Currency:
	iso_code: str
	name: str
	symbol: str | None = None

	@classmethod
	def wrap(cls, value: 'CurrencyLike') -> 'Currency':
		"""Return the registered currency for a code or currency value."""
		return CURRENCIES[normalize_currency(value)]


CurrencyLike = str | Currency


CURRENCIES: dict[str, Currency] = {
	code: Currency(code, name, symbol) for code, name, symbol in ISO_4217
}


def normalize_currency(value: CurrencyLike) -> str:
	"""Reduce a currency code or currency value to its registered ISO code.

	Strings are matched case-insensitively after stripping whitespace. Anything
	that does not resolve to a registered currency raises InvalidCurrencyError.
	"""
	if isinstance(value, Currency):
		code = value.iso_code.strip().upper()
	elif isinstance(value, str):
		code = value.strip().upper()
	else:
		raise InvalidCurrencyError(f'Unsupported currency value: {value!r}')

	if code not in CURRENCIES:
		raise InvalidCurrencyError(f'Unknown currency: {value!r}')
	return code


@dataclass(frozen=True)
class RateKey:
	from_currency: str
	to_currency: str

	@classmethod
	def for_pair(cls, from_currency: CurrencyLike, to_currency: CurrencyLike) -> 'RateKey':
		return cls(normalize_currency(from_currency), normalize_currency(to_currency))

	def __str__(self) -> str:
		return f'{self.from_currency}_TO_{self.to_currency}'
