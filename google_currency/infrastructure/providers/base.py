from decimal import Decimal
from typing import Protocol, runtime_checkable

from google_currency.domain.models.currency import CurrencyLike


@runtime_checkable
class RateFetcher(Protocol):
	@property
	def name(self) -> str: ...

	def fetch_rate(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Decimal: ...
