import logging
import threading
from decimal import Decimal

from google_currency.domain.models.currency import CurrencyLike, RateKey
from google_currency.infrastructure.providers.base import RateFetcher

logger = logging.getLogger(__name__)


class RateCache:
	"""In-memory rates keyed by currency pair, filled from a fetcher on miss.

	Every operation holds one lock for its whole duration, the fetch on a miss
	included. Concurrent callers for the same missing pair therefore trigger a
	single fetch, at the cost of serializing lookups while a fetch is in flight.
	Failed fetches are never cached.
	"""

	def __init__(self, fetcher: RateFetcher):
		self.fetcher = fetcher
		self._rates: dict[RateKey, Decimal] = {}
		self._lock = threading.Lock()

	@property
	def rates(self) -> dict[RateKey, Decimal]:
		with self._lock:
			return dict(self._rates)

	def get_rate(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Decimal:
		key = RateKey.for_pair(from_currency, to_currency)

		with self._lock:
			rate = self._rates.get(key)
			if rate is not None:
				logger.debug(f'Cache hit for {key}')
				return rate

			logger.debug(f'Cache miss for {key}, fetching from {self.fetcher.name}')
			try:
				rate = self.fetcher.fetch_rate(key.from_currency, key.to_currency)
			except Exception as e:
				logger.warning(f'Fetching {key} from {self.fetcher.name} failed: {e}')
				raise

			self._rates[key] = rate
			logger.info(
				f'Cached rate {key} = {rate}',
				extra={'extra_data': {'pair': key, 'rate': rate, 'source': self.fetcher.name}},
			)
			return rate

	def flush_rate(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Decimal | None:
		key = RateKey.for_pair(from_currency, to_currency)
		with self._lock:
			removed = self._rates.pop(key, None)
		logger.debug(f'Flushed {key}: {removed}')
		return removed

	def flush_rates(self) -> None:
		with self._lock:
			self._rates.clear()
		logger.debug('Flushed all cached rates')

	def __len__(self) -> int:
		with self._lock:
			return len(self._rates)

	def __contains__(self, pair: tuple[CurrencyLike, CurrencyLike]) -> bool:
		key = RateKey.for_pair(*pair)
		with self._lock:
			return key in self._rates

	def close(self) -> None:
		"""Release the fetcher's resources, for fetchers that hold any."""
		close = getattr(self.fetcher, 'close', None)
		if close is not None:
			close()

	def __enter__(self) -> 'RateCache':
		return self

	def __exit__(self, *exc_info) -> None:
		self.close()
