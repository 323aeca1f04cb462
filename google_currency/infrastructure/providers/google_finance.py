import logging
import urllib.parse
from decimal import Decimal

import httpx

from google_currency.config.settings import Settings, get_settings
from google_currency.domain.exceptions.currency import RateFetchError
from google_currency.domain.models.currency import CurrencyLike, normalize_currency
from google_currency.infrastructure.providers.responses import extract_rate

logger = logging.getLogger(__name__)


class GoogleFinanceRateFetcher:
	def __init__(self, settings: Settings | None = None, client: httpx.Client | None = None):
		self.settings = settings or get_settings()
		self._owns_client = client is None
		self._client = client or httpx.Client(timeout=httpx.Timeout(self.settings.HTTP_TIMEOUT))

	@property
	def name(self) -> str:
		return 'google_finance'

	def build_request_url(self, from_code: str, to_code: str) -> str:
		params = {'a': 1, 'from': from_code, 'to': to_code}
		return (
			f'{self.settings.SERVICE_SCHEME}://{self.settings.SERVICE_HOST}'
			f'{self.settings.SERVICE_PATH}?{urllib.parse.urlencode(params)}'
		)

	def _request(self, url: str) -> str:
		try:
			response = self._client.get(url)
			response.raise_for_status()
			return response.text

		except httpx.HTTPStatusError as e:
			raise RateFetchError(
				f'Google Finance HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise RateFetchError(f'Google Finance request failed: {e.__class__.__name__}') from e

	def fetch_rate(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Decimal:
		from_code, to_code = normalize_currency(from_currency), normalize_currency(to_currency)

		url = self.build_request_url(from_code, to_code)
		logger.debug(f'Fetching {from_code}->{to_code} from {url}')
		body = self._request(url)

		parsed = extract_rate(body)
		if (
			self.settings.VERIFY_TARGET_CURRENCY
			and parsed.currency is not None
			and parsed.currency != to_code
		):
			raise RateFetchError(
				f'Rate source answered in {parsed.currency}, expected {to_code}'
			)
		return parsed.rate

	def close(self) -> None:
		if self._owns_client:
			self._client.close()

	def __enter__(self) -> 'GoogleFinanceRateFetcher':
		return self

	def __exit__(self, *exc_info) -> None:
		self.close()
