import logging

from google_currency.application.services.rate_cache import RateCache
from google_currency.config.settings import Settings, get_settings
from google_currency.infrastructure.providers import GoogleFinanceRateFetcher
from google_currency.monitoring.logger import configure_logging

logger = logging.getLogger(__name__)


def build_rate_cache(settings: Settings | None = None, configure_logs: bool = False) -> RateCache:
	"""Wire a RateCache to a Google Finance fetcher using the given settings."""
	settings = settings or get_settings()
	if configure_logs:
		configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)

	fetcher = GoogleFinanceRateFetcher(settings=settings)
	logger.info(f'Rate cache initialized with {fetcher.name} at {settings.SERVICE_HOST}')
	return RateCache(fetcher)
