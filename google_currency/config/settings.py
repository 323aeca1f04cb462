from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	SERVICE_SCHEME: str = 'http'
	SERVICE_HOST: str = 'www.google.com'
	SERVICE_PATH: str = '/finance/converter'

	HTTP_TIMEOUT: float = 10.0

	# Reject a parsed rate whose currency token differs from the requested target
	VERIFY_TARGET_CURRENCY: bool = False

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(
		env_file='.env', env_prefix='GOOGLE_CURRENCY_', case_sensitive=False, extra='ignore'
	)


@lru_cache
def get_settings() -> Settings:
	return Settings()
