from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Quote feed
	RATE_PROVIDER: Literal['quotes_csv', 'openexchange'] = 'quotes_csv'
	QUOTE_FEED_URL: str = 'http://download.finance.yahoo.com/d/quotes.csv'
	OPENEXCHANGE_APP_ID: str = ''
	QUOTE_FEED_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
	# 1 means a failed request is not retried
	QUOTE_FEED_MAX_ATTEMPTS: int = Field(default=1, ge=1)

	# Rate cache
	RATE_TTL_HOURS: float = Field(default=24.0, gt=0)

	# Application
	APP_NAME: str = 'Currency Converter'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
