from config.settings import Settings

from .base import BaseHTTPProvider, ExchangeRateProvider
from .openexchange import OpenExchangeProvider
from .quotes_csv import QuoteCSVProvider


def build_provider(settings: Settings) -> ExchangeRateProvider:
	if settings.RATE_PROVIDER == 'openexchange':
		return OpenExchangeProvider(
			settings.OPENEXCHANGE_APP_ID,
			timeout=settings.QUOTE_FEED_TIMEOUT_SECONDS,
			max_attempts=settings.QUOTE_FEED_MAX_ATTEMPTS,
		)
	return QuoteCSVProvider(
		settings.QUOTE_FEED_URL,
		timeout=settings.QUOTE_FEED_TIMEOUT_SECONDS,
		max_attempts=settings.QUOTE_FEED_MAX_ATTEMPTS,
	)


__all__ = [
	'BaseHTTPProvider',
	'ExchangeRateProvider',
	'OpenExchangeProvider',
	'QuoteCSVProvider',
	'build_provider',
]
