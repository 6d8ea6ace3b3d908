import logging
import threading
from datetime import datetime, timedelta

from config.settings import get_settings
from domain.models.currency import CurrencyType
from domain.models.money import Money
from infrastructure.cache.rate_cache import RateCache
from infrastructure.providers import build_provider

from .conversion_service import ConversionService

logger = logging.getLogger(__name__)

_service: ConversionService | None = None
_service_lock = threading.Lock()


def get_conversion_service() -> ConversionService:
	"""Process-wide converter, built from settings on first use."""
	global _service
	with _service_lock:
		if _service is None:
			settings = get_settings()
			logger.info(f'Creating conversion service with provider {settings.RATE_PROVIDER}')
			cache = RateCache(
				provider=build_provider(settings),
				ttl=timedelta(hours=settings.RATE_TTL_HOURS),
			)
			_service = ConversionService(cache)
		return _service


def set_conversion_service(service: ConversionService) -> None:
	global _service
	with _service_lock:
		_service = service


def reset_conversion_service() -> None:
	global _service
	with _service_lock:
		if _service is not None:
			_service.rate_cache.provider.close()
		_service = None


def convert_to(money: Money, target: CurrencyType) -> Money:
	return get_conversion_service().convert_to(money, target)


def force_definition_update() -> datetime:
	return get_conversion_service().force_definition_update()


__all__ = [
	'ConversionService',
	'convert_to',
	'force_definition_update',
	'get_conversion_service',
	'reset_conversion_service',
	'set_conversion_service',
]
