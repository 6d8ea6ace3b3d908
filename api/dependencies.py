import logging

from application.services import (
	ConversionService,
	get_conversion_service as get_default_conversion_service,
	reset_conversion_service,
)

logger = logging.getLogger(__name__)


def init_dependencies() -> None:
	"""Build the process-wide conversion service. Called at app startup."""
	logger.info('Initializing dependencies...')
	get_default_conversion_service()
	logger.info('Dependencies initialized')


def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')
	reset_conversion_service()
	logger.info('Cleanup complete')


def get_conversion_service() -> ConversionService:
	return get_default_conversion_service()
