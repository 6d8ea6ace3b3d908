import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency
from config.logging_config import configure_logging
from config.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
	logger.info(f'Starting {settings.APP_NAME}...')

	init_dependencies()
	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.include_router(currency.router)
register_exception_handlers(app)
