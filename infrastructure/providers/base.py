import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Protocol

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import FeedParseError, ProviderError

logger = logging.getLogger(__name__)


class ExchangeRateProvider(Protocol):
	"""Returns, for each requested code and in the same order, how many units
	of that currency one US dollar buys."""

	@property
	def name(self) -> str: ...

	def fetch_usd_multipliers(self, codes: list[str]) -> list[Decimal]: ...

	def close(self) -> None: ...


def parse_multiplier(raw: object, code: str) -> Decimal:
	try:
		value = Decimal(str(raw).strip())
	except InvalidOperation as e:
		raise FeedParseError(f'Malformed rate for {code}: {raw!r}') from e

	if not value.is_finite() or value <= 0:
		raise FeedParseError(f'Invalid rate for {code}: {raw!r}')
	return value


class BaseHTTPProvider(ABC):
	"""Common HTTP handling for quote feeds: timeout, transport retries and
	translation of httpx errors into ProviderError."""

	def __init__(
		self,
		base_url: str,
		client: httpx.Client | None = None,
		timeout: float = 10.0,
		max_attempts: int = 1,
	):
		self.base_url = base_url.rstrip('/')
		self.max_attempts = max_attempts
		self.retry_wait = wait_exponential(multiplier=1, min=1, max=10)
		self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))

	@property
	@abstractmethod
	def name(self) -> str: ...

	@abstractmethod
	def fetch_usd_multipliers(self, codes: list[str]) -> list[Decimal]: ...

	def _retrying(self) -> Retrying:
		return Retrying(
			stop=stop_after_attempt(self.max_attempts),
			wait=self.retry_wait,
			retry=retry_if_exception_type(httpx.TransportError),
			reraise=True,
		)

	def _get(self, url: str, params: dict | None = None) -> httpx.Response:
		try:
			for attempt in self._retrying():
				with attempt:
					if attempt.retry_state.attempt_number > 1:
						logger.warning(
							f'{self.name}: retrying request (attempt {attempt.retry_state.attempt_number})'
						)
					response = self._client.get(url, params=params)
					response.raise_for_status()
			return response

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'{self.name} HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.InvalidURL as e:
			raise ProviderError(f'{self.name} invalid URL: {e}') from e
		except httpx.RequestError as e:
			raise ProviderError(f'{self.name} request failed: {e.__class__.__name__}') from e

	def close(self) -> None:
		self._client.close()
