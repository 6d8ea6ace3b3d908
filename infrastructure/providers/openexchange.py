from decimal import Decimal

import httpx

from domain.exceptions.currency import FeedParseError, ProviderError
from infrastructure.providers.base import BaseHTTPProvider, parse_multiplier


class OpenExchangeProvider(BaseHTTPProvider):
	BASE_URL = 'https://openexchangerates.org/api'

	def __init__(
		self,
		app_id: str,
		base_url: str = BASE_URL,
		client: httpx.Client | None = None,
		timeout: float = 10.0,
		max_attempts: int = 1,
	):
		super().__init__(base_url, client=client, timeout=timeout, max_attempts=max_attempts)
		self.app_id = app_id

	@property
	def name(self) -> str:
		return 'openexchange'

	def _request(self, endpoint: str, params: dict) -> dict:
		params['app_id'] = self.app_id
		response = self._get(f'{self.base_url}/{endpoint}', params=params)

		try:
			data = response.json()
		except ValueError as e:
			raise FeedParseError(f'OpenExchange response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise FeedParseError('OpenExchange response is not a JSON object')
		if 'error' in data:
			message = data.get('description', data.get('message', 'Unknown error'))
			raise ProviderError(f'OpenExchange API error: {message}')
		return data

	def fetch_usd_multipliers(self, codes: list[str]) -> list[Decimal]:
		symbols = [code for code in codes if code != 'USD']
		data = self._request('latest.json', {'base': 'USD', 'symbols': ','.join(symbols)})
		rates = data.get('rates') or {}

		multipliers = []
		for code in codes:
			if code == 'USD':
				multipliers.append(Decimal(1))
				continue
			if code not in rates:
				raise FeedParseError(f'Missing rate for {code}')
			multipliers.append(parse_multiplier(rates[code], code))
		return multipliers
