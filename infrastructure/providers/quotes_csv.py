import csv
import io
from decimal import Decimal

import httpx

from domain.exceptions.currency import FeedParseError
from infrastructure.providers.base import BaseHTTPProvider, parse_multiplier


class QuoteCSVProvider(BaseHTTPProvider):
	"""Batched quote feed answering with one CSV line per requested symbol.

	All symbols go out in a single GET as ``USD<CODE>=X`` and the feed returns
	the last trade price (field ``l1``) for each, in request order.
	"""

	BASE_URL = 'http://download.finance.yahoo.com/d/quotes.csv'

	def __init__(
		self,
		base_url: str = BASE_URL,
		client: httpx.Client | None = None,
		timeout: float = 10.0,
		max_attempts: int = 1,
	):
		super().__init__(base_url, client=client, timeout=timeout, max_attempts=max_attempts)

	@property
	def name(self) -> str:
		return 'quotes_csv'

	@staticmethod
	def build_symbols(codes: list[str]) -> str:
		return ','.join(f'USD{code}=X' for code in codes)

	def fetch_usd_multipliers(self, codes: list[str]) -> list[Decimal]:
		response = self._get(self.base_url, params={'s': self.build_symbols(codes), 'f': 'l1', 'e': '.csv'})
		return self.parse_response(response.text, codes)

	@staticmethod
	def parse_response(text: str, codes: list[str]) -> list[Decimal]:
		rows = [row for row in csv.reader(io.StringIO(text)) if row and row[0].strip()]
		if len(rows) != len(codes):
			raise FeedParseError(f'Expected {len(codes)} quote lines, got {len(rows)}')

		multipliers = []
		for code, row in zip(codes, rows, strict=True):
			if code == 'USD':
				multipliers.append(Decimal(1))
			else:
				multipliers.append(parse_multiplier(row[0], code))
		return multipliers
