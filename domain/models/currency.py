from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from domain.exceptions.currency import FeedParseError, InvalidCurrencyError


class CurrencyType(Enum):
	"""Supported currencies, indexed alphabetically by ISO 4217 code.

	The index of a member is stable and doubles as its slot in a rate table.
	"""

	AED = (0, 'AED', 'United Arab Emirates Dirham')
	AUD = (1, 'AUD', 'Australian Dollars')
	CAD = (2, 'CAD', 'Canadian Dollars')
	CHF = (3, 'CHF', 'Swiss Franc')
	CNY = (4, 'CNY', 'Chinese Yuan')
	DKK = (5, 'DKK', 'Danish Krones')
	EGP = (6, 'EGP', 'Egyptian Pounds')
	EUR = (7, 'EUR', 'European Euros')
	GBP = (8, 'GBP', 'British Pounds Sterling')
	HKD = (9, 'HKD', 'Hong Kong Dollars')
	ILS = (10, 'ILS', 'Israeli New Shekels')
	INR = (11, 'INR', 'Indian Rupees')
	JPY = (12, 'JPY', 'Japanese Yen')
	KRW = (13, 'KRW', 'South Korean Won')
	KWD = (14, 'KWD', 'Kuwaiti Dinar')
	MXN = (15, 'MXN', 'Mexican Pesos')
	NZD = (16, 'NZD', 'New Zealand Dollars')
	RUB = (17, 'RUB', 'Russian Rubles')
	SAR = (18, 'SAR', 'Saudi Arabian Riyals')
	SEK = (19, 'SEK', 'Sweedish Kronas')
	SGD = (20, 'SGD', 'Singapore Dollars')
	TWD = (21, 'TWD', 'Taiwan New Dollars')
	USD = (22, 'USD', 'US Dollars')
	ZAR = (23, 'ZAR', 'South African Rands')

	def __init__(self, index: int, code: str, display_name: str):
		self.index = index
		self.code = code
		self.display_name = display_name

	def __str__(self) -> str:
		return self.display_name

	@classmethod
	def values(cls) -> list['CurrencyType']:
		return list(cls)

	@classmethod
	def codes(cls) -> list[str]:
		return [c.code for c in cls]

	@classmethod
	def from_code(cls, code: str) -> 'CurrencyType':
		try:
			return cls[code.strip().upper()]
		except (KeyError, AttributeError) as e:
			raise InvalidCurrencyError(f'Currency {code} is not supported') from e

	@classmethod
	def from_index(cls, index: int) -> 'CurrencyType':
		if not 0 <= index < len(_BY_INDEX):
			raise InvalidCurrencyError(f'No currency at index {index}')
		return _BY_INDEX[index]


_BY_INDEX: tuple[CurrencyType, ...] = tuple(sorted(CurrencyType, key=lambda c: c.index))

PIVOT_CURRENCY = CurrencyType.USD


@dataclass(frozen=True)
class RateSnapshot:
	"""One complete set of USD multipliers from a single refresh."""

	rates: tuple[Decimal, ...]  # aligned with CurrencyType.index
	fetched_at: datetime
	source: str

	def __post_init__(self):
		if len(self.rates) != len(CurrencyType):
			raise FeedParseError(
				f'Expected {len(CurrencyType)} rates, got {len(self.rates)}'
			)
		for currency, rate in zip(_BY_INDEX, self.rates, strict=True):
			if not isinstance(rate, Decimal) or not rate.is_finite() or rate <= 0:
				raise FeedParseError(f'Invalid multiplier for {currency.code}: {rate!r}')

	def rate(self, currency: CurrencyType) -> Decimal:
		return self.rates[currency.index]

	def as_dict(self) -> dict[str, Decimal]:
		return {c.code: self.rates[c.index] for c in _BY_INDEX}
