import logging
from datetime import datetime
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_EVEN, Context, Decimal

from domain.models.currency import PIVOT_CURRENCY, CurrencyType, RateSnapshot
from domain.models.money import EXACT_CONTEXT, Money
from infrastructure.cache.rate_cache import RateCache

logger = logging.getLogger(__name__)

# Conversions into the pivot currency round here, half-even.
PIVOT_DIVISION_CONTEXT = Context(prec=28, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)


class ConversionService:
	"""Converts money between supported currencies through USD."""

	def __init__(self, rate_cache: RateCache):
		self.rate_cache = rate_cache

	def convert_to(self, money: Money, target: CurrencyType) -> Money:
		converted, _ = self.convert_with_rate(money, target)
		return converted

	def convert_with_rate(self, money: Money, target: CurrencyType) -> tuple[Money, Decimal]:
		"""Converted money plus the cross rate used, both from one refresh cycle."""
		if money.currency == target:
			return money, Decimal(1)

		self.rate_cache.ensure_fresh()
		snapshot = self.rate_cache.snapshot()

		if money.currency == PIVOT_CURRENCY:
			usd_amount = money.amount
		else:
			usd_amount = PIVOT_DIVISION_CONTEXT.divide(money.amount, snapshot.rate(money.currency))

		if target == PIVOT_CURRENCY:
			amount = usd_amount
		else:
			amount = EXACT_CONTEXT.multiply(usd_amount, snapshot.rate(target))

		logger.debug(f'Converted {money} to {target.code} using rates from {snapshot.source}')
		return Money(amount, target), self._cross_rate(snapshot, money.currency, target)

	def force_definition_update(self) -> datetime:
		return self.rate_cache.refresh().fetched_at

	def rate(self, currency: CurrencyType) -> Decimal:
		self.rate_cache.ensure_fresh()
		return self.rate_cache.rate(currency)

	def exchange_rate(self, source: CurrencyType, target: CurrencyType) -> Decimal:
		"""Units of ``target`` bought by one unit of ``source``."""
		if source == target:
			return Decimal(1)
		self.rate_cache.ensure_fresh()
		return self._cross_rate(self.rate_cache.snapshot(), source, target)

	@staticmethod
	def _cross_rate(snapshot: RateSnapshot, source: CurrencyType, target: CurrencyType) -> Decimal:
		return PIVOT_DIVISION_CONTEXT.divide(snapshot.rate(target), snapshot.rate(source))

	@property
	def last_refreshed(self) -> datetime | None:
		return self.rate_cache.last_refreshed
