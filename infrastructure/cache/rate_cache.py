import logging
import threading
from datetime import datetime, timedelta
from decimal import Decimal

from domain.exceptions.currency import CurrencyException, RatesUnavailableError
from domain.models.currency import CurrencyType, RateSnapshot
from infrastructure.providers.base import ExchangeRateProvider
from utils.time import Clock, SystemClock

logger = logging.getLogger(__name__)


class RateCache:
	"""USD multipliers for every supported currency, refreshed at most once per ttl.

	The table lives in an immutable RateSnapshot that is replaced wholesale on
	each successful refresh. Readers grab the current snapshot reference and
	never block each other; a failed refresh leaves the previous snapshot and
	its timestamp in place.
	"""

	def __init__(
		self,
		provider: ExchangeRateProvider,
		ttl: timedelta = timedelta(hours=24),
		clock: Clock | None = None,
	):
		self.provider = provider
		self.ttl = ttl
		self.clock = clock or SystemClock()
		self._snapshot: RateSnapshot | None = None
		self._swap_lock = threading.Lock()
		# Held for the whole fetch so concurrent refreshes collapse into one.
		self._refresh_lock = threading.Lock()

	@property
	def last_refreshed(self) -> datetime | None:
		snapshot = self._snapshot
		return snapshot.fetched_at if snapshot else None

	def is_stale(self) -> bool:
		snapshot = self._snapshot
		if snapshot is None:
			return True
		return self.clock.now() - snapshot.fetched_at > self.ttl

	def ensure_fresh(self) -> None:
		if not self.is_stale():
			return

		with self._refresh_lock:
			# Another thread may have refreshed while we waited.
			if not self.is_stale():
				return
			self._refresh_locked()

	def refresh(self) -> RateSnapshot:
		with self._refresh_lock:
			return self._refresh_locked()

	def _refresh_locked(self) -> RateSnapshot:
		codes = CurrencyType.codes()
		logger.debug(f'Refreshing {len(codes)} rates from {self.provider.name}')

		try:
			multipliers = self.provider.fetch_usd_multipliers(codes)
			snapshot = RateSnapshot(
				rates=tuple(multipliers),
				fetched_at=self.clock.now(),
				source=self.provider.name,
			)
		except CurrencyException:
			logger.error(f'Rate refresh from {self.provider.name} failed', exc_info=True)
			raise

		with self._swap_lock:
			self._snapshot = snapshot

		logger.info(f'Refreshed {len(snapshot.rates)} rates from {snapshot.source}')
		return snapshot

	def snapshot(self) -> RateSnapshot:
		with self._swap_lock:
			snapshot = self._snapshot
		if snapshot is None:
			raise RatesUnavailableError('Exchange rates have never been loaded')
		return snapshot

	def rate(self, currency: CurrencyType) -> Decimal:
		return self.snapshot().rate(currency)
