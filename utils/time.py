from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
	def now(self) -> datetime: ...


class SystemClock:
	"""Returns the current UTC time."""

	def now(self) -> datetime:
		return datetime.now(UTC)
