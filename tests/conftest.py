"""
Shared test configuration and fixtures.
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from application.services import ConversionService, reset_conversion_service, set_conversion_service
from domain.models.currency import CurrencyType
from infrastructure.cache.rate_cache import RateCache

START_TIME = datetime(2025, 11, 5, 10, 0, 0, tzinfo=UTC)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = START_TIME):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


class StubProvider:
    """In-memory quote feed returning fixed multipliers by code."""

    name = 'stub'

    def __init__(self, multipliers: dict[str, Decimal]):
        self.multipliers = dict(multipliers)
        self.calls = 0
        self.requested_codes: list[list[str]] = []
        self.error: Exception | None = None
        self.closed = False

    def fetch_usd_multipliers(self, codes: list[str]) -> list[Decimal]:
        self.calls += 1
        self.requested_codes.append(list(codes))
        if self.error is not None:
            raise self.error
        return [self.multipliers[code] for code in codes]

    def close(self) -> None:
        self.closed = True


def build_multipliers(**overrides: str) -> dict[str, Decimal]:
    # Distinct, easy-to-read multipliers for every currency; USD is always 1.
    multipliers = {c.code: Decimal(2) + Decimal(c.index) / 4 for c in CurrencyType}
    multipliers.update(
        {
            'USD': Decimal(1),
            'AUD': Decimal('1.50'),
            'EUR': Decimal('0.80'),
            'GBP': Decimal('0.75'),
            'JPY': Decimal('150.25'),
        }
    )
    multipliers.update({code: Decimal(value) for code, value in overrides.items()})
    return multipliers


@pytest.fixture
def multipliers():
    return build_multipliers()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def provider(multipliers):
    return StubProvider(multipliers)


@pytest.fixture
def rate_cache(provider, clock):
    return RateCache(provider=provider, ttl=timedelta(hours=24), clock=clock)


@pytest.fixture
def service(rate_cache):
    return ConversionService(rate_cache)


@pytest.fixture
def default_service(service):
    """Install ``service`` as the process-wide converter for the test."""
    set_conversion_service(service)
    yield service
    reset_conversion_service()


@pytest.fixture
def make_provider():
    def _make(**overrides: str) -> StubProvider:
        return StubProvider(build_multipliers(**overrides))

    return _make
