# nosec B101


from datetime import UTC, datetime
from decimal import Decimal

import pytest

from domain.exceptions.currency import FeedParseError, InvalidCurrencyError
from domain.models.currency import PIVOT_CURRENCY, CurrencyType, RateSnapshot


def test_catalog_has_24_currencies_with_contiguous_indexes():
    assert len(CurrencyType) == 24
    assert sorted(c.index for c in CurrencyType) == list(range(24))


def test_values_are_in_index_order_and_alphabetical():
    values = CurrencyType.values()

    assert [c.index for c in values] == list(range(24))
    assert [c.code for c in values] == sorted(c.code for c in values)
    assert values[0] is CurrencyType.AED
    assert values[-1] is CurrencyType.ZAR


def test_usd_is_the_pivot():
    assert PIVOT_CURRENCY is CurrencyType.USD
    assert CurrencyType.USD.index == 22
    assert CurrencyType.USD.code == 'USD'
    assert CurrencyType.USD.display_name == 'US Dollars'


def test_str_is_display_name():
    assert str(CurrencyType.GBP) == 'British Pounds Sterling'


def test_from_code_is_case_insensitive():
    assert CurrencyType.from_code('eur') is CurrencyType.EUR
    assert CurrencyType.from_code(' JPY ') is CurrencyType.JPY


@pytest.mark.parametrize('code', ['XXX', 'NGN', '', 'US'])
def test_from_code_unknown_raises(code):
    with pytest.raises(InvalidCurrencyError) as exc_info:
        CurrencyType.from_code(code)

    assert 'not supported' in str(exc_info.value)


def test_from_index_round_trips_every_member():
    for currency in CurrencyType:
        assert CurrencyType.from_index(currency.index) is currency


@pytest.mark.parametrize('index', [-1, 24, 100])
def test_from_index_out_of_range_raises(index):
    with pytest.raises(InvalidCurrencyError):
        CurrencyType.from_index(index)


# ============================================================================
# TEST: RateSnapshot
# ============================================================================

def _rates(value='1.5'):
    return tuple(Decimal(value) for _ in CurrencyType)


def test_snapshot_looks_up_by_index():
    rates = tuple(Decimal(c.index + 1) for c in CurrencyType)
    snapshot = RateSnapshot(rates=rates, fetched_at=datetime(2025, 1, 1, tzinfo=UTC), source='test')

    assert snapshot.rate(CurrencyType.AED) == Decimal(1)
    assert snapshot.rate(CurrencyType.ZAR) == Decimal(24)
    assert snapshot.as_dict()['USD'] == Decimal(23)


def test_snapshot_rejects_short_table():
    with pytest.raises(FeedParseError) as exc_info:
        RateSnapshot(rates=_rates()[:23], fetched_at=datetime.now(UTC), source='test')

    assert 'Expected 24 rates, got 23' in str(exc_info.value)


@pytest.mark.parametrize('bad', ['0', '-1.5', 'NaN', 'Infinity'])
def test_snapshot_rejects_non_positive_or_non_finite(bad):
    rates = list(_rates())
    rates[CurrencyType.EUR.index] = Decimal(bad)

    with pytest.raises(FeedParseError) as exc_info:
        RateSnapshot(rates=tuple(rates), fetched_at=datetime.now(UTC), source='test')

    assert 'EUR' in str(exc_info.value)


def test_display_names_match_catalog():
    assert CurrencyType.SEK.display_name == 'Sweedish Kronas'
    assert CurrencyType.AED.display_name == 'United Arab Emirates Dirham'
