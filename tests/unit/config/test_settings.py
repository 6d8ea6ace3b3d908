# nosec B101


import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_defaults(monkeypatch):
    for var in ('RATE_PROVIDER', 'RATE_TTL_HOURS', 'QUOTE_FEED_MAX_ATTEMPTS', 'QUOTE_FEED_TIMEOUT_SECONDS'):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.RATE_PROVIDER == 'quotes_csv'
    assert settings.RATE_TTL_HOURS == 24
    assert settings.QUOTE_FEED_MAX_ATTEMPTS == 1
    assert settings.QUOTE_FEED_TIMEOUT_SECONDS == 10


def test_env_is_case_insensitive(monkeypatch):
    monkeypatch.setenv('rate_ttl_hours', '6')

    assert Settings(_env_file=None).RATE_TTL_HOURS == 6


@pytest.mark.parametrize(
    'field, value',
    [('RATE_TTL_HOURS', 0), ('QUOTE_FEED_MAX_ATTEMPTS', 0), ('RATE_PROVIDER', 'fixerio')],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})
