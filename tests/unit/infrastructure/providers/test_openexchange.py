# nosec B101


from decimal import Decimal
from unittest.mock import Mock

import httpx
import pytest

from domain.exceptions.currency import FeedParseError, ProviderError
from infrastructure.providers.openexchange import OpenExchangeProvider


def _client_returning(data):
    mock_client = Mock(spec=httpx.Client)
    mock_response = Mock()
    mock_response.json.return_value = data
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


def test_fetch_returns_rates_in_request_order():
    mock_client = _client_returning(
        {'base': 'USD', 'rates': {'EUR': 0.85, 'AUD': 1.5, 'JPY': 110.50}}
    )
    provider = OpenExchangeProvider(app_id='test_id', client=mock_client)

    multipliers = provider.fetch_usd_multipliers(['JPY', 'USD', 'AUD', 'EUR'])

    assert multipliers == [Decimal('110.50'), Decimal(1), Decimal('1.5'), Decimal('0.85')]
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://openexchangerates.org/api/latest.json'
    assert call_args[1]['params']['app_id'] == 'test_id'
    assert call_args[1]['params']['base'] == 'USD'
    assert call_args[1]['params']['symbols'] == 'JPY,AUD,EUR'


def test_missing_rate_fails():
    provider = OpenExchangeProvider(app_id='test_id', client=_client_returning({'rates': {}}))

    with pytest.raises(FeedParseError) as exc_info:
        provider.fetch_usd_multipliers(['EUR'])

    assert 'Missing rate for EUR' in str(exc_info.value)


def test_api_error_payload():
    provider = OpenExchangeProvider(
        app_id='bad',
        client=_client_returning({'error': True, 'description': 'Invalid App ID'}),
    )

    with pytest.raises(ProviderError) as exc_info:
        provider.fetch_usd_multipliers(['EUR'])

    assert 'Invalid App ID' in str(exc_info.value)


def test_invalid_json_response():
    mock_client = _client_returning(None)
    mock_client.get.return_value.json.side_effect = ValueError('Invalid JSON')
    provider = OpenExchangeProvider(app_id='test_id', client=mock_client)

    with pytest.raises(FeedParseError) as exc_info:
        provider.fetch_usd_multipliers(['EUR'])

    assert 'parsing error' in str(exc_info.value).lower()


def test_http_429_rate_limit():
    mock_client = Mock(spec=httpx.Client)
    error_response = Mock()
    error_response.status_code = 429
    error_response.text = 'Rate limit exceeded'
    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Rate limit', request=Mock(), response=error_response
    )
    provider = OpenExchangeProvider(app_id='test_id', client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        provider.fetch_usd_multipliers(['EUR'])

    assert '429' in str(exc_info.value)
