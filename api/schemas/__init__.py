from .requests import ConversionRequest
from .responses import (
	ConversionResponse,
	CurrencyResponse,
	ExchangeRateResponse,
	RefreshResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'CurrencyResponse',
	'ExchangeRateResponse',
	'RefreshResponse',
	'SupportedCurrenciesResponse',
]
