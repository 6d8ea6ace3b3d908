from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount at full precision')
	display: str = Field(..., description='Converted amount formatted for display')
	exchange_rate: Decimal = Field(..., description='Units of target per unit of source')
	last_refreshed: datetime | None = Field(None, description='When the rates were fetched')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'AUD',
				'original_amount': 100,
				'converted_amount': 150.00,
				'display': '150.00 AUD',
				'exchange_rate': 1.50,
				'last_refreshed': '2025-09-27T10:30:00Z',
			}
		}
	)


class ExchangeRateResponse(BaseModel):
	from_currency: str = Field(..., description='Always the pivot currency, USD')
	to_currency: str = Field(..., description='Target currency code')
	rate: Decimal = Field(..., description='Units of target currency per US dollar')
	timestamp: datetime | None = Field(None, description='When the rate was fetched')


class CurrencyResponse(BaseModel):
	index: int
	code: str
	name: str


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Supported currencies in index order')


class RefreshResponse(BaseModel):
	refreshed_at: datetime = Field(..., description='Time of the completed refresh')
