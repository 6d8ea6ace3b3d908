from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., min_length=3, max_length=3)
	to_currency: str = Field(..., min_length=3, max_length=3)
	amount: Decimal = Field(..., allow_inf_nan=False)

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	model_config = ConfigDict(
		json_schema_extra={
			'example': {'from_currency': 'USD', 'to_currency': 'AUD', 'amount': 100.00}
		}
	)
