from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_conversion_service
from api.schemas import (
	ConversionRequest,
	ConversionResponse,
	CurrencyResponse,
	ExchangeRateResponse,
	RefreshResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService
from domain.models.currency import PIVOT_CURRENCY, CurrencyType
from domain.models.money import Money

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=3)]


def _convert(
	service: ConversionService, from_currency: str, to_currency: str, amount: Decimal
) -> ConversionResponse:
	source = CurrencyType.from_code(from_currency)
	target = CurrencyType.from_code(to_currency)

	converted, exchange_rate = service.convert_with_rate(Money(amount, source), target)
	return ConversionResponse(
		from_currency=source.code,
		to_currency=target.code,
		original_amount=amount,
		converted_amount=converted.amount,
		display=converted.format(),
		exchange_rate=exchange_rate,
		last_refreshed=service.last_refreshed,
	)


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[Decimal, Path(allow_inf_nan=False)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	return _convert(service, from_currency, to_currency, amount)


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
def convert_currency_body(
	request: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	return _convert(service, request.from_currency, request.to_currency, request.amount)


@router.get(
	'/rate/{currency}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the current USD multiplier for a currency',
)
def get_usd_rate(
	currency: CurrencyCode,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ExchangeRateResponse:
	target = CurrencyType.from_code(currency)
	rate = service.rate(target)
	return ExchangeRateResponse(
		from_currency=PIVOT_CURRENCY.code,
		to_currency=target.code,
		rate=rate,
		timestamp=service.last_refreshed,
	)


@router.post(
	'/rates/refresh',
	response_model=RefreshResponse,
	status_code=status.HTTP_200_OK,
	summary='Force a refresh of all exchange rates',
)
def refresh_rates(
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> RefreshResponse:
	return RefreshResponse(refreshed_at=service.force_definition_update())


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
def get_supported_currencies() -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(
		currencies=[
			CurrencyResponse(index=c.index, code=c.code, name=c.display_name)
			for c in CurrencyType.values()
		]
	)
