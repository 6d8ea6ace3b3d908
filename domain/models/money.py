from dataclasses import dataclass
from decimal import (
	MAX_EMAX,
	MAX_PREC,
	MIN_EMIN,
	ROUND_HALF_EVEN,
	Context,
	Decimal,
	InvalidOperation,
)
from typing import Protocol

from domain.models.currency import CurrencyType

# Add, subtract and multiply never round under this context.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)

# Scalar division keeps 200 significant digits.
SCALAR_DIVISION_CONTEXT = Context(prec=200, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)

CENT = Decimal('0.01')

Numeric = Decimal | int | float | str


def to_decimal(value: Numeric) -> Decimal:
	if isinstance(value, Decimal):
		result = value
	elif isinstance(value, float):
		result = Decimal(str(value))
	else:
		try:
			result = Decimal(value)
		except (InvalidOperation, TypeError) as e:
			raise ValueError(f'Not a decimal amount: {value!r}') from e

	if not result.is_finite():
		raise ValueError(f'Amount must be finite, got {value!r}')
	return result


class Converter(Protocol):
	def convert_to(self, money: 'Money', target: CurrencyType) -> 'Money': ...


def _default_converter() -> Converter:
	from application.services import get_conversion_service

	return get_conversion_service()


@dataclass(frozen=True)
class Money:
	"""An amount of money in one of the supported currencies.

	Operations that combine two values convert the right-hand side into this
	value's currency first and always return a new ``Money``. Pass
	``converter=`` to use a specific conversion service; otherwise the
	process-wide default is used.
	"""

	amount: Decimal
	currency: CurrencyType

	def __post_init__(self):
		if not isinstance(self.currency, CurrencyType):
			raise TypeError(f'currency must be a CurrencyType, got {self.currency!r}')
		object.__setattr__(self, 'amount', to_decimal(self.amount))

	@classmethod
	def zero(cls, currency: CurrencyType) -> 'Money':
		return cls(Decimal(0), currency)

	def _in_my_currency(self, other: 'Money', converter: Converter | None) -> 'Money':
		if not isinstance(other, Money):
			raise TypeError(f'Expected Money, got {type(other).__name__}')
		if other.currency == self.currency:
			return other
		return (converter or _default_converter()).convert_to(other, self.currency)

	def convert_to(self, target: CurrencyType, converter: Converter | None = None) -> 'Money':
		return (converter or _default_converter()).convert_to(self, target)

	def add(self, other: 'Money', converter: Converter | None = None) -> 'Money':
		other = self._in_my_currency(other, converter)
		return Money(EXACT_CONTEXT.add(self.amount, other.amount), self.currency)

	def subtract(self, other: 'Money', converter: Converter | None = None) -> 'Money':
		other = self._in_my_currency(other, converter)
		return Money(EXACT_CONTEXT.subtract(self.amount, other.amount), self.currency)

	def multiply(self, scalar: Numeric) -> 'Money':
		return Money(EXACT_CONTEXT.multiply(self.amount, to_decimal(scalar)), self.currency)

	def divide(self, scalar: Numeric) -> 'Money':
		divisor = to_decimal(scalar)
		if divisor == 0:
			raise ZeroDivisionError('Cannot divide money by zero')
		return Money(SCALAR_DIVISION_CONTEXT.divide(self.amount, divisor), self.currency)

	def compare_to(self, other: 'Money', converter: Converter | None = None) -> int:
		other = self._in_my_currency(other, converter)
		if self.amount < other.amount:
			return -1
		if self.amount > other.amount:
			return 1
		return 0

	def __add__(self, other: 'Money') -> 'Money':
		return self.add(other)

	def __sub__(self, other: 'Money') -> 'Money':
		return self.subtract(other)

	def __mul__(self, scalar: Numeric) -> 'Money':
		return self.multiply(scalar)

	__rmul__ = __mul__

	def __truediv__(self, scalar: Numeric) -> 'Money':
		return self.divide(scalar)

	def __neg__(self) -> 'Money':
		return Money(EXACT_CONTEXT.minus(self.amount), self.currency)

	def __lt__(self, other: 'Money') -> bool:
		return self.compare_to(other) < 0

	def __le__(self, other: 'Money') -> bool:
		return self.compare_to(other) <= 0

	def __gt__(self, other: 'Money') -> bool:
		return self.compare_to(other) > 0

	def __ge__(self, other: 'Money') -> bool:
		return self.compare_to(other) >= 0

	def format(self) -> str:
		rounded = self.amount.quantize(CENT, context=EXACT_CONTEXT)
		if rounded.is_zero():
			rounded = rounded.copy_abs()
		return f'{rounded:,f} {self.currency.code}'

	def __str__(self) -> str:
		return self.format()
