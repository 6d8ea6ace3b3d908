class CurrencyException(Exception):
	pass


class InvalidCurrencyError(CurrencyException):
	pass


class ProviderError(CurrencyException):
	"""The quote feed could not be reached or answered with an error."""


class FeedParseError(ProviderError):
	"""The quote feed answered, but not with one valid multiplier per requested code."""


class RatesUnavailableError(CurrencyException):
	"""No refresh has ever completed successfully."""
