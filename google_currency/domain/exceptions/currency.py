class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass


class UnknownRateError(CurrencyException):
    """The rate source reported that the pair cannot be converted."""


class RateFetchError(CurrencyException):
    """Transport failure or a response the parser does not recognize."""
