"""Exception hierarchy for currency lookup, parsing and conversion."""

from __future__ import annotations


class CurrencyError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(CurrencyError):
    """A download failed or returned nothing usable."""

    def __init__(self, message: str, http_code: int | None = None) -> None:
        if http_code is None:
            text = f"Network Error: {message}"
        else:
            text = f"Network Error (HTTP {http_code}): {message}"
        super().__init__(text)
        self.http_code = 0 if http_code is None else http_code


class ParseError(CurrencyError):
    """Exchange-rate data could not be parsed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        if field is None:
            text = f"Parse Error: {message}"
        else:
            text = f"Parse Error in field '{field}': {message}"
        super().__init__(text)
        self.field = field or ""


class ValidationError(CurrencyError):
    """A value supplied by the caller or the user is not acceptable."""

    def __init__(self, message: str, value: str | None = None) -> None:
        if value is None:
            text = f"Validation Error: {message}"
        else:
            text = f"Validation Error: {message} (got: '{value}')"
        super().__init__(text)
        self.value = value or ""


class ConversionError(CurrencyError):
    """An amount could not be converted between two currencies."""

    def __init__(
        self,
        message: str,
        from_currency: str | None = None,
        to_currency: str | None = None,
    ) -> None:
        if from_currency is None and to_currency is None:
            text = f"Conversion Error: {message}"
        else:
            text = (
                f"Conversion Error ({from_currency or ''} -> {to_currency or ''}): "
                f"{message}"
            )
        super().__init__(text)
        self.from_currency = from_currency or ""
        self.to_currency = to_currency or ""


class StateError(CurrencyError):
    """An operation was attempted in a state that does not allow it."""

    def __init__(self, message: str, state: str | None = None) -> None:
        if state is None:
            text = f"State Error: {message}"
        else:
            text = f"State Error in '{state}': {message}"
        super().__init__(text)
        self.state = state or ""