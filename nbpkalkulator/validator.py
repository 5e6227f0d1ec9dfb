"""Checks and parsing of user input."""

from __future__ import annotations

from .errors import ParseError, ValidationError
from .formatting import trim
from .nbp import NBPService, default_service
from .xmlparser import _parse_float_prefix


class InputValidator:
    """Validates amounts and currency codes typed by the user."""

    def __init__(self, service: NBPService | None = None) -> None:
        self._service = service if service is not None else default_service()

    def validate_amount(self, text: str) -> bool:
        """True if ``text`` starts with a number greater than zero."""
        if not text:
            return False
        try:
            return _parse_float_prefix(text) > 0
        except ParseError:
            return False

    def validate_currency(self, code: str) -> bool:
        """True if ``code`` names a currency known to the service."""
        if not code:
            return False
        return self._service.get_rate(code.upper()) is not None

    def sanitize(self, text: str) -> str:
        """Strip surrounding whitespace."""
        return trim(text)

    def parse_amount(self, text: str) -> float:
        """Return the number ``text`` starts with; raise ValidationError if none."""
        try:
            return _parse_float_prefix(text)
        except ParseError as exc:
            raise ValidationError("Invalid amount format", text) from exc