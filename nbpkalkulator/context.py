"""Shared application context: services, current state and conversions."""

from __future__ import annotations

import sys
from typing import TextIO

from .errors import ValidationError
from .model import Money
from .nbp import NBPService, default_service
from .states import ApplicationState, InitialState
from .strategies import CurrencyConverter
from .validator import InputValidator


class AppContext:
    """Holds the rate service, converter, validator and the current state."""

    def __init__(
        self,
        service: NBPService | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.service = service if service is not None else default_service()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.converter = CurrencyConverter(self.service)
        self.validator = InputValidator(self.service)
        self._state: ApplicationState | None = None

    @property
    def state(self) -> ApplicationState | None:
        return self._state

    @state.setter
    def state(self, value: ApplicationState | None) -> None:
        self._state = value

    def initialize(self) -> None:
        """Run the start-up states: initial, then loading of the rates."""
        self._state = InitialState()
        self._state.handle(self)
        if self._state is not None:
            self._state.handle(self)

    def convert_currency(self, amount: float, from_code: str, to_code: str) -> Money:
        """Convert ``amount`` between the currencies with the given codes."""
        source = self.service.get_rate(from_code.upper())
        if source is None:
            raise ValidationError("Currency not found", from_code)
        target = self.service.get_rate(to_code.upper())
        if target is None:
            raise ValidationError("Currency not found", to_code)
        return self.converter.convert(Money(amount, source), target)