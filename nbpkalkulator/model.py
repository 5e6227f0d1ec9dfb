"""Currencies and amounts of money."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ValidationError
from .formatting import format_fixed


class Currency:
    """A currency with its average rate in PLN per ``multiplier`` units."""

    __slots__ = ("_code", "_name", "_rate", "_multiplier")

    def __init__(self, code: str, name: str, rate: float, multiplier: int) -> None:
        if not code:
            raise ValidationError("Currency code cannot be empty")
        self._code = code
        self._name = name
        self.rate = rate
        self.multiplier = multiplier

    @property
    def code(self) -> str:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    @property
    def rate(self) -> float:
        """Price in PLN of ``multiplier`` units of this currency."""
        return self._rate

    @rate.setter
    def rate(self, value: float) -> None:
        if value < 0:
            raise ValidationError("Currency rate cannot be negative", format_fixed(value))
        self._rate = value

    @property
    def multiplier(self) -> int:
        """Number of units the rate refers to."""
        return self._multiplier

    @multiplier.setter
    def multiplier(self, value: int) -> None:
        if value <= 0:
            raise ValidationError("Currency multiplier must be positive", str(value))
        self._multiplier = value

    def __str__(self) -> str:
        return (
            f"{self._code} - {self._name} (Rate: {format_fixed(self._rate, 4)} PLN, "
            f"Multiplier: {self._multiplier})"
        )

    def __repr__(self) -> str:
        return (
            f"Currency(code={self._code!r}, name={self._name!r}, "
            f"rate={self._rate!r}, multiplier={self._multiplier!r})"
        )


@dataclass(frozen=True)
class Money:
    """A non-negative amount in a given currency."""

    amount: float
    currency: Currency

    def __post_init__(self) -> None:
        if self.currency is None:
            raise ValidationError("Currency cannot be null")
        if self.amount < 0:
            raise ValidationError("Amount cannot be negative", format_fixed(self.amount))

    def __str__(self) -> str:
        return f"{format_fixed(self.amount, 2)} {self.currency.code}"