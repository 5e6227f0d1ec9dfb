"""Ways of converting money between currencies."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .errors import ConversionError, StateError, ValidationError
from .model import Currency, Money
from .nbp import NBPService, default_service


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _check(money: Money, target: Currency | None) -> None:
    if money.currency is None:
        raise ConversionError("Source currency is null")
    if target is None:
        raise ConversionError("Target currency is null")


class ConversionStrategy(ABC):
    """Converts an amount of money into another currency."""

    @abstractmethod
    def convert(self, money: Money, target: Currency) -> Money:
        """Return ``money`` expressed in ``target``."""


class DirectConversionStrategy(ConversionStrategy):
    """Converts using the plain ratio of the two rates."""

    def __init__(self, service: NBPService) -> None:
        self._service = service

    def convert(self, money: Money, target: Currency) -> Money:
        _check(money, target)
        if money.currency.code == target.code:
            return Money(money.amount, target)
        rate = _divide(money.currency.rate, target.rate)
        return Money(money.amount * rate, target)


class ThroughPLNConversionStrategy(ConversionStrategy):
    """Converts to Polish zloty first, then to the target currency."""

    def __init__(self, service: NBPService) -> None:
        self._service = service

    def convert(self, money: Money, target: Currency) -> Money:
        _check(money, target)
        if money.currency.code == target.code:
            return Money(money.amount, target)
        return self._from_pln(self._to_pln(money), target)

    def _to_pln(self, money: Money) -> Money:
        source = money.currency
        if source.code == "PLN":
            return money
        amount = money.amount * source.rate / source.multiplier
        pln = self._service.get_rate("PLN")
        if pln is None:
            raise ConversionError("PLN currency not found in NBPService")
        return Money(amount, pln)

    @staticmethod
    def _from_pln(money: Money, target: Currency) -> Money:
        if target.code == "PLN":
            return money
        amount = _divide(money.amount * target.multiplier, target.rate)
        return Money(amount, target)


class CurrencyConverter:
    """Applies an interchangeable conversion strategy."""

    def __init__(
        self,
        service: NBPService | None = None,
        strategy: ConversionStrategy | None = None,
    ) -> None:
        if service is None:
            service = default_service()
        self.strategy = strategy if strategy is not None else ThroughPLNConversionStrategy(service)

    @property
    def strategy(self) -> ConversionStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, value: ConversionStrategy) -> None:
        if value is None:
            raise ValidationError("Strategy cannot be null")
        self._strategy = value

    def convert(self, money: Money, target: Currency) -> Money:
        """Convert with the current strategy."""
        if getattr(self, "_strategy", None) is None:
            raise StateError("Conversion strategy is not set")
        return self._strategy.convert(money, target)