"""Lifecycle states of the application."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .errors import CurrencyError

if TYPE_CHECKING:
    from .context import AppContext


class ApplicationState(ABC):
    """One stage of the application's start-up and work."""

    @abstractmethod
    def handle(self, context: AppContext) -> None:
        """Do this state's work and possibly move the context on."""

    @property
    def name(self) -> str:
        """Name of the state, e.g. ``"ReadyState"``."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.name}()"


class InitialState(ApplicationState):
    """Start of the application; moves on to loading the rates."""

    def handle(self, context: AppContext) -> None:
        print("Inicjalizacja aplikacji...", file=context.out)
        context.state = LoadingState()


class LoadingState(ApplicationState):
    """Downloads the exchange rates; moves on to ready or error."""

    def handle(self, context: AppContext) -> None:
        print("Pobieranie kursow walut z NBP...", file=context.out)
        try:
            context.service.fetch_exchange_rates()
        except CurrencyError as exc:
            print(f"Blad: {exc}", file=context.err)
            context.state = ErrorState(exc.message)
            return
        print("Kursy pobrane pomyslnie!", file=context.out)
        context.state = ReadyState()


class ReadyState(ApplicationState):
    """Rates are loaded and conversions can be made."""

    def handle(self, context: AppContext) -> None:
        print("Aplikacja gotowa do konwersji!", file=context.out)


class ConvertingState(ApplicationState):
    """A conversion is in progress; returns to ready."""

    def handle(self, context: AppContext) -> None:
        print("Wykonywanie konwersji...", file=context.out)
        context.state = ReadyState()


class ErrorState(ApplicationState):
    """Something went wrong; keeps the message that describes it."""

    def __init__(self, message: str) -> None:
        self.message = message

    def handle(self, context: AppContext) -> None:
        print(f"Stan bledu: {self.message}", file=context.err)

    def __repr__(self) -> str:
        return f"ErrorState({self.message!r})"