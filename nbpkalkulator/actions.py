"""Actions that can be chosen from the main menu."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Iterator, TextIO

from .context import AppContext
from .errors import CurrencyError
from .formatting import format_fixed, trim
from .nbp import NBPService, default_service

_RULE = "======================================"
_RESULT_RULE = "=================================="


class _TokenReader:
    """Whitespace-separated tokens read line by line from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next_token(self) -> str | None:
        """Return the next token, or None at end of input."""
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def push_back(self, token: str) -> None:
        self._pending.appendleft(token)

    def discard_line(self) -> None:
        """Drop what is left of the current line."""
        self._pending.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self.next_token, None)


class MenuAction(ABC):
    """Something the user can pick from the menu."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""

    def should_exit(self) -> bool:
        """True if the application should stop after this action."""
        return False


class ConversionAction(MenuAction):
    """Asks for an amount and two currencies and prints the conversion."""

    def __init__(
        self,
        context: AppContext,
        tokens: Iterable[str] | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._context = context
        self._tokens = iter(tokens) if tokens is not None else iter(_TokenReader(sys.stdin))
        self._out = out if out is not None else context.out
        self._err = err if err is not None else context.err

    def _ask(self, prompt: str) -> str:
        print(prompt, end="", file=self._out, flush=True)
        return next(self._tokens, "")

    def execute(self) -> None:
        validator = self._context.validator
        print("\n--- KONWERSJA WALUTY ---", file=self._out)

        amount_text = self._ask("Podaj kwote: ")
        if not validator.validate_amount(amount_text):
            print("Blad: Niepoprawna kwota!", file=self._err)
            return

        from_code = trim(self._ask("Waluta zrodlowa (np. USD): ")).upper()
        if not validator.validate_currency(from_code):
            print("Blad: Niepoprawny kod waluty zrodlowej!", file=self._err)
            return

        to_code = trim(self._ask("Waluta docelowa (np. EUR): ")).upper()
        if not validator.validate_currency(to_code):
            print("Blad: Niepoprawny kod waluty docelowej!", file=self._err)
            return

        try:
            amount = validator.parse_amount(amount_text)
            result = self._context.convert_currency(amount, from_code, to_code)
        except CurrencyError as exc:
            print(f"\nBlad konwersji: {exc}", file=self._err)
            return

        print(f"\n{_RESULT_RULE}", file=self._out)
        print("      WYNIK KONWERSJI", file=self._out)
        print(_RESULT_RULE, file=self._out)
        print(f"  {format_fixed(amount, 2)} {from_code} = {result}", file=self._out)
        print(_RESULT_RULE, file=self._out)


class DisplayCurrenciesAction(MenuAction):
    """Lists every currency with its average rate."""

    def __init__(self, service: NBPService | None = None, out: TextIO | None = None) -> None:
        self._service = service if service is not None else default_service()
        self._out = out if out is not None else sys.stdout

    def execute(self) -> None:
        print(f"\n{_RULE}", file=self._out)
        print("   DOSTEPNE WALUTY", file=self._out)
        print(_RULE, file=self._out)
        for index, currency in enumerate(self._service, start=1):
            print(
                f"{index}. {currency.code} - {currency.name} "
                f"(Kurs: {format_fixed(currency.rate, 4)} PLN)",
                file=self._out,
            )
        print(_RULE, file=self._out)


class ExitAction(MenuAction):
    """Says goodbye and ends the application."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def execute(self) -> None:
        print("\nDziekujemy za skorzystanie z kalkulatora walut!", file=self._out)

    def should_exit(self) -> bool:
        return True