"""Interactive currency calculator."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .actions import (
    ConversionAction,
    DisplayCurrenciesAction,
    ExitAction,
    MenuAction,
    _TokenReader,
)
from .context import AppContext
from .errors import CurrencyError

_RULE = "======================================"
_INT_PREFIX = re.compile(r"[+-]?\d+")


class CurrencyExchangeApp:
    """Text menu loop over the application context."""

    def __init__(
        self,
        context: AppContext | None = None,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._context = context if context is not None else AppContext(out=out, err=err)
        self._reader = _TokenReader(stdin if stdin is not None else sys.stdin)
        self._out = out if out is not None else self._context.out
        self._err = err if err is not None else self._context.err

    def _display_menu(self) -> None:
        print("\n", file=self._out)
        print(_RULE, file=self._out)
        print("   KALKULATOR WALUT - MENU GLOWNE", file=self._out)
        print(_RULE, file=self._out)
        print("1. Przelicz walute", file=self._out)
        print("2. Pokaz dostepne waluty", file=self._out)
        print("3. Wyjscie", file=self._out)
        print(_RULE, file=self._out)
        print("Wybierz opcje: ", end="", file=self._out, flush=True)

    def _read_choice(self) -> int | None:
        """Read a menu number; return None if the input is not a number."""
        token = self._reader.next_token()
        if token is None:
            raise EOFError
        match = _INT_PREFIX.match(token)
        if match is None:
            self._reader.discard_line()
            return None
        rest = token[match.end():]
        if rest:
            self._reader.push_back(rest)
        return int(match.group())

    def _action_for(self, choice: int) -> MenuAction | None:
        if choice == 1:
            return ConversionAction(self._context, self._reader, self._out, self._err)
        if choice == 2:
            return DisplayCurrenciesAction(self._context.service, self._out)
        if choice == 3:
            return ExitAction(self._out)
        return None

    def run(self) -> None:
        """Initialise the rates, then serve the menu until exit or end of input."""
        try:
            self._context.initialize()
            while True:
                self._display_menu()
                try:
                    choice = self._read_choice()
                except EOFError:
                    break
                action = None if choice is None else self._action_for(choice)
                if action is None:
                    print("Blad: Niepoprawny wybor!", file=self._err)
                    continue
                action.execute()
                if action.should_exit():
                    break
        except CurrencyError as exc:
            print(f"Blad krytyczny: {exc}", file=self._err)
        except Exception as exc:
            print(f"Nieoczekiwany blad: {exc}", file=self._err)


def main(argv: list[str] | None = None) -> int:
    """Run the calculator on standard input and output."""
    try:
        CurrencyExchangeApp().run()
    except Exception as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())