"""Exchange rates published by the National Bank of Poland."""

from __future__ import annotations

import functools
from typing import Iterator, Protocol

from .errors import NetworkError, ParseError
from .httpclient import default_client
from .model import Currency
from .xmlparser import parse_currencies

NBP_URL = "https://static.nbp.pl/dane/kursy/xml/LastA.xml"


class _Client(Protocol):
    def get(self, url: str) -> str: ...


class NBPService:
    """Holds the current table of average rates, keyed by currency code."""

    def __init__(self, client: _Client | None = None) -> None:
        self._client = client if client is not None else default_client()
        self._rates: dict[str, Currency] = {}
        self._last_update = ""

    def fetch_exchange_rates(self) -> int:
        """Download and load the latest table; return the number of entries parsed."""
        try:
            print("Pobieranie kursow walut z NBP...")
            xml = self._client.get(NBP_URL)
            if not xml:
                raise NetworkError("Otrzymano pusty XML z NBP")
            count = self.load_xml(xml)
            print(f"Pobrano {count} kursow walut")
        except (NetworkError, ParseError):
            raise
        except Exception as exc:
            raise NetworkError(f"Blad podczas pobierania kursow: {exc}") from exc
        return count

    def load_xml(self, xml: str) -> int:
        """Replace the rate table with the one in ``xml``; return the entries parsed.

        The Polish zloty is always added with a rate of 1.
        """
        currencies = parse_currencies(xml)
        rates = {currency.code: currency for currency in currencies}
        rates["PLN"] = Currency("PLN", "Polski zloty", 1.0, 1)
        self._rates = rates
        self._last_update = "success"
        return len(currencies)

    def get_rate(self, code: str) -> Currency | None:
        """Return the currency with ``code`` (any case), or None if unknown."""
        return self._rates.get(code.upper())

    def __iter__(self) -> Iterator[Currency]:
        return iter([self._rates[code] for code in sorted(self._rates)])

    def __len__(self) -> int:
        return len(self._rates)

    @property
    def last_update(self) -> str:
        """``"success"`` after a table has been loaded, empty before."""
        return self._last_update


@functools.lru_cache(maxsize=None)
def default_service() -> NBPService:
    """Return the process-wide shared service."""
    return NBPService(default_client())