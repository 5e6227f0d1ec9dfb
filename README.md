# nbpkalkulator

`nbpkalkulator` is a console currency calculator. On start-up it downloads the
latest table A of average exchange rates from the National Bank of Poland. You
can then convert an amount between any two of the listed currencies. The
conversion goes through PLN.

The package runs the `curl` command to download the rates, so `curl` must be
installed and on your `PATH`. The package has no other dependencies.

## Installation

```
pip install .
```

## Usage

```
nbpkalkulator
```

The program first reports that it is initialising and loading the rates. It
then shows the main menu, which is in Polish:

```
======================================
   KALKULATOR WALUT - MENU GLOWNE
======================================
1. Przelicz walute
2. Pokaz dostepne waluty
3. Wyjscie
======================================
Wybierz opcje:
```

- **1**: convert an amount. The program asks for the amount, the source
  currency code (e.g. `USD`) and the target currency code (e.g. `EUR`). Codes
  are not case sensitive. The amount must be a number greater than zero.
  The result is printed with two decimals.
- **2**: list every available currency, PLN included, in code order, each with
  its rate in PLN.
- **3**: quit.

Any other input prints `Blad: Niepoprawny wybor!` and shows the menu again. The
program also ends when standard input runs out.

If the rates cannot be downloaded or parsed, the program prints the error and
still shows the menu. In that case no currencies are available, so every
conversion is rejected as having an invalid currency code.

## Using it as a library

```python
from nbpkalkulator.nbp import NBPService
from nbpkalkulator.strategies import CurrencyConverter
from nbpkalkulator.model import Money

service = NBPService()
service.fetch_exchange_rates()          # or service.load_xml(xml_text)

converter = CurrencyConverter(service)
usd = service.get_rate("usd")
eur = service.get_rate("EUR")
print(converter.convert(Money(100, usd), eur))   # e.g. "92.31 EUR"
```

Modules:

- `nbpkalkulator.nbp`
  - `NBPService` holds the rate table.
    - `fetch_exchange_rates()` downloads the table and returns the number of
      entries parsed.
    - `load_xml(xml)` loads a table from text you already have.
    - `get_rate(code)` returns a `Currency`, or `None` if the code is unknown.
      The code is not case sensitive.
    - Iterating yields the currencies in code order.
    - `len()` counts the currencies, PLN included. PLN is always added with a
      rate of 1.
    - `last_update` is `"success"` once a table has been loaded.
  - `default_service()` returns a shared instance.
- `nbpkalkulator.xmlparser`
  - `parse_currencies(xml)` reads the `<pozycja>` entries of a table. It accepts
    a decimal comma in rates and skips entries that have an empty field.
- `nbpkalkulator.model`
  - `Currency(code, name, rate, multiplier)`: the rate is the price in PLN of
    `multiplier` units.
  - `Money(amount, currency)`: an immutable, non-negative amount.
- `nbpkalkulator.strategies`
  - `CurrencyConverter`: by default it uses `ThroughPLNConversionStrategy`,
    which takes the multipliers into account. Setting its `strategy` attribute
    replaces the strategy.
  - `DirectConversionStrategy` uses the plain ratio of the two rates.
- `nbpkalkulator.validator`
  - `InputValidator` checks amounts and currency codes typed by a user.
- `nbpkalkulator.httpclient`
  - `HTTPClient(timeout=30)` performs a `curl` GET with a timeout in seconds.
  - `default_client()` returns a shared instance.
- `nbpkalkulator.context`, `nbpkalkulator.states`, `nbpkalkulator.actions` and
  `nbpkalkulator.app` make up the interactive program. `nbpkalkulator.app.main()`
  is the entry point of the `nbpkalkulator` command.

Every error the package raises derives from
`nbpkalkulator.errors.CurrencyError`. The subclasses are `NetworkError`,
`ParseError`, `ValidationError`, `ConversionError` and `StateError`.

## Limitations

- Only the latest table A is used. The package does not support historical
  rates or other NBP tables.
- Rates are not stored between runs. They are downloaded again on every start,
  and there is no offline mode.
- The program's prompts and messages are in Polish only.

## Running the tests

```
pip install .[test]
pytest
```