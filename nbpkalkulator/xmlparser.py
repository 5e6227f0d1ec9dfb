"""Extraction of currency entries from an NBP exchange-rate table."""

from __future__ import annotations

import math
import re
import sys

from .errors import ParseError
from .formatting import trim
from .model import Currency

_ITEM_TAG = "pozycja"
_FIELD_TAGS = ("kod_waluty", "nazwa_waluty", "kurs_sredni", "przelicznik")

_INVALID_NUMBER = "Invalid number format in currency data"
_OUT_OF_RANGE = "Number out of range in currency data"

_LEADING_SPACE = r"[ \t\n\r\f\v]*"
_FLOAT_PREFIX = re.compile(
    _LEADING_SPACE
    + r"([+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r"))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(_LEADING_SPACE + r"([+-]?\d+)")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _text_between_tags(xml: str, tag: str, start: int) -> str:
    open_tag = f"<{tag}>"
    close_tag = f"</{tag}>"
    begin = xml.find(open_tag, start)
    if begin == -1:
        return ""
    begin += len(open_tag)
    end = xml.find(close_tag, begin)
    if end == -1:
        raise ParseError("Closing tag not found", tag)
    return trim(xml[begin:end])


def _parse_float_prefix(text: str) -> float:
    """Read the leading floating-point number of ``text``, ignoring what follows."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ParseError(_INVALID_NUMBER)
    token = match.group(1)
    unsigned = token.lower().lstrip("+-")
    try:
        if unsigned.startswith("0x"):
            value = float.fromhex(token)
            mantissa, significant = unsigned[2:].split("p")[0], "123456789abcdef"
        else:
            value = float(token)
            mantissa, significant = unsigned.split("e")[0], "123456789"
    except OverflowError as exc:
        raise ParseError(_OUT_OF_RANGE) from exc

    if math.isinf(value) and not unsigned.startswith("inf"):
        raise ParseError(_OUT_OF_RANGE)
    if value == 0.0 and any(ch in significant for ch in mantissa):
        raise ParseError(_OUT_OF_RANGE)
    if value != 0.0 and abs(value) < sys.float_info.min:
        raise ParseError(_OUT_OF_RANGE)
    return value


def _parse_int_prefix(text: str) -> int:
    """Read the leading decimal integer of ``text``, ignoring what follows."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ParseError(_INVALID_NUMBER)
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ParseError(_OUT_OF_RANGE)
    return value


def parse_currencies(xml: str) -> list[Currency]:
    """Return the currencies listed in the ``<pozycja>`` entries of ``xml``.

    Entries with an empty or missing field are skipped. Raises ParseError when
    the document is empty, malformed, or holds no usable entry.
    """
    if not xml:
        raise ParseError("XML content is empty")

    currencies: list[Currency] = []
    pos = 0
    while (pos := xml.find(f"<{_ITEM_TAG}>", pos)) != -1:
        fields = [_text_between_tags(xml, tag, pos) for tag in _FIELD_TAGS]
        pos += 1
        if not all(fields):
            continue
        code, name, rate_text, multiplier_text = fields
        rate = _parse_float_prefix(rate_text.replace(",", "."))
        multiplier = _parse_int_prefix(multiplier_text)
        currencies.append(Currency(code, name, rate, multiplier))

    if not currencies:
        raise ParseError("No valid currency entries found in XML")
    return currencies