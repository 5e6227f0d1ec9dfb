import pytest

from nbpkalkulator.errors import ValidationError
from nbpkalkulator.nbp import NBPService
from nbpkalkulator.validator import InputValidator

SAMPLE_XML = """
<pozycja><nazwa_waluty>dolar</nazwa_waluty><przelicznik>1</przelicznik>
<kod_waluty>USD</kod_waluty><kurs_sredni>4,0</kurs_sredni></pozycja>
"""


class NoClient:
    def get(self, url):
        raise AssertionError("no network in tests")


@pytest.fixture
def validator():
    service = NBPService(NoClient())
    service.load_xml(SAMPLE_XML)
    return InputValidator(service)


@pytest.mark.parametrize("text", ["100", "0.01", "12abc", "  7", "3e2"])
def test_valid_amounts(validator, text):
    assert validator.validate_amount(text) is True


@pytest.mark.parametrize("text", ["", "0", "-5", "abc", "1e999", "nan"])
def test_invalid_amounts(validator, text):
    assert validator.validate_amount(text) is False


def test_validate_currency(validator):
    assert validator.validate_currency("USD") is True
    assert validator.validate_currency("usd") is True
    assert validator.validate_currency("pln") is True
    assert validator.validate_currency("XYZ") is False
    assert validator.validate_currency("") is False


def test_sanitize_strips_whitespace(validator):
    assert validator.sanitize("  USD\t\r\n") == "USD"
    assert validator.sanitize(" \t ") == ""


def test_parse_amount(validator):
    assert validator.parse_amount("12.5") == 12.5
    assert validator.parse_amount("42xyz") == 42.0


def test_parse_amount_rejects_garbage(validator):
    with pytest.raises(ValidationError) as info:
        validator.parse_amount("abc")
    assert info.value.value == "abc"
    assert str(info.value) == "Validation Error: Invalid amount format (got: 'abc')"


def test_parse_amount_rejects_out_of_range(validator):
    with pytest.raises(ValidationError):
        validator.parse_amount("1e999")