import io
import subprocess
import sys

from nbpkalkulator.app import CurrencyExchangeApp, main
from nbpkalkulator.context import AppContext
from nbpkalkulator.errors import NetworkError
from nbpkalkulator.nbp import NBPService
from nbpkalkulator.states import ErrorState, ReadyState

XML = (
    "<tabela_kursow>"
    "<pozycja><nazwa_waluty>dolar</nazwa_waluty><przelicznik>1</przelicznik>"
    "<kod_waluty>USD</kod_waluty><kurs_sredni>4,0000</kurs_sredni></pozycja>"
    "<pozycja><nazwa_waluty>euro</nazwa_waluty><przelicznik>1</przelicznik>"
    "<kod_waluty>EUR</kod_waluty><kurs_sredni>4,5000</kurs_sredni></pozycja>"
    "</tabela_kursow>"
)

FAREWELL = "Dziekujemy za skorzystanie z kalkulatora walut!"
BAD_CHOICE = "Blad: Niepoprawny wybor!"


class FakeClient:
    def __init__(self, error=None):
        self.error = error

    def get(self, url):
        if self.error is not None:
            raise self.error
        return XML


def run_app(text, client=None):
    out, err = io.StringIO(), io.StringIO()
    context = AppContext(NBPService(client or FakeClient()), out, err)
    CurrencyExchangeApp(context, io.StringIO(text), out, err).run()
    return context, out.getvalue(), err.getvalue()


def test_exit_immediately():
    context, out, err = run_app("3\n")
    assert isinstance(context.state, ReadyState)
    assert "KALKULATOR WALUT - MENU GLOWNE" in out
    assert out.rstrip().endswith(FAREWELL)
    assert err == ""


def test_display_then_exit():
    _, out, _ = run_app("2\n3\n")
    assert "DOSTEPNE WALUTY" in out
    assert "2. PLN - Polski zloty (Kurs: 1.0000 PLN)" in out
    assert out.index("DOSTEPNE WALUTY") < out.index(FAREWELL)


def test_conversion_then_exit():
    _, out, err = run_app("1\n100 USD PLN\n3\n")
    assert "100.00 USD = 400.00 PLN" in out
    assert FAREWELL in out
    assert err == ""


def test_non_numeric_choice_is_rejected():
    _, out, err = run_app("abc def\n3\n")
    assert err.count(BAD_CHOICE) == 1
    assert FAREWELL in out


def test_out_of_range_choice_is_rejected():
    _, out, err = run_app("9\n0\n3\n")
    assert err.count(BAD_CHOICE) == 2
    assert FAREWELL in out


def test_end_of_input_stops_loop():
    _, out, err = run_app("2\n")
    assert FAREWELL not in out
    assert out.count("Wybierz opcje: ") == 2
    assert err == ""


def test_loading_failure_still_serves_menu():
    context, out, err = run_app("3\n", FakeClient(error=NetworkError("down")))
    assert isinstance(context.state, ErrorState)
    assert "Blad: " in err
    assert FAREWELL in out


def test_unexpected_error_is_reported():
    stdin = io.StringIO()
    stdin.close()
    out, err = io.StringIO(), io.StringIO()
    context = AppContext(NBPService(FakeClient()), out, err)
    CurrencyExchangeApp(context, stdin, out, err).run()
    assert err.getvalue().startswith("Nieoczekiwany blad: ")


def test_main_runs_and_exits(monkeypatch, capsys):
    def fake_run(command, **kwargs):
        return subprocess.CompletedProcess(command, 0, stdout=XML.encode("utf-8"))

    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert FAREWELL in capsys.readouterr().out