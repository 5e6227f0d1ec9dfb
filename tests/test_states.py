import io

import pytest

from nbpkalkulator.context import AppContext
from nbpkalkulator.errors import NetworkError
from nbpkalkulator.nbp import NBPService
from nbpkalkulator.states import (
    ConvertingState,
    ErrorState,
    InitialState,
    LoadingState,
    ReadyState,
)

XML = (
    "<tabela_kursow>"
    "<pozycja><nazwa_waluty>dolar</nazwa_waluty><przelicznik>1</przelicznik>"
    "<kod_waluty>USD</kod_waluty><kurs_sredni>4,0000</kurs_sredni></pozycja>"
    "<pozycja><nazwa_waluty>euro</nazwa_waluty><przelicznik>1</przelicznik>"
    "<kod_waluty>EUR</kod_waluty><kurs_sredni>4,5000</kurs_sredni></pozycja>"
    "</tabela_kursow>"
)


class FakeClient:
    def __init__(self, payload=XML, error=None):
        self.payload = payload
        self.error = error

    def get(self, url):
        if self.error is not None:
            raise self.error
        return self.payload


def make_context(client=None):
    service = NBPService(client or FakeClient())
    return AppContext(service, io.StringIO(), io.StringIO())


def test_initial_state_moves_to_loading():
    context = make_context()
    InitialState().handle(context)
    assert isinstance(context.state, LoadingState)
    assert "Inicjalizacja aplikacji..." in context.out.getvalue()


def test_loading_state_success_moves_to_ready():
    context = make_context()
    LoadingState().handle(context)
    assert isinstance(context.state, ReadyState)
    assert len(context.service) == 3
    assert "Kursy pobrane pomyslnie!" in context.out.getvalue()


def test_loading_state_failure_moves_to_error():
    context = make_context(FakeClient(error=NetworkError("down")))
    LoadingState().handle(context)
    assert isinstance(context.state, ErrorState)
    assert context.state.message == str(NetworkError("down"))
    assert f"Blad: {NetworkError('down')}" in context.err.getvalue()


def test_converting_state_returns_to_ready():
    context = make_context()
    ConvertingState().handle(context)
    assert isinstance(context.state, ReadyState)
    assert "Wykonywanie konwersji..." in context.out.getvalue()


def test_ready_state_keeps_state():
    context = make_context()
    ready = ReadyState()
    context.state = ready
    ready.handle(context)
    assert context.state is ready
    assert "Aplikacja gotowa do konwersji!" in context.out.getvalue()


def test_error_state_reports_message():
    context = make_context()
    error = ErrorState("oops")
    context.state = error
    error.handle(context)
    assert context.state is error
    assert context.err.getvalue() == "Stan bledu: oops\n"


@pytest.mark.parametrize(
    "state, name",
    [
        (InitialState(), "InitialState"),
        (LoadingState(), "LoadingState"),
        (ReadyState(), "ReadyState"),
        (ConvertingState(), "ConvertingState"),
        (ErrorState("x"), "ErrorState"),
    ],
)
def test_state_names(state, name):
    assert state.name == name