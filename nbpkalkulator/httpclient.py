"""Minimal HTTP GET client that delegates the transfer to ``curl``."""

from __future__ import annotations

import codecs
import functools
import re
import subprocess

from .errors import CurrencyError, NetworkError, ValidationError

_DEFAULT_TIMEOUT = 30
_XML_ENCODING = re.compile(rb"<\?xml[^>]*encoding=[\"']([A-Za-z0-9._-]+)[\"']")


def _decode(payload: bytes) -> str:
    """Decode a response, honouring an XML encoding declaration if present."""
    encoding = "utf-8"
    match = _XML_ENCODING.search(payload[:200])
    if match is not None:
        declared = match.group(1).decode("ascii")
        try:
            codecs.lookup(declared)
        except LookupError:
            pass
        else:
            encoding = declared
    return payload.decode(encoding, errors="replace")


class HTTPClient:
    """Fetches URLs with a configurable timeout in seconds."""

    def __init__(self, timeout: int = _DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    @property
    def timeout(self) -> int:
        return self._timeout

    @timeout.setter
    def timeout(self, seconds: int) -> None:
        if seconds <= 0:
            raise ValidationError("Timeout must be positive", str(seconds))
        self._timeout = seconds

    def get(self, url: str) -> str:
        """Return the body of ``url``; raise NetworkError on any failure."""
        if not url:
            raise ValidationError("URL cannot be empty")
        try:
            return self._curl(url)
        except CurrencyError:
            raise
        except Exception as exc:
            raise NetworkError(f"HTTP GET failed: {exc}") from exc

    def _curl(self, url: str) -> str:
        command = ["curl", "-s", "-L", "--max-time", str(self._timeout), url]
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as exc:
            raise NetworkError("Failed to execute curl command") from exc

        if completed.returncode != 0:
            raise NetworkError("Failed to execute curl command")

        response = _decode(completed.stdout or b"")
        if not response:
            raise NetworkError("Empty response from server")
        if "curl:" in response:
            raise NetworkError("CURL error: " + response)
        return response


@functools.lru_cache(maxsize=None)
def default_client() -> HTTPClient:
    """Return the process-wide shared client."""
    return HTTPClient()