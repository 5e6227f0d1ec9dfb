"""Currency calculator based on National Bank of Poland average exchange rates."""

__version__ = "0.1.0"