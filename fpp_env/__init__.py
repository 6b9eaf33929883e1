"""FPP environment snapshot export for the calendar scheduler plugin."""

__version__ = "1.0.0"
