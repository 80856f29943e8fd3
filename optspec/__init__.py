"""Declarative command-line option parsing with grouped help output."""

__version__ = "3.0.0"

__all__ = ["errors", "values", "result", "helpformat", "parser", "options"]