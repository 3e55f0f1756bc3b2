"""Savings tracker backend: compound-interest projections for money kept by quitting habits."""

__version__ = "0.1.0"
