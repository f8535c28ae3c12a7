"""Savings goal tracker API: goals, contributions and progress."""

__version__ = "1.0.0"
