"""Household account book: register income and expenses, summarise by month and year."""

__version__ = "0.1.0"