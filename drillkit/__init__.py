"""Routines for arithmetic, sorting, text, tables, matrices and people records, with a small command line."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "sorting", "text", "matrix", "table", "people", "cli"]