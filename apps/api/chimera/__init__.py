"""Chimera token and asset ledger API."""

__version__ = "0.1.0"
