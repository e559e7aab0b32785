"""Caller identity adapters."""

from .base import AuthVerificationError, TokenVerifier
from .mock_auth import MockTokenVerifier

__all__ = [
    "AuthVerificationError",
    "TokenVerifier",
    "MockTokenVerifier",
]
