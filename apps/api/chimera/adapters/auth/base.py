"""Caller identity provider interfaces."""

from abc import ABC, abstractmethod

from chimera.schemas.auth import AuthPrincipal


class AuthVerificationError(Exception):
    """Raised when a token cannot be resolved to a sending account."""


class TokenVerifier(ABC):
    """Provider-neutral token verification interface."""

    @abstractmethod
    def verify_token(self, token: str) -> AuthPrincipal:
        """Verify token and return the account it speaks for."""


__all__ = ["AuthVerificationError", "TokenVerifier"]
