"""Mock caller verifier for local development networks and tests."""

from chimera.adapters.auth.base import AuthVerificationError, TokenVerifier
from chimera.schemas.auth import AuthPrincipal


class MockTokenVerifier(TokenVerifier):
    """Trusts the account named in the token, like an unlocked dev-node account.

    Expected token format: ``test:<account>``
    """

    def verify_token(self, token: str) -> AuthPrincipal:
        prefix, separator, account = token.partition(":")
        if prefix != "test" or not separator:
            raise AuthVerificationError("Invalid bearer token")

        account = account.strip()
        if not account:
            raise AuthVerificationError("Bearer token missing account")
        if ":" in account:
            raise AuthVerificationError("Invalid bearer token")

        return AuthPrincipal(account=account)


__all__ = ["MockTokenVerifier"]
