"""Dependency wiring for routes."""

from __future__ import annotations

import logging
from secrets import compare_digest
from typing import Annotated
from uuid import uuid4

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from chimera.adapters.auth import AuthVerificationError, MockTokenVerifier, TokenVerifier
from chimera.core.config import Settings, get_settings
from chimera.core.logging_safety import safe_log_identifier
from chimera.errors import ApiError
from chimera.repositories.memory import InMemoryStore
from chimera.schemas.auth import AuthPrincipal
from chimera.services.assets import AssetService
from chimera.services.ledgers import LedgerService

bearer_scheme = HTTPBearer(auto_error=False, scheme_name="bearerAuth")
deploy_secret_scheme = APIKeyHeader(
    name="X-Deploy-Secret",
    auto_error=False,
    scheme_name="deploySecret",
)
logger = logging.getLogger(__name__)


def _auth_error(message: str) -> ApiError:
    return ApiError(status_code=401, code="UNAUTHORIZED", message=message)


def _request_correlation_id(request: Request) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get("X-Correlation-Id")
    if correlation_id:
        request.state.correlation_id = correlation_id
        return correlation_id

    generated = f"req-{uuid4()}"
    request.state.correlation_id = generated
    return generated


def get_token_verifier() -> TokenVerifier:
    return MockTokenVerifier()


async def get_sender(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Security(bearer_scheme)],
    verifier: Annotated[TokenVerifier, Depends(get_token_verifier)],
) -> AuthPrincipal:
    """Resolve the account a transaction is sent from."""
    safe_correlation_id = safe_log_identifier(_request_correlation_id(request), prefix="cid")
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        logger.warning(
            "auth.rejected correlation_id=%s method=%s path=%s reason=invalid_or_missing_bearer",
            safe_correlation_id,
            request.method,
            request.url.path,
        )
        raise _auth_error("Invalid or missing bearer token")

    try:
        principal = verifier.verify_token(credentials.credentials)
    except AuthVerificationError as exc:
        logger.warning(
            "auth.rejected correlation_id=%s method=%s path=%s reason=token_verification_failed",
            safe_correlation_id,
            request.method,
            request.url.path,
        )
        raise _auth_error(str(exc) or "Invalid bearer token") from exc

    logger.info(
        "auth.accepted correlation_id=%s method=%s path=%s account=%s",
        safe_correlation_id,
        request.method,
        request.url.path,
        safe_log_identifier(principal.account, prefix="acc"),
    )
    request.state.auth_principal = principal
    return principal


async def require_deploy_secret(
    request: Request,
    deploy_secret: Annotated[str | None, Security(deploy_secret_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """Gate ledger deployment when a deploy secret is configured."""
    if settings.deploy_secret is None:
        return

    if deploy_secret is None or not compare_digest(deploy_secret, settings.deploy_secret):
        logger.warning(
            "deploy.auth_rejected correlation_id=%s method=%s path=%s reason=invalid_deploy_secret",
            safe_log_identifier(_request_correlation_id(request), prefix="cid"),
            request.method,
            request.url.path,
        )
        raise _auth_error("Invalid deploy authentication")


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_ledger_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> LedgerService:
    return LedgerService(store)


def get_asset_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> AssetService:
    return AssetService(store)
