"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from chimera import __version__
from chimera.errors import ApiError
from chimera.repositories.memory import InMemoryStore
from chimera.routes import assets_router, ledgers_router, network_router


_OPENAPI_RESPONSE_CODES: dict[str, dict[str, set[str]]] = {
    "/api/v1/network": {"get": {"200"}},
    "/api/v1/ledgers": {"post": {"201", "401", "422"}},
    "/api/v1/ledgers/{ledgerAddress}": {"get": {"200", "404"}},
    "/api/v1/ledgers/{ledgerAddress}/balances/{account}": {"get": {"200", "404"}},
    "/api/v1/ledgers/{ledgerAddress}/allowances/{owner}/{spender}": {"get": {"200", "404"}},
    "/api/v1/ledgers/{ledgerAddress}/transfer": {"post": {"200", "401", "404", "409", "422"}},
    "/api/v1/ledgers/{ledgerAddress}/approve": {"post": {"200", "401", "404", "422"}},
    "/api/v1/ledgers/{ledgerAddress}/transfer-from": {"post": {"200", "401", "404", "409", "422"}},
    "/api/v1/ledgers/{ledgerAddress}/events": {"get": {"200", "404", "422"}},
    "/api/v1/ledgers/{ledgerAddress}/assets": {
        "get": {"200", "404"},
        "post": {"201", "401", "404", "409", "422"},
    },
    "/api/v1/ledgers/{ledgerAddress}/assets/{assetId}": {"get": {"200", "404", "422"}},
    "/api/v1/ledgers/{ledgerAddress}/assets/{assetId}/media-uris": {"post": {"200", "401", "404", "409", "422"}},
}


def _apply_contract_response_codes(schema: dict) -> None:
    """Limit documented response codes to the ones each operation can return."""
    for path, methods in _OPENAPI_RESPONSE_CODES.items():
        path_item = schema.get("paths", {}).get(path)
        if not path_item:
            continue

        for method, allowed_codes in methods.items():
            operation = path_item.get(method)
            if not operation:
                continue

            responses = operation.setdefault("responses", {})
            for status_code in list(responses.keys()):
                if status_code not in allowed_codes:
                    responses.pop(status_code, None)

            for status_code in sorted(allowed_codes):
                responses.setdefault(status_code, {"description": "See API contract"})


def create_app() -> FastAPI:
    app = FastAPI(title="Chimera Ledger API", version=__version__)
    app.state.store = InMemoryStore()

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.payload.model_dump(mode="json", exclude_none=True),
        )

    api_prefix = "/api/v1"
    app.include_router(network_router, prefix=api_prefix)
    app.include_router(ledgers_router, prefix=api_prefix)
    app.include_router(assets_router, prefix=api_prefix)

    def custom_openapi() -> dict:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        _apply_contract_response_codes(schema)
        app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app


app = create_app()
