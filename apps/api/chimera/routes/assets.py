"""Non-fungible asset routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from chimera.routes.dependencies import get_asset_service, get_sender
from chimera.schemas.asset import AddAssetRequest, AddMediaUriRequest, Asset
from chimera.schemas.auth import AuthPrincipal
from chimera.schemas.error import ErrorResponse, NoLeakNotFoundError, RevertError
from chimera.schemas.ledger import TransactionReceipt
from chimera.services.assets import AssetService

router = APIRouter(prefix="/ledgers/{ledgerAddress}/assets", tags=["Assets"])

LedgerAddress = Annotated[str, Path(alias="ledgerAddress")]
AssetId = Annotated[int, Path(alias="assetId", ge=1)]


@router.get(
    "",
    response_model=list[Asset],
    responses={404: {"model": NoLeakNotFoundError}},
)
async def list_assets(
    address: LedgerAddress,
    service: Annotated[AssetService, Depends(get_asset_service)],
) -> list[Asset]:
    return service.list_assets(address=address)


@router.post(
    "",
    response_model=TransactionReceipt,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": NoLeakNotFoundError},
        409: {"model": RevertError},
    },
)
async def add_asset(
    address: LedgerAddress,
    payload: AddAssetRequest,
    principal: Annotated[AuthPrincipal, Depends(get_sender)],
    service: Annotated[AssetService, Depends(get_asset_service)],
) -> TransactionReceipt:
    return service.add_asset(
        address=address,
        caller=principal.account,
        asset_id=payload.id,
        title=payload.title,
        media_uri=payload.media_uri,
    )


@router.get(
    "/{assetId}",
    response_model=Asset,
    responses={404: {"model": NoLeakNotFoundError}},
)
async def get_asset(
    address: LedgerAddress,
    asset_id: AssetId,
    service: Annotated[AssetService, Depends(get_asset_service)],
) -> Asset:
    return service.get_asset(address=address, asset_id=asset_id)


@router.post(
    "/{assetId}/media-uris",
    response_model=TransactionReceipt,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": NoLeakNotFoundError},
        409: {"model": RevertError},
    },
)
async def add_media_uri(
    address: LedgerAddress,
    asset_id: AssetId,
    payload: AddMediaUriRequest,
    principal: Annotated[AuthPrincipal, Depends(get_sender)],
    service: Annotated[AssetService, Depends(get_asset_service)],
) -> TransactionReceipt:
    return service.add_media_uri(
        address=address,
        caller=principal.account,
        asset_id=asset_id,
        media_uri=payload.media_uri,
    )
