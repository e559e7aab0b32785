"""Network environment routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from chimera.core.config import Settings, get_settings
from chimera.schemas.network import Network

router = APIRouter(tags=["Network"])


@router.get("/network", response_model=Network)
async def get_network(settings: Annotated[Settings, Depends(get_settings)]) -> Network:
    return settings.active_network
