"""Route modules."""

from .assets import router as assets_router
from .ledgers import router as ledgers_router
from .network import router as network_router

__all__ = ["assets_router", "ledgers_router", "network_router"]
