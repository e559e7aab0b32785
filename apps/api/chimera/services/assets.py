"""Non-fungible asset service layer."""

from functools import partial

from chimera.domain import ledger as ledger_rules
from chimera.domain.ledger import AssetRecord
from chimera.errors import ApiError
from chimera.repositories.memory import InMemoryStore
from chimera.schemas.asset import Asset
from chimera.schemas.ledger import TransactionReceipt
from chimera.services.transactions import require_ledger, submit_transaction


class AssetService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_assets(self, *, address: str) -> list[Asset]:
        record = require_ledger(self._store, address)
        return [self._to_asset(asset) for _, asset in sorted(record.state.assets.items())]

    def get_asset(self, *, address: str, asset_id: int) -> Asset:
        record = require_ledger(self._store, address)
        asset = record.state.assets.get(asset_id)
        if asset is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Resource not found")

        return self._to_asset(asset)

    def add_asset(
        self,
        *,
        address: str,
        caller: str,
        asset_id: int,
        title: str,
        media_uri: str,
    ) -> TransactionReceipt:
        record = require_ledger(self._store, address)
        return submit_transaction(
            self._store,
            ledger=record,
            sender=caller,
            action="add_asset",
            operation=partial(
                ledger_rules.add_asset,
                caller=caller,
                asset_id=asset_id,
                title=title,
                media_uri=media_uri,
            ),
        )

    def add_media_uri(self, *, address: str, caller: str, asset_id: int, media_uri: str) -> TransactionReceipt:
        record = require_ledger(self._store, address)
        return submit_transaction(
            self._store,
            ledger=record,
            sender=caller,
            action="add_media_uri",
            operation=partial(ledger_rules.add_media_uri, caller=caller, asset_id=asset_id, media_uri=media_uri),
        )

    @staticmethod
    def _to_asset(asset: AssetRecord) -> Asset:
        return Asset(id=asset.id, title=asset.title, media_uris=list(asset.media_uris))
