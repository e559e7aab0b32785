"""Token balance, allowance and asset registry rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from chimera.errors import ApiError

EVENT_TRANSFER = "Transfer"
EVENT_APPROVAL = "Approval"
EVENT_ADD_ASSET = "AddAsset"
EVENT_ADD_MEDIA_URI = "AddMediaUri"


class RevertReason(str, Enum):
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    INSUFFICIENT_ALLOWANCE = "INSUFFICIENT_ALLOWANCE"
    UNKNOWN_ASSET_ID = "UNKNOWN_ASSET_ID"
    DUPLICATE_ASSET_ID = "DUPLICATE_ASSET_ID"
    CALLER_NOT_OWNER = "CALLER_NOT_OWNER"


_REVERT_MESSAGES: dict[RevertReason, str] = {
    RevertReason.INSUFFICIENT_BALANCE: "Sender balance is too low for this transfer",
    RevertReason.INSUFFICIENT_ALLOWANCE: "Spender allowance is too low for this transfer",
    RevertReason.UNKNOWN_ASSET_ID: "Asset is not registered",
    RevertReason.DUPLICATE_ASSET_ID: "Asset id is already registered",
    RevertReason.CALLER_NOT_OWNER: "Only the ledger owner may administer assets",
}


@dataclass(slots=True)
class LedgerEvent:
    name: str
    args: dict[str, Any]


@dataclass(slots=True)
class AssetRecord:
    id: int
    title: str
    media_uris: list[str] = field(default_factory=list)


@dataclass(slots=True)
class LedgerState:
    """Complete mutable state of one deployed ledger.

    Every operation below checks all of its preconditions before the first
    write, so a revert never leaves a partially applied change behind.
    """

    name: str
    symbol: str
    decimals: int
    total_supply: int
    owner: str
    balances: dict[str, int] = field(default_factory=dict)
    allowances: dict[tuple[str, str], int] = field(default_factory=dict)
    assets: dict[int, AssetRecord] = field(default_factory=dict)

    @classmethod
    def create(cls, *, name: str, symbol: str, decimals: int, total_supply: int, owner: str) -> LedgerState:
        state = cls(name=name, symbol=symbol, decimals=decimals, total_supply=total_supply, owner=owner)
        state.balances[owner] = total_supply
        return state

    def balance_of(self, account: str) -> int:
        return self.balances.get(account, 0)

    def allowance_of(self, owner: str, spender: str) -> int:
        return self.allowances.get((owner, spender), 0)

    @property
    def num_assets(self) -> int:
        return len(self.assets)


def revert(reason: RevertReason, **details: Any) -> ApiError:
    """Build the error raised when a ledger precondition fails."""
    return ApiError(
        status_code=409,
        code=reason.value,
        message=_REVERT_MESSAGES[reason],
        details={"reverted": True, **details},
    )


def _move_balance(state: LedgerState, *, sender: str, to: str, amount: int) -> None:
    # Debit first so a self-transfer nets to zero.
    state.balances[sender] = state.balance_of(sender) - amount
    state.balances[to] = state.balance_of(to) + amount


def transfer(state: LedgerState, *, sender: str, to: str, amount: int) -> list[LedgerEvent]:
    balance = state.balance_of(sender)
    if balance < amount:
        raise revert(RevertReason.INSUFFICIENT_BALANCE, balance=balance, amount=amount)

    _move_balance(state, sender=sender, to=to, amount=amount)
    return [LedgerEvent(EVENT_TRANSFER, {"_from": sender, "_to": to, "_value": amount})]


def approve(state: LedgerState, *, owner: str, spender: str, amount: int) -> list[LedgerEvent]:
    """Set the spender's cap, replacing any previous value."""
    state.allowances[(owner, spender)] = amount
    return [LedgerEvent(EVENT_APPROVAL, {"_owner": owner, "_spender": spender, "_value": amount})]


def transfer_from(
    state: LedgerState,
    *,
    spender: str,
    owner: str,
    to: str,
    amount: int,
) -> list[LedgerEvent]:
    allowance = state.allowance_of(owner, spender)
    if allowance < amount:
        raise revert(RevertReason.INSUFFICIENT_ALLOWANCE, allowance=allowance, amount=amount)

    balance = state.balance_of(owner)
    if balance < amount:
        raise revert(RevertReason.INSUFFICIENT_BALANCE, balance=balance, amount=amount)

    state.allowances[(owner, spender)] = allowance - amount
    _move_balance(state, sender=owner, to=to, amount=amount)
    return [LedgerEvent(EVENT_TRANSFER, {"_from": owner, "_to": to, "_value": amount})]


def _ensure_owner(state: LedgerState, caller: str) -> None:
    if caller != state.owner:
        raise revert(RevertReason.CALLER_NOT_OWNER)


def add_asset(
    state: LedgerState,
    *,
    caller: str,
    asset_id: int,
    title: str,
    media_uri: str,
) -> list[LedgerEvent]:
    _ensure_owner(state, caller)
    if asset_id in state.assets:
        raise revert(RevertReason.DUPLICATE_ASSET_ID, asset_id=asset_id)

    state.assets[asset_id] = AssetRecord(id=asset_id, title=title, media_uris=[media_uri])
    return [LedgerEvent(EVENT_ADD_ASSET, {"_id": asset_id, "_title": title, "_mediaUri": media_uri})]


def add_media_uri(state: LedgerState, *, caller: str, asset_id: int, media_uri: str) -> list[LedgerEvent]:
    _ensure_owner(state, caller)
    asset = state.assets.get(asset_id)
    if asset is None:
        raise revert(RevertReason.UNKNOWN_ASSET_ID, asset_id=asset_id)

    # Duplicate URIs are appended as-is; the sequence only grows.
    asset.media_uris.append(media_uri)
    return [LedgerEvent(EVENT_ADD_MEDIA_URI, {"_id": asset_id, "_mediaUri": media_uri})]
