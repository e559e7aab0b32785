"""Ledger API schemas."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Same normalization the bearer token verifier applies to the sending account.
AccountId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, pattern=r"^[^:]+$")]
Amount = Annotated[int, Field(ge=0, strict=True)]


class DeployLedgerRequest(BaseModel):
    name: str = Field(min_length=1)
    symbol: str = Field(min_length=1)
    decimals: int = Field(ge=0, le=255, strict=True)
    total_supply: Amount
    gas: int | None = Field(default=None, ge=0, strict=True)
    gas_price: int | None = Field(default=None, ge=0, strict=True)


class Ledger(BaseModel):
    address: str
    creator: str
    name: str
    symbol: str
    decimals: int
    total_supply: int
    num_assets: int
    block_number: int
    created_at: datetime


class Balance(BaseModel):
    account: str
    balance: int


class Allowance(BaseModel):
    owner: str
    spender: str
    allowance: int


class TransferRequest(BaseModel):
    to: AccountId
    amount: Amount


class ApproveRequest(BaseModel):
    spender: AccountId
    amount: Amount


class TransferFromRequest(BaseModel):
    owner: AccountId = Field(alias="from")
    to: AccountId
    amount: Amount

    model_config = ConfigDict(populate_by_name=True)


class EventLog(BaseModel):
    event: str
    args: dict[str, Any]
    ledger_address: str
    block_number: int
    log_index: int
    transaction_hash: str


class TransactionReceipt(BaseModel):
    transaction_hash: str
    ledger_address: str
    block_number: int
    sender: str = Field(alias="from")
    logs: list[EventLog]

    model_config = ConfigDict(populate_by_name=True)
