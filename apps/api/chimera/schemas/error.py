"""API error response schemas."""

from typing import Any
from typing import Literal

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class NoLeakNotFoundError(BaseModel):
    code: Literal["RESOURCE_NOT_FOUND"]
    message: str


class RevertErrorDetails(BaseModel):
    reverted: Literal[True]
    balance: int | None = None
    allowance: int | None = None
    amount: int | None = None
    asset_id: int | None = None


class RevertError(BaseModel):
    code: Literal[
        "INSUFFICIENT_BALANCE",
        "INSUFFICIENT_ALLOWANCE",
        "UNKNOWN_ASSET_ID",
        "DUPLICATE_ASSET_ID",
        "CALLER_NOT_OWNER",
    ]
    message: str
    details: RevertErrorDetails
