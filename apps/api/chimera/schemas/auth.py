"""Authentication schemas."""

from pydantic import BaseModel, Field


class AuthPrincipal(BaseModel):
    """Account on whose behalf a transaction is submitted."""

    account: str = Field(min_length=1)
