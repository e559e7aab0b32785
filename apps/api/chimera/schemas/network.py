"""Network environment schemas."""

from pydantic import BaseModel, Field


class Network(BaseModel):
    name: str
    host: str
    port: int = Field(ge=1, le=65535)
    network_id: str
    gas: int = Field(ge=0)
