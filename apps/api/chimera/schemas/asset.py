"""Asset API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Asset(BaseModel):
    id: int
    title: str
    media_uris: list[str]


class AddAssetRequest(BaseModel):
    id: int = Field(ge=1, strict=True)
    title: str = Field(min_length=1)
    media_uri: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class AddMediaUriRequest(BaseModel):
    media_uri: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)
