from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ASSET_REQUEST = "ASSET_REQUEST"
ASSET_RESPONSE = "ASSET_RESPONSE"


class RenderRequest(BaseModel):
    template: str = "index"
    context: dict[str, Any] = Field(default_factory=dict)


class IngestSummary(BaseModel):
    total: int = 0
    liquid: int = 0
    section: int = 0
    snippet: int = 0
    template: int = 0
    layout: int = 0
    assets: int = 0


class AssetRequest(BaseModel):
    """Worker -> client: fetch the bytes stored at ``path``."""

    type: Literal["ASSET_REQUEST"] = ASSET_REQUEST
    path: str


class AssetResponse(BaseModel):
    """Client -> worker: the reply to exactly one ``AssetRequest``."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["ASSET_RESPONSE"] = ASSET_RESPONSE
    found: bool
    content: bytes | None = None
    content_type: str | None = Field(default=None, alias="contentType")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
