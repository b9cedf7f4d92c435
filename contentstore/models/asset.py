"""Binary asset models."""

from datetime import datetime
from typing import Optional, Protocol

from pydantic import BaseModel, Field

from .base import DBModel


class AssetUpload(Protocol):
    """File-like input accepted by ``ContentStore.store_asset``."""

    content_type: str
    size: int

    def read(self) -> bytes:
        ...


class BytesUpload(BaseModel):
    """In-memory upload."""

    data: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.data)

    def read(self) -> bytes:
        return self.data


class AssetPayload(BaseModel):
    """Raw bytes tagged with their MIME type."""

    data: bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.data)


class Asset(DBModel):
    """Asset row as stored."""

    asset_id: str = Field(..., description="Key, may contain path-like segments")
    mime_type: str = Field(..., description="MIME type of the payload")
    size: int = Field(..., description="Payload size in bytes", ge=0)
    data: bytes = Field(..., description="Raw payload")


class StoredAsset(BaseModel):
    """Asset as returned to callers."""

    filename: str = Field(..., description="Last path segment of the asset id")
    mime_type: str
    last_modified: Optional[datetime] = None
    size: int
    data: AssetPayload

    @classmethod
    def from_row(cls, row: dict) -> "StoredAsset":
        """Build from an ``assets`` row."""
        asset = Asset(**{**row, "data": bytes(row["data"])})
        return cls(
            filename=asset.asset_id.split("/")[-1],
            mime_type=asset.mime_type,
            last_modified=asset.updated_at,
            size=asset.size,
            data=AssetPayload(data=asset.data, mime_type=asset.mime_type),
        )
