"""Records returned by the API and the option bundles accepted by the client."""

from __future__ import annotations

import base64
import datetime as dt
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ResponseType, Size, Theme

JPEG_MEDIA_TYPE = "image/jpeg"


class _Record(BaseModel):
    """Immutable view of a JSON object; unknown keys from the server are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class SearchResult(_Record):
    id: str = Field(..., description="Opaque image identifier assigned by the service.")
    url: str = Field(..., description="Direct link to the image.")


class CatInfo(_Record):
    id: str = Field(..., description="Opaque image identifier assigned by the service.")
    date_created: int = Field(
        ...,
        alias="dateCreated",
        description="Creation time in unix-epoch milliseconds.",
    )
    prompt: str = Field(..., description="Prompt the image was generated from.")
    theme: Theme = Field(..., description="Theme the image was generated with.")

    @property
    def created_at(self) -> dt.datetime:
        return dt.datetime.fromtimestamp(self.date_created / 1000, tz=dt.timezone.utc)


class _Options(BaseModel):
    """Call parameters; a field left as ``None`` is not sent."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class RandomCatOptions(_Options):
    size: Optional[Size] = None
    theme: Optional[Theme] = None
    response_type: Optional[ResponseType] = None


class GetByIdOptions(_Options):
    size: Optional[Size] = None
    response_type: Optional[ResponseType] = None


class SearchOptions(_Options):
    query: Optional[str] = Field(None, description='Free text, e.g. "orange fluffy cat".')
    limit: Optional[int] = Field(None, ge=1, le=100, description="Maximum number of results.")
    from_: Optional[str] = Field(
        None,
        alias="from",
        description="Pagination cursor: id of the result to start from.",
    )
    descending: Optional[bool] = Field(None, description="Newest first when true.")
    theme: Optional[Theme] = None
    size: Optional[Size] = None


class SimilarOptions(_Options):
    limit: Optional[int] = Field(None, ge=1, le=100)
    size: Optional[Size] = None


@dataclass(frozen=True)
class ImageBlob:
    """Raw image bytes tagged with their media type."""

    data: bytes
    content_type: str = JPEG_MEDIA_TYPE

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")
