"""Enums, records and option bundles exposed by the AI Cats client."""

from .enums import ResponseType, Size, Theme  # noqa: F401
from .payloads import (  # noqa: F401
    JPEG_MEDIA_TYPE,
    CatInfo,
    GetByIdOptions,
    ImageBlob,
    RandomCatOptions,
    SearchOptions,
    SearchResult,
    SimilarOptions,
)

__all__ = [
    "JPEG_MEDIA_TYPE",
    "CatInfo",
    "GetByIdOptions",
    "ImageBlob",
    "RandomCatOptions",
    "ResponseType",
    "SearchOptions",
    "SearchResult",
    "SimilarOptions",
    "Size",
    "Theme",
]
