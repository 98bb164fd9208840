"""Async Python client for the AI Cats image API.

Usage::

    from aicats import AiCats, ResponseType, Size, Theme

    blob = await AiCats.random(theme=Theme.HALLOWEEN)
    data_url = await AiCats.get_by_id(cat_id, size=Size.MEDIUM, response_type=ResponseType.DATA_URL)
    cats = await AiCats.search(query="orange", limit=5)
"""

from aicats._version import __version__
from aicats.client import AiCatsClient
from aicats.errors import AiCatsError, RequestFailed
from aicats.models import (
    CatInfo,
    GetByIdOptions,
    ImageBlob,
    RandomCatOptions,
    ResponseType,
    SearchOptions,
    SearchResult,
    SimilarOptions,
    Size,
    Theme,
)

AiCats = AiCatsClient()

__all__ = [
    "AiCats",
    "AiCatsClient",
    "AiCatsError",
    "CatInfo",
    "GetByIdOptions",
    "ImageBlob",
    "RandomCatOptions",
    "RequestFailed",
    "ResponseType",
    "SearchOptions",
    "SearchResult",
    "SimilarOptions",
    "Size",
    "Theme",
    "__version__",
]
