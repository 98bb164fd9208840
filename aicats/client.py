"""Asynchronous client for the AI Cats HTTP API.

Every public method maps to one GET endpoint:

    random                 /cat                      image
    get_by_id              /cat/{id}                 image
    get_info               /cat/info/{id}            CatInfo
    search                 /cat/search               list[SearchResult]
    get_similar            /cat/similar/{id}         list[SearchResult]
    get_search_completion  /cat/search-completion    str
    get_themes             /cat/theme-list           list[Theme]
    get_count              /cat/count                int

Image endpoints return the shape selected by ``response_type`` (see
:mod:`aicats.shaping`). A non-2xx status raises :class:`RequestFailed`;
transport errors from httpx propagate unchanged. Nothing is retried.

By default each call opens and closes its own ``httpx.AsyncClient``, so calls
share no state and may run concurrently. Use the client as an async context
manager, or pass ``http_client``, to reuse one connection pool.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter

from aicats.config import Settings, get_settings
from aicats.errors import RequestFailed
from aicats.models import (
    CatInfo,
    GetByIdOptions,
    RandomCatOptions,
    SearchOptions,
    SearchResult,
    SimilarOptions,
    Size,
    Theme,
)
from aicats.query import Params, build_params, random_params
from aicats.shaping import ImageResult, shape_image

logger = logging.getLogger(__name__)

_OptionsT = TypeVar("_OptionsT", bound=BaseModel)

_UNSET: Any = object()

_SEARCH_RESULTS = TypeAdapter(List[SearchResult])


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")


class _CountBody(_Envelope):
    count: int


class _CompletionBody(_Envelope):
    completion: str


class _ThemesBody(_Envelope):
    themes: List[Theme]


def _coerce_options(
    model: Type[_OptionsT],
    options: _OptionsT | dict[str, Any] | None,
    fields: dict[str, Any],
) -> _OptionsT:
    """Merge an options object (or mapping) with keyword overrides."""

    if options is None:
        return model.model_validate(fields)
    if not isinstance(options, model):
        options = model.model_validate(options)
    if not fields:
        return options
    # overrides may use either the field name or its alias ("from_" / "from")
    overrides = model.model_validate(fields)
    return options.model_copy(
        update={name: getattr(overrides, name) for name in overrides.model_fields_set}
    )


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class AiCatsClient:
    """Typed access to the AI Cats image API."""

    def __init__(
        self,
        api_url: str | None = None,
        *,
        timeout: float | None = _UNSET,
        proxy: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.timeout = settings.timeout if timeout is _UNSET else timeout
        self.proxy = proxy or settings.proxy
        self.user_agent = settings.user_agent
        self._transport = transport
        self._http = http_client
        self._owns_http = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_url={self.api_url!r})"

    # ---- connection handling ----

    def _new_http_client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {
            "timeout": httpx.Timeout(self.timeout),
            "headers": {"User-Agent": self.user_agent},
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        elif self.proxy:
            kwargs["proxy"] = self.proxy
        return httpx.AsyncClient(**kwargs)

    async def __aenter__(self) -> "AiCatsClient":
        if self._http is None:
            self._http = self._new_http_client()
            self._owns_http = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the pooled connection opened by ``async with``; injected clients are left open."""

        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None
            self._owns_http = False

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http is not None:
            yield self._http
            return
        async with self._new_http_client() as http:
            yield http

    async def _get(self, operation: str, path: str, params: Optional[Params] = None) -> httpx.Response:
        url = f"{self.api_url}{path}"
        logger.debug("GET %s params=%s", url, params or [])
        async with self._session() as http:
            response = await http.get(url, params=params)
        if not response.is_success:
            status_text = response.reason_phrase
            logger.warning(
                "AI Cats request failed while %s: %s %s",
                operation,
                response.status_code,
                status_text,
            )
            raise RequestFailed(operation, response.status_code, status_text, str(response.url))
        return response

    # ---- image endpoints ----

    async def random(
        self,
        options: RandomCatOptions | dict[str, Any] | None = None,
        **fields: Any,
    ) -> ImageResult:
        """Fetch a random cat image.

        A fresh ``rnd`` token is added to every request so intermediary caches
        never serve the same image twice.

        Example::

            blob = await client.random(theme=Theme.HALLOWEEN)
        """
        opts = _coerce_options(RandomCatOptions, options, fields)
        response = await self._get("fetching cat image", "/cat", random_params(opts))
        return shape_image(response.content, opts.response_type)

    async def get_by_id(
        self,
        id: str,
        options: GetByIdOptions | dict[str, Any] | None = None,
        **fields: Any,
    ) -> ImageResult:
        """Fetch one image by id; ``size`` defaults to :attr:`Size.LARGE`."""
        opts = _coerce_options(GetByIdOptions, options, fields)
        if opts.size is None:
            opts = opts.model_copy(update={"size": Size.LARGE})
        response = await self._get(
            "fetching cat image",
            f"/cat/{_segment(id)}",
            build_params(opts),
        )
        return shape_image(response.content, opts.response_type)

    # ---- metadata endpoints ----

    async def get_info(self, id: str) -> CatInfo:
        """Prompt, theme and creation date of an image."""
        response = await self._get("fetching cat info", f"/cat/info/{_segment(id)}")
        return CatInfo.model_validate(response.json())

    async def search(
        self,
        options: SearchOptions | dict[str, Any] | None = None,
        **fields: Any,
    ) -> List[SearchResult]:
        """Search images by free text, theme and cursor.

        Example::

            cats = await client.search(query="space tiger", limit=5)
        """
        opts = _coerce_options(SearchOptions, options, fields)
        response = await self._get("searching for cats", "/cat/search", build_params(opts))
        return _SEARCH_RESULTS.validate_python(response.json())

    async def get_similar(
        self,
        id: str,
        options: SimilarOptions | dict[str, Any] | None = None,
        **fields: Any,
    ) -> List[SearchResult]:
        opts = _coerce_options(SimilarOptions, options, fields)
        response = await self._get(
            "fetching similar cats",
            f"/cat/similar/{_segment(id)}",
            build_params(opts),
        )
        return _SEARCH_RESULTS.validate_python(response.json())

    async def get_search_completion(
        self,
        options: SearchOptions | dict[str, Any] | None = None,
        **fields: Any,
    ) -> str:
        """Suggested completion for a partial search query."""
        opts = _coerce_options(SearchOptions, options, fields)
        response = await self._get(
            "fetching completion",
            "/cat/search-completion",
            build_params(opts),
        )
        return _CompletionBody.model_validate(response.json()).completion

    async def get_themes(self) -> List[Theme]:
        response = await self._get("fetching themes", "/cat/theme-list")
        return _ThemesBody.model_validate(response.json()).themes

    async def get_count(self, theme: Theme | str | None = None) -> int:
        """Total number of images, optionally restricted to one theme."""
        path = "/cat/count"
        if theme:
            path = f"{path}?theme={Theme(theme).value}"
        response = await self._get("fetching count", path)
        return _CountBody.model_validate(response.json()).count
