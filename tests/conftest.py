from __future__ import annotations

from typing import Callable

import httpx
import pytest

from aicats import AiCatsClient
from aicats.config import Settings

from helpers import API_URL


class Recorder:
    """Collects requests seen by a MockTransport and replies via a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], tuple[AiCatsClient, Recorder]]:
    def _make(handler):
        recorder = Recorder(handler)
        client = AiCatsClient(
            API_URL,
            transport=httpx.MockTransport(recorder),
            settings=Settings(),
        )
        return client, recorder

    return _make
