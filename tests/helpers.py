from __future__ import annotations

import json
from typing import Any

import httpx

API_URL = "https://api.example.test/v1"


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json"},
    )
