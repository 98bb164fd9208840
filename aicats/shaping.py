"""Convert image payloads into the shape requested by the caller."""
from __future__ import annotations

import base64
import binascii
from typing import Callable, Union

from aicats.models import JPEG_MEDIA_TYPE, ImageBlob, ResponseType

ImageResult = Union[ImageBlob, bytes, str]

DATA_URL_PREFIX = f"data:{JPEG_MEDIA_TYPE};base64,"


def _to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


_SHAPERS: dict[ResponseType, Callable[[bytes], ImageResult]] = {
    ResponseType.BLOB: lambda data: ImageBlob(data=data, content_type=JPEG_MEDIA_TYPE),
    ResponseType.ARRAY_BUFFER: bytes,
    ResponseType.BASE64: _to_base64,
    ResponseType.DATA_URL: lambda data: DATA_URL_PREFIX + _to_base64(data),
}


def shape_image(data: bytes, response_type: ResponseType | str | None = None) -> ImageResult:
    """Return *data* as a blob (default), raw bytes, base64 text or data URL."""

    kind = ResponseType(response_type) if response_type is not None else ResponseType.BLOB
    return _SHAPERS[kind](bytes(data))


def decode_data_url(text: str) -> bytes:
    """Inverse of the ``dataUrl`` shape."""

    if not text.startswith(DATA_URL_PREFIX):
        raise ValueError(f"expected a data URL starting with {DATA_URL_PREFIX!r}")
    try:
        return base64.b64decode(text[len(DATA_URL_PREFIX):], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("data URL carries an invalid base64 payload") from exc
