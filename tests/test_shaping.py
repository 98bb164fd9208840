import base64

import pytest

from aicats.models import ImageBlob, ResponseType
from aicats.shaping import DATA_URL_PREFIX, decode_data_url, shape_image

JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + bytes(range(256)) + b"\xff\xd9"


def test_blob_is_default_shape() -> None:
    result = shape_image(JPEG)

    assert isinstance(result, ImageBlob)
    assert result.data == JPEG
    assert result.content_type == "image/jpeg"
    assert len(result) == len(JPEG)
    assert bytes(result) == JPEG


def test_array_buffer_returns_plain_bytes() -> None:
    result = shape_image(bytearray(JPEG), ResponseType.ARRAY_BUFFER)

    assert type(result) is bytes
    assert result == JPEG


def test_base64_round_trips_exactly() -> None:
    result = shape_image(JPEG, "base64")

    assert isinstance(result, str)
    assert "\n" not in result
    assert base64.b64decode(result) == JPEG


def test_base64_keeps_padding() -> None:
    assert shape_image(b"ab", ResponseType.BASE64) == "YWI="


def test_data_url_round_trips_exactly() -> None:
    result = shape_image(JPEG, ResponseType.DATA_URL)

    assert result.startswith("data:image/jpeg;base64,")
    assert base64.b64decode(result[len(DATA_URL_PREFIX):]) == JPEG
    assert decode_data_url(result) == JPEG


def test_empty_payload_shapes() -> None:
    assert shape_image(b"", "base64") == ""
    assert shape_image(b"", "dataUrl") == DATA_URL_PREFIX


def test_blob_to_base64_matches_base64_shape() -> None:
    assert shape_image(JPEG).to_base64() == shape_image(JPEG, "base64")


def test_unknown_response_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        shape_image(JPEG, "text")


@pytest.mark.parametrize("text", ["data:image/png;base64,AAAA", "data:image/jpeg;base64,@@@"])
def test_decode_data_url_rejects_bad_input(text) -> None:
    with pytest.raises(ValueError):
        decode_data_url(text)
