"""Closed value sets shared by requests and responses.

Enum values are the literal tokens the API expects, so members can be put
straight into a query string.
"""
from __future__ import annotations

from enum import Enum


class Size(str, Enum):
    """Square pixel dimension of a returned image."""

    LARGE = "1024"
    MEDIUM = "512"
    SMALL = "256"
    THUMBNAIL = "128"
    ICON = "64"
    TINY = "32"
    MICRO = "16"

    def __str__(self) -> str:
        return self.value


class Theme(str, Enum):
    """Visual theme an image was generated with."""

    DEFAULT = "Default"
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"
    HALLOWEEN = "Halloween"
    XMAS = "Xmas"
    NEW_YEAR = "NewYear"
    EASTER = "Easter"

    def __str__(self) -> str:
        return self.value


class ResponseType(str, Enum):
    """In-memory shape an image endpoint returns."""

    BLOB = "blob"
    ARRAY_BUFFER = "arrayBuffer"
    BASE64 = "base64"
    DATA_URL = "dataUrl"

    def __str__(self) -> str:
        return self.value
