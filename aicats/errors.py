"""Exceptions raised by the AI Cats client."""
from __future__ import annotations


class AiCatsError(RuntimeError):
    """Base class for errors raised by this package."""


class RequestFailed(AiCatsError):
    """The API answered with a non-success HTTP status."""

    def __init__(
        self,
        operation: str,
        status_code: int,
        status_text: str,
        url: str | None = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        super().__init__(f"Error {operation}: {status_text}")
