"""Turn option bundles into query parameters.

A single ordered table maps option fields to query keys. Parameters are
emitted in the order the fields are declared on the option model, so the
resulting query string is stable for a given bundle.
"""
from __future__ import annotations

import uuid
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Tuple

from pydantic import BaseModel

Params = List[Tuple[str, str]]

CACHE_BUSTER_KEY = "rnd"


class _QueryField(NamedTuple):
    key: str
    present: Callable[[Any], bool]
    serialize: Callable[[Any], str]


def _is_set(value: Any) -> bool:
    return value is not None


def _is_non_empty(value: Any) -> bool:
    return value is not None and value != ""


def _is_true(value: Any) -> bool:
    return value is True


def _enum_value(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


_QUERY_FIELDS: dict[str, _QueryField] = {
    "size": _QueryField("size", _is_set, _enum_value),
    "theme": _QueryField("theme", _is_set, _enum_value),
    "query": _QueryField("query", _is_non_empty, str),
    "limit": _QueryField("limit", _is_set, lambda v: str(int(v))),
    "from_": _QueryField("from", _is_non_empty, str),
    "descending": _QueryField("descending", _is_true, lambda _v: "true"),
}


def build_params(options: BaseModel | None) -> Params:
    """Return ``(key, value)`` pairs for every option that is set."""

    if options is None:
        return []
    params: Params = []
    for name in type(options).model_fields:
        field = _QUERY_FIELDS.get(name)
        if field is None:
            continue
        value = getattr(options, name)
        if field.present(value):
            params.append((field.key, field.serialize(value)))
    return params


def cache_buster() -> str:
    """Fresh token that makes every random-image URL unique."""

    return uuid.uuid4().hex


def random_params(options: BaseModel | None) -> Params:
    params = build_params(options)
    params.append((CACHE_BUSTER_KEY, cache_buster()))
    return params
