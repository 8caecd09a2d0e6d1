"""Query-string construction for authenticated Nike+ requests."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional, Union
from urllib.parse import urlencode

ParamValue = Union[int, str, bytes]

ACCESS_TOKEN_PARAM = "access_token"

__all__ = [
    "ACCESS_TOKEN_PARAM",
    "ParamValue",
    "ParameterBag",
    "build_query",
    "build_request_params",
    "render_param_value",
]


def _check_value(key: str, value: Any) -> ParamValue:
    # bool is an int subclass but has no single agreed query rendering.
    if isinstance(value, bool):
        raise TypeError(f"Query parameter '{key}' cannot be a bool")
    if isinstance(value, (int, str)):
        return value
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
        try:
            raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(
                f"Query parameter '{key}' bytes are not valid UTF-8"
            ) from exc
        return raw
    raise TypeError(
        f"Query parameter '{key}' has unsupported type {type(value).__name__}; "
        "expected int, str or bytes"
    )


class ParameterBag(Mapping[str, ParamValue]):
    """Immutable set of extra query parameters for one request.

    Values are limited to integers, text and raw UTF-8 bytes; anything else is
    rejected here rather than when the request is built. ``access_token`` is
    reserved for the session token.
    """

    __slots__ = ("_items",)

    def __init__(
        self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> None:
        merged: Dict[str, Any] = dict(values or {})
        merged.update(kwargs)
        items: Dict[str, ParamValue] = {}
        for key, value in merged.items():
            if not isinstance(key, str):
                raise TypeError(f"Query parameter names must be str, got {key!r}")
            if key == ACCESS_TOKEN_PARAM:
                raise ValueError(
                    f"'{ACCESS_TOKEN_PARAM}' is set from the session token"
                )
            items[key] = _check_value(key, value)
        self._items = items

    @classmethod
    def coerce(
        cls, params: ParameterBag | Mapping[str, Any] | None
    ) -> ParameterBag:
        if isinstance(params, ParameterBag):
            return params
        return cls(params)

    def __getitem__(self, key: str) -> ParamValue:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ParameterBag({self._items!r})"


def render_param_value(value: ParamValue) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, int):
        return str(int(value))
    return value


def build_request_params(
    access_token: str,
    params: ParameterBag | Mapping[str, Any] | None = None,
) -> Dict[str, str]:
    """Return the query parameters for an authenticated request.

    ``access_token`` is always present, even when empty; callers must obtain a
    token before calling authenticated endpoints.
    """

    request_params: Dict[str, str] = {ACCESS_TOKEN_PARAM: access_token}
    for key, value in ParameterBag.coerce(params).items():
        request_params[key] = render_param_value(value)
    return request_params


def build_query(
    access_token: str,
    params: ParameterBag | Mapping[str, Any] | None = None,
) -> str:
    """Return the URL-encoded query string for an authenticated request."""

    return urlencode(build_request_params(access_token, params))
