"""Shared HTTP response decoding for Nike+ API interactions.

The service reports failures in two different JSON shapes depending on the
endpoint, so every body is classified before any schema-specific decoding:

1. an error envelope ``{"result", "errorCode", "errorMessage"}``;
2. a bare ``{"error": "<message>"}`` object;
3. otherwise, the payload itself.

The first matching kind wins. Both error kinds surface as ``NikePlusAPIError``.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, NoReturn, Tuple, Type, TypeVar, overload

import requests

from ..errors import NikePlusAPIError, ResponseDecodeError
from ..models import ErrorEnvelope

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_BODY_SNIPPET_LIMIT = 300

__all__ = [
    "BodyKind",
    "classify_body",
    "decode_body",
    "decode_response",
]


class BodyKind(str, Enum):
    ERROR_ENVELOPE = "error_envelope"
    GENERIC_ERROR = "generic_error"
    PAYLOAD = "payload"


def _snippet(text: str) -> str:
    trimmed = text.strip()
    limit = _BODY_SNIPPET_LIMIT
    return (trimmed[: limit - 3] + "...") if len(trimmed) > limit else trimmed


def classify_body(data: Any) -> BodyKind:
    """Tag a parsed JSON body with the kind of response it represents."""

    if isinstance(data, dict):
        if "errorCode" in data:
            return BodyKind.ERROR_ENVELOPE
        if "error" in data:
            return BodyKind.GENERIC_ERROR
    return BodyKind.PAYLOAD


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        LOGGER.warning("Response body is not valid JSON: %s", _snippet(text))
        raise ResponseDecodeError(
            f"Response body is not valid JSON: {exc}", body=text
        ) from exc


def _raise_for_error_envelope(data: Any, text: str) -> NoReturn:
    try:
        envelope = ErrorEnvelope.from_dict(data)
    except ValueError as exc:
        raise ResponseDecodeError(
            f"Malformed error envelope: {exc}", body=text
        ) from exc
    LOGGER.info(
        "Nike+ reported error code=%s result=%s: %s",
        envelope.error_code,
        envelope.result,
        envelope.error_message,
    )
    raise NikePlusAPIError(
        envelope.error_message,
        error_code=envelope.error_code,
        result=envelope.result,
    )


def _raise_for_generic_error(data: dict, text: str) -> NoReturn:
    message = data.get("error")
    if not isinstance(message, str):
        raise ResponseDecodeError(f"Unknown error response: {text}", body=text)
    LOGGER.info("Nike+ reported error: %s", message)
    raise NikePlusAPIError(message)


def _build(shape: Callable[..., Any], data: Any, text: str) -> Any:
    if shape is dict:
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"Expected a JSON object, got {type(data).__name__}", body=text
            )
        return data
    from_dict = getattr(shape, "from_dict", None)
    if from_dict is None:
        raise TypeError(f"Unsupported destination shape: {shape!r}")
    try:
        return from_dict(data)
    except (ValueError, TypeError) as exc:
        LOGGER.warning(
            "Response does not match %s: %s", getattr(shape, "__name__", shape), exc
        )
        raise ResponseDecodeError(
            f"Response does not match {getattr(shape, '__name__', shape)}: {exc}",
            body=text,
        ) from exc


@overload
def decode_body(text: str, shape: Type[dict]) -> dict: ...


@overload
def decode_body(text: str, shape: Type[T]) -> T: ...


def decode_body(text: str, shape: Any) -> Any:
    """Decode a raw JSON body into ``shape`` or raise the normalized error."""

    data = _parse_json(text)
    kind = classify_body(data)
    if kind is BodyKind.ERROR_ENVELOPE:
        _raise_for_error_envelope(data, text)
    if kind is BodyKind.GENERIC_ERROR:
        _raise_for_generic_error(data, text)
    return _build(shape, data, text)


def _read_body(response: requests.Response) -> Tuple[str, int]:
    try:
        return response.text, response.status_code
    finally:
        response.close()


def decode_response(response: requests.Response, shape: Any) -> Any:
    """Read and close ``response``, then decode its body into ``shape``.

    Raises:
        NikePlusAPIError: The body is one of the remote error shapes.
        ResponseDecodeError: The body is not JSON or does not fit ``shape``.
    """

    text, status = _read_body(response)
    LOGGER.debug(
        "Decoding response url=%s status=%s bytes=%s",
        _safe_url(response),
        status,
        len(text),
    )
    return decode_body(text, shape)


def _safe_url(response: requests.Response) -> str:
    url = getattr(response, "url", "") or ""
    head, sep, _ = url.partition("?")
    return f"{head}?..." if sep else head
