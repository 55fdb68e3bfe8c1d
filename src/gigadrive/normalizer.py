from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, NoReturn

from .errors import APIClientHTTPError


logger = logging.getLogger(__name__)


class ErrorBodyKind(str, Enum):
    STRUCTURED = "structured"  # {"errors": [{"message": ...}, ...]}
    UNSTRUCTURED = "unstructured"  # valid JSON, any other shape
    UNPARSEABLE = "unparseable"  # not JSON at all


@dataclass(frozen=True)
class ErrorBody:
    kind: ErrorBodyKind
    messages: List[str] = field(default_factory=list)


def _error_message(error: Any) -> str:
    # Missing or null messages render as empty strings.
    if isinstance(error, dict):
        message = error.get("message")
        return "" if message is None else str(message)
    return ""


def parse_error_body(text: str) -> ErrorBody:
    """
    Classify a failed response body.

    Only a JSON object carrying a non-empty ``errors`` list counts as
    structured. Invalid JSON is reported as UNPARSEABLE rather than raised.
    """
    try:
        payload = json.loads(text)
    except ValueError:
        return ErrorBody(kind=ErrorBodyKind.UNPARSEABLE)

    if isinstance(payload, dict):
        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            return ErrorBody(
                kind=ErrorBodyKind.STRUCTURED,
                messages=[_error_message(e) for e in errors],
            )

    return ErrorBody(kind=ErrorBodyKind.UNSTRUCTURED)


def build_error_message(status_code: Any, status_text: Any, body: ErrorBody) -> str:
    if body.kind is ErrorBodyKind.STRUCTURED:
        joined = "', '".join(body.messages)
        return f"Encountered errors: '{joined}'"

    return (
        f"Request failed with status code {status_code} "
        f"and response text '{status_text}'"
    )


def raise_for_response(response: Any) -> NoReturn:
    """
    Turn a failed response into an APIClientHTTPError and raise it.

    Never returns.
    """
    body = parse_error_body(response.text or "")
    message = build_error_message(
        getattr(response, "status_code", None),
        getattr(response, "reason", None),
        body,
    )
    logger.debug(f"HTTP {getattr(response, 'status_code', '?')} ({body.kind.value}): {message}")
    raise APIClientHTTPError(message, response=response)
