from __future__ import annotations

from typing import Any, Optional


class APIClientError(RuntimeError):
    """Base error for Gigadrive API client failures."""


class APIClientConfigError(APIClientError):
    """Raised when client configuration is missing or invalid."""


class APIClientHTTPError(APIClientError):
    """
    Raised for non-success HTTP responses.

    The message is already human readable (see ``normalizer``); the original
    response is kept for callers that need more than the message.
    """

    def __init__(self, message: str, response: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)

    @property
    def status_text(self) -> Optional[str]:
        return getattr(self.response, "reason", None)

    @property
    def is_not_found(self) -> bool:
        """
        True for a 404, or for a response that exposes no status code
        but reports itself as not ok.
        """
        if self.response is None:
            return False
        status_code = self.status_code
        if status_code is not None:
            return status_code == 404
        return getattr(self.response, "ok", True) is False
