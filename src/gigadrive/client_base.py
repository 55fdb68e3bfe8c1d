from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .config import ClientConfig
from .credentials import CredentialProvider, default_credential_provider
from .errors import APIClientConfigError, APIClientError, APIClientHTTPError
from .normalizer import raise_for_response
from .query import QueryParams, append_query


logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


class HttpClient:
    """
    Shared request core for every Gigadrive product client.

    Features:
    - Persistent session with default headers
    - Bearer token injection from a pluggable CredentialProvider
    - Query string encoding (repeated keys for list values)
    - Content-type aware decoding (JSON or raw text)
    - Normalized errors for non-success responses

    There are no retries: every call is exactly one HTTP request.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        credential_provider: Optional[CredentialProvider] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        default_headers: Optional[Dict[str, str]] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        config = config or ClientConfig.from_env()

        self.base_url = (base_url or config.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.timeout
        self.credential_provider = credential_provider or default_credential_provider()

        # A caller-supplied session is never modified; defaults go out per request.
        self.session = session or requests.Session()

        self.default_headers: Dict[str, str] = {
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        }

        if default_headers:
            self.default_headers.update(default_headers)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ---------------------------------------------------
    # Core request method
    # ---------------------------------------------------
    def request(
        self,
        path: str,
        method: str = "GET",
        *,
        query: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        api_key: Optional[str] = None,
        **transport_options: Any,
    ) -> Any:
        """
        Send a single request and return the decoded response.

        Returns parsed JSON when the response declares a JSON content type,
        the raw text otherwise, and None for 204 No Content.
        Raises APIClientHTTPError for non-success responses. Transport
        errors (connection failures, timeouts) propagate unchanged.

        Extra keyword arguments (timeout, verify, ...) go straight to
        ``requests.Session.request``.
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise APIClientConfigError(f"Unsupported HTTP method '{method}'")

        if query is not None:
            path = append_query(path, query)

        url = f"{self.base_url}{path}"

        request_headers: Dict[str, str] = dict(self.default_headers)
        request_headers.update(headers or {})

        if api_key is None:
            api_key = self.credential_provider.resolve()

        if api_key:
            # Never log the key; just attach it to headers.
            request_headers["Authorization"] = f"Bearer {api_key}"

        if self.timeout is not None:
            transport_options.setdefault("timeout", self.timeout)

        logger.debug(f"{method} {url} (authenticated={bool(api_key)})")

        try:
            response = self.session.request(
                method,
                url,
                headers=request_headers,
                data=body,
                **transport_options,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise

        logger.debug(f"{method} {url} -> {getattr(response, 'status_code', '?')}")

        if not response.ok:
            raise_for_response(response)

        return self._decode(response, method, url)

    def request_nullable(self, path: str, method: str = "GET", **options: Any) -> Any:
        """
        Like ``request``, but returns None when the resource does not exist.

        Only not-found failures are converted; every other error propagates.
        """
        try:
            return self.request(path, method, **options)
        except APIClientHTTPError as e:
            if e.is_not_found:
                logger.debug(f"{method} {path} not found, returning None")
                return None
            raise

    @staticmethod
    def _decode(response: Any, method: str, url: str) -> Any:
        if method == "HEAD" or getattr(response, "status_code", None) == 204:
            return None

        content_type = response.headers.get("Content-Type") or ""
        if "json" not in content_type.lower():
            return response.text

        if not response.text:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise APIClientError(f"Invalid JSON returned from {url}") from e

    # ---------------------------------------------------
    # Verb helpers
    # ---------------------------------------------------
    def get(self, path: str, **options: Any) -> Any:
        return self.request(path, "GET", **options)

    def post(self, path: str, body: Any = None, **options: Any) -> Any:
        return self._send_json(path, "POST", body, **options)

    def put(self, path: str, body: Any = None, **options: Any) -> Any:
        return self._send_json(path, "PUT", body, **options)

    def patch(self, path: str, body: Any = None, **options: Any) -> Any:
        return self._send_json(path, "PATCH", body, **options)

    def delete(self, path: str, **options: Any) -> Any:
        options["headers"] = _json_headers(options.get("headers"))
        return self.request(path, "DELETE", **options)

    def _send_json(self, path: str, method: str, body: Any, **options: Any) -> Any:
        options["headers"] = _json_headers(options.get("headers"))
        data = json.dumps(body) if body is not None else None
        return self.request(path, method, body=data, **options)


def _json_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    merged = {"Content-Type": "application/json"}
    if headers:
        merged.update(headers)
    return merged


def first_record(data: Any, what: str) -> Any:
    """
    Collapse a list response to its first element.

    Lookup endpoints answer with a list even when a single value was asked for.
    """
    if isinstance(data, list) and data:
        return data[0]
    raise APIClientError(f"Unexpected {what} response shape; expected a non-empty list.")
