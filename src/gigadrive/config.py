"""
Client configuration.

Read from the environment by ``ClientConfig.from_env()``:

    GIGADRIVE_BASE_URL     - API base URL (default: https://api.gigadrive.network)
    GIGADRIVE_TIMEOUT_SEC  - Request timeout handed to the transport (default: none)

The API key is deliberately not part of the config; it is resolved per
request by a ``CredentialProvider``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import APIClientConfigError


DEFAULT_BASE_URL = "https://api.gigadrive.network"
DEFAULT_USER_AGENT = "gigadrive-python/0.1.0"

BASE_URL_ENV_VAR = "GIGADRIVE_BASE_URL"
TIMEOUT_ENV_VAR = "GIGADRIVE_TIMEOUT_SEC"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        base_url = os.getenv(BASE_URL_ENV_VAR, "").strip() or DEFAULT_BASE_URL

        timeout: Optional[float] = None
        timeout_raw = os.getenv(TIMEOUT_ENV_VAR, "").strip()
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError as e:
                raise APIClientConfigError(
                    f"{TIMEOUT_ENV_VAR} must be a number, got '{timeout_raw}'."
                ) from e
            if timeout <= 0:
                raise APIClientConfigError(
                    f"{TIMEOUT_ENV_VAR} must be positive, got '{timeout_raw}'."
                )

        return cls(base_url=base_url, timeout=timeout)
