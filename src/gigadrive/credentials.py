"""
Credential providers for the Gigadrive API.

A provider exposes a single ``resolve()`` returning the bearer token to send,
or ``None`` when the request should go out unauthenticated. Providers are
read-only and are consulted once per request; nothing is cached.

The default chain mirrors where a Gigadrive API key is usually kept:

1. a persistent key-value store under ``gigadriveApiKey`` (if one is given)
2. the ``GIGADRIVE_API_KEY`` environment variable
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence


logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "GIGADRIVE_API_KEY"
API_KEY_STORE_KEY = "gigadriveApiKey"


class CredentialProvider(ABC):
    """Base class for everything that can hand out an API key."""

    @abstractmethod
    def resolve(self) -> Optional[str]:
        """Return the API key, or None if this source has none."""


class StaticCredentialProvider(CredentialProvider):
    """Always returns the key it was constructed with."""

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    def resolve(self) -> Optional[str]:
        return self._api_key or None

    def __repr__(self) -> str:
        # Never print the key itself.
        return f"{self.__class__.__name__}(api_key=***)"


class EnvironmentCredentialProvider(CredentialProvider):
    """Reads the key from an environment variable on every call."""

    def __init__(self, env_var: str = API_KEY_ENV_VAR) -> None:
        self.env_var = env_var

    def resolve(self) -> Optional[str]:
        return os.getenv(self.env_var) or None


class StoreCredentialProvider(CredentialProvider):
    """
    Reads the key from a persistent key-value store.

    Any mapping works, e.g. a dict loaded from a settings file or a
    ``shelve`` database:

        with shelve.open("settings") as db:
            provider = StoreCredentialProvider(db)
    """

    def __init__(self, store: Mapping[str, str], key: str = API_KEY_STORE_KEY) -> None:
        self.store = store
        self.key = key

    def resolve(self) -> Optional[str]:
        return self.store.get(self.key) or None


class NoCredentialProvider(CredentialProvider):
    """Never authenticates."""

    def resolve(self) -> Optional[str]:
        return None


class ChainedCredentialProvider(CredentialProvider):
    """Returns the first key any of its providers resolves."""

    def __init__(self, providers: Sequence[CredentialProvider]) -> None:
        self.providers = list(providers)

    def resolve(self) -> Optional[str]:
        for provider in self.providers:
            api_key = provider.resolve()
            if api_key:
                logger.debug(f"API key resolved from {provider.__class__.__name__}")
                return api_key
        return None


def default_credential_provider(
    store: Optional[Mapping[str, str]] = None,
) -> CredentialProvider:
    """Store lookup (when a store is given), then the environment."""
    providers: list = []
    if store is not None:
        providers.append(StoreCredentialProvider(store))
    providers.append(EnvironmentCredentialProvider())
    return ChainedCredentialProvider(providers)
