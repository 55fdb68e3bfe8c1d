"""
Gigadrive - Python SDK for the Gigadrive Network APIs

Clients for FastCache, Web Reputation, WHOIS, VAT and MCSkinHistory.
All of them share one request core (``HttpClient``) that adds the API key,
encodes query strings, decodes responses and turns failed responses into
readable errors.

Usage:
------
    from gigadrive import FastCacheClient, WebReputationClient

    cache = FastCacheClient()
    cache.set("greeting", "hello", expiration=1893456000)
    item = cache.get("greeting")          # None if the key does not exist

    reputation = WebReputationClient().get_domain_reputation("example.com")

    # Share one HttpClient (and its session) between products
    http = HttpClient(credential_provider=StaticCredentialProvider("my-key"))
    vat = VATClient(http=http)

Configuration:
--------------
Set these environment variables (optional):

    GIGADRIVE_API_KEY      - API key sent as a bearer token
    GIGADRIVE_BASE_URL     - Override the API base URL
    GIGADRIVE_TIMEOUT_SEC  - Request timeout (default: none)

Every method also accepts ``api_key=...`` to override the key per call.
"""

# -----------------------------------------------------------------------------
# Request core
# -----------------------------------------------------------------------------
from .client_base import HttpClient
from .config import ClientConfig
from .errors import APIClientConfigError, APIClientError, APIClientHTTPError
from .query import build_query_string

# -----------------------------------------------------------------------------
# Credentials
# -----------------------------------------------------------------------------
from .credentials import (
    ChainedCredentialProvider,
    CredentialProvider,
    EnvironmentCredentialProvider,
    NoCredentialProvider,
    StaticCredentialProvider,
    StoreCredentialProvider,
    default_credential_provider,
)

# -----------------------------------------------------------------------------
# Product clients
# -----------------------------------------------------------------------------
from .fastcache import FastCacheClient, FastCacheDocumentClient
from .mcskinhistory import MCSkinHistoryClient
from .vat import VATClient
from .web_reputation import WebReputationClient
from .whois import WhoisClient


__all__ = [
    # Request core
    "HttpClient",
    "ClientConfig",
    "APIClientError",
    "APIClientConfigError",
    "APIClientHTTPError",
    "build_query_string",
    # Credentials
    "CredentialProvider",
    "StaticCredentialProvider",
    "EnvironmentCredentialProvider",
    "StoreCredentialProvider",
    "NoCredentialProvider",
    "ChainedCredentialProvider",
    "default_credential_provider",
    # Product clients
    "FastCacheClient",
    "FastCacheDocumentClient",
    "WebReputationClient",
    "WhoisClient",
    "VATClient",
    "MCSkinHistoryClient",
]
