"""
FastCache client.

FastCache is a key-value store hosted at the edge for low latency.
See https://docs.gigadrive.network/products/fastcache
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .client_base import HttpClient
from .schema import FastCacheItem


logger = logging.getLogger(__name__)


class FastCacheClient:
    """
    Read, write and delete FastCache items.

    Required API key permissions: ``fastcache:read``, ``fastcache:write``
    and ``fastcache:delete`` respectively.
    """

    def __init__(self, http: Optional[HttpClient] = None, base_url: Optional[str] = None) -> None:
        self.http = http or HttpClient(base_url=base_url)
        logger.info(f"FastCacheClient initialized for {self.http.base_url}")

    def get(self, key: str, **options: Any) -> Optional[FastCacheItem]:
        """Return the item stored under ``key``, or None if it does not exist."""
        data = self.http.request_nullable("/fastcache", "GET", query={"key": key}, **options)
        if data is None:
            return None
        return FastCacheItem.model_validate(data)

    def set(
        self,
        key: str,
        value: str,
        expiration: Optional[int] = None,
        **options: Any,
    ) -> FastCacheItem:
        """
        Save ``value`` under ``key``.

        Args:
            key: Item key
            value: Item value
            expiration: Unix timestamp when the item expires (None = never)
        """
        data = self.http.post(
            "/fastcache",
            {"key": key, "value": value, "expiration": expiration},
            **options,
        )
        return FastCacheItem.model_validate(data)

    def delete(self, key: str, **options: Any) -> None:
        self.http.delete("/fastcache", query={"key": key}, **options)


class FastCacheDocumentClient:
    """
    FastCache client that stores JSON documents instead of plain strings.

    Values are serialized with ``json.dumps`` on write and parsed with
    ``json.loads`` on read.
    """

    def __init__(self, fastcache: Optional[FastCacheClient] = None) -> None:
        self.fastcache = fastcache or FastCacheClient()

    def get(self, key: str, **options: Any) -> Any:
        item = self.fastcache.get(key, **options)
        if item is None:
            return None
        return json.loads(item.value)

    def set(self, key: str, value: Any, expiration: Optional[int] = None, **options: Any) -> None:
        self.fastcache.set(key, json.dumps(value), expiration=expiration, **options)

    def delete(self, key: str, **options: Any) -> None:
        self.fastcache.delete(key, **options)
