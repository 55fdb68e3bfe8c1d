"""
MCSkinHistory Data API client.

Minecraft player profiles, name history, skins, capes and server data.
See https://docs.gigadrive.network/products/mcskinhistory
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, List, Literal, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from .client_base import HttpClient
from .schema import (
    CapeTexture,
    Name,
    PlayerProfile,
    ServerPlayerHistoryEntry,
    ServerProfile,
    SkinFile,
    SkinTexture,
)


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
TimeValue = Union[datetime, int, float, str]


def to_iso_timestamp(value: Optional[TimeValue]) -> Optional[str]:
    """
    Convert a range boundary to an ISO-8601 string.

    Numbers are Unix epoch milliseconds; strings are passed through as-is.
    Naive datetimes are assumed to be UTC.
    """
    if value is None or isinstance(value, str):
        return value

    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)

    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MCSkinHistoryClient:
    """
    Every player/server lookup returns None when MCSkinHistory does not know
    the player or server.

    Required API key permissions follow the pattern
    ``mcskinhistory:<resource>:get`` (e.g. ``mcskinhistory:player-skins:get``).
    """

    def __init__(self, http: Optional[HttpClient] = None, base_url: Optional[str] = None) -> None:
        self.http = http or HttpClient(base_url=base_url)
        logger.info(f"MCSkinHistoryClient initialized for {self.http.base_url}")

    def _get_one(self, path: str, model: Type[ModelT], query: dict, **options: Any) -> Optional[ModelT]:
        data = self.http.request_nullable(path, "GET", query=query, **options)
        if data is None:
            return None
        return model.model_validate(data)

    def _get_many(self, path: str, model: Type[ModelT], query: dict, **options: Any) -> Optional[List[ModelT]]:
        data = self.http.request_nullable(path, "GET", query=query, **options)
        if data is None:
            return None
        return [model.model_validate(d) for d in data]

    # -------------------------------------------------
    # Players (query = UUID or username)
    # -------------------------------------------------
    def get_player_profile(self, query: str, **options: Any) -> Optional[PlayerProfile]:
        return self._get_one("/mcskinhistory/player", PlayerProfile, {"id": query}, **options)

    def get_player_names(self, query: str, **options: Any) -> Optional[List[Name]]:
        return self._get_many("/mcskinhistory/player/names", Name, {"id": query}, **options)

    def get_player_skins(self, query: str, **options: Any) -> Optional[List[SkinTexture]]:
        return self._get_many("/mcskinhistory/player/skins", SkinTexture, {"id": query}, **options)

    def get_player_mojang_capes(self, query: str, **options: Any) -> Optional[List[CapeTexture]]:
        return self._get_many(
            "/mcskinhistory/player/mojang-capes", CapeTexture, {"id": query}, **options
        )

    def get_player_optifine_capes(self, query: str, **options: Any) -> Optional[List[CapeTexture]]:
        return self._get_many(
            "/mcskinhistory/player/optifine-capes", CapeTexture, {"id": query}, **options
        )

    def get_player_custom_capes(self, query: str, **options: Any) -> Optional[List[CapeTexture]]:
        return self._get_many(
            "/mcskinhistory/player/custom-capes", CapeTexture, {"id": query}, **options
        )

    # -------------------------------------------------
    # Servers
    # -------------------------------------------------
    def get_server_profile(self, ip: str, **options: Any) -> Optional[ServerProfile]:
        return self._get_one("/mcskinhistory/server", ServerProfile, {"ip": ip}, **options)

    def get_server_player_history(
        self,
        ip: str,
        range_start: Optional[TimeValue] = None,
        range_end: Optional[TimeValue] = None,
        **options: Any,
    ) -> List[ServerPlayerHistoryEntry]:
        """
        Historical player counts of a server.

        Args:
            ip: Server IP address or domain
            range_start: Start of the range (server default: 24 hours ago)
            range_end: End of the range (server default: now)
        """
        data = self.http.request(
            "/mcskinhistory/server/player-history",
            "GET",
            query={
                "ip": ip,
                "rangeStart": to_iso_timestamp(range_start),
                "rangeEnd": to_iso_timestamp(range_end),
            },
            **options,
        )
        return [ServerPlayerHistoryEntry.model_validate(e) for e in data]

    # -------------------------------------------------
    # Skins
    # -------------------------------------------------
    def get_skin_list(
        self,
        sort: Literal["new", "popular"] = "new",
        limit: int = 25,
        **options: Any,
    ) -> List[SkinFile]:
        data = self.http.request(
            "/mcskinhistory/skins", "GET", query={"sort": sort, "limit": limit}, **options
        )
        return [SkinFile.model_validate(s) for s in data]
