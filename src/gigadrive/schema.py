"""
Response models for the Gigadrive APIs.

Attributes are snake_case; the camelCase wire names are accepted as aliases
(``FastCacheItem.model_validate({"byteSize": 6})``). Unknown fields are kept
rather than rejected so new API fields never break parsing.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class GigadriveModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


# ---------------------------------------------------------------------------
# FastCache
# ---------------------------------------------------------------------------
class FastCacheItem(GigadriveModel):
    """An item saved to FastCache."""

    key: str = Field(..., description="Main identifier of the item")
    value: str = Field(..., description="Stored value")
    expiration: Optional[int] = Field(
        None, description="Unix timestamp when the item expires (None = never)"
    )
    byte_size: int = Field(0, description="Size of the item in bytes")


# ---------------------------------------------------------------------------
# Web Reputation
# ---------------------------------------------------------------------------
DomainStatus = Literal[
    "good",
    "adult_content",
    "phishing",
    "spam",
    "disposable_email",
    "relay_email",
    "piracy",
    "malware",
]


class DomainReputation(GigadriveModel):
    """
    Reputation of a single domain.

    ``status`` is ``good`` for domains that are not in the database; every
    other status marks a known category of abuse (phishing, spam, malware,
    disposable or relay e-mail, piracy, adult content).
    """

    domain: str
    status: Union[DomainStatus, str] = Field(..., description="Domain status")
    withholding_recommended: bool = Field(
        False, description="Whether content from this domain should be withheld"
    )
    is_mx_record_available: bool = Field(
        False, description="Whether the domain has an MX record"
    )


class EmailValidator(GigadriveModel):
    valid: bool


class EmailValidators(GigadriveModel):
    regex: EmailValidator
    typo: EmailValidator
    mx: EmailValidator


class EmailValidations(GigadriveModel):
    valid: bool
    validators: EmailValidators


class EmailReputation(GigadriveModel):
    email: str
    role: bool = Field(
        False, description="Role address such as noreply@, support@ or info@"
    )
    domain: DomainReputation
    validations: EmailValidations


# ---------------------------------------------------------------------------
# WHOIS
# ---------------------------------------------------------------------------
class DomainRecord(GigadriveModel):
    name: str
    id: Optional[str] = None
    status: Optional[List[str]] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    expires: Optional[str] = None


class DomainRegistrar(GigadriveModel):
    name: Optional[str] = None
    url: Optional[str] = None
    whois_server: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    iana_id: Optional[int] = None


class DomainWhoisAddress(GigadriveModel):
    name: Optional[str] = None
    organization: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    phone_ext: Optional[str] = None
    fax: Optional[str] = None
    fax_ext: Optional[str] = None
    email: Optional[str] = None


class DomainInformation(GigadriveModel):
    """Structured WHOIS record of a domain."""

    domain: DomainRecord
    registrar: DomainRegistrar = Field(default_factory=DomainRegistrar)
    registrant: DomainWhoisAddress = Field(default_factory=DomainWhoisAddress)
    admin: DomainWhoisAddress = Field(default_factory=DomainWhoisAddress)
    tech: DomainWhoisAddress = Field(default_factory=DomainWhoisAddress)
    billing: DomainWhoisAddress = Field(default_factory=DomainWhoisAddress)
    nameservers: Optional[List[str]] = None
    dnssec: Optional[str] = None


# ---------------------------------------------------------------------------
# VAT
# ---------------------------------------------------------------------------
class VATException(GigadriveModel):
    """
    An area with its own VAT rules. The exceptional rates are kept as extra
    fields, e.g. ``exception.standard``.
    """

    name: str
    postcode: str


class VATCountryRate(GigadriveModel):
    effective_from: str = Field(
        ..., alias="effective_from", description="Date the rates took effect"
    )
    rates: Dict[str, float] = Field(
        default_factory=dict, description="VAT rate per type of goods"
    )
    exceptions: List[VATException] = Field(default_factory=list)


class VATIDInformation(GigadriveModel):
    """Validation result for a VAT ID."""

    id: str = Field(..., description="Full VAT ID including country code")
    valid: bool
    country_code: str
    vat_number: str
    request_date: str
    # "---" when the registry does not publish company details
    name: str = "---"
    address: str = "---"
    current_rate: Dict[str, float] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# MCSkinHistory
# ---------------------------------------------------------------------------
class PlayerProfile(GigadriveModel):
    id: str
    id_formatted: str
    username: str
    detection_date: str
    creation_date: Optional[str] = None


class Name(GigadriveModel):
    name: str
    changed_to_at: Optional[int] = None


SkinFileType = Literal["SKIN", "CAPE_MOJANG", "CAPE_OPTIFINE", "CAPE_LABYMOD"]


class BaseSkinFile(GigadriveModel):
    id: int
    static_identifier: Optional[str] = None
    hash: str
    url: str
    first_user: Optional[str] = None
    users: int = 0
    type: Union[SkinFileType, str]
    time_added: str


class SkinImages(GigadriveModel):
    face: str
    full: str


class SkinFile(BaseSkinFile):
    model: Union[Literal["STEVE", "ALEX"], str]
    images: SkinImages


class CapeImages(GigadriveModel):
    cape: str


class CapeFile(BaseSkinFile):
    images: CapeImages


class Texture(GigadriveModel):
    id: int
    time_added: str


class SkinTexture(Texture):
    file: SkinFile


class CapeTexture(Texture):
    file: CapeFile


class ServerCategory(str, Enum):
    ADVENTURE = "ADVENTURE"
    ANARCHY = "ANARCHY"
    ANNIHILATION = "ANNIHILATION"
    BEDWARS = "BEDWARS"
    BLOCKS_VS_ZOMBIES = "BLOCKS_VS_ZOMBIES"
    BUKKIT = "BUKKIT"
    CAPTURE_THE_FLAG = "CAPTURE_THE_FLAG"
    COPS_AND_ROBBERS = "COPS_AND_ROBBERS"
    CREATIVE = "CREATIVE"
    DUNGEONS = "DUNGEONS"
    ECONOMY = "ECONOMY"
    EGGWARS = "EGGWARS"
    FACTIONS = "FACTIONS"
    FEED_THE_BEAST = "FEED_THE_BEAST"
    GTA = "GTA"
    HARDCORE = "HARDCORE"
    HEXXIT = "HEXXIT"
    KITPVP = "KITPVP"
    LAND_CLAIM = "LAND_CLAIM"
    LUCKYBLOCK = "LUCKYBLOCK"
    MCMMO = "MCMMO"
    MAGIC_WORLD = "MAGIC_WORLD"
    MANHUNT = "MANHUNT"
    MINDCRACK = "MINDCRACK"
    MINEZ = "MINEZ"
    MINIGAMES = "MINIGAMES"
    NO_WHITELIST = "NO_WHITELIST"
    ONEBLOCK = "ONEBLOCK"
    PARKOUR = "PARKOUR"
    PETS = "PETS"
    PIXELMON = "PIXELMON"
    PRISON = "PRISON"
    PVE = "PVE"
    PVP = "PVP"
    ROLEPLAY = "ROLEPLAY"
    SKYBLOCK = "SKYBLOCK"
    SKYWARS = "SKYWARS"
    SPIGOT = "SPIGOT"
    SPOUTCRAFT = "SPOUTCRAFT"
    SURVIVAL = "SURVIVAL"
    SURVIVAL_GAMES = "SURVIVAL_GAMES"
    TEAM_PVP = "TEAM_PVP"
    TNT_RUN = "TNT_RUN"
    TEKKIT = "TEKKIT"
    TOWNY = "TOWNY"
    VANILLA = "VANILLA"
    VOTING_REWARDS = "VOTING_REWARDS"
    WHITELIST = "WHITELIST"


class ServerPlayers(GigadriveModel):
    online: int = 0
    max: int = 0
    peak: int = 0


class ServerImages(GigadriveModel):
    icon: Optional[str] = None
    logo: Optional[str] = None
    background: Optional[str] = None


class ServerSocial(GigadriveModel):
    website: Optional[str] = None
    mcskinhistory: Optional[str] = None
    twitter: Optional[str] = None
    discord_invite: Optional[str] = None
    discord_id: Optional[str] = None
    teamspeak: Optional[str] = None
    youtube: Optional[str] = None
    tiktok: Optional[str] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    shop: Optional[str] = None
    support: Optional[str] = None
    youtube_video: Optional[str] = None


class ServerMotd(GigadriveModel):
    raw: Optional[str] = None
    html: Optional[str] = None


class ServerBlockData(GigadriveModel):
    blocked: bool = False
    last_blocked_time: Optional[str] = None


class ServerProfile(GigadriveModel):
    ip: str
    name: Optional[str] = None
    votes: int = 0
    version: Optional[str] = None
    uptime: float = 0
    last_ping: Optional[str] = None
    country: Optional[str] = None
    players: ServerPlayers = Field(default_factory=ServerPlayers)
    images: ServerImages = Field(default_factory=ServerImages)
    social: ServerSocial = Field(default_factory=ServerSocial)
    motd: ServerMotd = Field(default_factory=ServerMotd)
    block_data: ServerBlockData = Field(default_factory=ServerBlockData)
    alternative_addresses: List[str] = Field(default_factory=list)
    categories: List[Union[ServerCategory, str]] = Field(default_factory=list)

    @field_validator("categories", mode="after")
    @classmethod
    def validate_categories(cls, v):
        # Categories added upstream after this release stay plain strings.
        known = ServerCategory._value2member_map_
        return [known.get(c, c) if isinstance(c, str) else c for c in v]


class ServerPlayerHistoryEntry(GigadriveModel):
    time: str
    players: int
