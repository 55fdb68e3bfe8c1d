from __future__ import annotations

import logging
from typing import Any, Optional

from .client_base import HttpClient
from .schema import DomainInformation


logger = logging.getLogger(__name__)


class WhoisClient:
    """
    WHOIS API client: owner, registrar, nameservers and more for a domain.

    Required API key permission: ``whois:domain:get``
    See https://docs.gigadrive.network/products/whois-api
    """

    def __init__(self, http: Optional[HttpClient] = None, base_url: Optional[str] = None) -> None:
        self.http = http or HttpClient(base_url=base_url)
        logger.info(f"WhoisClient initialized for {self.http.base_url}")

    def get_domain_information(self, domain: str, **options: Any) -> DomainInformation:
        data = self.http.request("/whois/domain", "GET", query={"domain": domain}, **options)
        return DomainInformation.model_validate(data)

    def get_raw_domain_information(self, domain: str, **options: Any) -> str:
        """Return the WHOIS record exactly as the registry served it."""
        return self.http.request(
            "/whois/domain", "GET", query={"domain": domain, "raw": True}, **options
        )
