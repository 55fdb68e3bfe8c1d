"""
Web Reputation API client.

Checks the reputation of domains and e-mail addresses to protect users from
phishing, spam, malware and similar abuse.
See https://docs.gigadrive.network/products/web-reputation
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .client_base import HttpClient, first_record
from .schema import DomainReputation, EmailReputation


logger = logging.getLogger(__name__)


class WebReputationClient:
    """Required API key permissions: ``web-reputation:domain:get`` / ``web-reputation:email:get``."""

    def __init__(self, http: Optional[HttpClient] = None, base_url: Optional[str] = None) -> None:
        self.http = http or HttpClient(base_url=base_url)
        logger.info(f"WebReputationClient initialized for {self.http.base_url}")

    def get_domain_reputation(self, domain: str, **options: Any) -> DomainReputation:
        data = self.http.request("/web-reputation/domain", "GET", query={"domain": domain}, **options)
        return DomainReputation.model_validate(first_record(data, "domain reputation"))

    def get_domain_reputations(self, domains: Sequence[str], **options: Any) -> List[DomainReputation]:
        """Look up several domains with a single request."""
        data = self.http.request(
            "/web-reputation/domain", "GET", query={"domain": list(domains)}, **options
        )
        return [DomainReputation.model_validate(d) for d in data]

    def get_email_reputation(self, email: str, **options: Any) -> EmailReputation:
        data = self.http.request("/web-reputation/email", "GET", query={"email": email}, **options)
        return EmailReputation.model_validate(first_record(data, "email reputation"))

    def get_email_reputations(self, emails: Sequence[str], **options: Any) -> List[EmailReputation]:
        """Look up several e-mail addresses with a single request."""
        data = self.http.request(
            "/web-reputation/email", "GET", query={"email": list(emails)}, **options
        )
        return [EmailReputation.model_validate(e) for e in data]
