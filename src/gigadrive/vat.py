"""
VAT API client.

Validates VAT IDs and returns current VAT rates for EU countries.
See https://docs.gigadrive.network/products/vat-api
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from .client_base import HttpClient, first_record
from .errors import APIClientError
from .schema import VATCountryRate, VATIDInformation


logger = logging.getLogger(__name__)


class VATClient:
    """Required API key permissions: ``vat:id:get`` / ``vat:rates:get``."""

    def __init__(self, http: Optional[HttpClient] = None, base_url: Optional[str] = None) -> None:
        self.http = http or HttpClient(base_url=base_url)
        logger.info(f"VATClient initialized for {self.http.base_url}")

    def get_id_information(self, vat_id: str, **options: Any) -> VATIDInformation:
        data = self.http.request("/vat/id", "GET", query={"id": vat_id}, **options)
        return VATIDInformation.model_validate(first_record(data, "VAT ID"))

    def get_id_informations(self, vat_ids: Sequence[str], **options: Any) -> List[VATIDInformation]:
        data = self.http.request("/vat/id", "GET", query={"id": list(vat_ids)}, **options)
        return [VATIDInformation.model_validate(d) for d in data]

    def get_rates(self, **options: Any) -> Dict[str, List[VATCountryRate]]:
        """All known rates, keyed by two-letter country code."""
        data = self.http.request("/vat/rates", "GET", **options)
        return {
            country: [VATCountryRate.model_validate(r) for r in rates]
            for country, rates in data.items()
        }

    def get_rates_for_country(self, country: str, **options: Any) -> List[VATCountryRate]:
        data = self.http.request("/vat/rates", "GET", query={"country": country}, **options)
        return [VATCountryRate.model_validate(r) for r in data]

    def get_current_rate_for_country(self, country: str, **options: Any) -> VATCountryRate:
        """
        Return the rate with the latest ``effective_from`` date.

        Dates are ISO formatted (YYYY-MM-DD), so string comparison orders
        them correctly, including the ``0000-01-01`` placeholder.
        On ties the earlier entry wins.
        """
        rates = self.get_rates_for_country(country, **options)
        if not rates:
            raise APIClientError(f"No VAT rates returned for country '{country}'")

        current = rates[0]
        for rate in rates[1:]:
            if rate.effective_from > current.effective_from:
                current = rate
        return current
