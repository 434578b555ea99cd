"""
Cloudflare DNS Provider Implementation

Uses Cloudflare API v4 for DNS record management.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import requests

from .base import (
    DNSProvider,
    DNSProviderConfig,
    DNSProviderConnectionError,
    DNSProviderError,
    DNSRecord,
    RecordType,
)

logger = logging.getLogger(__name__)

CLOUDFLARE_API_BASE = "https://api.cloudflare.com/client/v4"


@dataclass
class CloudflareConfig(DNSProviderConfig):
    """Cloudflare-specific configuration"""

    # API Token with Zone:DNS:Edit permission
    api_token: str = ""

    # Enable Cloudflare proxy (orange cloud) for A/AAAA/CNAME records
    proxied: bool = False

    # API base URL
    api_base: str = CLOUDFLARE_API_BASE

    @classmethod
    def from_env(cls) -> "CloudflareConfig":
        """Create config from environment variables"""
        return cls(
            api_token=os.environ.get("CLOUDFLARE_API_TOKEN", ""),
            proxied=os.environ.get("CLOUDFLARE_PROXIED", "false").lower() == "true",
            api_base=os.environ.get("CLOUDFLARE_API_BASE", "") or CLOUDFLARE_API_BASE,
            default_ttl=int(os.environ.get("DNS_TTL", "1")),
            timeout=int(os.environ.get("CLOUDFLARE_TIMEOUT", "30")),
        )


class CloudflareAPIError(DNSProviderError):
    """Cloudflare API error"""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


class CloudflareConnectionError(CloudflareAPIError, DNSProviderConnectionError):
    """Cloudflare API could not be reached"""


class CloudflareProvider(DNSProvider):
    """
    Cloudflare DNS provider implementation.

    Features:
    - Paginated record listing with type/name filters
    - Support for proxied records (A/AAAA/CNAME)
    - API token verification
    """

    def __init__(self, config: CloudflareConfig):
        super().__init__(config)
        self.cf_config = config
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create configured requests session"""
        session = requests.Session()
        session.headers.update(
            {
                "Authorization": f"Bearer {self.cf_config.api_token}",
                "Content-Type": "application/json",
            }
        )
        return session

    def _api_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        json_data: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Make API request to Cloudflare"""
        url = f"{self.cf_config.api_base}{endpoint}"

        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                timeout=self.cf_config.timeout,
            )
        except requests.RequestException as e:
            self.logger.error(f"Cloudflare API request failed: {e}")
            raise CloudflareConnectionError(f"Request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise CloudflareAPIError(
                f"Invalid response from {method} {endpoint}: "
                f"HTTP {response.status_code}"
            ) from e

        if not data.get("success", False):
            errors = data.get("errors", [])
            error_msg = "; ".join(e.get("message", str(e)) for e in errors)
            error_msg = error_msg or f"HTTP {response.status_code}"
            self.logger.error(f"Cloudflare API error: {error_msg}")
            raise CloudflareAPIError(error_msg, errors)

        return data

    def _record_from_api(self, item: dict[str, Any]) -> DNSRecord:
        return DNSRecord(
            name=item["name"],
            type=RecordType(item["type"]),
            content=item["content"],
            ttl=item.get("ttl", 1),
            proxied=item.get("proxied", False),
            record_id=item["id"],
        )

    def _record_payload(self, record: DNSRecord) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": record.type.value,
            "name": record.name,
            "content": record.content,
            "ttl": record.ttl if record.ttl > 1 else 1,  # 1 = auto
        }

        # Proxied only for A/AAAA/CNAME
        if record.type.proxiable:
            data["proxied"] = record.proxied

        return data

    def list_records(
        self,
        zone_id: str,
        record_type: Optional[RecordType] = None,
        name: Optional[str] = None,
    ) -> list[DNSRecord]:
        """List DNS records in a zone with optional filtering"""
        params: dict[str, Any] = {"per_page": 100}

        if record_type:
            params["type"] = record_type.value
        if name:
            params["name"] = name

        records = []
        page = 1

        while True:
            params["page"] = page

            data = self._api_request(
                "GET", f"/zones/{zone_id}/dns_records", params=params
            )

            for item in data.get("result", []):
                records.append(self._record_from_api(item))

            # Check pagination
            result_info = data.get("result_info") or {}
            total_pages = result_info.get("total_pages", 1)
            if page >= total_pages:
                break
            page += 1

        self.logger.debug(f"Listed {len(records)} record(s) in zone {zone_id}")
        return records

    def create_record(self, zone_id: str, record: DNSRecord) -> DNSRecord:
        """Create a new DNS record"""
        try:
            result = self._api_request(
                "POST",
                f"/zones/{zone_id}/dns_records",
                json_data=self._record_payload(record),
            )
        except CloudflareAPIError as e:
            self.logger.error(
                f"✗ Failed to create {record.type.value} {record.name}: {e}"
            )
            raise

        created = self._record_from_api(result["result"])
        self.logger.info(f"✓ Created {created.type.value} {created.name}")
        return created

    def update_record(self, zone_id: str, record: DNSRecord) -> DNSRecord:
        """
        Update an existing DNS record.

        Sends a PATCH carrying only type, name and content, so ttl, proxy
        status, comment and tags are kept as they are on Cloudflare.
        """
        if not record.record_id:
            raise CloudflareAPIError(
                f"Cannot update record without record_id: {record.name}"
            )

        try:
            result = self._api_request(
                "PATCH",
                f"/zones/{zone_id}/dns_records/{record.record_id}",
                json_data={
                    "type": record.type.value,
                    "name": record.name,
                    "content": record.content,
                },
            )
        except CloudflareAPIError as e:
            self.logger.error(
                f"✗ Failed to update {record.type.value} {record.name}: {e}"
            )
            raise

        updated = self._record_from_api(result["result"])
        self.logger.info(f"✓ Updated {updated.type.value} {updated.name}")
        return updated

    def verify_credentials(self) -> bool:
        """
        Verify API token is valid.

        Returns False when Cloudflare rejects the token or reports it as not
        active. CloudflareConnectionError propagates when the API is unreachable.
        """
        try:
            data = self._api_request("GET", "/user/tokens/verify")
        except CloudflareConnectionError:
            raise
        except CloudflareAPIError:
            return False

        status = (data.get("result") or {}).get("status")
        if status == "active":
            self.logger.info("Cloudflare API token verified")
            return True
        self.logger.error(f"Token status: {status}")
        return False
