# DNS Management Module
# Provides abstract DNS provider interface and the Cloudflare implementation

from .base import (
    DNSProvider,
    DNSProviderConnectionError,
    DNSProviderError,
    DNSRecord,
    RecordType,
)
from .cloudflare import (
    CloudflareAPIError,
    CloudflareConfig,
    CloudflareConnectionError,
    CloudflareProvider,
)

__all__ = [
    "DNSProvider",
    "DNSProviderConnectionError",
    "DNSProviderError",
    "DNSRecord",
    "RecordType",
    "CloudflareAPIError",
    "CloudflareConfig",
    "CloudflareConnectionError",
    "CloudflareProvider",
]
