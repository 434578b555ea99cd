"""Configuration for the DNS updater."""

import os
from dataclasses import dataclass, field

from dns_providers.base import DNSRecord, RecordType
from dns_providers.cloudflare import CloudflareConfig
from utils.ip import IPDetectorConfig

REQUIRED_VARIABLES = (
    "CLOUDFLARE_API_TOKEN",
    "CLOUDFLARE_ZONE_ID",
    "CLOUDFLARE_DNS_RECORD_NAME",
    "CLOUDFLARE_DNS_RECORD_TYPE",
)


class ConfigError(ValueError):
    """Raised when the environment does not describe a usable configuration."""


@dataclass(frozen=True)
class UpdaterConfig:
    """Zone, record and polling settings, fixed for the process lifetime."""

    zone_id: str
    record_name: str
    record_type: RecordType
    interval: int  # Poll interval in minutes

    # Log writes instead of performing them
    dry_run: bool = False

    cloudflare: CloudflareConfig = field(default_factory=CloudflareConfig)
    ip_detection: IPDetectorConfig = field(default_factory=IPDetectorConfig)

    @property
    def interval_seconds(self) -> int:
        return self.interval * 60

    def desired_record(self, ip: str) -> DNSRecord:
        """Build the record that should point at ``ip``."""
        return DNSRecord(
            name=self.record_name,
            type=self.record_type,
            content=ip,
            ttl=self.cloudflare.default_ttl,
            proxied=self.cloudflare.proxied,
        )

    @classmethod
    def from_env(cls) -> "UpdaterConfig":
        """Create config from environment variables."""
        missing = [name for name in REQUIRED_VARIABLES if not os.environ.get(name)]
        if missing:
            raise ConfigError(
                f"{', '.join(REQUIRED_VARIABLES)} environment variables must be set "
                f"(missing: {', '.join(missing)})"
            )

        interval_env = os.environ.get("INTERVAL", "")
        try:
            interval = int(interval_env)
        except ValueError:
            raise ConfigError(
                f"Can't read the interval from the environment: INTERVAL={interval_env!r}"
            ) from None
        if interval <= 0:
            raise ConfigError(f"INTERVAL must be a positive number of minutes, got {interval}")

        record_type_env = os.environ["CLOUDFLARE_DNS_RECORD_TYPE"].strip().upper()
        try:
            record_type = RecordType(record_type_env)
        except ValueError:
            raise ConfigError(
                f"Unsupported CLOUDFLARE_DNS_RECORD_TYPE: {record_type_env!r}"
            ) from None

        try:
            cloudflare = CloudflareConfig.from_env()
            ip_detection = IPDetectorConfig.from_env()
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        return cls(
            zone_id=os.environ["CLOUDFLARE_ZONE_ID"],
            record_name=os.environ["CLOUDFLARE_DNS_RECORD_NAME"].rstrip("."),
            record_type=record_type,
            interval=interval,
            dry_run=os.environ.get("DNS_DRY_RUN", "false").lower() == "true",
            cloudflare=cloudflare,
            ip_detection=ip_detection,
        )
