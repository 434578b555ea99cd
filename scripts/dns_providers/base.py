"""
Abstract DNS Provider Interface

Provides the record directory a DDNS updater talks to: list, create and
update records inside a single zone.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class RecordType(str, Enum):
    """Supported DNS record types"""

    A = "A"
    AAAA = "AAAA"
    CAA = "CAA"
    CNAME = "CNAME"
    HTTPS = "HTTPS"
    MX = "MX"
    NS = "NS"
    PTR = "PTR"
    SRV = "SRV"
    SVCB = "SVCB"
    TXT = "TXT"

    @property
    def proxiable(self) -> bool:
        return self in (RecordType.A, RecordType.AAAA, RecordType.CNAME)


@dataclass
class DNSRecord:
    """Represents a DNS record"""

    name: str
    type: RecordType
    content: str
    ttl: int = 1  # 1 = automatic
    proxied: bool = False

    # Provider-assigned identifier, stable across updates
    record_id: Optional[str] = None

    def __post_init__(self):
        # Normalize record name (remove trailing dot)
        self.name = self.name.rstrip(".")

    def matches(self, record_type: RecordType, name: str) -> bool:
        """Check whether this record is the (type, name) pair we manage"""
        return self.type == record_type and self.name == name.rstrip(".")

    def __str__(self) -> str:
        return f"{self.type.value} {self.name} = {self.content}"


@dataclass
class DNSProviderConfig:
    """Base configuration for DNS providers"""

    # Default TTL for records (1 = automatic)
    default_ttl: int = 1

    # Request timeout in seconds
    timeout: int = 30


class DNSProviderError(Exception):
    """Raised when the DNS provider cannot list or write records"""


class DNSProviderConnectionError(DNSProviderError):
    """Raised when the DNS provider cannot be reached at all"""


class DNSProvider(ABC):
    """
    Abstract base class for DNS providers.

    Every operation either returns its result or raises DNSProviderError;
    callers decide whether a failure is fatal.
    """

    def __init__(self, config: DNSProviderConfig):
        self.config = config
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # ==========================================================================
    # Abstract methods - must be implemented by providers
    # ==========================================================================

    @abstractmethod
    def list_records(
        self,
        zone_id: str,
        record_type: Optional[RecordType] = None,
        name: Optional[str] = None,
    ) -> list[DNSRecord]:
        """
        List DNS records in a zone.

        Args:
            zone_id: Zone identifier
            record_type: Filter by record type
            name: Filter by record name

        Returns:
            List of DNSRecord objects, in provider order
        """

    @abstractmethod
    def create_record(self, zone_id: str, record: DNSRecord) -> DNSRecord:
        """
        Create a new DNS record.

        Args:
            zone_id: Zone identifier
            record: Record to create

        Returns:
            The created record, with record_id set
        """

    @abstractmethod
    def update_record(self, zone_id: str, record: DNSRecord) -> DNSRecord:
        """
        Update an existing DNS record.

        Only type, name and content are written; other settings are kept.

        Args:
            zone_id: Zone identifier
            record: Record with record_id set

        Returns:
            The updated record
        """

    def verify_credentials(self) -> bool:
        """Check that the configured credentials are usable"""
        return True
