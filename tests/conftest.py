"""Shared fixtures for DNS updater tests."""

from typing import Optional

import pytest

from ddns.config import UpdaterConfig
from dns_providers.base import (
    DNSProvider,
    DNSProviderConfig,
    DNSProviderError,
    DNSRecord,
    RecordType,
)

REQUIRED_ENV = {
    "CLOUDFLARE_API_TOKEN": "token",
    "CLOUDFLARE_ZONE_ID": "zone123",
    "CLOUDFLARE_DNS_RECORD_NAME": "home.example.com",
    "CLOUDFLARE_DNS_RECORD_TYPE": "A",
    "INTERVAL": "5",
}


class FakeProvider(DNSProvider):
    """In-memory record directory that records every call."""

    def __init__(self, records: Optional[list[DNSRecord]] = None):
        super().__init__(DNSProviderConfig())
        self.records = list(records or [])
        self.calls: list[tuple] = []
        self.fail_on: set[str] = set()
        self._next_id = 1

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise DNSProviderError(f"{operation} failed")

    def list_records(self, zone_id, record_type=None, name=None):
        self.calls.append(("list", zone_id, record_type))
        self._check("list")
        return [
            r
            for r in self.records
            if (record_type is None or r.type == record_type)
            and (name is None or r.name == name)
        ]

    def create_record(self, zone_id, record):
        self.calls.append(("create", zone_id, record))
        self._check("create")
        created = DNSRecord(
            name=record.name,
            type=record.type,
            content=record.content,
            ttl=record.ttl,
            proxied=record.proxied,
            record_id=f"new{self._next_id}",
        )
        self._next_id += 1
        self.records.append(created)
        return created

    def update_record(self, zone_id, record):
        self.calls.append(("update", zone_id, record))
        self._check("update")
        for i, existing in enumerate(self.records):
            if existing.record_id == record.record_id:
                self.records[i] = record
                return record
        raise DNSProviderError(f"record {record.record_id} not found")

    def calls_of(self, operation: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == operation]


@pytest.fixture
def config() -> UpdaterConfig:
    return UpdaterConfig(
        zone_id="zone123",
        record_name="home.example.com",
        record_type=RecordType.A,
        interval=5,
    )


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
