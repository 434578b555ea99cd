"""Tests for the update decision logic."""

import dataclasses

import pytest

from conftest import FakeProvider
from ddns.models import UpdateAction
from ddns.updater import find_record, run_cycle
from dns_providers.base import DNSProviderError, DNSRecord, RecordType


def _record(record_id, content, name="home.example.com", type_=RecordType.A):
    return DNSRecord(name=name, type=type_, content=content, record_id=record_id)


# --- unchanged IP ---

class TestUnchanged:
    def test_same_ip_makes_no_calls(self, provider, config):
        result = run_cycle(provider, config, "203.0.113.5", "203.0.113.5")
        assert result.action is UpdateAction.UNCHANGED
        assert result.ip == "203.0.113.5"
        assert not result.changed
        assert provider.calls == []

    def test_second_call_with_applied_ip_is_noop(self, provider, config):
        first = run_cycle(provider, config, "", "203.0.113.5")
        assert first.action is UpdateAction.CREATED
        calls_after_first = len(provider.calls)

        second = run_cycle(provider, config, first.ip, "203.0.113.5")
        assert second.action is UpdateAction.UNCHANGED
        assert len(provider.calls) == calls_after_first

    def test_comparison_is_exact_string(self, provider, config):
        result = run_cycle(provider, config, "203.0.113.5", "203.0.113.05")
        assert result.action is UpdateAction.CREATED
        assert len(provider.calls_of("list")) == 1


# --- create path ---

class TestCreate:
    def test_creates_when_missing(self, provider, config):
        result = run_cycle(provider, config, "", "203.0.113.5")

        assert result.action is UpdateAction.CREATED
        assert result.ip == "203.0.113.5"
        assert provider.calls_of("list") == [("list", "zone123", RecordType.A)]
        creates = provider.calls_of("create")
        assert len(creates) == 1
        _, zone_id, record = creates[0]
        assert zone_id == "zone123"
        assert record.type is RecordType.A
        assert record.name == "home.example.com"
        assert record.content == "203.0.113.5"
        assert provider.calls_of("update") == []

    def test_result_carries_created_record(self, provider, config):
        result = run_cycle(provider, config, "", "203.0.113.5")
        assert result.record.record_id == "new1"

    def test_ignores_records_with_other_name(self, config):
        provider = FakeProvider([_record("other", "198.51.100.1", name="nas.example.com")])
        result = run_cycle(provider, config, "", "203.0.113.5")
        assert result.action is UpdateAction.CREATED
        assert provider.calls_of("update") == []

    def test_create_failure_propagates(self, provider, config):
        provider.fail_on.add("create")
        with pytest.raises(DNSProviderError):
            run_cycle(provider, config, "", "203.0.113.5")


# --- update path ---

class TestUpdate:
    def test_updates_existing_record(self, config):
        provider = FakeProvider([_record("abc123", "203.0.113.5")])
        result = run_cycle(provider, config, "203.0.113.5", "203.0.113.9")

        assert result.action is UpdateAction.UPDATED
        assert result.ip == "203.0.113.9"
        assert len(provider.calls_of("list")) == 1
        assert provider.calls_of("create") == []
        updates = provider.calls_of("update")
        assert len(updates) == 1
        _, zone_id, record = updates[0]
        assert zone_id == "zone123"
        assert record.record_id == "abc123"
        assert record.content == "203.0.113.9"
        assert record.name == "home.example.com"

    def test_keeps_existing_proxied_and_ttl(self, config):
        existing = DNSRecord(
            name="home.example.com",
            type=RecordType.A,
            content="203.0.113.5",
            ttl=300,
            proxied=True,
            record_id="abc123",
        )
        provider = FakeProvider([existing])

        result = run_cycle(provider, config, "203.0.113.5", "203.0.113.9")

        _, _, record = provider.calls_of("update")[0]
        assert record.content == "203.0.113.9"
        assert record.ttl == 300
        assert record.proxied is True
        assert result.record.proxied is True
        assert existing.content == "203.0.113.5"

    def test_updates_even_when_content_already_matches(self, config):
        provider = FakeProvider([_record("abc123", "203.0.113.9")])
        result = run_cycle(provider, config, "", "203.0.113.9")
        assert result.action is UpdateAction.UPDATED
        assert len(provider.calls_of("update")) == 1

    def test_only_first_duplicate_is_touched(self, config):
        first = _record("first", "198.51.100.1")
        second = _record("second", "198.51.100.2")
        provider = FakeProvider([first, second])

        run_cycle(provider, config, "", "203.0.113.9")

        updates = provider.calls_of("update")
        assert [call[2].record_id for call in updates] == ["first"]
        assert provider.records[1] is second
        assert second.content == "198.51.100.2"

    def test_update_failure_propagates(self, config):
        provider = FakeProvider([_record("abc123", "203.0.113.5")])
        provider.fail_on.add("update")
        with pytest.raises(DNSProviderError):
            run_cycle(provider, config, "203.0.113.5", "203.0.113.9")


# --- failures ---

class TestListFailure:
    def test_list_failure_stops_before_writes(self, provider, config):
        provider.fail_on.add("list")
        with pytest.raises(DNSProviderError):
            run_cycle(provider, config, "", "203.0.113.5")
        assert provider.calls_of("create") == []
        assert provider.calls_of("update") == []


# --- dry run ---

class TestDryRun:
    def test_dry_run_create_skips_write(self, provider, config):
        config = dataclasses.replace(config, dry_run=True)
        result = run_cycle(provider, config, "", "203.0.113.5")
        assert result.action is UpdateAction.CREATED
        assert result.dry_run
        assert result.ip == "203.0.113.5"
        assert len(provider.calls_of("list")) == 1
        assert provider.calls_of("create") == []

    def test_dry_run_update_skips_write(self, config):
        config = dataclasses.replace(config, dry_run=True)
        provider = FakeProvider([_record("abc123", "203.0.113.5")])
        result = run_cycle(provider, config, "203.0.113.5", "203.0.113.9")
        assert result.action is UpdateAction.UPDATED
        assert result.record.record_id == "abc123"
        assert provider.calls_of("update") == []


# --- find_record ---

class TestFindRecord:
    def test_none_when_empty(self):
        assert find_record([], RecordType.A, "home.example.com") is None

    def test_requires_type_and_name(self):
        records = [
            _record("aaaa", "2001:db8::1", type_=RecordType.AAAA),
            _record("a", "203.0.113.5"),
        ]
        assert find_record(records, RecordType.A, "home.example.com").record_id == "a"

    def test_trailing_dot_is_ignored(self):
        records = [_record("a", "203.0.113.5")]
        assert find_record(records, RecordType.A, "home.example.com.").record_id == "a"

    def test_first_match_wins(self, caplog):
        records = [_record("one", "1.1.1.1"), _record("two", "2.2.2.2")]
        assert find_record(records, RecordType.A, "home.example.com").record_id == "one"
        assert "Found 2 A records named home.example.com" in caplog.text
