"""
Update decision logic.

Given the freshly detected IP and the last one applied, decides whether the
managed record has to change and performs a find-or-create-or-update against
the DNS provider. Provider failures propagate as DNSProviderError; deciding
what to do about them is left to the caller.
"""

import dataclasses
import logging
from typing import Iterable, Optional

from dns_providers.base import DNSProvider, DNSRecord, RecordType

from .config import UpdaterConfig
from .models import CycleResult, UpdateAction

logger = logging.getLogger(__name__)


def find_record(
    records: Iterable[DNSRecord], record_type: RecordType, name: str
) -> Optional[DNSRecord]:
    """Return the first record matching (type, name), in provider order."""
    matches = [record for record in records if record.matches(record_type, name)]
    if not matches:
        return None

    if len(matches) > 1:
        logger.warning(
            f"Found {len(matches)} {record_type.value} records named {name}, "
            f"only {matches[0].record_id} will be managed"
        )
    return matches[0]


def run_cycle(
    provider: DNSProvider,
    config: UpdaterConfig,
    previous_ip: str,
    new_ip: str,
) -> CycleResult:
    """
    Bring the managed record in line with ``new_ip``.

    Args:
        provider: DNS record directory
        config: Zone and record settings
        previous_ip: Last IP successfully applied ("" when unknown)
        new_ip: IP detected in this cycle

    Returns:
        CycleResult whose ``ip`` is the value to pass as ``previous_ip``
        next time
    """
    if new_ip == previous_ip:
        logger.info(f"IP address has not changed ({new_ip}), skipping update")
        return CycleResult(UpdateAction.UNCHANGED, ip=previous_ip)

    records = provider.list_records(config.zone_id, config.record_type)
    existing = find_record(records, config.record_type, config.record_name)

    if existing is None:
        desired = config.desired_record(new_ip)
        logger.info(
            f"DNS record {config.record_name} does not exist, creating {desired}"
        )

        if config.dry_run:
            logger.info("[DRY RUN] Would create record")
            return CycleResult(
                UpdateAction.CREATED, ip=new_ip, record=desired, dry_run=True
            )

        created = provider.create_record(config.zone_id, desired)
        logger.info("DNS record created successfully")
        return CycleResult(UpdateAction.CREATED, ip=new_ip, record=created)

    # Only the content changes; ttl, proxied and the record ID stay as they are
    desired = dataclasses.replace(existing, name=config.record_name, content=new_ip)
    logger.info(
        f"DNS record {config.record_name} found, updating: "
        f"{existing.content} -> {new_ip}"
    )

    if config.dry_run:
        logger.info("[DRY RUN] Would update record")
        return CycleResult(UpdateAction.UPDATED, ip=new_ip, record=desired, dry_run=True)

    updated = provider.update_record(config.zone_id, desired)
    logger.info("DNS record updated successfully")
    return CycleResult(UpdateAction.UPDATED, ip=new_ip, record=updated)
