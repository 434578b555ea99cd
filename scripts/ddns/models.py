"""Data models for update cycles."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dns_providers.base import DNSRecord


class UpdateAction(str, Enum):
    """What a cycle did to the managed record."""

    UNCHANGED = "unchanged"
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class CycleResult:
    """Outcome of one update cycle."""

    action: UpdateAction
    ip: str  # Last-applied IP to carry into the next cycle
    record: Optional[DNSRecord] = None
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        return self.action is not UpdateAction.UNCHANGED
