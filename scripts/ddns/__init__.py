"""Dynamic DNS updater package.

Public API:
    - UpdateScheduler: Fixed-interval update loop
    - UpdaterConfig: Configuration dataclass
    - run_cycle: Single find-or-create-or-update decision
    - CycleResult / UpdateAction: Cycle outcome models
"""

from .config import ConfigError, UpdaterConfig
from .models import CycleResult, UpdateAction
from .scheduler import UpdateScheduler
from .updater import find_record, run_cycle

__all__ = [
    "UpdateScheduler",
    "UpdaterConfig",
    "ConfigError",
    "CycleResult",
    "UpdateAction",
    "find_record",
    "run_cycle",
]
