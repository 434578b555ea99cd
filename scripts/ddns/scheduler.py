"""Fixed-interval update loop."""

import logging
import threading
from typing import Optional

from dns_providers.base import DNSProvider, DNSProviderError
from utils.ip import IPDetectionError, IPDetector

from .config import UpdaterConfig
from .models import CycleResult
from .updater import run_cycle


class UpdateScheduler:
    """Runs update cycles at a fixed interval until shutdown or a fatal error."""

    def __init__(
        self,
        config: UpdaterConfig,
        provider: DNSProvider,
        detector: IPDetector,
        shutdown_event: Optional[threading.Event] = None,
    ):
        self.config = config
        self.provider = provider
        self.detector = detector
        self.shutdown_event = shutdown_event or threading.Event()
        self.logger = logging.getLogger(__name__)

        self._check_count = 0

    def tick(self, previous_ip: str) -> Optional[CycleResult]:
        """
        Run a single cycle.

        Returns None when the public IP could not be detected; the directory
        is not contacted in that case. DNSProviderError is not caught here.
        """
        self._check_count += 1

        try:
            new_ip = self.detector.detect()
        except IPDetectionError as e:
            self.logger.warning(f"Error getting public IP: {e}")
            return None

        return run_cycle(self.provider, self.config, previous_ip, new_ip)

    def run(self, once: bool = False) -> int:
        """Run the update loop and return the process exit status."""
        self.logger.info("=" * 50)
        self.logger.info("DNS Updater Starting")
        self.logger.info("=" * 50)
        self.logger.info(f"Zone: {self.config.zone_id}")
        self.logger.info(
            f"Record: {self.config.record_type.value} {self.config.record_name}"
        )
        self.logger.info(f"Check interval: {self.config.interval}m")
        if self.config.dry_run:
            self.logger.info("Dry run: no records will be written")
        self.logger.info("")

        last_applied = ""

        while not self.shutdown_event.is_set():
            try:
                result = self.tick(last_applied)
            except DNSProviderError as e:
                self.logger.error(f"DNS update failed: {e}")
                return 1

            if result is not None:
                last_applied = result.ip

            if once:
                return 0 if result is not None else 1

            # Wait for interval or shutdown signal (whichever comes first)
            if self.shutdown_event.wait(self.config.interval_seconds):
                break

        self.logger.info(f"DNS Updater stopped after {self._check_count} check(s)")
        return 0
