#!/usr/bin/env python3
"""
DNS Updater - Keeps a Cloudflare DNS record pointed at the current public IP.

Periodically looks up the public IP address and, when it changed since the
last successful update, creates or updates the configured record.

Configuration comes from the environment:
    CLOUDFLARE_API_TOKEN, CLOUDFLARE_ZONE_ID, CLOUDFLARE_DNS_RECORD_NAME,
    CLOUDFLARE_DNS_RECORD_TYPE, INTERVAL (minutes)

Usage:
    dns_updater.py [--once] [-v]
"""

import argparse
import logging
import signal
import sys
import threading
from types import FrameType
from typing import Optional

from ddns.config import ConfigError, UpdaterConfig
from ddns.scheduler import UpdateScheduler
from dns_providers.base import DNSProviderConnectionError
from dns_providers.cloudflare import CloudflareProvider
from utils.ip import IPDetector

# Event for graceful shutdown (can be set from signal handler to wake up sleeps)
shutdown_event = threading.Event()


def signal_handler(signum: int, frame: Optional[FrameType]) -> None:
    """Handle termination signals"""
    logging.info(f"Received signal {signum}, initiating shutdown...")
    shutdown_event.set()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Cloudflare dynamic DNS updater")

    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single update cycle and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    # Register signal handlers
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    try:
        config = UpdaterConfig.from_env()
    except ConfigError as e:
        logger.error(f"Error: {e}")
        return 1

    provider = CloudflareProvider(config.cloudflare)
    try:
        if not provider.verify_credentials():
            logger.error(
                "Error initializing Cloudflare API client: token was rejected or is not active"
            )
            return 1
    except DNSProviderConnectionError as e:
        logger.warning(f"Could not verify Cloudflare API token, continuing: {e}")

    detector = IPDetector(config.ip_detection)
    scheduler = UpdateScheduler(config, provider, detector, shutdown_event)

    return scheduler.run(once=args.once)


if __name__ == "__main__":
    sys.exit(main())
