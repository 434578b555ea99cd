"""IP Detection Utilities.

Looks up the caller's public IP address through an external echo service.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)

# Default external IP detection API
DEFAULT_IP_API = "https://api.ipify.org"


class IPDetectionError(Exception):
    """Raised when the public IP cannot be retrieved"""


@dataclass
class IPDetectorConfig:
    """IP detection configuration"""

    # External API returning the caller's address as plain text
    url: str = DEFAULT_IP_API

    # Request timeout
    timeout: int = 15

    @classmethod
    def from_env(cls) -> "IPDetectorConfig":
        """Create config from environment variables"""
        return cls(
            url=os.environ.get("IP_SERVICE_URL", "") or DEFAULT_IP_API,
            timeout=int(os.environ.get("IP_DETECTION_TIMEOUT", "15")),
        )


class IPDetector:
    """
    Detects the public IP address via an external API.

    The response body is returned as-is after trimming whitespace; no
    address-family validation is applied.
    """

    def __init__(self, config: Optional[IPDetectorConfig] = None):
        self.config = config or IPDetectorConfig()
        self.logger = logging.getLogger(__name__)

    def detect(self) -> str:
        """Return the current public IP, raising IPDetectionError on failure"""
        api_url = self.config.url

        try:
            response = requests.get(
                api_url,
                timeout=self.config.timeout,
                headers={"User-Agent": "cloudflare-ddns"},
            )
        except requests.RequestException as e:
            raise IPDetectionError(f"failed to get public IP from {api_url}: {e}") from e

        if response.status_code != 200:
            raise IPDetectionError(
                f"failed to get public IP from {api_url}: "
                f"HTTP status {response.status_code}"
            )

        ip = response.text.strip()
        self.logger.debug(f"Detected public IP via {api_url}: {ip}")
        return ip
