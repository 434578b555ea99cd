# Utility modules
from .ip import IPDetectionError, IPDetector, IPDetectorConfig

__all__ = ["IPDetectionError", "IPDetector", "IPDetectorConfig"]
