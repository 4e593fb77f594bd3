"""
Base Service Module.

Result type shared by the media services and a small helper base class
with the logger, timing and debug-image plumbing they have in common.
"""

from dataclasses import dataclass
from typing import Optional, Any
from pathlib import Path
import logging
import time

import cv2

from core.errors import DecodeErrorKind


@dataclass
class ServiceResult:
    """
    Outcome of a service call.

    Attributes:
        success: Whether the operation succeeded.
        data: Saved path for saves, decoded image for loads.
        errorMessage: Error description if success is False.
        errorKind: Decode failure category, when a decode failed.
        processingTimeMs: Processing time in milliseconds.
    """
    success: bool
    data: Optional[Any] = None
    errorMessage: str = ""
    errorKind: Optional[DecodeErrorKind] = None
    processingTimeMs: float = 0.0


class BaseService:
    """
    Helper base class for services.

    Logs through a logger named after the service and, when debug is
    on, dumps intermediate images under <debugBasePath>/<serviceName>.
    """

    def __init__(
        self,
        serviceName: str,
        debugBasePath: str = "output/debug",
        debugEnabled: bool = False
    ):
        self._debugDir = Path(debugBasePath) / serviceName
        self._debugEnabled = debugEnabled
        self._logger = logging.getLogger(serviceName)

        if debugEnabled:
            self._debugDir.mkdir(parents=True, exist_ok=True)

    def setDebugEnabled(self, enabled: bool) -> None:
        """Turn debug image output on or off."""
        self._debugEnabled = enabled
        if enabled:
            self._debugDir.mkdir(parents=True, exist_ok=True)
        self._logger.info(f"Debug {'enabled' if enabled else 'disabled'}")

    def _saveDebugImage(self, name: str, image: Any, prefix: str = "") -> Optional[str]:
        """
        Write an image to the debug directory.

        Args:
            name: Identifier used in the filename.
            image: BGR numpy array.
            prefix: Optional filename prefix (usually the operation).

        Returns:
            Written path, or None when debug is off or the write failed.
        """
        if not self._debugEnabled or image is None:
            return None

        filename = f"{prefix}_{name}.png" if prefix else f"{name}.png"
        filepath = self._debugDir / filename

        try:
            written = cv2.imwrite(str(filepath), image)
        except cv2.error as e:
            self._logger.warning(f"Failed to save debug image: {e}")
            return None

        if not written:
            self._logger.warning(f"Failed to save debug image: {filepath}")
            return None

        self._logger.debug(f"Saved debug image: {filepath}")
        return str(filepath)

    def _logTiming(self, operation: str, processingTimeMs: float) -> None:
        """Log how long an operation took."""
        self._logger.info(f"[{operation}] Processing time: {processingTimeMs:.2f}ms")

    def _measureTime(self, startTime: float) -> float:
        """Milliseconds elapsed since startTime (from time.time())."""
        return (time.time() - startTime) * 1000
