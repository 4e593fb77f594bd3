"""
Writer Interface Module

Defines the abstract interface for writing encoded image files.
Follows ISP: Only contains methods related to file creation.
"""

from abc import ABC, abstractmethod
from enum import Enum


class WriteStatus(Enum):
    """Outcome of a create-exclusive file write."""
    SUCCESS = "success"
    ALREADY_EXISTS = "already_exists"
    IO_ERROR = "io_error"


class IImageWriter(ABC):
    """
    Abstract interface for image writing operations.
    
    Implementations must never overwrite an existing file and must
    report "already exists" separately from other I/O failures.
    """
    
    @abstractmethod
    def write(self, data: bytes, filepath: str) -> WriteStatus:
        """
        Write encoded image bytes to a new file.
        
        Args:
            data: Encoded image bytes (e.g. PNG).
            filepath: Destination path for the image file.
            
        Returns:
            WriteStatus: SUCCESS, ALREADY_EXISTS or IO_ERROR.
        """
        pass
