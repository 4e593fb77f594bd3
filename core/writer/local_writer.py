"""
Local Image Writer Implementation

Implements IImageWriter for writing encoded images to local filesystem.
Follows SRP: Only handles file creation.
"""

import os
import logging

from core.interfaces.writer_interface import IImageWriter, WriteStatus


logger = logging.getLogger(__name__)


class LocalImageWriter(IImageWriter):
    """
    Image writer implementation for local filesystem.
    
    Opens the destination with create-exclusive mode, so an existing
    file is never overwritten. Parent directories are created on demand.
    
    Follows SRP: Only responsible for writing files locally.
    """
    
    def __init__(self, createDirectories: bool = True):
        """
        Initialize LocalImageWriter.
        
        Args:
            createDirectories: Create missing parent directories before writing.
        """
        self._createDirectories = createDirectories
    
    def write(self, data: bytes, filepath: str) -> WriteStatus:
        """
        Write encoded bytes to a new file.
        
        Args:
            data: Encoded image bytes.
            filepath: Destination path for the image file.
            
        Returns:
            WriteStatus: Outcome of the write.
        """
        filepath = os.fspath(filepath)
        
        directory = os.path.dirname(filepath)
        if directory and self._createDirectories:
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                logger.error(f"The directory {directory} failed to be created: {e}")
                return WriteStatus.IO_ERROR

        try:
            f = open(filepath, "xb")
        except FileExistsError:
            logger.error(f"File {filepath} could not be created. Image was not saved.")
            return WriteStatus.ALREADY_EXISTS
        except OSError as e:
            logger.error(f"Failed to create {filepath}: {e}")
            return WriteStatus.IO_ERROR
        
        try:
            with f:
                f.write(data)
        except OSError as e:
            logger.error(
                f"An error occurred while writing the image to file "
                f"({filepath}). Image was not saved: {e}"
            )
            self._removePartial(filepath)
            return WriteStatus.IO_ERROR
        
        logger.debug(f"Image written to {filepath} ({len(data)} bytes)")
        return WriteStatus.SUCCESS
    
    def _removePartial(self, filepath: str) -> None:
        """Remove a partially written file."""
        try:
            os.remove(filepath)
        except OSError as e:
            logger.warning(f"Failed to remove partial file {filepath}: {e}")
