"""
Media Storage Module

Contains filename conventions and album directory helpers.
"""

from core.storage.media_storage import (
    FILE_NAME_SUFFIX,
    CAPTURE_PREFIX,
    formatTimestamp,
    buildSaveFilename,
    getImageStorageDir,
    createNewImageFile,
)


__all__ = [
    "FILE_NAME_SUFFIX",
    "CAPTURE_PREFIX",
    "formatTimestamp",
    "buildSaveFilename",
    "getImageStorageDir",
    "createNewImageFile",
]
