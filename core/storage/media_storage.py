"""
Media Storage Helpers

Filename generation and directory handling for saved images.

Naming convention:
- Saved images:   <APPNAME>_<yyyyMMdd-hh:mm:ss>.png
- Capture files:  IMG_<yyyyMMdd-hh:mm:ss><unique>.png
"""

import os
import logging
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


logger = logging.getLogger(__name__)


FILE_NAME_SUFFIX = ".png"
CAPTURE_PREFIX = "IMG_"

# 12-hour clock, matching the historic gallery naming
TIMESTAMP_FORMAT = "%Y%m%d-%I:%M:%S"


def formatTimestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a local timestamp for use in filenames.
    
    Args:
        moment: Time to format (defaults to now, local time).
        
    Returns:
        str: Timestamp such as "20260119-03:04:05".
    """
    if moment is None:
        moment = datetime.now()
    return moment.strftime(TIMESTAMP_FORMAT)


def buildSaveFilename(appName: str, moment: Optional[datetime] = None) -> str:
    """
    Build the filename for a saved image.
    
    Args:
        appName: Application name used as the namespace prefix.
        moment: Time to embed (defaults to now).
        
    Returns:
        str: Filename such as "PXSORT_20260119-03:04:05.png".
    """
    return f"{appName.upper()}_{formatTimestamp(moment)}{FILE_NAME_SUFFIX}"


def getImageStorageDir(
    picturesRoot: Union[str, Path],
    appName: str
) -> Optional[Path]:
    """
    Get the application album directory, creating it if needed.
    
    Only the album directory itself is created; the pictures root
    must already exist.
    
    Args:
        picturesRoot: Public pictures directory.
        appName: Application name (album directory name).
        
    Returns:
        Album directory path, or None if it could not be created.
    """
    albumDir = Path(picturesRoot).expanduser() / appName
    
    if not albumDir.exists():
        try:
            albumDir.mkdir()
        except OSError as e:
            logger.error(f"The directory {albumDir} failed to be created: {e}")
            return None
    elif not albumDir.is_dir():
        logger.error(f"The path {albumDir} exists but is not a directory")
        return None
    
    return albumDir


def createNewImageFile(directory: Optional[Union[str, Path]]) -> Optional[Path]:
    """
    Allocate a new, empty, uniquely named image file.
    
    Args:
        directory: Directory to create the file in.
        
    Returns:
        Path of the created file, or None if it could not be created.
    """
    if directory is None:
        logger.error("The image file failed to be created: no storage directory")
        return None
    
    prefix = CAPTURE_PREFIX + formatTimestamp()
    try:
        fd, path = tempfile.mkstemp(
            suffix=FILE_NAME_SUFFIX,
            prefix=prefix,
            dir=os.fspath(directory)
        )
        os.close(fd)
    except OSError as e:
        logger.error(f"The image file failed to be created: {e}")
        return None
    
    logger.debug(f"Allocated image file: {path}")
    return Path(path)
