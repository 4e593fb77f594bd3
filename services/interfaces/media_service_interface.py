"""
Media Service Interface Module.

Defines the interface for saving images to the application album
and loading images from encoded sources.

Follows:
- SRP: Only handles media save/load orchestration
- DIP: Depends on decoder, codec, writer and notifier abstractions from core layer
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from pathlib import Path
from typing import Callable, Optional
import numpy as np

from core.interfaces.decoder_interface import ImageSource
from services.interfaces.base_service_interface import ServiceResult


class IMediaService(ABC):
    """
    Interface for media save and load operations.
    
    Save results carry the saved file path in ServiceResult.data.
    Load results carry the decoded image in ServiceResult.data.
    """
    
    @abstractmethod
    def saveImage(self, image: np.ndarray) -> ServiceResult:
        """
        Save an image to the album as PNG and notify the media index.
        
        Args:
            image: Image to save (BGR or BGRA format).
            
        Returns:
            ServiceResult: data is the saved Path on success.
        """
        pass
    
    @abstractmethod
    def saveImageAsync(
        self,
        image: np.ndarray,
        onComplete: Optional[Callable[[ServiceResult], None]] = None
    ) -> "Future[ServiceResult]":
        """
        Save an image on a worker thread.
        
        Args:
            image: Image to save (BGR or BGRA format).
            onComplete: Optional callback invoked with the result.
            
        Returns:
            Future resolving to the ServiceResult of saveImage.
        """
        pass
    
    @abstractmethod
    def loadImage(self, source: ImageSource) -> ServiceResult:
        """
        Load an image at native resolution.
        
        Args:
            source: Encoded image bytes or binary stream.
            
        Returns:
            ServiceResult: data is the decoded image on success.
        """
        pass
    
    @abstractmethod
    def loadImageBounded(
        self,
        source: ImageSource,
        requestedWidth: int,
        requestedHeight: int
    ) -> ServiceResult:
        """
        Load an image downsampled as far as the requested bounds allow.
        
        Args:
            source: Encoded image bytes or binary stream.
            requestedWidth: Minimum width of the decoded image.
            requestedHeight: Minimum height of the decoded image.
            
        Returns:
            ServiceResult: data is the decoded image on success.
        """
        pass
    
    @abstractmethod
    def getImageStorageDir(self) -> Optional[Path]:
        """
        Get the application album directory, creating it if needed.
        
        Returns:
            Album directory, or None if it could not be created.
        """
        pass
    
    @abstractmethod
    def getNewImageFile(self) -> Optional[Path]:
        """
        Allocate a new uniquely named image file in the album.
        
        Returns:
            Path of the empty file, or None on failure.
        """
        pass
    
    @abstractmethod
    def addImageToGallery(self, filepath: str) -> None:
        """
        Notify the media index about a file.
        
        Args:
            filepath: Path of the image file.
        """
        pass
