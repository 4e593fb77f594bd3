"""
Decoder Interface Module

Defines the abstract interface for loading images from encoded sources,
optionally downsampled to fit requested bounds.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Union
import numpy as np

from core.interfaces.codec_interface import ImageDimensions


# Raw bytes or a binary file-like object positioned at the image start
ImageSource = Union[bytes, bytearray, memoryview, BinaryIO]


class IImageDecoder(ABC):
    """
    Abstract interface for bounds-constrained image decoding.
    
    Implementations are stateless; every call is independent.
    """
    
    @abstractmethod
    def probeDimensions(self, source: ImageSource) -> ImageDimensions:
        """
        Determine native dimensions without decoding pixels.
        
        Args:
            source: Encoded image source.
            
        Returns:
            ImageDimensions: Native width and height.
        """
        pass
    
    @abstractmethod
    def decodeAt(self, source: ImageSource, sampleFactor: int) -> np.ndarray:
        """
        Decode the source at 1/sampleFactor linear resolution.
        
        Args:
            source: Encoded image source.
            sampleFactor: Power-of-two reduction factor.
            
        Returns:
            np.ndarray: Decoded pixel buffer owned by the caller.
        """
        pass
    
    @abstractmethod
    def loadBounded(
        self,
        source: ImageSource,
        requestedWidth: int,
        requestedHeight: int
    ) -> np.ndarray:
        """
        Decode the source as small as possible while both dimensions
        stay at or above the requested bounds.
        
        Args:
            source: Encoded image source.
            requestedWidth: Minimum width of the decoded image.
            requestedHeight: Minimum height of the decoded image.
            
        Returns:
            np.ndarray: Decoded pixel buffer owned by the caller.
        """
        pass
    
    @abstractmethod
    def loadFull(self, source: ImageSource) -> np.ndarray:
        """
        Decode the source at native resolution.
        
        Args:
            source: Encoded image source.
            
        Returns:
            np.ndarray: Decoded pixel buffer owned by the caller.
        """
        pass
