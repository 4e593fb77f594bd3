"""
Codec Interface Module

Defines the abstract interface for the image codec: header probing,
full decoding at a reduced resolution, and PNG encoding.
Follows ISP: Only contains the codec primitives the decoder needs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Union
import numpy as np


@dataclass(frozen=True)
class ImageDimensions:
    """
    Native pixel extents of an encoded image.
    
    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """
    width: int
    height: int
    
    def __repr__(self) -> str:
        return f"ImageDimensions({self.width}x{self.height})"


class IImageCodec(ABC):
    """
    Abstract interface for encoding and decoding images.
    
    Implementations bind these operations to a concrete imaging library.
    Decoding and encoding operate on complete in-memory byte buffers.
    """
    
    @abstractmethod
    def probeDimensions(self, source: Union[bytes, BinaryIO]) -> ImageDimensions:
        """
        Read the image header and return its native dimensions.
        
        Args:
            source: Encoded image bytes, or a seekable binary stream
                positioned at the image start. Streams are read only
                as far as the header.
            
        Returns:
            ImageDimensions: Native width and height.
            
        Raises:
            InvalidFormatError: If the bytes are not a recognised image.
        """
        pass
    
    @abstractmethod
    def decode(self, data: bytes, sampleFactor: int) -> np.ndarray:
        """
        Decode an image at 1/sampleFactor linear resolution.
        
        Args:
            data: Complete encoded image bytes.
            sampleFactor: Power-of-two reduction factor (1 = native size).
            
        Returns:
            np.ndarray: Writable BGR pixel buffer (H x W x 3, uint8).
            
        Raises:
            InvalidFormatError: If the bytes cannot be decoded.
            OutOfMemoryError: If the pixel buffer cannot be allocated.
        """
        pass
    
    @abstractmethod
    def encodePng(self, image: np.ndarray) -> bytes:
        """
        Encode a pixel buffer as PNG.
        
        Args:
            image: Image as numpy array (BGR or BGRA, uint8).
            
        Returns:
            bytes: PNG file contents.
        """
        pass
