"""
OpenCV Image Codec Implementation

Implements IImageCodec with OpenCV for pixel decoding and PNG encoding.
Header probing goes through Pillow, which parses dimensions lazily
without allocating the pixel buffer.
"""

import io
import logging
from typing import BinaryIO, Union
import numpy as np
import cv2
from PIL import Image, UnidentifiedImageError

from core.errors import (
    DecodeError,
    InvalidArgumentError,
    InvalidFormatError,
    OutOfMemoryError,
)
from core.interfaces.codec_interface import IImageCodec, ImageDimensions


logger = logging.getLogger(__name__)


class OpenCVImageCodec(IImageCodec):
    """
    Image codec backed by OpenCV and Pillow.
    
    Reduced decodes use OpenCV's IMREAD_REDUCED_COLOR_* modes, which
    let the JPEG decoder scale during decompression. Factors beyond 8
    decode at 1/8 and shrink the rest with area interpolation.
    
    Follows SRP: Only converts between encoded bytes and pixel buffers.
    """
    
    # Largest factor OpenCV can apply while decoding
    MAX_NATIVE_FACTOR = 8
    
    # Stored orientation, so pixel axes match the probed header
    _DECODE_FLAGS = {
        1: cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION,
        2: cv2.IMREAD_REDUCED_COLOR_2 | cv2.IMREAD_IGNORE_ORIENTATION,
        4: cv2.IMREAD_REDUCED_COLOR_4 | cv2.IMREAD_IGNORE_ORIENTATION,
        8: cv2.IMREAD_REDUCED_COLOR_8 | cv2.IMREAD_IGNORE_ORIENTATION,
    }
    
    def __init__(self, pngCompression: int = 9):
        """
        Initialize OpenCVImageCodec.
        
        Args:
            pngCompression: PNG compression level (0-9, 9 = smallest file).
        """
        self._pngCompression = max(0, min(9, pngCompression))  # Clamp to [0, 9]
    
    def probeDimensions(self, source: Union[bytes, BinaryIO]) -> ImageDimensions:
        """
        Read native dimensions from the image header.

        Pillow only parses the header, so a stream is read no further
        than the header needs.

        Args:
            source: Encoded bytes or a seekable binary stream.

        Returns:
            ImageDimensions: Native width and height.
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            if not source:
                raise InvalidFormatError("Empty image data")
            source = io.BytesIO(source)

        try:
            with Image.open(source) as pilImage:
                width, height = pilImage.size
        except DecodeError:
            # Raised by the source itself (read failure, wrong stream type)
            raise
        except Image.DecompressionBombError as e:
            raise OutOfMemoryError(f"Image too large to decode: {e}") from e
        except (UnidentifiedImageError, OSError, SyntaxError, EOFError, ValueError) as e:
            raise InvalidFormatError(f"Unrecognised image header: {e}") from e
        
        if width <= 0 or height <= 0:
            raise InvalidFormatError(f"Invalid image dimensions: {width}x{height}")
        
        logger.debug(f"Probed image dimensions: {width}x{height}")
        return ImageDimensions(width=width, height=height)
    
    def decode(self, data: bytes, sampleFactor: int) -> np.ndarray:
        """Decode image bytes at 1/sampleFactor resolution."""
        if sampleFactor <= 0 or (sampleFactor & (sampleFactor - 1)) != 0:
            raise InvalidArgumentError(
                f"Sample factor must be a positive power of two, got {sampleFactor}"
            )
        if not data:
            raise InvalidFormatError("Empty image data")
        
        directFactor = min(sampleFactor, self.MAX_NATIVE_FACTOR)
        buffer = np.frombuffer(data, dtype=np.uint8)
        
        try:
            image = cv2.imdecode(buffer, self._DECODE_FLAGS[directFactor])
        except MemoryError as e:
            raise OutOfMemoryError("Failed to allocate decoded image") from e
        except cv2.error as e:
            if "memory" in str(e).lower():
                raise OutOfMemoryError(f"Failed to allocate decoded image: {e}") from e
            raise InvalidFormatError(f"Failed to decode image: {e}") from e
        
        if image is None:
            raise InvalidFormatError("Image data could not be decoded")
        
        remainingFactor = sampleFactor // directFactor
        if remainingFactor > 1:
            height, width = image.shape[:2]
            targetSize = (max(1, width // remainingFactor), max(1, height // remainingFactor))
            image = cv2.resize(image, targetSize, interpolation=cv2.INTER_AREA)
        
        logger.debug(
            f"Decoded image at 1/{sampleFactor}: {image.shape[1]}x{image.shape[0]}"
        )
        return image
    
    def encodePng(self, image: np.ndarray) -> bytes:
        """Encode a pixel buffer as lossless PNG."""
        if image is None or image.size == 0:
            raise ValueError("Cannot encode an empty image")
        
        try:
            success, encoded = cv2.imencode(
                ".png",
                image,
                [cv2.IMWRITE_PNG_COMPRESSION, self._pngCompression]
            )
        except cv2.error as e:
            raise RuntimeError(f"PNG encoding failed: {e}") from e

        if not success:
            raise RuntimeError("PNG encoding failed")
        
        return encoded.tobytes()
    
    @property
    def pngCompression(self) -> int:
        """Get PNG compression level."""
        return self._pngCompression
