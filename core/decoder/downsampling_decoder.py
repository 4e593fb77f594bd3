"""
Downsampling Decoder Implementation

Implements IImageDecoder on top of an IImageCodec.
Loads images either at native size or reduced by the largest
power-of-two factor that still satisfies the requested bounds.
"""

import io
import logging
from typing import Optional
import numpy as np

from core.errors import DecodeIOError, InvalidArgumentError
from core.interfaces.codec_interface import IImageCodec, ImageDimensions
from core.interfaces.decoder_interface import IImageDecoder, ImageSource
from core.codec.opencv_codec import OpenCVImageCodec
from core.decoder.sample_factor import computeSampleFactor, isPowerOfTwo


logger = logging.getLogger(__name__)


# Bytes pulled from a stream per read while parsing a header
HEADER_CHUNK_SIZE = 8192


def _requireStream(source) -> None:
    """Reject sources that are neither byte-like nor readable."""
    if source is None or not hasattr(source, "read"):
        raise InvalidArgumentError(f"Unsupported image source: {type(source).__name__}")


def _requireBytes(chunk) -> bytes:
    """Reject chunks from text-mode streams."""
    if not isinstance(chunk, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(
            f"Image source must be a binary stream, read() returned {type(chunk).__name__}"
        )
    return bytes(chunk)


def readImageSource(source: ImageSource) -> bytes:
    """
    Read the complete encoded image from a source.
    
    Byte-like sources are returned as bytes. Streams are read from
    their current position to the end.
    
    Args:
        source: Bytes or binary file-like object.
        
    Returns:
        bytes: Encoded image contents.
        
    Raises:
        DecodeIOError: If the stream cannot be read or is closed.
        InvalidArgumentError: If the source is not a binary source.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    
    _requireStream(source)
    
    try:
        data = source.read()
    except (OSError, ValueError) as e:
        # ValueError is raised for reads on a closed file
        raise DecodeIOError(f"Failed to read image source: {e}") from e
    
    if data is None:
        raise DecodeIOError("Image source returned no data (non-blocking stream?)")
    
    return _requireBytes(data)


class HeaderStream(io.RawIOBase):
    """
    Seekable read-only view of a stream from its current position.
    
    Chunks read from the wrapped stream are kept, so a header parser
    can seek back over them. The wrapped stream only moves forward and
    only as far as the parser reads; it is never rewound or closed.
    """
    
    def __init__(self, stream, chunkSize: int = HEADER_CHUNK_SIZE):
        super().__init__()
        self._stream = stream
        self._chunkSize = chunkSize
        self._buffer = bytearray()
        self._position = 0
        self._exhausted = False
    
    def readable(self) -> bool:
        return True
    
    def seekable(self) -> bool:
        return True
    
    def readinto(self, target) -> int:
        self._fill(self._position + len(target))
        chunk = self._buffer[self._position:self._position + len(target)]
        target[:len(chunk)] = chunk
        self._position += len(chunk)
        return len(chunk)
    
    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            self._fill(None)
            position = len(self._buffer) + offset
        else:
            raise ValueError(f"Invalid whence: {whence}")
        
        if position < 0:
            raise ValueError(f"Negative seek position: {position}")
        self._position = position
        return position
    
    def tell(self) -> int:
        return self._position
    
    def _fill(self, size: Optional[int]) -> None:
        """Read chunks until the buffer holds size bytes (None: to EOF)."""
        while not self._exhausted and (size is None or len(self._buffer) < size):
            try:
                chunk = self._stream.read(self._chunkSize)
            except (OSError, ValueError) as e:
                raise DecodeIOError(f"Failed to read image source: {e}") from e
            
            if not chunk:
                self._exhausted = True
            else:
                self._buffer += _requireBytes(chunk)


class DownsamplingDecoder(IImageDecoder):
    """
    Bounds-constrained image decoder.
    
    Probes the header for native dimensions, picks the sample factor
    and decodes once at that reduced resolution. For the two-pass load,
    streams are read into memory once, so non-seekable sources work.
    A plain probe reads a stream only as far as its header.
    
    Stateless: safe to share across threads.
    
    Follows:
    - SRP: Only handles decode orchestration
    - DIP: Depends on IImageCodec abstraction
    """
    
    def __init__(self, codec: Optional[IImageCodec] = None):
        """
        Initialize DownsamplingDecoder.
        
        Args:
            codec: Codec implementation (defaults to OpenCVImageCodec).
        """
        self._codec = codec if codec is not None else OpenCVImageCodec()
    
    def probeDimensions(self, source: ImageSource) -> ImageDimensions:
        """Determine native dimensions, reading streams only up to the header."""
        if isinstance(source, (bytes, bytearray, memoryview)):
            return self._codec.probeDimensions(bytes(source))
        
        _requireStream(source)
        return self._codec.probeDimensions(HeaderStream(source))
    
    def computeSampleFactor(
        self,
        native: ImageDimensions,
        requestedWidth: int,
        requestedHeight: int
    ) -> int:
        """Calculate the sample factor for the given bounds."""
        return computeSampleFactor(native, requestedWidth, requestedHeight)
    
    def decodeAt(self, source: ImageSource, sampleFactor: int) -> np.ndarray:
        """Decode the source at 1/sampleFactor linear resolution."""
        if not isPowerOfTwo(sampleFactor):
            raise InvalidArgumentError(
                f"Sample factor must be a positive power of two, got {sampleFactor}"
            )
        
        return self._codec.decode(readImageSource(source), sampleFactor)
    
    def loadBounded(
        self,
        source: ImageSource,
        requestedWidth: int,
        requestedHeight: int
    ) -> np.ndarray:
        """Decode as small as possible while staying within the bounds."""
        # Reject bad bounds before the stream is consumed
        if requestedWidth <= 0 or requestedHeight <= 0:
            raise InvalidArgumentError(
                f"Requested bounds must be positive, got {requestedWidth}x{requestedHeight}"
            )
        
        data = readImageSource(source)
        native = self._codec.probeDimensions(data)
        sampleFactor = computeSampleFactor(native, requestedWidth, requestedHeight)
        
        logger.debug(
            f"Loading {native.width}x{native.height} for bounds "
            f"{requestedWidth}x{requestedHeight} with sample factor {sampleFactor}"
        )
        
        return self._codec.decode(data, sampleFactor)
    
    def loadFull(self, source: ImageSource) -> np.ndarray:
        """Decode the source at native resolution."""
        return self.decodeAt(source, 1)