"""
Sample Factor Calculation

Chooses the power-of-two reduction for a downsampled decode.
The factor is the largest power of two that keeps both decoded
dimensions at or above the requested bounds.
"""

from core.errors import InvalidArgumentError
from core.interfaces.codec_interface import ImageDimensions


def isPowerOfTwo(value: int) -> bool:
    """Check whether value is a positive power of two."""
    return value > 0 and (value & (value - 1)) == 0


def computeSampleFactor(
    native: ImageDimensions,
    requestedWidth: int,
    requestedHeight: int
) -> int:
    """
    Calculate the largest power-of-two sample factor for a decode.
    
    Doubling continues only while halving the image once more would
    still leave both dimensions strictly larger than requested.
    
    Args:
        native: Native image dimensions.
        requestedWidth: Minimum width the decoded image must keep.
        requestedHeight: Minimum height the decoded image must keep.
        
    Returns:
        int: Sample factor (1, 2, 4, 8, ...).
        
    Raises:
        InvalidArgumentError: If any dimension or bound is not positive.
        
    Example:
        >>> computeSampleFactor(ImageDimensions(2000, 2000), 400, 400)
        4
    """
    if requestedWidth <= 0 or requestedHeight <= 0:
        raise InvalidArgumentError(
            f"Requested bounds must be positive, got {requestedWidth}x{requestedHeight}"
        )
    if native.width <= 0 or native.height <= 0:
        raise InvalidArgumentError(f"Native dimensions must be positive, got {native}")
    
    sampleFactor = 1
    
    if native.height > requestedHeight or native.width > requestedWidth:
        halfHeight = native.height // 2
        halfWidth = native.width // 2
        
        while (halfHeight // sampleFactor) > requestedHeight \
                and (halfWidth // sampleFactor) > requestedWidth:
            sampleFactor *= 2
    
    return sampleFactor
