"""
Image Decoder Module

Contains bounds-constrained image loading:
- computeSampleFactor: Power-of-two factor selection
- DownsamplingDecoder: Probe, factor and decode orchestration
"""

from core.decoder.sample_factor import computeSampleFactor, isPowerOfTwo
from core.decoder.downsampling_decoder import DownsamplingDecoder, readImageSource


__all__ = [
    "computeSampleFactor",
    "isPowerOfTwo",
    "DownsamplingDecoder",
    "readImageSource",
]
