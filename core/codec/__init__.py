"""
Image Codec Module

Contains the OpenCV-backed implementation of IImageCodec.
"""

from core.codec.opencv_codec import OpenCVImageCodec


__all__ = [
    "OpenCVImageCodec",
]
