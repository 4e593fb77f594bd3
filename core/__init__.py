# Core module for Media Store
# Contains interfaces and implementations for decoding, encoding, writing and notification

from core.errors import (
    DecodeErrorKind,
    DecodeError,
    InvalidFormatError,
    DecodeIOError,
    OutOfMemoryError,
    InvalidArgumentError,
)
from core.interfaces.codec_interface import IImageCodec, ImageDimensions
from core.interfaces.decoder_interface import IImageDecoder, ImageSource
from core.interfaces.writer_interface import IImageWriter, WriteStatus
from core.interfaces.notifier_interface import IMediaNotifier
from core.codec.opencv_codec import OpenCVImageCodec
from core.decoder.downsampling_decoder import DownsamplingDecoder
from core.decoder.sample_factor import computeSampleFactor
from core.writer.local_writer import LocalImageWriter
from core.notifier.callback_notifier import CallbackMediaNotifier

__all__ = [
    "DecodeErrorKind",
    "DecodeError",
    "InvalidFormatError",
    "DecodeIOError",
    "OutOfMemoryError",
    "InvalidArgumentError",
    "IImageCodec",
    "ImageDimensions",
    "IImageDecoder",
    "ImageSource",
    "IImageWriter",
    "WriteStatus",
    "IMediaNotifier",
    "OpenCVImageCodec",
    "DownsamplingDecoder",
    "computeSampleFactor",
    "LocalImageWriter",
    "CallbackMediaNotifier",
]
