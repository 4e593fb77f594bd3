"""
Decode Errors Module

Typed failures raised by the decoding layer.
Each error carries a DecodeErrorKind so callers can branch on the
failure category without parsing messages.
"""

from enum import Enum


class DecodeErrorKind(Enum):
    """Category of a decoding failure."""
    INVALID_FORMAT = "invalid_format"
    IO_ERROR = "io_error"
    OUT_OF_MEMORY = "out_of_memory"
    INVALID_ARGUMENT = "invalid_argument"


class DecodeError(Exception):
    """
    Base class for all decoding failures.
    
    Attributes:
        kind: Category of the failure.
    """
    
    kind: DecodeErrorKind = DecodeErrorKind.INVALID_FORMAT
    
    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, message={str(self)!r})"


class InvalidFormatError(DecodeError):
    """Source bytes are not a decodable image."""
    kind = DecodeErrorKind.INVALID_FORMAT


class DecodeIOError(DecodeError):
    """Reading the source failed (including a prematurely closed stream)."""
    kind = DecodeErrorKind.IO_ERROR


class OutOfMemoryError(DecodeError):
    """The decoded pixel buffer could not be allocated."""
    kind = DecodeErrorKind.OUT_OF_MEMORY


class InvalidArgumentError(DecodeError, ValueError):
    """Requested bounds or sample factor are out of range."""
    kind = DecodeErrorKind.INVALID_ARGUMENT
