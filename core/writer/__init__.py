"""
Image Writer Module

Contains the local filesystem implementation of IImageWriter.
"""

from core.writer.local_writer import LocalImageWriter


__all__ = [
    "LocalImageWriter",
]
