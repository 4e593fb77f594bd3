"""
Services Implementation Package.

Exports all service implementations for the Media Store.
"""

from services.impl.config_service import ConfigService
from services.impl.media_service import MediaService


__all__ = [
    "ConfigService",
    "MediaService",
]
