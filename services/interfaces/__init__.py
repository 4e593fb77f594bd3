"""
Services Interfaces Package.

Exports all service interfaces for the Media Store.
"""

from services.interfaces.base_service_interface import (
    ServiceResult,
    BaseService
)

from services.interfaces.config_service_interface import IConfigService

from services.interfaces.media_service_interface import IMediaService


__all__ = [
    # Base
    "ServiceResult",
    "BaseService",
    # Config
    "IConfigService",
    # Media
    "IMediaService",
]
