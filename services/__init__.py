# Services module for Media Store
# Contains orchestration services

# Service implementations are in services/impl/
# Import them directly from there:
# from services.impl.config_service import ConfigService
# from services.impl.media_service import MediaService

__all__ = []
