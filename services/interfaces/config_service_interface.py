"""
Config Service Interface Module.

Defines the interface for centralized configuration management.
The config service loads and provides access to all application settings.

Follows:
- SRP: Only handles configuration management
- DIP: Other services depend on this abstraction
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IConfigService(ABC):
    """
    Interface for configuration management.
    
    Provides centralized access to all application configuration.
    Supports dot notation for nested config access.
    """
    
    @abstractmethod
    def loadConfig(self, configPath: str) -> bool:
        """
        Load configuration from a JSON file.
        
        Args:
            configPath: Path to the configuration file.
            
        Returns:
            bool: True if loaded successfully, False otherwise.
        """
        pass
    
    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.
        
        Supports dot notation for nested access:
        - "app" -> config["app"]
        - "storage.pngCompression" -> config["storage"]["pngCompression"]
        
        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.
            
        Returns:
            Configuration value or default.
        """
        pass
    
    @abstractmethod
    def getServiceConfig(self, serviceName: str) -> Dict[str, Any]:
        """
        Get all configuration for a specific section.
        
        Args:
            serviceName: Name of the section (e.g., "storage", "worker").
            
        Returns:
            Dictionary with section-specific configuration.
        """
        pass
    
    @abstractmethod
    def getAppName(self) -> str:
        """
        Get the application name used to namespace saved files.
        
        Returns:
            str: Application name.
        """
        pass
    
    @abstractmethod
    def getPicturesDirectory(self) -> str:
        """
        Get the public pictures directory (album parent).
        
        Returns:
            str: Pictures directory with "~" expanded.
        """
        pass
    
    @abstractmethod
    def getDebugBasePath(self) -> str:
        """
        Get the base path for debug output.
        
        Returns:
            str: Base path for debug files.
        """
        pass
    
    @abstractmethod
    def isDebugEnabled(self) -> bool:
        """
        Check if debug mode is enabled globally.
        
        Returns:
            bool: True if debug is enabled.
        """
        pass
    
    @abstractmethod
    def setDebugEnabled(self, enabled: bool) -> None:
        """
        Enable or disable debug mode globally.
        
        Args:
            enabled: True to enable debug mode.
        """
        pass
