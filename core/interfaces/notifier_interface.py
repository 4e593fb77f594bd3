"""
Notifier Interface Module

Defines the abstract interface for announcing new media files
to a media index.
"""

from abc import ABC, abstractmethod


class IMediaNotifier(ABC):
    """
    Abstract interface for media-index notification.
    
    Notification is fire-and-forget: implementations must not raise
    and do not report delivery back to the caller.
    """
    
    @abstractmethod
    def notify(self, filepath: str) -> None:
        """
        Signal that a new media file exists at filepath.
        
        Args:
            filepath: Path of the newly written file.
        """
        pass
