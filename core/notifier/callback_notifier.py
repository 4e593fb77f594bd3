"""
Callback Media Notifier Implementation

Implements IMediaNotifier by forwarding new file paths to registered
listener callables (e.g. a gallery indexer or thumbnail cache).
"""

import logging
import threading
from typing import Callable, List


from core.interfaces.notifier_interface import IMediaNotifier


logger = logging.getLogger(__name__)


MediaListener = Callable[[str], None]


class CallbackMediaNotifier(IMediaNotifier):
    """
    Media-index notifier that invokes listener callbacks.
    
    Listener failures are logged and never reach the caller.
    Registration is thread-safe; notify works on a snapshot so
    listeners may be added or removed while a notification runs.
    """
    
    def __init__(self, listeners: List[MediaListener] = None):
        """
        Initialize CallbackMediaNotifier.
        
        Args:
            listeners: Initial listener callables.
        """
        self._listeners: List[MediaListener] = list(listeners) if listeners else []
        self._lock = threading.Lock()
    
    def addListener(self, listener: MediaListener) -> None:
        """Register a listener."""
        with self._lock:
            self._listeners.append(listener)
    
    def removeListener(self, listener: MediaListener) -> bool:
        """
        Unregister a listener.
        
        Returns:
            bool: True if the listener was registered.
        """
        with self._lock:
            try:
                self._listeners.remove(listener)
                return True
            except ValueError:
                return False
    
    def notify(self, filepath: str) -> None:
        """Forward filepath to every listener."""
        with self._lock:
            listeners = list(self._listeners)
        
        if not listeners:
            logger.debug(f"No media listeners registered for {filepath}")
            return
        
        for listener in listeners:
            try:
                listener(filepath)
            except Exception as e:
                logger.warning(f"Media listener failed for {filepath}: {e}")
    
    @property
    def listenerCount(self) -> int:
        """Get number of registered listeners."""
        with self._lock:
            return len(self._listeners)
