"""
Media Notifier Module

Contains the callback-based implementation of IMediaNotifier.
"""

from core.notifier.callback_notifier import CallbackMediaNotifier, MediaListener


__all__ = [
    "CallbackMediaNotifier",
    "MediaListener",
]
