"""Exception types raised by Speedy."""

from __future__ import annotations


class SpeedyError(Exception):
    """Base class for all Speedy failures."""


class ConfigurationError(SpeedyError, ValueError):
    """Invalid settings detected before any traversal starts."""


class ThreadPoolError(SpeedyError, RuntimeError):
    """The worker pool could not be created."""


class NotificationError(SpeedyError):
    """A desktop notification could not be delivered."""
