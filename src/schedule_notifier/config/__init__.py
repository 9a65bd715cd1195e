"""
Package: config
Description: Settings and dispatcher configuration.
"""

from .dispatcher import DispatcherConfig
from .settings import Settings, settings

__all__ = [
    "DispatcherConfig",
    "Settings",
    "settings",
]
