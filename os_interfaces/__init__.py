"""OS interface module - platform-specific implementations

Since we build separate executables for each platform,
import the appropriate implementation directly in the main entry points:
- entrypoints.lingoost_app_linux imports from os_interfaces.linux
- entrypoints.lingoost_app_android imports from os_interfaces.android
"""

from .base import ChannelRegistry, NotificationManager, OSImplementations

__all__ = [
  "ChannelRegistry",
  "NotificationManager",
  "OSImplementations",
]
