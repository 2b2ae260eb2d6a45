"""Linux entrypoint for the Lingoost app.

This entrypoint injects Linux OS interface implementations.
"""

from __future__ import annotations

from entrypoints.app_core import configure_logging, provision_channels
from os_interfaces.base import OSImplementations
from os_interfaces.linux import LinuxChannelRegistry, LinuxNotificationManager


def main() -> None:
  configure_logging()
  os_impl = OSImplementations(
    notification_manager_cls=LinuxNotificationManager,
    channel_registry_factory=LinuxChannelRegistry,
  )
  provision_channels(os_impl)


if __name__ == "__main__":
  main()
