"""Android entrypoint for the packaged Lingoost app.

Injects Android OS interfaces into the shared startup hook.
"""

from __future__ import annotations

from entrypoints.app_core import configure_logging, provision_channels
from os_interfaces.android import AndroidNotificationManager, android_channel_registry
from os_interfaces.base import OSImplementations


def main() -> None:
  configure_logging()
  os_impl = OSImplementations(
    notification_manager_cls=AndroidNotificationManager,
    channel_registry_factory=android_channel_registry,
  )
  provision_channels(os_impl)


if __name__ == "__main__":
  main()
