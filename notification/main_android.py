"""Android entrypoint for the `lingoost-notify` worker."""

import asyncio

from entrypoints.app_core import configure_logging
from notification.main import main
from os_interfaces.android import AndroidNotificationManager, android_channel_registry
from os_interfaces.base import OSImplementations


def run() -> None:
  configure_logging()
  os_impl = OSImplementations(
    notification_manager_cls=AndroidNotificationManager,
    channel_registry_factory=android_channel_registry,
  )
  asyncio.run(main(os_impl=os_impl))


if __name__ == "__main__":
  run()
