"""
Send a system notification on a provisioned channel.

Provisions the configured channels first (see
~/.config/lingoost/channels.yaml on Linux), then posts the notification.

Usage:
    python -m notification.main <title> <body> [--channel ID] [--wait]
"""

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from entrypoints.app_core import configure_logging, provision_channels
from notification_channels import DEFAULT_CHANNEL_ID, load_channels
from notification_channels.models import ProvisionOutcome
from notification_channels.settings import channels_config_path
from os_interfaces.base import OSImplementations

logger = logging.getLogger(__name__)

# Notification bodies longer than this are truncated
MAX_BODY_LENGTH = 200


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    description="Send a system notification on a Lingoost notification channel."
  )
  parser.add_argument("title", help="Notification title")
  parser.add_argument("body", help="Notification body text")
  parser.add_argument(
    "--channel",
    default=DEFAULT_CHANNEL_ID,
    help=f"Channel id to post on (default: {DEFAULT_CHANNEL_ID})",
  )
  parser.add_argument(
    "--wait",
    action="store_true",
    help="Wait until the notification is clicked or dismissed",
  )
  return parser


def truncate(text: str, max_length: int = MAX_BODY_LENGTH) -> str:
  if len(text) <= max_length:
    return text
  return text[:max_length] + "..."


async def send_notification(
  os_impl: OSImplementations,
  title: str,
  body: str,
  channel_id: str,
  wait: bool = False,
) -> None:
  """Post a notification, optionally waiting for the user to react to it."""
  notifier = os_impl.notification_manager(channels=load_channels(channels_config_path()))
  done_event = asyncio.Event()

  def on_clicked():
    logger.info("Notification clicked")
    done_event.set()

  def on_dismissed():
    logger.info("Notification dismissed")
    done_event.set()

  await notifier.create_notification(
    title=title,
    body=truncate(body),
    channel_id=channel_id,
    on_clicked=on_clicked,
    on_dismissed=on_dismissed,
  )

  if wait:
    logger.info("Waiting for notification interaction...")
    await done_event.wait()


async def main(
  os_impl: OSImplementations | None = None, argv: Sequence[str] | None = None
) -> None:
  args = build_parser().parse_args(argv)

  if os_impl is None:
    from os_interfaces.linux import LinuxChannelRegistry, LinuxNotificationManager

    os_impl = OSImplementations(
      notification_manager_cls=LinuxNotificationManager,
      channel_registry_factory=LinuxChannelRegistry,
    )

  outcomes = provision_channels(os_impl)
  if args.channel not in outcomes:
    available = ", ".join(outcomes.keys())
    logger.error(f"Channel '{args.channel}' not found in config.")
    logger.error(f"Available channels: {available}")
    sys.exit(1)
  if outcomes[args.channel] == ProvisionOutcome.FAILED:
    logger.warning(f"Channel '{args.channel}' could not be provisioned, posting anyway")

  await send_notification(os_impl, args.title, args.body, args.channel, wait=args.wait)


def run() -> None:
  configure_logging()
  asyncio.run(main())


if __name__ == "__main__":
  run()
