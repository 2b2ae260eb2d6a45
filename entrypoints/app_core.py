"""Platform-agnostic startup hook.

The platform-specific entrypoints (Linux/Android) call `provision_channels`
exactly once, before any UI is shown, with their OS-interface bundle.

Contract:
- Inputs: an os-interface bundle `os_impl` with `channel_registry()`.
- Behavior: loads the channel config and provisions every channel. Never
  raises: notification setup must not stop the app from starting.
"""

from __future__ import annotations

import logging
from pathlib import Path

from notification_channels import AppError, ChannelProvisioner, load_channels
from notification_channels.models import ProvisionOutcome
from notification_channels.settings import AppConfig, channels_config_path
from os_interfaces.base import OSImplementations

logger = logging.getLogger(__name__)


def configure_logging() -> None:
  logging.basicConfig(
    level=getattr(logging, AppConfig.LOG_LEVEL.upper(), logging.INFO),
    format=AppConfig.LOG_FORMAT,
  )


def provision_channels(
  os_impl: OSImplementations, config_path: Path | str | None = None
) -> dict[str, ProvisionOutcome]:
  if config_path is None:
    config_path = channels_config_path()
  specs = load_channels(config_path)

  try:
    registry = os_impl.channel_registry()
  except Exception as e:
    error = AppError.from_exception(
      e,
      name="NOTIFICATION_SERVICE_LOOKUP_FAILED",
      source="platform",
      context="Notification service lookup failed",
    )
    logger.warning(str(error))
    registry = None

  outcomes = ChannelProvisioner(registry).ensure_all(specs)
  logger.info(
    "Notification channels: %s",
    ", ".join(f"{cid}={outcome.value}" for cid, outcome in outcomes.items()),
  )
  return outcomes
