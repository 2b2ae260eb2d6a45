"""Notification channel provisioning"""

from .models import Importance, NotificationChannelSpec, ProvisionOutcome
from .defaults import DEFAULT_CHANNEL, DEFAULT_CHANNEL_ID
from .exceptions import AppError
from .config_parser import ChannelConfig, load_channels, parse_channel_config
from .provisioner import ChannelProvisioner

__all__ = [
  "AppError",
  "ChannelConfig",
  "ChannelProvisioner",
  "DEFAULT_CHANNEL",
  "DEFAULT_CHANNEL_ID",
  "Importance",
  "NotificationChannelSpec",
  "ProvisionOutcome",
  "load_channels",
  "parse_channel_config",
]
