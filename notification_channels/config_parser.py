"""
Notification channel configuration parser
Parses YAML files declaring the channels the app provisions on startup
"""

import logging
from pathlib import Path
from typing import Dict

import yaml
from pydantic import BaseModel, ValidationError, model_validator

from .defaults import DEFAULT_CHANNEL
from .exceptions import AppError
from .models import NotificationChannelSpec

logger = logging.getLogger(__name__)


class ChannelConfig(BaseModel):
  """Channels keyed by id, in file order"""

  channels: Dict[str, NotificationChannelSpec]

  @model_validator(mode="after")
  def validate_keys(self):
    """Ensure each key matches the id of its channel"""
    for key, channel in self.channels.items():
      if key != channel.id:
        raise ValueError(f"Channel key '{key}' does not match id '{channel.id}'")
    return self

  def specs(self) -> list[NotificationChannelSpec]:
    return list(self.channels.values())


def parse_channel_config(config_path: Path | str) -> ChannelConfig:
  """
  Parse channel configuration from a YAML file

  Args:
      config_path: Path to the YAML configuration file

  Returns:
      ChannelConfig with one spec per declared channel

  Raises:
      FileNotFoundError: If config file doesn't exist
      yaml.YAMLError: If YAML is malformed
      ValueError: If the document is not a mapping of channel ids
      pydantic.ValidationError: If a channel doesn't match the schema
  """
  config_path = Path(config_path)

  if not config_path.exists():
    raise FileNotFoundError(f"Configuration file not found: {config_path}")

  with open(config_path, "r", encoding="utf-8") as f:
    raw_config = yaml.safe_load(f)

  if raw_config is None:
    return ChannelConfig(channels={})
  if not isinstance(raw_config, dict):
    raise ValueError(
      f"Channel config must map channel ids to settings, got {type(raw_config).__name__}"
    )

  channels = {}
  for channel_id, config in raw_config.items():
    match config:
      case dict():
        channels[str(channel_id)] = {"id": str(channel_id), **config}
      case _:
        raise ValueError(f"Channel '{channel_id}': settings must be a mapping")

  return ChannelConfig(channels=channels)


def load_channels(
  config_path: Path | str | None = None, strict: bool = False
) -> list[NotificationChannelSpec]:
  """Channels to provision, falling back to the built-in Lingoost channel.

  A missing or empty file yields the default channel. An invalid file is logged
  and also yields the default, unless `strict` is set, in which case it raises
  AppError with source "config".
  """
  if config_path is None or not Path(config_path).exists():
    return [DEFAULT_CHANNEL]

  try:
    specs = parse_channel_config(config_path).specs()
  except (yaml.YAMLError, ValueError, ValidationError) as e:
    error = AppError.from_exception(
      e,
      name="INVALID_CHANNEL_CONFIG",
      source="config",
      context=f"Invalid channel config {config_path}",
    )
    if strict:
      raise error from e
    logger.error(str(error))
    return [DEFAULT_CHANNEL]

  if not specs:
    logger.info(f"No channels declared in {config_path}, using default channel")
    return [DEFAULT_CHANNEL]
  return specs
