"""Linux-specific implementations of OS interfaces"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

import yaml
from desktop_notifier import DesktopNotifier, Urgency
from platformdirs import user_config_dir

from notification_channels.defaults import DEFAULT_CHANNEL, DEFAULT_CHANNEL_ID
from notification_channels.models import Importance, NotificationChannelSpec
from notification_channels.settings import REGISTRY_FILE_NAME, AppConfig

from .base import ChannelRegistry, NotificationManager

logger = logging.getLogger(__name__)

_URGENCY = {
  Importance.MIN: Urgency.Low,
  Importance.LOW: Urgency.Low,
  Importance.DEFAULT: Urgency.Normal,
  Importance.HIGH: Urgency.Normal,
  Importance.URGENT: Urgency.Critical,
}


def urgency_for(importance: Importance) -> Urgency:
  return _URGENCY[importance]


class LinuxNotificationManager(NotificationManager):
  """Linux notification manager using desktop-notifier"""

  def __init__(
    self,
    app_name: str = AppConfig.APP_NAME,
    channels: Iterable[NotificationChannelSpec] = (DEFAULT_CHANNEL,),
  ):
    self.notifier = DesktopNotifier(app_name=app_name)
    self.importance = {spec.id: spec.importance for spec in channels}

  async def create_notification(
    self,
    title: str,
    body: str,
    channel_id: Optional[str] = None,
    on_clicked: Optional[Callable] = None,
    on_dismissed: Optional[Callable] = None,
  ) -> None:
    """Create and show a notification using desktop-notifier

    Desktop notifications have no channels, so the channel only picks the
    urgency. Unknown channels are sent with normal urgency.
    """
    importance = self.importance.get(channel_id or DEFAULT_CHANNEL_ID, Importance.DEFAULT)
    try:
      await self.notifier.send(
        title=title,
        message=body,
        urgency=urgency_for(importance),
        on_clicked=on_clicked,
        on_dismissed=on_dismissed,
      )
      logger.info(f"Notification sent: {title}")
    except Exception as e:
      logger.error(f"Failed to send notification: {e}")


class LinuxChannelRegistry(ChannelRegistry):
  """Channel registry persisted as YAML in the user config directory.

  Entries are only ever added. Once a channel id is stored its settings stay
  as first registered, the same way Android treats channel metadata.
  """

  def __init__(self, app_name: str = AppConfig.APP_NAME, config_dir: Path | None = None):
    self.config_dir = (
      Path(config_dir)
      if config_dir is not None
      else Path(user_config_dir(app_name, ensure_exists=True))
    )
    self.registry_file = self.config_dir / REGISTRY_FILE_NAME

  def _read(self) -> dict:
    """Stored channels, raising ValueError if the file exists but can't be used"""
    if not self.registry_file.exists():
      return {}
    try:
      with open(self.registry_file, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
      raise ValueError(f"Unreadable channel registry {self.registry_file}: {e}") from e
    if not isinstance(data, dict):
      raise ValueError(f"Malformed channel registry {self.registry_file}")
    return data

  def _save(self, channels: dict) -> None:
    # Dump fully before touching the registry so a failed write leaves it intact
    text = yaml.safe_dump(channels, default_flow_style=False, allow_unicode=True)
    self.config_dir.mkdir(parents=True, exist_ok=True)
    tmp_file = self.registry_file.with_name(self.registry_file.name + ".tmp")
    tmp_file.write_text(text, encoding="utf-8")
    tmp_file.replace(self.registry_file)
    logger.debug(f"Saved channel registry to {self.registry_file}")

  def supports_channels(self) -> bool:
    return True

  def has_channel(self, channel_id: str) -> bool:
    try:
      return channel_id in self._read()
    except ValueError as e:
      logger.error(f"Failed to load channel registry: {e}")
      return False

  def create_channel(self, spec: NotificationChannelSpec) -> None:
    """Add the channel unless present. Refuses to overwrite an unreadable registry."""
    channels = self._read()
    if spec.id in channels:
      return
    channels[spec.id] = {
      "name": spec.display_name,
      "description": spec.description,
      "importance": spec.importance.name.lower(),
      "vibration": spec.vibration,
      "lights": spec.lights,
    }
    self._save(channels)
