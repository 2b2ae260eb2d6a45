"""Abstract base classes for OS-specific interfaces"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
  from notification_channels.models import NotificationChannelSpec


class ChannelRegistry(ABC):
  """Host notification-channel registry.

  Channel creation on the host is create-if-absent: registering an id that
  already exists must not change the existing channel.
  """

  @abstractmethod
  def supports_channels(self) -> bool:
    """Whether the host exposes channel-based notifications"""
    raise NotImplementedError

  @abstractmethod
  def has_channel(self, channel_id: str) -> bool:
    """Whether a channel with this id is already registered"""
    raise NotImplementedError

  @abstractmethod
  def create_channel(self, spec: NotificationChannelSpec) -> None:
    """Register a channel

    Args:
      spec: Channel id, name, description, importance and delivery flags
    """
    raise NotImplementedError


class NotificationManager(ABC):
  """Abstract base class for notification management"""

  @abstractmethod
  async def create_notification(
    self,
    title: str,
    body: str,
    channel_id: Optional[str] = None,
    on_clicked: Optional[Callable] = None,
    on_dismissed: Optional[Callable] = None,
  ) -> None:
    """Create and show a notification

    Args:
      title: Notification title
      body: Notification body text
      channel_id: Channel to post on, the default Lingoost channel when None
      on_clicked: Optional callback when notification is clicked
      on_dismissed: Optional callback when notification is dismissed
    """
    raise NotImplementedError


@dataclass
class OSImplementations:
  """Per-platform bundle injected by the entrypoints.

  `channel_registry_factory` may return None when the host has no
  notification service.
  """

  notification_manager_cls: Callable[..., NotificationManager]
  channel_registry_factory: Callable[[], Optional[ChannelRegistry]]

  def notification_manager(self, *args, **kwargs) -> NotificationManager:
    return self.notification_manager_cls(*args, **kwargs)

  def channel_registry(self) -> Optional[ChannelRegistry]:
    return self.channel_registry_factory()
