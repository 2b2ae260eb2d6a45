"""Shared fixtures for notification channel tests"""

import pytest

from notification_channels import Importance, NotificationChannelSpec
from os_interfaces.base import ChannelRegistry


class FakeChannelRegistry(ChannelRegistry):
  """In-memory registry that records every registration call"""

  def __init__(self, supported: bool = True):
    self.supported = supported
    self.channels: dict[str, NotificationChannelSpec] = {}
    self.created: list[NotificationChannelSpec] = []

  def supports_channels(self) -> bool:
    return self.supported

  def has_channel(self, channel_id: str) -> bool:
    return channel_id in self.channels

  def create_channel(self, spec: NotificationChannelSpec) -> None:
    self.created.append(spec)
    self.channels.setdefault(spec.id, spec)


@pytest.fixture
def registry():
  return FakeChannelRegistry()


@pytest.fixture
def legacy_registry():
  """Registry of a host without channel support"""
  return FakeChannelRegistry(supported=False)


@pytest.fixture
def alerts_spec():
  return NotificationChannelSpec(
    id="lingoost_notification_channel",
    display_name="Lingoost Alerts",
    description="Main alerts",
    importance=Importance.HIGH,
    vibration=True,
    lights=True,
  )
