"""Tests for the startup hook and the notification CLI"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from entrypoints.app_core import provision_channels
from notification import main as notification_main
from notification_channels import DEFAULT_CHANNEL_ID, ProvisionOutcome
from os_interfaces.base import OSImplementations


@pytest.fixture
def channels_file(tmp_path, monkeypatch):
  config_file = tmp_path / "channels.yaml"
  config_file.write_text(
    """
lingoost_notification_channel:
  name: "Lingoost Alerts"
  importance: high
lessons:
  name: "Lessons"
  importance: low
"""
  )
  monkeypatch.setenv("LINGOOST_CHANNELS_CONFIG", str(config_file))
  return config_file


def _os_impl(registry_factory, notifier=None):
  return OSImplementations(
    notification_manager_cls=lambda **kwargs: notifier,
    channel_registry_factory=registry_factory,
  )


def test_provision_default_channel(registry, tmp_path):
  outcomes = provision_channels(
    _os_impl(lambda: registry), config_path=tmp_path / "absent.yaml"
  )

  assert outcomes == {DEFAULT_CHANNEL_ID: ProvisionOutcome.CREATED}
  assert registry.created[0].id == DEFAULT_CHANNEL_ID


def test_provision_configured_channels(registry, channels_file):
  outcomes = provision_channels(_os_impl(lambda: registry))

  assert list(outcomes) == [DEFAULT_CHANNEL_ID, "lessons"]
  assert all(o == ProvisionOutcome.CREATED for o in outcomes.values())


def test_provision_without_service(tmp_path):
  outcomes = provision_channels(
    _os_impl(lambda: None), config_path=tmp_path / "absent.yaml"
  )

  assert outcomes == {DEFAULT_CHANNEL_ID: ProvisionOutcome.UNAVAILABLE}


def test_provision_survives_service_lookup_error(tmp_path, caplog):
  def broken_factory():
    raise RuntimeError("activity not attached")

  outcomes = provision_channels(
    _os_impl(broken_factory), config_path=tmp_path / "absent.yaml"
  )

  assert outcomes == {DEFAULT_CHANNEL_ID: ProvisionOutcome.UNAVAILABLE}
  assert "activity not attached" in caplog.text


def test_provision_on_legacy_platform(legacy_registry, tmp_path):
  outcomes = provision_channels(
    _os_impl(lambda: legacy_registry), config_path=tmp_path / "absent.yaml"
  )

  assert outcomes == {DEFAULT_CHANNEL_ID: ProvisionOutcome.UNSUPPORTED}
  assert legacy_registry.created == []


def test_truncate():
  assert notification_main.truncate("short") == "short"
  assert notification_main.truncate("x" * 250) == "x" * 200 + "..."


@pytest.mark.asyncio
async def test_cli_posts_on_channel(registry, channels_file):
  notifier = MagicMock()
  notifier.create_notification = AsyncMock()

  await notification_main.main(
    os_impl=_os_impl(lambda: registry, notifier),
    argv=["Time to practice", "Your streak is waiting", "--channel", "lessons"],
  )

  assert registry.has_channel("lessons")
  kwargs = notifier.create_notification.call_args.kwargs
  assert kwargs["title"] == "Time to practice"
  assert kwargs["body"] == "Your streak is waiting"
  assert kwargs["channel_id"] == "lessons"


@pytest.mark.asyncio
async def test_cli_unknown_channel_exits(registry, channels_file):
  notifier = MagicMock()
  notifier.create_notification = AsyncMock()

  with pytest.raises(SystemExit):
    await notification_main.main(
      os_impl=_os_impl(lambda: registry, notifier),
      argv=["Title", "Body", "--channel", "missing"],
    )

  notifier.create_notification.assert_not_called()
