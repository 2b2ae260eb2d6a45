"""Tests for ChannelProvisioner"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from notification_channels import (
  ChannelProvisioner,
  Importance,
  NotificationChannelSpec,
  ProvisionOutcome,
)


def test_creates_channel_with_exact_fields(registry, alerts_spec):
  ChannelProvisioner(registry).ensure(alerts_spec)

  assert len(registry.created) == 1
  created = registry.created[0]
  assert created.id == "lingoost_notification_channel"
  assert created.display_name == "Lingoost Alerts"
  assert created.description == "Main alerts"
  assert created.importance == Importance.HIGH
  assert created.vibration is True
  assert created.lights is True


def test_ensure_is_idempotent(registry, alerts_spec):
  provisioner = ChannelProvisioner(registry)
  provisioner.ensure(alerts_spec)
  state_after_one = dict(registry.channels)

  provisioner.ensure(alerts_spec)

  assert registry.channels == state_after_one
  assert len(registry.created) == 1


def test_unsupported_platform_is_noop(legacy_registry, alerts_spec):
  ChannelProvisioner(legacy_registry).ensure(alerts_spec)

  assert legacy_registry.created == []
  assert legacy_registry.channels == {}


def test_absent_service_handle_is_noop(alerts_spec):
  provisioner = ChannelProvisioner(None)

  assert provisioner.ensure(alerts_spec) is None
  assert provisioner.ensure_all([alerts_spec]) == {
    alerts_spec.id: ProvisionOutcome.UNAVAILABLE
  }


def test_reprovision_with_different_name_does_not_fail(registry, alerts_spec):
  provisioner = ChannelProvisioner(registry)
  provisioner.ensure(alerts_spec)

  renamed = alerts_spec.model_copy(update={"display_name": "Renamed"})
  provisioner.ensure(renamed)


def test_platform_error_is_swallowed(alerts_spec, caplog):
  registry = MagicMock()
  registry.supports_channels.return_value = True
  registry.has_channel.return_value = False
  registry.create_channel.side_effect = RuntimeError("binder died")

  outcomes = ChannelProvisioner(registry).ensure_all([alerts_spec])

  assert outcomes == {alerts_spec.id: ProvisionOutcome.FAILED}
  assert "binder died" in caplog.text
  assert "[platform/CHANNEL_PROVISIONING_FAILED]" in caplog.text


def test_capability_check_error_is_swallowed(alerts_spec):
  registry = MagicMock()
  registry.supports_channels.side_effect = RuntimeError("no such field SDK_INT")

  ChannelProvisioner(registry).ensure(alerts_spec)

  registry.create_channel.assert_not_called()


def test_ensure_all_reports_outcomes(registry, alerts_spec):
  other = NotificationChannelSpec(id="lessons", display_name="Lessons")
  registry.channels[other.id] = other

  outcomes = ChannelProvisioner(registry).ensure_all([alerts_spec, other, alerts_spec])

  assert outcomes == {
    alerts_spec.id: ProvisionOutcome.CREATED,
    "lessons": ProvisionOutcome.EXISTING,
  }
  assert registry.created == [alerts_spec]


def test_ensure_all_unsupported(legacy_registry, alerts_spec):
  outcomes = ChannelProvisioner(legacy_registry).ensure_all([alerts_spec])

  assert outcomes == {alerts_spec.id: ProvisionOutcome.UNSUPPORTED}


class TestNotificationChannelSpec:
  """Tests for the channel model"""

  @pytest.mark.parametrize("channel_id", ["", "   "])
  def test_empty_id_rejected(self, channel_id):
    with pytest.raises(ValidationError, match="non-empty"):
      NotificationChannelSpec(id=channel_id, display_name="x")

  def test_defaults(self):
    spec = NotificationChannelSpec(id="general", display_name="General")

    assert spec.description == ""
    assert spec.importance == Importance.DEFAULT
    assert spec.vibration is False
    assert spec.lights is False

  @pytest.mark.parametrize(
    "value,expected",
    [("high", Importance.HIGH), ("URGENT", Importance.URGENT), (1, Importance.MIN)],
  )
  def test_importance_parsing(self, value, expected):
    spec = NotificationChannelSpec(id="c", name="C", importance=value)
    assert spec.importance == expected

  def test_unknown_importance(self):
    with pytest.raises(ValidationError, match="Unknown importance"):
      NotificationChannelSpec(id="c", name="C", importance="loud")

  def test_importance_is_ordered(self):
    assert Importance.MIN < Importance.LOW < Importance.DEFAULT
    assert Importance.DEFAULT < Importance.HIGH < Importance.URGENT

  def test_spec_is_frozen(self, alerts_spec):
    with pytest.raises(ValidationError):
      alerts_spec.id = "other"
