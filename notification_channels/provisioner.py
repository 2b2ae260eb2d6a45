"""Idempotent notification channel provisioning"""

import logging
from typing import Iterable, Optional

from os_interfaces.base import ChannelRegistry

from .exceptions import AppError
from .models import NotificationChannelSpec, ProvisionOutcome

logger = logging.getLogger(__name__)


class ChannelProvisioner:
  """Makes sure notification channels exist before anything is posted.

  Provisioning is best effort: an absent registry, a platform without channel
  support, or a failing platform call all degrade to a no-op so app startup
  is never blocked by notification setup.
  """

  def __init__(self, registry: Optional[ChannelRegistry]):
    self.registry = registry

  def ensure(self, spec: NotificationChannelSpec) -> None:
    """Create the channel unless it already exists. Never raises platform errors."""
    self._provision(spec)

  def ensure_all(
    self, specs: Iterable[NotificationChannelSpec]
  ) -> dict[str, ProvisionOutcome]:
    """Provision each spec in order.

    Returns:
      Outcome per channel id. Repeated ids keep the first outcome.
    """
    outcomes: dict[str, ProvisionOutcome] = {}
    for spec in specs:
      if spec.id in outcomes:
        logger.debug(f"Channel '{spec.id}' listed twice, skipping duplicate")
        continue
      outcomes[spec.id] = self._provision(spec)
    return outcomes

  def _provision(self, spec: NotificationChannelSpec) -> ProvisionOutcome:
    if self.registry is None:
      logger.info(f"Notification service unavailable, skipping channel '{spec.id}'")
      return ProvisionOutcome.UNAVAILABLE

    try:
      if not self.registry.supports_channels():
        logger.debug(f"Platform has no notification channels, skipping '{spec.id}'")
        return ProvisionOutcome.UNSUPPORTED

      if self.registry.has_channel(spec.id):
        # Metadata of an existing channel belongs to the OS now
        logger.debug(f"Channel '{spec.id}' already exists")
        return ProvisionOutcome.EXISTING

      self.registry.create_channel(spec)
    except Exception as e:
      error = AppError.from_exception(
        e,
        name="CHANNEL_PROVISIONING_FAILED",
        source="platform",
        context=f"Could not provision channel '{spec.id}'",
      )
      logger.warning(str(error))
      return ProvisionOutcome.FAILED

    logger.info(
      f"Created notification channel '{spec.id}' ({spec.importance.name.lower()})"
    )
    return ProvisionOutcome.CREATED
