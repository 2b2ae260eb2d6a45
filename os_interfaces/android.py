"""Android-specific implementations of OS interfaces."""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, Optional

from jnius import PythonJavaClass, autoclass, cast, java_method  # type: ignore

from notification_channels.defaults import DEFAULT_CHANNEL, DEFAULT_CHANNEL_ID
from notification_channels.models import Importance, NotificationChannelSpec
from notification_channels.settings import AppConfig

from .base import ChannelRegistry, NotificationManager

logger = logging.getLogger(__name__)


# --- PyJNIus handles ---
PythonActivity = autoclass("org.kivy.android.PythonActivity")
Intent = autoclass("android.content.Intent")
IntentFilter = autoclass("android.content.IntentFilter")
PendingIntent = autoclass("android.app.PendingIntent")
NotificationManagerJava = autoclass("android.app.NotificationManager")
NotificationChannel = autoclass("android.app.NotificationChannel")
BuildVersion = autoclass("android.os.Build$VERSION")
NotificationCompatBuilder = autoclass("androidx.core.app.NotificationCompat$Builder")
NotificationCompat = autoclass("androidx.core.app.NotificationCompat")
AndroidRDrawable = autoclass("android.R$drawable")
Context = autoclass("android.content.Context")

ACTION_CLICK = "com.ludgi.lingoost.NOTIFICATION_CLICKED"
ACTION_DISMISS = "com.ludgi.lingoost.NOTIFICATION_DISMISSED"

_CHANNEL_IMPORTANCE = {
  Importance.MIN: NotificationManagerJava.IMPORTANCE_MIN,
  Importance.LOW: NotificationManagerJava.IMPORTANCE_LOW,
  Importance.DEFAULT: NotificationManagerJava.IMPORTANCE_DEFAULT,
  Importance.HIGH: NotificationManagerJava.IMPORTANCE_HIGH,
  Importance.URGENT: NotificationManagerJava.IMPORTANCE_MAX,
}

# Pre-Oreo devices ignore channels and read the priority off each notification
_COMPAT_PRIORITY = {
  Importance.MIN: NotificationCompat.PRIORITY_MIN,
  Importance.LOW: NotificationCompat.PRIORITY_LOW,
  Importance.DEFAULT: NotificationCompat.PRIORITY_DEFAULT,
  Importance.HIGH: NotificationCompat.PRIORITY_HIGH,
  Importance.URGENT: NotificationCompat.PRIORITY_MAX,
}


def _context():
  return PythonActivity.mActivity.getApplicationContext()


def _notification_service(ctx):
  service = ctx.getSystemService(Context.NOTIFICATION_SERVICE)
  if service is None:
    return None
  return cast("android.app.NotificationManager", service)


def _flags(base: int | None = None) -> int:
  flag_immutable = PendingIntent.FLAG_IMMUTABLE
  flag_update = PendingIntent.FLAG_UPDATE_CURRENT
  return (base or 0) | flag_immutable | flag_update


class AndroidChannelRegistry(ChannelRegistry):
  """Channel registry backed by android.app.NotificationManager."""

  def __init__(self, manager):
    self.manager = manager

  def supports_channels(self) -> bool:
    return BuildVersion.SDK_INT >= AppConfig.ANDROID_CHANNELS_MIN_SDK

  def has_channel(self, channel_id: str) -> bool:
    return self.manager.getNotificationChannel(channel_id) is not None

  def create_channel(self, spec: NotificationChannelSpec) -> None:
    channel = NotificationChannel(
      spec.id,
      spec.display_name,
      _CHANNEL_IMPORTANCE[spec.importance],
    )
    channel.setDescription(spec.description)
    channel.enableVibration(spec.vibration)
    channel.enableLights(spec.lights)
    self.manager.createNotificationChannel(channel)


def android_channel_registry() -> AndroidChannelRegistry | None:
  """Registry over the app's notification service, None if there is none."""
  manager = _notification_service(_context())
  if manager is None:
    return None
  return AndroidChannelRegistry(manager)


class _NotificationReceiver(PythonJavaClass):
  __javainterfaces__ = ["android/content/BroadcastReceiver"]
  __javacontext__ = "app"

  def __init__(self, on_clicked: Optional[Callable], on_dismissed: Optional[Callable]):
    super().__init__()
    self.on_clicked = on_clicked
    self.on_dismissed = on_dismissed

  @java_method("(Landroid/content/Context;Landroid/content/Intent;)V")
  def onReceive(self, _context, intent):
    try:
      action = intent.getAction()
      if action == ACTION_CLICK and self.on_clicked:
        self.on_clicked()
      elif action == ACTION_DISMISS and self.on_dismissed:
        self.on_dismissed()
    except Exception:  # pragma: no cover
      logger.exception("Notification callback failed")


def _rand_request_code() -> int:
  return random.randint(10_000, 99_999)


class AndroidNotificationManager(NotificationManager):
  """Android notification manager using PyJNIus NotificationCompat."""

  def __init__(self, channels: Iterable[NotificationChannelSpec] = (DEFAULT_CHANNEL,)):
    self.ctx = _context()
    self.manager = _notification_service(self.ctx)
    self.importance = {spec.id: spec.importance for spec in channels}

  async def create_notification(
    self,
    title: str,
    body: str,
    channel_id: Optional[str] = None,
    on_clicked: Optional[Callable] = None,
    on_dismissed: Optional[Callable] = None,
  ) -> None:
    if self.manager is None:
      logger.warning("Notification service unavailable, dropping '%s'", title)
      return

    channel_id = channel_id or DEFAULT_CHANNEL_ID
    receiver = _NotificationReceiver(on_clicked, on_dismissed)
    f = IntentFilter()
    f.addAction(ACTION_CLICK)
    f.addAction(ACTION_DISMISS)
    self.ctx.registerReceiver(receiver, f)

    notification_id = _rand_request_code()
    icon = self.ctx.getApplicationInfo().icon or AndroidRDrawable.ic_dialog_info

    click_intent = Intent(self.ctx, PythonActivity)
    click_intent.setAction(ACTION_CLICK)
    click_intent.putExtra("notification_id", notification_id)
    click_pi = PendingIntent.getBroadcast(
      self.ctx, notification_id, click_intent, _flags()
    )

    dismiss_intent = Intent(self.ctx, PythonActivity)
    dismiss_intent.setAction(ACTION_DISMISS)
    dismiss_intent.putExtra("notification_id", notification_id)
    dismiss_pi = PendingIntent.getBroadcast(
      self.ctx, notification_id + 1, dismiss_intent, _flags()
    )

    importance = self.importance.get(channel_id, Importance.DEFAULT)
    builder = (
      NotificationCompatBuilder(self.ctx, channel_id)
      .setSmallIcon(icon)
      .setContentTitle(title)
      .setContentText(body)
      .setAutoCancel(True)
      .setPriority(_COMPAT_PRIORITY[importance])
      .setDefaults(NotificationCompat.DEFAULT_ALL)
      .setContentIntent(click_pi)
      .setDeleteIntent(dismiss_pi)
    )

    self.manager.notify(notification_id, builder.build())
    logger.info("Notification %s created on channel %s", notification_id, channel_id)
