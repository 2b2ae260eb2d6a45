"""Built-in Lingoost channel"""

from .models import Importance, NotificationChannelSpec

DEFAULT_CHANNEL_ID = "lingoost_notification_channel"

DEFAULT_CHANNEL = NotificationChannelSpec(
  id=DEFAULT_CHANNEL_ID,
  display_name="Lingoost 알림",
  description="Lingoost 앱의 주요 알림",
  importance=Importance.HIGH,
  vibration=True,
  lights=True,
)
