"""Notification channel data model"""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Importance(IntEnum):
  """Ordered interruption level of a channel.

  Values line up with Android's NotificationManager.IMPORTANCE_* constants.
  """

  MIN = 1
  LOW = 2
  DEFAULT = 3
  HIGH = 4
  URGENT = 5


class ProvisionOutcome(str, Enum):
  CREATED = "created"
  EXISTING = "existing"
  UNSUPPORTED = "unsupported"
  UNAVAILABLE = "unavailable"
  FAILED = "failed"


class NotificationChannelSpec(BaseModel):
  """Desired notification channel.

  `id` is the idempotency key: once a channel with this id exists on a device
  its metadata is owned by the OS and later specs with the same id are ignored.
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  id: str
  display_name: str = Field(alias="name")
  description: str = ""
  importance: Importance = Importance.DEFAULT
  vibration: bool = False
  lights: bool = False

  @field_validator("id")
  @classmethod
  def validate_id(cls, v: str) -> str:
    if not v.strip():
      raise ValueError("Channel id must be non-empty")
    return v

  @field_validator("importance", mode="before")
  @classmethod
  def parse_importance(cls, v):
    """Accept enum members, ints, or names like "high" """
    match v:
      case Importance():
        return v
      case str():
        try:
          return Importance[v.strip().upper()]
        except KeyError as e:
          allowed = ", ".join(i.name.lower() for i in Importance)
          raise ValueError(f"Unknown importance '{v}', expected one of: {allowed}") from e
      case _:
        return v
