"""Errors raised or logged by notification setup"""

from typing import Literal, Optional

ErrorSource = Literal[
  "config",  # Channel configuration file problems
  "platform",  # Host notification service failures
]


class AppError(Exception):
  """Error with a stable name and source.

  Platform failures are wrapped in this before being logged, so log lines
  carry the failing step and the original exception type.
  """

  def __init__(
    self,
    description: str,
    name: str,
    source: ErrorSource,
    caused_by: Optional[str] = None,
  ):
    self.description = description
    self.name = name
    self.source = source
    self.caused_by = caused_by
    super().__init__(description)

  def __str__(self) -> str:
    return f"[{self.source}/{self.name}] {self.description}"

  @classmethod
  def from_exception(
    cls,
    e: Exception,
    name: str,
    source: ErrorSource,
    context: Optional[str] = None,
  ) -> "AppError":
    """Wrap an existing exception, keeping its type and message in `caused_by`"""
    original_msg = str(e)
    description = f"{context}: {original_msg}" if context else original_msg
    return cls(
      description=description,
      name=name,
      source=source,
      caused_by=f"{e.__class__.__name__}: {original_msg}",
    )
