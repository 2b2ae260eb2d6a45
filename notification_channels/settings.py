"""
Configuration for Lingoost notification setup
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_config_dir

# Load environment variables from .env file
load_dotenv()

APP_NAME = os.getenv("LINGOOST_APP_NAME", "lingoost")
CHANNELS_FILE_NAME = "channels.yaml"
REGISTRY_FILE_NAME = "notification_channels.yaml"


def default_config_dir() -> Path:
  return Path(user_config_dir(APP_NAME, ensure_exists=True))


def channels_config_path() -> Path:
  """Channel config path, `LINGOOST_CHANNELS_CONFIG` wins over the default."""
  override = os.getenv("LINGOOST_CHANNELS_CONFIG")
  if override:
    return Path(override).expanduser()
  return default_config_dir() / CHANNELS_FILE_NAME


class AppConfig:
  """Application configuration settings"""

  APP_NAME = APP_NAME

  # Logging
  LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
  LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

  # Android exposes notification channels from Oreo (API 26) onwards
  ANDROID_CHANNELS_MIN_SDK = 26
