"""WeChat hot-list push relay."""

from .config import ConfigError, PushConfig
from .runner import PushRunner

__all__ = [
    "ConfigError",
    "PushConfig",
    "PushRunner",
]

__version__ = "0.1.0"
