# Where: devprops.config.__init__
# What: Expose configuration loading and path resolution helpers.
# Why: Give embedding applications one import path for logging settings.

from .config import (
    Config,
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    configure_logging,
)
from .paths import ENV_CONFIG_PATH, default_config_path, resolve_config_path

__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "ENV_CONFIG_PATH",
    "configure_logging",
    "default_config_path",
    "resolve_config_path",
]
