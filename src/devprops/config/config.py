"""Configuration management for devprops."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Final

from devprops.config.file_ops import write_text_file
from devprops.config.paths import resolve_config_path
from devprops.platform.logging import logger, setup_logger

_LEVEL_NAMES: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
)

# Escapes for TOML basic strings; other control characters use \uXXXX.
_TOML_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Logging configuration for applications embedding devprops."""

    # Log file path (console only when unset)
    log_file: Path | None = _path_field()

    # Level names understood by the logging module
    console_level: str = "INFO"
    file_level: str = "DEBUG"

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate level names."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.console_level = _validate_level(self.console_level, key="console_level")
        self.file_level = _validate_level(self.file_level, key="file_level")

    def save(self, path: Path | str | None = None, env: Mapping[str, str] | None = None) -> Path:
        """Save configuration as commented TOML.

        Args:
            path: Optional explicit target. Defaults to the resolved config path.
            env: Optional environment mapping consulted for the path override.

        Returns:
            Path: File the configuration was written to.
        """
        config_dict = asdict(self)

        # Convert Path objects to strings for serialization
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = resolve_config_path(path, env)
        write_text_file(target, self._render_toml(config_dict))
        logger.info(
            "Configuration saved to %s",
            target,
            extra={"value_event": "config.saved", "config_path": str(target)},
        )
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# devprops Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Console logging only when omitted")
        lines.append('# Example: log_file = "/path/to/logs/devprops.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Log levels: CRITICAL, ERROR, WARNING, INFO or DEBUG")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append(f"file_level = {self._format_toml_value(config['file_level'])}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{_escape_toml_string(str(value))}"'
        return str(value)

    @classmethod
    def load(
        cls, path: Path | str | None = None, env: Mapping[str, str] | None = None
    ) -> Config:
        """Load configuration from file.

        A missing file yields the defaults without writing anything.

        Args:
            path: Optional explicit path to the config file.
            env: Optional environment mapping consulted for the path override.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigParseError: If the file is not valid TOML.
            ConfigValidationError: If a key is unknown or a value is invalid.
        """
        config_file = resolve_config_path(path, env)

        if not config_file.exists():
            logger.debug(
                "No configuration file at %s; using defaults",
                config_file,
                extra={"value_event": "config.defaulted", "config_path": str(config_file)},
            )
            return cls()

        try:
            with config_file.open("rb") as handle:
                document = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigParseError(f"Invalid TOML in configuration file: {config_file}") from exc
        except OSError as exc:  # pragma: no cover - rare filesystem failure
            raise ConfigError(f"Failed to read configuration file: {config_file}") from exc

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(document) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key, value in document.items():
            if not isinstance(value, str):
                raise ConfigValidationError(f"{key} must be a string")

        instance = cls(**document)
        logger.info(
            "Configuration loaded from %s",
            config_file,
            extra={"value_event": "config.loaded", "config_path": str(config_file)},
        )
        return instance


def _validate_level(value: str, *, key: str) -> str:
    normalized = value.strip().upper()
    if normalized not in _LEVEL_NAMES:
        raise ConfigValidationError(f"{key} must be one of {', '.join(sorted(_LEVEL_NAMES))}")
    return normalized


def _escape_toml_string(value: str) -> str:
    parts: list[str] = []
    for char in value:
        escaped = _TOML_ESCAPES.get(char)
        if escaped is None and (ord(char) < 0x20 or ord(char) == 0x7F):
            escaped = f"\\u{ord(char):04X}"
        parts.append(escaped if escaped is not None else char)
    return "".join(parts)


def configure_logging(config: Config) -> logging.Logger:
    """Apply ``config`` to the package logger."""

    return setup_logger(
        log_file=config.log_file,
        console_level=logging.getLevelName(config.console_level),
        file_level=logging.getLevelName(config.file_level),
    )


__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "configure_logging",
]
