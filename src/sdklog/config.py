"""Configuration for sdklog loggers.

Three-layer config resolution (highest priority wins):
  1. Explicit overrides passed by the calling code
  2. Environment variables (SDKLOG_LEVEL, SDKLOG_PREFIX, ...)
  3. A JSON config file, e.g. {"level": "debug", "prefix": "build"}

Anything not set in any layer falls back to the LoggerConfig defaults.
"""

import json
import os
from dataclasses import dataclass, fields, replace

from .channels import validate_channel
from .formatter import DEFAULT_TIMESTAMP_FORMAT, MultilineMode
from .levels import DEFAULT_CHANNEL

ENV_PREFIX = "SDKLOG_"


@dataclass
class LoggerConfig:
    """Construction parameters for a Logger."""
    level: str = DEFAULT_CHANNEL.value
    prefix: str = ""
    indent: int = 0
    multiline: str = MultilineMode.INLINE.value
    indent_when_suppressed: bool = True
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    def validate(self) -> "LoggerConfig":
        """Return a copy with normalized values.

        Raises:
            InvalidChannel: If level is not a known channel.
            ValueError: If indent or multiline is malformed.
        """
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"indent must be an integer, got {self.indent!r}")
        try:
            multiline = MultilineMode(self.multiline)
        except ValueError:
            raise ValueError(
                f"multiline must be one of "
                f"{[m.value for m in MultilineMode]}, got {self.multiline!r}"
            ) from None
        return replace(
            self,
            level=validate_channel(self.level),
            prefix=self.prefix or "",
            multiline=multiline,
        )

    @classmethod
    def from_mapping(cls, data) -> "LoggerConfig":
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _parse_bool(value):
    return value.strip().lower() in ("1", "true", "yes", "on")


def config_from_env(environ=None):
    """Read config values from SDKLOG_* environment variables.

    Returns:
        Dict with only the keys that were set.
    """
    environ = os.environ if environ is None else environ
    result = {}
    for key in ("level", "prefix", "multiline", "timestamp_format"):
        value = environ.get(ENV_PREFIX + key.upper())
        if value is not None:
            result[key] = value
    indent = environ.get(ENV_PREFIX + "INDENT")
    if indent is not None:
        try:
            result["indent"] = int(indent)
        except ValueError:
            raise ValueError(
                f"{ENV_PREFIX}INDENT must be an integer, got {indent!r}"
            ) from None
    suppressed = environ.get(ENV_PREFIX + "INDENT_WHEN_SUPPRESSED")
    if suppressed is not None:
        result["indent_when_suppressed"] = _parse_bool(suppressed)
    return result


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(overrides=None, path=None, environ=None):
    """Resolve a LoggerConfig using three-layer precedence.

    Args:
        overrides: Dict of explicit values; None values are ignored.
        path: Optional JSON config file.
        environ: Environment mapping (default: os.environ).

    Returns:
        A validated LoggerConfig.
    """
    merged = {}
    if path is not None:
        merged.update(load_json(path))
    merged.update(config_from_env(environ))
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    return LoggerConfig.from_mapping(merged).validate()
