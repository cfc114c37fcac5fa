"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import dataclasses
import os
from dataclasses import dataclass
from typing import Any

from greeter.errors import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})
_LOG_LEVELS = frozenset({"critical", "error", "warning", "info", "debug"})
_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, service_name="billing-edge")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 0  # 0 = auto-detect from CPU count

    # Service identity reported by /api/status
    service_name: str = "greeter-api"
    version: str = "1.0.0"

    # /hello fallback when ?name= is absent or empty
    default_name: str = "World"

    # Logging
    log_level: str = "info"
    log_format: str = "text"

    def __post_init__(self) -> None:
        """Reject logging settings the server and ``logging`` cannot use."""
        object.__setattr__(self, "log_level", self.log_level.lower())
        if self.log_level not in _LOG_LEVELS:
            msg = f"log_level={self.log_level!r} must be one of {sorted(_LOG_LEVELS)}"
            raise ConfigurationError(msg)
        if self.log_format not in _LOG_FORMATS:
            msg = f"log_format={self.log_format!r} must be one of {sorted(_LOG_FORMATS)}"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, prefix: str = "GREETER_", **overrides: Any) -> "AppConfig":
        """Build a config from ``os.environ`` with *prefix*.

        ``GREETER_PORT=9000`` sets ``port=9000``. Variables that do not
        name a field are ignored. Keyword *overrides* win over the
        environment.

        Raises:
            ConfigurationError: If a variable cannot be converted to
                the field's type, or names an unknown log level or
                log format.
        """
        known = {f.name: f for f in dataclasses.fields(cls)}
        values: dict[str, Any] = {}
        for key, raw in os.environ.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):].lower()
            field = known.get(name)
            if field is None:
                continue
            values[name] = _convert(key, raw, field.type)
        values.update(overrides)
        return cls(**values)


def _convert(key: str, raw: str, annotation: Any) -> Any:
    """Convert an environment string to the annotated field type."""
    kind = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
    value = raw.strip()
    if kind == "bool":
        lowered = value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        msg = f"{key}={raw!r} is not a boolean (use 1/0, true/false, yes/no, on/off)"
        raise ConfigurationError(msg)
    if kind == "int":
        try:
            return int(value)
        except ValueError:
            msg = f"{key}={raw!r} is not an integer"
            raise ConfigurationError(msg) from None
    return value
