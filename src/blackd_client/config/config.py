"""Configuration management for blackd-client."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from blackd_client.config.paths import default_config_path
from blackd_client.platform.logging import logger


DEFAULT_HOST = "127.0.0.1"
REQUEST_TIMEOUT_DEFAULT = 5.0
POOL_MAXSIZE_DEFAULT = 100
MAX_CONCURRENCY_DEFAULT = 1


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
    """Client configuration."""

    # Address blackd listens on; only local daemons are supported
    host: str = DEFAULT_HOST

    # Ports of running blackd instances, one worker group per port
    ports: list[int] = field(default_factory=list)

    # Seconds before a single request to blackd is abandoned
    request_timeout: float = REQUEST_TIMEOUT_DEFAULT

    # Idle connections kept per daemon endpoint
    pool_maxsize: int = POOL_MAXSIZE_DEFAULT

    # Workers issuing requests against each endpoint
    max_concurrency: int = MAX_CONCURRENCY_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and coerce numeric fields.

        A single port given as a scalar is accepted as a one-element list.

        Only fields flagged with ``metadata={"path": True}`` by ``_path_field``
        are converted, so TOML strings never leak into path handling.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        ports: Any = self.ports
        if isinstance(ports, (int, str)):
            ports = [ports]
        try:
            self.ports = [int(port) for port in ports]
        except (TypeError, ValueError):
            raise ValueError(
                f"invalid ports {self.ports!r}: expected a list of port numbers"
            ) from None
        self.request_timeout = float(self.request_timeout)
        self.pool_maxsize = int(self.pool_maxsize)
        self.max_concurrency = int(self.max_concurrency)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit configuration file; defaults to the
                location returned by ``default_config_path``.

        Returns:
            Config: Loaded configuration object, or defaults when the file
            does not exist.
        """
        target = default_config_path(config_file)

        # If config is already loaded from the same file, return cached instance
        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
            cls._instance = instance
            cls._loaded_from = target
            return instance

        try:
            with open(target, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        known = {f.name for f in fields(cls)}
        for key in sorted(set(config_dict) - known):
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, target)
            del config_dict[key]

        try:
            instance = cls(**config_dict)
        except (TypeError, ValueError) as e:
            logger.error("Invalid configuration in %s: %s", target, e)
            raise
        logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance
