"""Parse and validate the optional boffset YAML configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from boffset.types import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ShiftConfig:
    """Settings that shape a run without changing its byte-level result."""

    sparse: bool = False    # pad with holes instead of explicit zeros
    sample_size: int = 1    # bytes per offset unit (4 for CD audio samples)
    log_level: str = "INFO"

    def validate(self) -> None:
        """Check value types and ranges."""
        if not isinstance(self.sparse, bool):
            raise ConfigError(f"sparse must be true or false, got {self.sparse!r}")
        if isinstance(self.sample_size, bool) or not isinstance(self.sample_size, int):
            raise ConfigError(f"sample_size must be an integer, got {self.sample_size!r}")
        if self.sample_size < 1:
            raise ConfigError(f"sample_size must be >= 1, got {self.sample_size}")
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        self.log_level = str(self.log_level).upper()


def load_config(path: str | Path) -> ShiftConfig:
    """Load a YAML configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed and validated :class:`ShiftConfig`.

    Raises:
        ConfigError: If the file is missing, malformed or has unknown keys.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")

    try:
        with open(p, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    known = {f.name for f in fields(ShiftConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {p}: {', '.join(unknown)}")

    cfg = ShiftConfig(**data)
    cfg.validate()
    logger.debug("Loaded configuration from %s: %s", p, cfg)
    return cfg
