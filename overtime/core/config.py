"""Global configuration for overtime.

Manages default settings for the parser and the CLI.
Settings can be overridden via environment variables or explicit configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from overtime.core.types import BUILTIN_TYPES

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class OvertimeConfig:
    """Top-level configuration for overtime."""

    # Parser limits (characters; 0 disables the check)
    max_source_size: int = 1_048_576

    # Reject a second `type` declaration with an already used name
    reject_duplicate_types: bool = False

    # Logging
    log_level: str = "WARNING"

    # Types that never get a resolver method
    builtin_types: frozenset[str] = field(default_factory=lambda: BUILTIN_TYPES)

    @classmethod
    def from_env(cls) -> OvertimeConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("OVERTIME_MAX_SOURCE_SIZE"):
            config.max_source_size = int(val)
        if val := os.environ.get("OVERTIME_REJECT_DUPLICATE_TYPES"):
            config.reject_duplicate_types = val.strip().lower() in _TRUTHY
        if val := os.environ.get("OVERTIME_LOG_LEVEL"):
            config.log_level = val.upper()

        return config


# Module-level singleton
_config: OvertimeConfig | None = None


def get_config() -> OvertimeConfig:
    """Return the global overtime config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = OvertimeConfig.from_env()
    return _config


def set_config(config: OvertimeConfig | None) -> None:
    """Override the global config (useful in tests). ``None`` resets it."""
    global _config
    _config = config
