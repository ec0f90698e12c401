"""overtime core: shared types, errors and configuration.

Import the most commonly used types from here for convenience:

    from overtime.core import ParseResult, SchemaError, get_config
"""

from overtime.core.config import OvertimeConfig, get_config, set_config
from overtime.core.types import (
    BUILTIN_TYPES,
    ParseResult,
    SchemaError,
    ValidationError,
)

__all__ = [
    "BUILTIN_TYPES",
    "OvertimeConfig",
    "ParseResult",
    "SchemaError",
    "ValidationError",
    "get_config",
    "set_config",
]
