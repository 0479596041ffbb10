"""Centralized environment configuration management for visual-builder.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from visual_builder.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> limit = get_environment(EnvVar.BUILDER_HISTORY_LIMIT)  # Returns int
    >>> framework = get_environment(EnvVar.BUILDER_FRAMEWORK)  # Returns str
    >>>
    >>> # Override at runtime
    >>> limit = get_environment(EnvVar.BUILDER_HISTORY_LIMIT, override=10)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "BUILDER_GRID_SIZE").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by visual-builder.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - editor: Builder canvas and history behaviour
        - dragdrop: Drop-zone resolution
        - export: Default export options
        - logging: Log output
    """

    # -------------------------------------------------------------------------
    # Editor
    # -------------------------------------------------------------------------
    BUILDER_HISTORY_LIMIT = EnvConfig(
        name="BUILDER_HISTORY_LIMIT",
        default=50,
        var_type=int,
        description="Maximum number of undo snapshots kept in history",
        category="editor",
    )
    BUILDER_GRID_SIZE = EnvConfig(
        name="BUILDER_GRID_SIZE",
        default=8,
        var_type=int,
        description="Canvas grid size in pixels used for snapping",
        category="editor",
    )
    BUILDER_SNAP_TO_GRID = EnvConfig(
        name="BUILDER_SNAP_TO_GRID",
        default=True,
        var_type=bool,
        description="Round pointer coordinates to the grid while dragging",
        category="editor",
    )

    # -------------------------------------------------------------------------
    # Drag and drop
    # -------------------------------------------------------------------------
    BUILDER_DROP_THRESHOLD = EnvConfig(
        name="BUILDER_DROP_THRESHOLD",
        default=50,
        var_type=int,
        description="Maximum pointer distance (px) to a drop zone center",
        category="dragdrop",
    )

    # -------------------------------------------------------------------------
    # Export defaults
    # -------------------------------------------------------------------------
    BUILDER_FRAMEWORK = EnvConfig(
        name="BUILDER_FRAMEWORK",
        default="react",
        var_type=str,
        description="Default export framework (react, vue, angular, svelte)",
        category="export",
    )
    BUILDER_STYLING = EnvConfig(
        name="BUILDER_STYLING",
        default="tailwind",
        var_type=str,
        description="Default styling system (tailwind, css, scss, plain)",
        category="export",
    )
    BUILDER_TYPESCRIPT = EnvConfig(
        name="BUILDER_TYPESCRIPT",
        default=False,
        var_type=bool,
        description="Emit TypeScript flavoured code by default",
        category="export",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    BUILDER_LOG_LEVEL = EnvConfig(
        name="BUILDER_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the command line (DEBUG, INFO, WARNING)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, or bool).

    Example:
        >>> get_environment(EnvVar.BUILDER_GRID_SIZE)
        8
        >>> get_environment(EnvVar.BUILDER_GRID_SIZE, override=16)
        16
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (editor, dragdrop, export, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Convenience Functions
# =============================================================================


def get_history_limit(override: int | None = None) -> int:
    """Get the undo history cap, never below 1."""
    return max(1, get_environment(EnvVar.BUILDER_HISTORY_LIMIT, override))


def get_drop_threshold(override: int | None = None) -> int:
    """Get the drop-zone proximity threshold in pixels."""
    return get_environment(EnvVar.BUILDER_DROP_THRESHOLD, override)


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name (upper-cased)."""
    return str(get_environment(EnvVar.BUILDER_LOG_LEVEL, override)).upper()


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_history_limit",
    "get_drop_threshold",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
