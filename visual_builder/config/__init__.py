"""Centralized configuration management for visual-builder.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from visual_builder.config import EnvVar, get_environment
    >>>
    >>> grid = get_environment(EnvVar.BUILDER_GRID_SIZE)  # Returns int: 8
    >>> grid = get_environment(EnvVar.BUILDER_GRID_SIZE, override=16)
    >>>
    >>> for var in list_environment_variables("export"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    editor: History limit and canvas grid
    dragdrop: Drop-zone proximity threshold
    export: Default framework, styling and TypeScript flag
    logging: CLI log level
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_drop_threshold,
    get_environment,
    get_environment_info,
    get_history_limit,
    get_log_level,
    list_environment_variables,
)

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
