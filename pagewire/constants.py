"""Constants and default values for PageWire configuration.

This module centralizes the configuration constants and environment variable
names used by PageWire.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "PAGEWIRE_"

ENV_CATALOG: Final[str] = f"{ENV_VAR_PREFIX}CATALOG"
ENV_LOG_LEVEL: Final[str] = f"{ENV_VAR_PREFIX}LOG_LEVEL"
ENV_STRICT: Final[str] = f"{ENV_VAR_PREFIX}STRICT"


# =============================================================================
# Default Configuration Values
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_STRICT: Final[bool] = False

# Module attribute read from component modules
CONTRACT_ATTRIBUTE: Final[str] = "contract"

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# File Format Constants
# =============================================================================

FILE_EXT_YAML: Final[str] = "yaml"
FILE_EXT_YML: Final[str] = "yml"
FILE_EXT_JSON: Final[str] = "json"

SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (
    FILE_EXT_YAML,
    FILE_EXT_YML,
    FILE_EXT_JSON,
)
JSON_EXTENSIONS: Final[tuple[str, ...]] = (FILE_EXT_JSON,)


# =============================================================================
# Boolean String Parsing
# =============================================================================

TRUTHY_VALUES: Final[tuple[str, ...]] = ("true", "1", "yes", "on")


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_bool(env_var: str, default: bool) -> bool:
    """
    Get boolean value from environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set

    Returns:
        Boolean value from environment or default
    """
    value = os.getenv(env_var, str(default)).lower()
    return value in TRUTHY_VALUES


def get_env_str(env_var: str, default: str) -> str:
    """Get string value from environment variable."""
    return os.getenv(env_var, default)


def get_catalog_path() -> str | None:
    """Get the component catalog path from environment, if configured."""
    return os.getenv(ENV_CATALOG) or None


def get_log_level() -> str:
    return get_env_str(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()


def get_strict() -> bool:
    return get_env_bool(ENV_STRICT, DEFAULT_STRICT)
