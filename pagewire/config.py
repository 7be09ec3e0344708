# pagewire/config.py
from dataclasses import dataclass
from pathlib import Path

from typing_extensions import TypedDict

from pagewire.common.exceptions import ConfigurationError
from pagewire.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT,
    LOG_LEVELS,
    get_catalog_path,
    get_log_level,
    get_strict,
)


class WiringConfigDict(TypedDict, total=False):
    """TypedDict for configuration dictionary"""
    catalog_path: str | None
    log_level: str
    strict: bool


@dataclass(frozen=True)
class WiringConfig:
    """Configuration for PageWire tooling"""

    catalog_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    # Treat binding warnings as failures when validating pages
    strict: bool = DEFAULT_STRICT

    def __post_init__(self):
        """Validate configuration after initialization"""
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log_level: {self.log_level}. Expected one of: {', '.join(LOG_LEVELS)}",
                config_key="log_level",
            )
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls) -> "WiringConfig":
        """Create configuration from PAGEWIRE_* environment variables"""
        catalog = get_catalog_path()
        return cls(
            catalog_path=Path(catalog).expanduser().resolve() if catalog else None,
            log_level=get_log_level(),
            strict=get_strict(),
        )

    @classmethod
    def from_dict(cls, config_dict: WiringConfigDict) -> "WiringConfig":
        """Create configuration from typed dictionary"""
        catalog = config_dict.get("catalog_path")
        return cls(
            catalog_path=Path(catalog).expanduser().resolve() if catalog else None,
            log_level=config_dict.get("log_level", DEFAULT_LOG_LEVEL),
            strict=config_dict.get("strict", DEFAULT_STRICT),
        )

    def with_catalog(self, catalog_path: Path | None) -> "WiringConfig":
        """Copy of this configuration with the catalog overridden, if given"""
        if catalog_path is None:
            return self
        return WiringConfig(
            catalog_path=catalog_path.expanduser().resolve(),
            log_level=self.log_level,
            strict=self.strict,
        )

    def require_catalog(self) -> Path:
        """Catalog path, or an error telling the user how to set one"""
        if self.catalog_path is None:
            raise ConfigurationError(
                "No component catalog configured. Pass --catalog or set PAGEWIRE_CATALOG.",
                config_key="catalog_path",
            )
        return self.catalog_path
