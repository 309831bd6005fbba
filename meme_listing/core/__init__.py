"""Core module - data models, types, configuration and exceptions."""

from .config import APIConfig, get_config, reload_config
from .exceptions import (
    ConfigurationError,
    DataSourceError,
    MemeListingError,
    ValidationError,
)
from .models import (
    CanonicalToken,
    ListingOptions,
    PlatformDetail,
    SelectionResult,
    TokenDetail,
    TokenListEntry,
)
from .types import (
    BASE_CHAIN_ID,
    BASE_PLATFORM_KEY,
    DataSource,
    SelectionOutcome,
    SortColumn,
)

__all__ = [
    # Config
    "APIConfig",
    "get_config",
    "reload_config",
    # Models
    "CanonicalToken",
    "ListingOptions",
    "PlatformDetail",
    "SelectionResult",
    "TokenDetail",
    "TokenListEntry",
    # Types
    "BASE_CHAIN_ID",
    "BASE_PLATFORM_KEY",
    "DataSource",
    "SelectionOutcome",
    "SortColumn",
    # Exceptions
    "MemeListingError",
    "DataSourceError",
    "ValidationError",
    "ConfigurationError",
]
