"""Configuration for termlookup.

Main components:
- DEFAULT_LOOKUP_CONFIG: built-in endpoints, user agent and timeout
- resolve_config: merge CLI flags, TERMLOOKUP_* variables and defaults
"""

from termlookup.config.defaults import DEFAULT_LOOKUP_CONFIG
from termlookup.config.settings import LookupConfig, resolve_config

__all__ = [
    "DEFAULT_LOOKUP_CONFIG",
    "LookupConfig",
    "resolve_config",
]
