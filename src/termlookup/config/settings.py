"""Lookup configuration resolution.

Values are resolved per field with the priority:

1. CLI flags
2. Environment variables (TERMLOOKUP_* vars)
3. Built-in defaults
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from termlookup.config.defaults import DEFAULT_LOOKUP_CONFIG
from termlookup.lib.errors import ConfigError

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "dictionary_url": "TERMLOOKUP_DICTIONARY_URL",
    "encyclopedia_url": "TERMLOOKUP_ENCYCLOPEDIA_URL",
    "user_agent": "TERMLOOKUP_USER_AGENT",
    "timeout": "TERMLOOKUP_TIMEOUT",
}


class LookupConfig(BaseModel):
    """Resolved settings for the two HTTP sources."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dictionary_url: str = Field(..., min_length=1, description="Dictionary base URL")
    encyclopedia_url: str = Field(
        ..., min_length=1, description="Encyclopedia base URL"
    )
    user_agent: str = Field(..., min_length=1, description="User-Agent header")
    timeout: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Request timeout in seconds"
    )


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to the field's type.

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "timeout":
        return float(value)
    return value


def _get_env_value(field_name: str, env_vars: Mapping[str, str]) -> Any | None:
    """Get environment variable value for a field.

    Returns:
        Parsed value or None if not set or invalid
    """
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None

    try:
        return _parse_env_value(field_name, env_vars[env_var_name])
    except ValueError:
        logger.warning(
            f"Ignoring {env_var_name}={env_vars[env_var_name]!r}: not a valid value"
        )
        return None


def resolve_config(
    cli_overrides: Mapping[str, Any] | None = None,
    env_vars: Mapping[str, str] | None = None,
) -> LookupConfig:
    """Resolve the lookup configuration.

    Args:
        cli_overrides: Values from CLI flags; None entries are skipped
        env_vars: Environment mapping (defaults to ``os.environ``)

    Returns:
        Resolved LookupConfig

    Raises:
        ConfigError: If a resolved value is invalid
    """
    cli_overrides = cli_overrides or {}
    env_vars = os.environ if env_vars is None else env_vars
    resolved: dict[str, Any] = {}

    for field in LookupConfig.model_fields:
        # Priority 1: CLI flag
        if cli_overrides.get(field) is not None:
            resolved[field] = cli_overrides[field]
        # Priority 2: Environment variable
        elif (env_value := _get_env_value(field, env_vars)) is not None:
            resolved[field] = env_value
        # Priority 3: Built-in default
        else:
            resolved[field] = DEFAULT_LOOKUP_CONFIG.get(field)

    try:
        config = LookupConfig(**resolved)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "config"
        raise ConfigError(field, first["msg"]) from e

    logger.debug(f"Resolved lookup config: {config.model_dump()}")
    return config
