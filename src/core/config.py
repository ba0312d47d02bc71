"""
Application settings.

Read once from the environment, validated with pydantic. Anything not set falls back to the defaults below.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import DimensionOutOfRangeError, GameError
from src.foxhound.board import DEFAULT_DIMENSION, initialise_positions

DEFAULT_DATABASE_URL = "sqlite:///foxhound.db"
ENV_PREFIX = "FOXHOUND_"


class Settings(BaseModel):
    database_url: str = DEFAULT_DATABASE_URL
    default_dimension: int = DEFAULT_DIMENSION
    echo_sql: bool = False

    @field_validator("default_dimension")
    @classmethod
    def validate_default_dimension(cls, value: int) -> int:
        # must be a board we can actually set up (in range AND even)
        try:
            initialise_positions(value)
        except DimensionOutOfRangeError as error:
            raise ValueError(str(error)) from error
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Collect FOXHOUND_* variables. Pydantic takes care of converting the strings."""
    environ = os.environ if environ is None else environ
    values = {
        field: environ[f"{ENV_PREFIX}{field.upper()}"]
        for field in Settings.model_fields
        if f"{ENV_PREFIX}{field.upper()}" in environ
    }
    return Settings.model_validate(values)


def resolve_dimension(raw: Optional[str], default: int = DEFAULT_DIMENSION) -> int:
    """
    The dimension to start a game with
    ----

    Anything missing, unreadable or out of range falls back to the default.
    This is the only place where a default replaces a bad value: the rule engine itself never does that.
    """
    if raw is None:
        return default
    try:
        dimension = int(raw)
        initialise_positions(dimension)
    except (ValueError, GameError):
        return default
    return dimension
