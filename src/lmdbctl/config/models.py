"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lmdbctl.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from lmdbctl.infrastructure.store import DEFAULT_MAP_SIZE
from lmdbctl.shell.context import DEFAULT_PAGE_SIZE


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    size_factor: float = Field(default=2.0, gt=0)
    default_map_size: int = Field(default=DEFAULT_MAP_SIZE, gt=0)


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    prompt: str = "> "
    strict_quotes: bool = False
