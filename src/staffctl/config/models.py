"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, staffctl.toml only contains
overrides.  A fresh project needs no config file at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- staffctl.toml sections ---


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    data_file: str = "employees.json"
    pretty: bool = True


class StoreConfig(BaseModel):
    """[store] section.

    ``next_id_from`` picks how the id counter resumes after a load:
    ``"last"`` follows the final record in stored order, ``"max"`` the
    highest id present.
    """

    model_config = {"frozen": True}

    next_id_from: Literal["last", "max"] = "last"


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    salary_decimals: int = Field(default=2, ge=0, le=6)

