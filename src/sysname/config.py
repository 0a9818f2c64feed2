"""Plugin configuration: settings schema and sysname.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from sysname.core.assemble import DEFAULT_TOKEN


CONFIG_FILE = "sysname.yaml"


class Settings(BaseModel):
    field_ids:        str = Field(default="",       description="Comma-delimited list of page field identifiers")
    space_token:      str = Field(default=DEFAULT_TOKEN, description="Replaces spaces within a field value")
    concat_token:     str = Field(default=DEFAULT_TOKEN, description="Joins the values of consecutive fields")
    placeholder_name: str = Field(default="hidden", description="Name seeded before creation while the system name is hidden")
    keep_chars:       str = Field(default="",       description="Extra characters the normalizer preserves")

    @field_validator("space_token", "concat_token", mode="before")
    @classmethod
    def _default_blank_token(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_TOKEN
        return v

    @field_validator("field_ids", mode="before")
    @classmethod
    def _join_field_list(cls, v: Any) -> Any:
        """Accept a YAML list as well as the comma-delimited string form."""
        if isinstance(v, (list, tuple)):
            return ",".join(str(s) for s in v)
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from sysname.yaml, then SYSNAME_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"SYSNAME_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
