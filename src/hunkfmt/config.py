"""Application configuration: settings schema and hunkfmt.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "hunkfmt.yaml"


class Settings(BaseModel):
    context_lines:      int  = Field(default=3,     ge=0, description="Unchanged lines shown around each change")
    ignore_whitespace:  bool = Field(default=True,  description="Ignore leading/trailing whitespace when diffing lines")
    strip_trailing_cr:  bool = Field(default=True,  description="Normalize CRLF line endings before diffing")
    line_number_origin: str  = Field(default="old", pattern="^(old|new)$", description="Number rows from the hunk's old or new start")
    separator:          str  = Field(default="...", description="Text of the row shown between hunks")
    padding_left:       int  = Field(default=0,     ge=0, description="Spaces before every rendered row")
    color:              bool = Field(default=True,  description="Style terminal output")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from hunkfmt.yaml, then HUNKFMT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"HUNKFMT_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
