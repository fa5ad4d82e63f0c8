"""Application configuration: settings schema and linediff.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from linediff.core.search import DEFAULT_MAX_DEPTH


CONFIG_FILE = "linediff.yaml"


class Settings(BaseModel):
    app_name:  str = "linediff"
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0, description="Largest edit distance searched before giving up")
    color:     str = Field(default="auto", pattern="^(auto|always|never)$", description="auto, always or never")
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Level for the linediff logger")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from linediff.yaml, then LINEDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"LINEDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
