"""
Configuration module for vector3d.

Loads configuration from a YAML file with Pydantic validation.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from .constants import DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)


class FormatConfig(BaseModel):
    separator: str = DEFAULT_SEPARATOR
    accept_commas: bool = True  # read "x, y, z" back as three tokens


class VectorConfig(BaseModel):
    format: FormatConfig = FormatConfig()
    debug: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "VectorConfig":
        """Load configuration from a YAML file."""
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        logger.debug(f"Loaded config from {path}: {data}")
        return cls(**data)
