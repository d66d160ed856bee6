"""Configuration parsing for temper.yaml"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from temper.files import DEFAULT_FILE_TTL
from temper.loader import DEFAULT_ENGINE_TTL

ENV_VAR = "TEMPER_ENV"
PRODUCTION = "production"


def is_production() -> bool:
    """Whether we're running in a production-like deployment."""
    return os.environ.get(ENV_VAR, "").strip().lower() == PRODUCTION


class TemperConfig(BaseModel):
    """Temper configuration.

    ``cache_artifacts`` left unset means: cache compiled templates unless
    TEMPER_ENV is ``production``. An explicit value always wins.
    """

    cache_artifacts: bool | None = None
    engine_ttl: float = DEFAULT_ENGINE_TTL
    file_ttl: float = DEFAULT_FILE_TTL
    debug: bool = False
    engines: dict[str, list[str]] = {}  # extension -> candidate engines

    model_config = {"extra": "forbid"}

    @field_validator("engines")
    @classmethod
    def _dotted_extensions(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return {
            ext if ext.startswith(".") else f".{ext}": list(names)
            for ext, names in value.items()
        }

    @field_validator("engine_ttl", "file_ttl")
    @classmethod
    def _positive_ttl(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("ttl must be positive")
        return value

    def should_cache(self) -> bool:
        if self.cache_artifacts is not None:
            return self.cache_artifacts
        return not is_production()

    @classmethod
    def load(cls, path: Path) -> "TemperConfig":
        """Load config from yaml file"""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)
