"""Configuration loading utilities for decoded-char."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .models import ErrorPolicy
from .paths import runtime_config_dir
from .utils.text import SUPPORTED_ENCODINGS, normalize_encoding


class DecodingConfig(BaseModel):
    encoding: str = Field(default="utf-8", description=f"Source encoding: {'|'.join(SUPPORTED_ENCODINGS)}")
    errors: ErrorPolicy = Field(default=ErrorPolicy.STRICT, description="Invalid sequence policy: strict|replace")

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        return normalize_encoding(value)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    decoding: DecodingConfig = Field(default_factory=DecodingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".decoded-char" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
