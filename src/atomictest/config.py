from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

ERROR_TAG = "[Error]: "
FLOAT_TOLERANCE = 1e-7


class KitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    error_tag: str = ERROR_TAG
    float_tolerance: float = FLOAT_TOLERANCE
    echo: bool = True

    @field_validator("error_tag")
    @classmethod
    def error_tag_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("error_tag must not be blank")
        return v

    @field_validator("float_tolerance")
    @classmethod
    def tolerance_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("float_tolerance must be greater than 0")
        return v


_active = KitConfig()


def get_config() -> KitConfig:
    return _active


def configure(config: KitConfig) -> KitConfig:
    """Install *config* as the process-wide settings; returns the previous one."""
    global _active
    previous, _active = _active, config
    return previous


def reset_config() -> None:
    configure(KitConfig())


def load_config(path: Path) -> KitConfig:
    """Load and validate kit settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return KitConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return KitConfig(**raw)
