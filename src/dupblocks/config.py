"""Scan configuration model and YAML loader."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from dupblocks.core import DupBlocksValueError
from dupblocks.report import DEFAULT_MIN_BLOCK_LENGTH

__all__ = ["DEFAULT_THRESHOLD", "ScanConfig", "load_config", "merge_cli_overrides"]

DEFAULT_THRESHOLD = 0.9


class ScanConfig(BaseModel):
    """Settings for one document scan.

    ``threshold`` is normally in ``[0, 1]``; values outside that range are
    accepted and simply make every pair pass or fail.
    """

    threshold: float = DEFAULT_THRESHOLD
    min_block_length: int = Field(DEFAULT_MIN_BLOCK_LENGTH, ge=0)
    show_progress: bool = True

    @field_validator("threshold")
    @classmethod
    def _threshold_is_number(cls, v: float) -> float:
        if math.isnan(v):
            raise ValueError("threshold must be a number")
        return v


def load_config(path: str | Path) -> ScanConfig:
    """Load a :class:`ScanConfig` from a YAML mapping."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DupBlocksValueError(f"Config {path} must contain a mapping")
    try:
        return ScanConfig.model_validate(data)
    except ValidationError as exc:
        raise DupBlocksValueError(f"Invalid config {path}: {exc}") from exc


def merge_cli_overrides(config: ScanConfig, **overrides: Any) -> ScanConfig:
    """Return ``config`` with every non-``None`` override applied."""

    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    try:
        return ScanConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as exc:
        raise DupBlocksValueError(str(exc)) from exc
