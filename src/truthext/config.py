from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from babel import Locale, UnknownLocaleError
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TruthConfig(BaseModel):
    """Settings shared by a root subject and everything derived from it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_locale: str | None = None
    max_value_length: int = Field(default=200, ge=10)
    show_path: bool = True

    @field_validator("default_locale")
    @classmethod
    def locale_must_be_known(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            Locale.parse(v)
        except (ValueError, UnknownLocaleError) as e:
            raise ValueError(f"Unknown locale '{v}': {e}") from e
        return v


class ConfigFile(BaseModel):
    """Top-level layout of a YAML config file."""

    model_config = ConfigDict(extra="forbid")
    truthext: TruthConfig = TruthConfig()

    @model_validator(mode="before")
    @classmethod
    def accept_bare_settings(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict) and "truthext" not in data:
            return {"truthext": data}
        return data


DEFAULT_CONFIG = TruthConfig()


def _expand(raw: Any, missing: list[str], where: str = "") -> Any:
    if isinstance(raw, dict):
        return {k: _expand(v, missing, f"{where}{k}.") for k, v in raw.items()}
    if isinstance(raw, list):
        return [_expand(v, missing, f"{where}{i}.") for i, v in enumerate(raw)]
    if isinstance(raw, str):
        try:
            return expandvars(raw, nounset=True)
        except Exception:
            # Variable is missing and has no default
            missing.append(f"  {where.rstrip('.')}={raw}")
            return raw
    return raw


def load_config(path: Path) -> TruthConfig:
    """Load and validate a config from a YAML file.

    ``${VAR}`` references in string values are expanded from the environment.
    Raises ValueError listing every unset variable without a default.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    missing: list[str] = []
    expanded = _expand(raw, missing)
    if missing:
        details = "\n".join(missing)
        raise ValueError(f"Config '{path}' has missing environment variables:\n{details}")

    return ConfigFile.model_validate(expanded).truthext
