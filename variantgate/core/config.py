"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .canonical.entities import DEFAULT_COUNTRY_ID


@dataclass(frozen=True)
class CoreConfig:
    strict: bool = False
    debug: bool = False
    default_country_id: int = DEFAULT_COUNTRY_ID


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        return default


def config_from_env(*, strict: bool | None = None, debug: bool = False) -> CoreConfig:
    return CoreConfig(
        strict=_env_bool("VARIANTGATE_STRICT") if strict is None else strict,
        debug=debug,
        default_country_id=_env_int("DEFAULT_COUNTRY_ID", DEFAULT_COUNTRY_ID),
    )


__all__ = ["CoreConfig", "config_from_env"]
