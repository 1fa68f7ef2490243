"""Runtime configuration for tle_codec, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["CodecConfig", "load_config"]


@dataclass(frozen=True)
class CodecConfig:
    """Options that change how records are parsed."""

    strict_checksums: bool = False
    log_level: str = "INFO"


_TRUE_SET = {"1", "true", "yes", "on"}
_FALSE_SET = {"0", "false", "no", "off"}


def _to_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_SET:
        return True
    if lowered in _FALSE_SET:
        return False
    return default


def load_config(env: Optional[Mapping[str, str]] = None) -> CodecConfig:
    """Load configuration from ``TLE_CODEC_*`` environment variables."""

    env_map: Mapping[str, str]
    if env is None:
        env_map = os.environ
    else:
        env_map = env

    return CodecConfig(
        strict_checksums=_to_bool(env_map.get("TLE_CODEC_STRICT_CHECKSUMS"), default=False),
        log_level=env_map.get("TLE_CODEC_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
