# src/shahash/config.py
from __future__ import annotations
import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

from .algorithms import supported_names
from .errors import ConfigError
from .hashutil import DEFAULT_CHUNK_SIZE

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class HashConfig:
    """
    Settings for a single hashing run.
    """

    default_algorithm: str = "md5"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    copy_to_clipboard: bool = True

    def __post_init__(self) -> None:
        if self.default_algorithm not in supported_names():
            raise ConfigError(
                f"Unsupported default algorithm: {self.default_algorithm!r}"
            )
        if self.chunk_size <= 0:
            raise ConfigError(f"chunk_size must be positive, got {self.chunk_size}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HashConfig":
        """
        Build a config from SHAHASH_* environment variables.
        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}

        algo = env.get("SHAHASH_DEFAULT_ALGORITHM")
        if algo:
            kwargs["default_algorithm"] = algo.strip()

        chunk = env.get("SHAHASH_CHUNK_SIZE")
        if chunk:
            try:
                kwargs["chunk_size"] = int(chunk)
            except ValueError as e:
                raise ConfigError(f"SHAHASH_CHUNK_SIZE is not an integer: {chunk!r}") from e

        no_clip = env.get("SHAHASH_NO_CLIPBOARD")
        if no_clip is not None:
            kwargs["copy_to_clipboard"] = no_clip.strip().lower() not in _TRUTHY

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the configuration to a dictionary.
        """
        return asdict(self)
