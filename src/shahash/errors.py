# src/shahash/errors.py
from __future__ import annotations
from pathlib import Path
from typing import Sequence


class ShahashError(Exception):
    """
    Base class for every classified failure raised by shahash.
    """


class UnsupportedAlgorithm(ShahashError, ValueError):
    """
    The algorithm token is not one of the supported digest names.
    """

    def __init__(self, name: str, supported: Sequence[str]) -> None:
        self.name = name
        self.supported = list(supported)
        super().__init__(
            f"Unsupported algorithm: {name!r} (expected one of: {', '.join(self.supported)})"
        )


class FileNotFound(ShahashError):
    """
    The path does not exist or is not a regular file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"{self.path} could not be found.")


class FileUnreadable(ShahashError):
    """
    The file exists but reading it failed (permissions, I/O error).
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path} could not be processed: {reason}")


class ConfigError(ShahashError):
    """
    An environment override holds an invalid value.
    """
