# src/shahash/algorithms.py
from __future__ import annotations
import hashlib
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from .errors import UnsupportedAlgorithm

# hashlib objects have no public base class
DigestEngine = Any
EngineFactory = Callable[[], DigestEngine]


class Algorithm(str, Enum):
    """
    Supported digest algorithms. The value is the canonical display name.
    """

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """
        Length of the raw digest in bytes.
        """
        return _DIGEST_SIZES[self]

    def new(self) -> DigestEngine:
        """
        Build a fresh, unused digest engine for this algorithm.
        """
        return _FACTORIES[self]()


_FACTORIES: Dict[Algorithm, EngineFactory] = {
    Algorithm.MD5: hashlib.md5,
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA384: hashlib.sha384,
    Algorithm.SHA512: hashlib.sha512,
}

_DIGEST_SIZES: Dict[Algorithm, int] = {
    Algorithm.MD5: 16,
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
}

_BY_NAME: Dict[str, Algorithm] = {a.value: a for a in Algorithm}


def supported_names() -> List[str]:
    return [a.value for a in Algorithm]


def resolve(name: str) -> Tuple[EngineFactory, str]:
    """
    Map an algorithm token to an engine factory and its canonical name.
    Matching is exact: no aliases, no case folding.
    """
    if not isinstance(name, str) or name not in _BY_NAME:
        raise UnsupportedAlgorithm(str(name), supported_names())
    algo = _BY_NAME[name]
    return algo.new, algo.value

