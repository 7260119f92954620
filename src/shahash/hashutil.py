# src/shahash/hashutil.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import BinaryIO, Final, Tuple

from .algorithms import DigestEngine, resolve
from .errors import FileNotFound, FileUnreadable
from .models.schema import HashResult

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE: Final[int] = 1024 * 1024


def _check_chunk_size(chunk_size: int) -> None:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size!r}")


def hash_stream(
    stream: BinaryIO, engine: DigestEngine, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Tuple[str, int]:
    """
    Feed an open binary stream through the engine from offset 0 to EOF.
    Returns (lowercase hex digest, bytes consumed).

    The engine is finalized here and must not be reused afterwards.
    """
    _check_chunk_size(chunk_size)

    # Always start from the beginning of the stream
    stream.seek(0)

    total = 0
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            # EOF
            break
        engine.update(chunk)
        total += len(chunk)

    return engine.digest().hex(), total


def _hash_path(
    path: str | Path, engine: DigestEngine, chunk_size: int
) -> Tuple[str, int]:
    _check_chunk_size(chunk_size)
    p = Path(path)

    try:
        is_file = p.is_file()
    except OSError as e:
        raise FileUnreadable(path, e.strerror or str(e)) from e
    if not is_file:
        raise FileNotFound(path)

    try:
        with p.open("rb") as f:
            hexdigest, total = hash_stream(f, engine, chunk_size)
    except (FileNotFoundError, IsADirectoryError) as e:
        # Raced with a delete/replace between the check and the open
        raise FileNotFound(path) from e
    except OSError as e:
        raise FileUnreadable(path, e.strerror or str(e)) from e

    logger.debug(f"Hashed {total} bytes from {p}")
    return hexdigest, total


def hash_file(
    path: str | Path, engine: DigestEngine, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> str:
    """
    Compute the digest of a file with the given engine.
    It reads the file in chunks to avoid high memory usage.

    Raises FileNotFound when the path is missing or not a regular file, and
    FileUnreadable when opening or reading fails.
    """
    hexdigest, _ = _hash_path(path, engine, chunk_size)
    return hexdigest


def digest_file(
    path: str | Path, algorithm: str = "md5", chunk_size: int = DEFAULT_CHUNK_SIZE
) -> HashResult:
    """
    Resolve the algorithm, hash the file and wrap the result.
    The algorithm is resolved before the file is touched, so an invalid
    name never causes any I/O.
    """
    factory, canonical = resolve(algorithm)
    logger.debug(f"Hashing {path} with {canonical} (chunk_size={chunk_size})")

    hexdigest, total = _hash_path(path, factory(), chunk_size)
    return HashResult(
        path=str(path),
        name=Path(path).name,
        algorithm=canonical,
        hexdigest=hexdigest,
        size=total,
    )
