"""SHA-256 helpers: chunked digests, HMAC and 32-bit NIDs."""

from __future__ import annotations

import hashlib
import hmac
import os
from collections.abc import Iterable

SHA256_MAC_LEN = 32
READ_BUFFER = 1024 * 1024
MAX_HMAC_CHUNKS = 5


def sha256_vector(chunks: Iterable[bytes]) -> bytes:
    """Return the SHA-256 digest of the concatenation of ``chunks``."""
    digest = hashlib.sha256()
    for chunk in chunks:
        digest.update(chunk)
    return digest.digest()


def hmac_sha256_vector(key: bytes, chunks: Iterable[bytes]) -> bytes:
    """Return the HMAC-SHA256 of the concatenated ``chunks`` under ``key``.

    At most five chunks are accepted.
    """
    chunks = list(chunks)
    if len(chunks) > MAX_HMAC_CHUNKS:
        raise ValueError(
            f"at most {MAX_HMAC_CHUNKS} data chunks are supported, got {len(chunks)}"
        )
    mac = hmac.new(bytes(key), digestmod=hashlib.sha256)
    for chunk in chunks:
        mac.update(chunk)
    return mac.digest()


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    """Return the HMAC-SHA256 of ``data`` under ``key``."""
    return hmac_sha256_vector(key, [data])


def sha256_32_vector(chunks: Iterable[bytes]) -> int:
    """Return the first four bytes of the SHA-256 digest as a big-endian integer."""
    return int.from_bytes(sha256_vector(chunks)[:4], "big")


def sha256_file(path: str | os.PathLike[str]) -> bytes:
    """Return the SHA-256 digest of the file at ``path``."""
    digest = hashlib.sha256()
    with open(path, "rb") as handle:
        while block := handle.read(READ_BUFFER):
            digest.update(block)
    return digest.digest()


def sha256_32_file(path: str | os.PathLike[str]) -> int:
    """Return a 32-bit NID derived from the SHA-256 of the file's SHA-256."""
    try:
        file_hash = sha256_file(path)
    except OSError as exc:
        raise OSError(f"could not calculate SHA256 of '{os.fspath(path)}'") from exc
    return sha256_32_vector([file_hash])