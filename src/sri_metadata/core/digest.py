"""
Create integrity metadata from resource bytes.

Hashing runs in a worker thread via ``asyncio.to_thread`` so large payloads
do not block the event loop. When several algorithms are requested they are
digested concurrently, and the results keep the requested order.
"""

from __future__ import annotations

import asyncio
import base64
import hashlib
from typing import Awaitable, Callable, Iterable, Sequence, Union

from . import diagnostics
from .algorithms import (
    GetPrioritizedHashAlgorithm,
    get_prioritized_hash_algorithm,
    is_supported,
    platform_name,
)
from .errors import DigestError
from .grammar import stringify
from .metadata import IntegrityMetadata
from .metadata_set import IntegrityMetadataSet

BytesLike = Union[bytes, bytearray, memoryview]
DigestFunction = Callable[[str, BytesLike], Awaitable[bytes]]


def _hashlib_digest_sync(name: str, data: BytesLike) -> bytes:
    try:
        hasher = hashlib.new(name)
    except ValueError as exc:
        raise DigestError(name, str(exc)) from exc
    hasher.update(data)
    return hasher.digest()


async def hashlib_digest(name: str, data: BytesLike) -> bytes:
    """Digest ``data`` with the named ``hashlib`` algorithm off the event loop."""
    return await asyncio.to_thread(_hashlib_digest_sync, name, data)


async def digest_and_stringify(
    hash_algorithm: str,
    data: BytesLike,
    opt: Sequence[str] = (),
    *,
    digest: DigestFunction = hashlib_digest,
) -> str:
    """Digest ``data`` and return the canonical metadata token.

    Returns ``""`` without hashing when the algorithm is unsupported.

    Example:
        >>> asyncio.run(digest_and_stringify("sha256", b"Hello, world!"))
        'sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM='
    """
    alg = hash_algorithm.lower()
    if not is_supported(alg):
        diagnostics.warn(
            "digest",
            "unsupported hash algorithm",
            algorithm_length=len(hash_algorithm),
            _rate_limit_key="digest.unsupported",
        )
        return ""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, got {type(data).__name__}")
    raw = await digest(platform_name(alg), data)
    val = base64.b64encode(raw).decode("ascii")
    return stringify({"alg": alg, "val": val, "opt": list(opt)})


async def create_integrity_metadata(
    hash_algorithm: str,
    data: BytesLike,
    opt: Sequence[str] = (),
    *,
    digest: DigestFunction = hashlib_digest,
) -> IntegrityMetadata:
    """Digest ``data`` and return it as ``IntegrityMetadata``.

    Unsupported algorithms yield empty metadata.
    """
    return IntegrityMetadata(
        await digest_and_stringify(hash_algorithm, data, opt, digest=digest)
    )


async def create_integrity_metadata_set(
    hash_algorithms: str | Iterable[str],
    data: BytesLike,
    opt: Sequence[str] = (),
    *,
    get_prioritized_hash_algorithm: GetPrioritizedHashAlgorithm = get_prioritized_hash_algorithm,
    digest: DigestFunction = hashlib_digest,
) -> IntegrityMetadataSet:
    """Digest ``data`` with each algorithm and collect the results.

    Example:
        >>> s = asyncio.run(
        ...     create_integrity_metadata_set(["sha256", "sha512"], b"Hello, world!")
        ... )
        >>> [m.alg for m in s.strongest]
        ['sha512']
    """
    algorithms = (
        [hash_algorithms] if isinstance(hash_algorithms, str) else list(hash_algorithms)
    )
    tokens = await asyncio.gather(
        *(
            digest_and_stringify(alg, data, opt, digest=digest)
            for alg in algorithms
        )
    )
    return IntegrityMetadataSet(
        list(tokens),
        get_prioritized_hash_algorithm=get_prioritized_hash_algorithm,
    )
