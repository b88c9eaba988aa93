"""
Hash algorithm registry and prioritization for Subresource Integrity.

The registry is closed: only the algorithms listed in
``SUPPORTED_HASH_ALGORITHMS`` are understood. Anything else, including the
empty string carried by invalid metadata, has no strength and is never
preferred over a supported algorithm.

See https://www.w3.org/TR/SRI/#dfn-getprioritizedhashfunction-a-b
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Final, Literal, Mapping

HashAlgorithm = Literal["sha256", "sha384", "sha512"]

# "" means "no preference" when returned from a prioritization function
PrioritizedHashAlgorithm = Literal["", "sha256", "sha384", "sha512"]

GetPrioritizedHashAlgorithm = Callable[[str, str], str]


@dataclass(frozen=True)
class HashAlgorithmInfo:
    """Static description of a supported hash algorithm."""

    name: HashAlgorithm
    identifier: str  # e.g., "SHA-256"
    hashlib_name: str
    digest_size: int  # bytes


SUPPORTED_HASH_ALGORITHMS: Final[Mapping[str, HashAlgorithmInfo]] = MappingProxyType(
    {
        "sha256": HashAlgorithmInfo("sha256", "SHA-256", "sha256", 32),
        "sha384": HashAlgorithmInfo("sha384", "SHA-384", "sha384", 48),
        "sha512": HashAlgorithmInfo("sha512", "SHA-512", "sha512", 64),
    }
)


def is_supported(alg: object) -> bool:
    """Return True if ``alg`` names a supported hash algorithm."""
    return isinstance(alg, str) and alg in SUPPORTED_HASH_ALGORITHMS


def platform_name(alg: str) -> str:
    """Return the ``hashlib`` name for a supported algorithm.

    Raises:
        KeyError: If ``alg`` is not supported. Check with ``is_supported``.
    """
    return SUPPORTED_HASH_ALGORITHMS[alg].hashlib_name


def get_prioritized_hash_algorithm(a: str, b: str) -> PrioritizedHashAlgorithm:
    """Return the stronger of two hash algorithms.

    Returns the empty string when the algorithms are identical or when
    neither is supported. The canonical names sort in the same order as
    their strength, so a plain string comparison decides between two
    distinct supported algorithms.

    Example:
        >>> get_prioritized_hash_algorithm("sha256", "sha512")
        'sha512'
        >>> get_prioritized_hash_algorithm("sha256", "sha256")
        ''
        >>> get_prioritized_hash_algorithm("md5", "sha256")
        'sha256'
    """
    if a == b:
        return ""

    if not is_supported(a):
        return b if is_supported(b) else ""  # type: ignore[return-value]

    if not is_supported(b):
        return a  # type: ignore[return-value]

    return b if a < b else a  # type: ignore[return-value]
