"""
Subresource Integrity metadata for Python.

Parse, normalize, compare and prioritize ``<alg>-<base64>[?<opt>...]``
metadata tokens as used in ``integrity`` attributes.

Example:
    ```python
    from sri_metadata import IntegrityMetadataSet, create_integrity_metadata_set

    expected = IntegrityMetadataSet(
        "sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM= "
        "sha512-wVJ82JPBJHc9gRkRlwyP5uhX1t9dySJr2KFgYUwM2WOk3eorlLt9NgIe+dhl1c6ilKgt1JoLsmn1H256V/eUIQ=="
    )
    actual = await create_integrity_metadata_set(
        expected.strongest_hash_algorithms, b"Hello, world!"
    )
    assert any(expected.match(m) for m in actual)
    ```
"""

from __future__ import annotations

from ._version import __version__
from .core.algorithms import (
    SUPPORTED_HASH_ALGORITHMS,
    GetPrioritizedHashAlgorithm,
    HashAlgorithm,
    PrioritizedHashAlgorithm,
    get_prioritized_hash_algorithm,
)
from .core.digest import (
    create_integrity_metadata,
    create_integrity_metadata_set,
    digest_and_stringify,
)
from .core.errors import DigestError, SriMetadataError
from .core.grammar import (
    INTEGRITY_METADATA_PATTERN,
    SEPARATOR_PATTERN,
    IntegrityMetadataLike,
)
from .core.metadata import IntegrityMetadata
from .core.metadata_set import IntegrityMetadataSet
from .core.settings import Settings

VERSION = __version__

__all__ = [
    "IntegrityMetadata",
    "IntegrityMetadataSet",
    "IntegrityMetadataLike",
    "HashAlgorithm",
    "PrioritizedHashAlgorithm",
    "GetPrioritizedHashAlgorithm",
    "SUPPORTED_HASH_ALGORITHMS",
    "INTEGRITY_METADATA_PATTERN",
    "SEPARATOR_PATTERN",
    "get_prioritized_hash_algorithm",
    "create_integrity_metadata",
    "create_integrity_metadata_set",
    "digest_and_stringify",
    "DigestError",
    "SriMetadataError",
    "Settings",
    "__version__",
    "VERSION",
]
