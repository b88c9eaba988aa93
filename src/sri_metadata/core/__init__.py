"""
Core parsing, comparison and prioritization of integrity metadata.
"""

from .algorithms import (
    SUPPORTED_HASH_ALGORITHMS,
    GetPrioritizedHashAlgorithm,
    HashAlgorithm,
    HashAlgorithmInfo,
    PrioritizedHashAlgorithm,
    get_prioritized_hash_algorithm,
    is_supported,
    platform_name,
)
from .digest import (
    create_integrity_metadata,
    create_integrity_metadata_set,
    digest_and_stringify,
)
from .errors import DigestError, SriMetadataError
from .grammar import (
    INTEGRITY_METADATA_PATTERN,
    SEPARATOR_PATTERN,
    IntegrityMetadataLike,
    ParsedIntegrity,
    parse,
    stringify,
)
from .metadata import IntegrityMetadata
from .metadata_set import IntegrityMetadataSet

__all__ = [
    "SUPPORTED_HASH_ALGORITHMS",
    "GetPrioritizedHashAlgorithm",
    "HashAlgorithm",
    "HashAlgorithmInfo",
    "PrioritizedHashAlgorithm",
    "get_prioritized_hash_algorithm",
    "is_supported",
    "platform_name",
    "create_integrity_metadata",
    "create_integrity_metadata_set",
    "digest_and_stringify",
    "DigestError",
    "SriMetadataError",
    "INTEGRITY_METADATA_PATTERN",
    "SEPARATOR_PATTERN",
    "IntegrityMetadataLike",
    "ParsedIntegrity",
    "parse",
    "stringify",
    "IntegrityMetadata",
    "IntegrityMetadataSet",
]
