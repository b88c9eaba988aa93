"""
Exceptions raised at the digest boundary.

Metadata parsing and comparison never raise; malformed input collapses to
empty metadata instead. These exceptions cover failures of the hashing back
end only.
"""

from __future__ import annotations


class SriMetadataError(Exception):
    """Base class for sri-metadata errors."""


class DigestError(SriMetadataError):
    """The hashing back end could not produce a digest."""

    def __init__(self, algorithm: str, message: str) -> None:
        super().__init__(f"{algorithm}: {message}")
        self.algorithm = algorithm
