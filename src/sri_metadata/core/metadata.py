"""
Single integrity metadata entry.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .algorithms import PrioritizedHashAlgorithm, is_supported
from .grammar import IntegrityMetadataLike, parse, stringify, trim

IntegrityMetadataInput = Union[
    "IntegrityMetadata", IntegrityMetadataLike, str, bytes, None
]


def is_structured(integrity: Any) -> bool:
    """Return True for mappings and objects exposing ``alg``/``val`` fields."""
    if isinstance(integrity, Mapping):
        return True
    return hasattr(integrity, "alg") and hasattr(integrity, "val")


def to_token(integrity: Any) -> str:
    """Reduce any accepted input to a single token string."""
    if integrity is None:
        return ""
    if isinstance(integrity, str):
        return trim(integrity)
    if isinstance(integrity, (bytes, bytearray, memoryview)):
        return trim(bytes(integrity).decode("utf-8", errors="replace"))
    if is_structured(integrity):
        return stringify(integrity)
    return trim(str(integrity))


class IntegrityMetadata:
    """A hash algorithm, a base64 digest and optional options.

    Construction never fails. Input that is malformed, empty or uses an
    unsupported algorithm produces empty metadata, which stringifies to
    ``""`` and never matches anything.

    ``==`` compares all fields, so two empty entries are equal; use
    ``match()`` to decide whether metadata names the expected resource.

    Example:
        >>> IntegrityMetadata("sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM=")
        IntegrityMetadata('sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM=')
        >>> IntegrityMetadata({"alg": "sha256", "val": "MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM="}).alg
        'sha256'
    """

    __slots__ = ("alg", "val", "opt")

    alg: PrioritizedHashAlgorithm
    val: str
    opt: tuple[str, ...]

    def __init__(self, integrity: IntegrityMetadataInput | Any = None) -> None:
        parsed = parse(to_token(integrity))
        object.__setattr__(self, "alg", parsed.alg)
        object.__setattr__(self, "val", parsed.val)
        object.__setattr__(self, "opt", parsed.opt)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def match(self, integrity: IntegrityMetadataInput | Any) -> bool:
        """Return True if ``integrity`` names the same algorithm and digest.

        Options are ignored. Empty metadata on either side never matches.
        """
        other = (
            integrity
            if isinstance(integrity, IntegrityMetadata)
            else IntegrityMetadata(integrity)
        )
        if not other.alg:
            return False
        if not other.val:
            return False
        if not is_supported(other.alg):
            return False
        return other.alg == self.alg and other.val == self.val

    @property
    def is_empty(self) -> bool:
        return not str(self)

    def to_string(self) -> str:
        return stringify(self)

    def to_json(self) -> str:
        """Return the canonical string, the value used in JSON documents."""
        return self.to_string()

    def to_dict(self) -> dict[str, Any]:
        return {"alg": self.alg, "val": self.val, "opt": list(self.opt)}

    @staticmethod
    def stringify(integrity: IntegrityMetadataLike | Any) -> str:
        return stringify(integrity)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegrityMetadata):
            return NotImplemented
        return (self.alg, self.val, self.opt) == (other.alg, other.val, other.opt)

    def __hash__(self) -> int:
        return hash((self.alg, self.val, self.opt))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.to_dict(),))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )
