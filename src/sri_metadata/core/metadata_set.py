"""
Collections of integrity metadata and strongest-metadata selection.

See https://www.w3.org/TR/SRI/#get-the-strongest-metadata-from-set
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from . import diagnostics
from .algorithms import (
    GetPrioritizedHashAlgorithm,
    HashAlgorithm,
    get_prioritized_hash_algorithm,
)
from .grammar import IntegrityMetadataLike, split_metadata
from .metadata import IntegrityMetadata, is_structured

IntegrityInput = Union[
    IntegrityMetadata,
    IntegrityMetadataLike,
    str,
    bytes,
    None,
    Iterable[Any],
]

_EMPTY = IntegrityMetadata(None)
_EXHAUSTED = object()


def flatten(integrity: IntegrityInput | Any) -> Iterator[Any]:
    """Yield atomic items from arbitrarily nested input.

    Strings (and bytes) are split on the separator class; structured items
    and ``None`` pass through unchanged.
    """
    # Lists being walked, innermost last; ids on the path skip self-containing input
    stack: list[tuple[int, Iterator[Any]]] = [(0, iter((integrity,)))]
    path: set[int] = set()
    while stack:
        item = next(stack[-1][1], _EXHAUSTED)
        if item is _EXHAUSTED:
            path.discard(stack.pop()[0])
        elif item is None:
            yield None
        elif isinstance(item, str):
            yield from split_metadata(item)
        elif isinstance(item, (bytes, bytearray, memoryview)):
            yield from split_metadata(bytes(item).decode("utf-8", errors="replace"))
        elif isinstance(item, IntegrityMetadata) or is_structured(item):
            yield item
        elif isinstance(item, Iterable):
            if id(item) not in path:
                path.add(id(item))
                stack.append((id(item), iter(item)))
        else:
            yield from split_metadata(str(item))


class IntegrityMetadataSet:
    """An ordered collection of valid integrity metadata.

    Invalid and unsupported entries are dropped. Repeated entries are kept,
    so ``size`` counts every valid token in the input.

    Example:
        >>> s = IntegrityMetadataSet('''
        ...     sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM=
        ...     sha384-VbxVaw0v4Pzlgrpf4Huq//A1ZTY4x6wNVJTCpkwL6hzFczHHwSpFzbyn9MNKCJ7r
        ... ''')
        >>> s.size
        2
        >>> s.strongest_hash_algorithms
        ('sha384',)
    """

    __slots__ = ("_set", "_strongest")

    def __init__(
        self,
        integrity: IntegrityInput | Any = None,
        *,
        get_prioritized_hash_algorithm: GetPrioritizedHashAlgorithm = get_prioritized_hash_algorithm,
    ) -> None:
        entries: list[IntegrityMetadata] = []
        for item in flatten(integrity):
            metadata = IntegrityMetadata(item)
            if metadata.is_empty:
                if item is not None:
                    diagnostics.debug(
                        "metadata_set",
                        "discarded integrity metadata",
                        structured=not isinstance(item, str),
                        token_length=len(item) if isinstance(item, str) else None,
                        _rate_limit_key="metadata_set.discard",
                    )
                continue
            entries.append(metadata)
        self._set: tuple[IntegrityMetadata, ...] = tuple(entries)
        self._strongest = _select_strongest(self._set, get_prioritized_hash_algorithm)

    @property
    def strongest(self) -> tuple[IntegrityMetadata, ...]:
        """Entries using the most preferred algorithm, including ties."""
        return self._strongest

    @property
    def strongest_hash_algorithms(self) -> tuple[HashAlgorithm, ...]:
        """Distinct algorithms of the strongest entries, in first-seen order."""
        seen: dict[str, None] = {}
        for metadata in self._strongest:
            if metadata.alg:
                seen.setdefault(metadata.alg, None)
        return tuple(seen)  # type: ignore[arg-type]

    @property
    def size(self) -> int:
        return len(self._set)

    def __len__(self) -> int:
        return len(self._set)

    def __iter__(self) -> Iterator[IntegrityMetadata]:
        return iter(self._set)

    def match(self, integrity: Any) -> bool:
        """Return True if any entry matches ``integrity``."""
        candidate = (
            integrity
            if isinstance(integrity, IntegrityMetadata)
            else IntegrityMetadata(integrity)
        )
        return any(metadata.match(candidate) for metadata in self._set)

    def join(self, separator: str = " ") -> str:
        return separator.join(str(metadata) for metadata in self._set)

    def to_string(self) -> str:
        return self.join()

    def to_json(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.join()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegrityMetadataSet):
            return NotImplemented
        return self._set == other._set

    def __hash__(self) -> int:
        return hash(self._set)

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


def _select_strongest(
    entries: Iterable[IntegrityMetadata],
    prioritize: GetPrioritizedHashAlgorithm,
) -> tuple[IntegrityMetadata, ...]:
    strongest: list[IntegrityMetadata] = []
    for metadata in entries:
        current = strongest[0] if strongest else _EMPTY
        prioritized = prioritize(current.alg, metadata.alg)
        if prioritized == "":
            strongest.append(metadata)
        elif prioritized == metadata.alg:
            strongest = [metadata]
        # otherwise the current strongest wins and this entry is dropped
    return tuple(strongest)

