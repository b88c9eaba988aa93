"""
Grammar for integrity metadata tokens.

A token has the form ``<alg>-<base64 value>[?<option>...]``. Parsing never
raises: input that does not match yields an empty ``ParsedIntegrity``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple, Sequence

from typing_extensions import NotRequired, TypedDict

from .algorithms import is_supported

INTEGRITY_METADATA_PATTERN = re.compile(
    r"\A(?P<alg>sha256|sha384|sha512)"
    r"-(?P<val>(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?)"
    r"(?:[?](?P<opt>[\x21-\x7e]*))?\Z"
)

# Anything outside printable ASCII (whitespace, controls, non-ASCII) separates tokens
SEPARATOR_PATTERN = re.compile(r"[^\x21-\x7e]+")

# Every str.isspace() code point, plus the byte order mark
_TRIM_CHARS = (
    "\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class IntegrityMetadataLike(TypedDict):
    """Structured integrity metadata fields."""

    alg: str
    val: str
    opt: NotRequired[Sequence[str]]


class ParsedIntegrity(NamedTuple):
    alg: str = ""
    val: str = ""
    opt: tuple[str, ...] = ()


EMPTY = ParsedIntegrity()


def trim(text: str) -> str:
    """Strip surrounding whitespace, including Unicode space separators."""
    return text.strip(_TRIM_CHARS)


def split_metadata(text: str) -> list[str]:
    """Split a metadata list into tokens, dropping empty pieces."""
    return [token for token in SEPARATOR_PATTERN.split(text) if token]


def parse(token: str) -> ParsedIntegrity:
    """Parse one metadata token.

    Example:
        >>> parse("sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM=?foo")
        ParsedIntegrity(alg='sha256', val='MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM=', opt=('foo',))
        >>> parse("sha1-lDpwLQbzRZmu4fjajvn3KWAx1pk=")
        ParsedIntegrity(alg='', val='', opt=())
    """
    match = INTEGRITY_METADATA_PATTERN.match(trim(token))
    if match is None:
        return EMPTY
    opt = match.group("opt")
    return ParsedIntegrity(
        alg=match.group("alg"),
        val=match.group("val"),
        opt=tuple(opt.split("?")) if opt is not None else (),
    )


def _options(opt: Any) -> tuple[Any, ...]:
    if not opt:
        return ()
    if isinstance(opt, str) or not isinstance(opt, Iterable):
        return (opt,)
    return tuple(opt)


def get_fields(integrity: Any) -> tuple[Any, Any, tuple[Any, ...]]:
    """Read ``alg``, ``val`` and ``opt`` from a mapping or an attribute holder."""
    if isinstance(integrity, Mapping):
        return (
            integrity.get("alg", ""),
            integrity.get("val", ""),
            _options(integrity.get("opt")),
        )
    return (
        getattr(integrity, "alg", ""),
        getattr(integrity, "val", ""),
        _options(getattr(integrity, "opt", None)),
    )


def stringify(integrity: IntegrityMetadataLike | Any) -> str:
    """Serialize structured fields into the canonical token.

    Only the algorithm and the presence of a value are checked; the value
    and options are trusted to be well formed.

    Example:
        >>> stringify({"alg": "sha256", "val": "MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM="})
        'sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM='
    """
    alg, val, opt = get_fields(integrity)
    if not alg:
        return ""
    if not val:
        return ""
    if not is_supported(alg):
        return ""
    return f"{alg}-" + "?".join([str(val), *(str(o) for o in opt)])
