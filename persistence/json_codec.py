from __future__ import annotations

import json
import logging
from typing import Any, Final, NoReturn

logger = logging.getLogger(__name__)

NULL_TEXT: Final = "null"

# str(int) refuses more than 4300 digits; stay well under that per chunk.
_INT_CHUNK_DIGITS: Final = 4000
_INT_CHUNK: Final = 10**_INT_CHUNK_DIGITS


class _DecodeFailed:
    """Marker for "no usable decoded value" (absent or malformed)."""

    def __repr__(self) -> str:
        return "DECODE_FAILED"


DECODE_FAILED: Final = _DecodeFailed()


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def decode(raw: str | None) -> Any:
    """
    Parse raw JSON text.

    Returns the decoded value, or DECODE_FAILED when raw is None or not valid JSON.
    NaN/Infinity tokens and integers past the interpreter's digit limit count as
    invalid. Callers compare with `is DECODE_FAILED`; a decoded JSON null is
    returned as None.
    """
    if raw is None:
        return DECODE_FAILED
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.debug("JSON DECODE: %d chars of malformed text", len(raw))
        return DECODE_FAILED


def encode(obj: Any) -> str:
    """
    Serialize obj to compact JSON text.

    Cyclic structures, unserializable values, non-finite floats and oversized
    integers degrade to NULL_TEXT so whatever gets stored is always parseable.
    """
    try:
        return json.dumps(obj, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("JSON ENCODE: storing null instead of %s: %r", type(obj).__name__, e)
        return NULL_TEXT


def _int_text(n: int) -> str:
    sign = "-" if n < 0 else ""
    n = abs(n)
    chunks = []
    while n >= _INT_CHUNK:
        n, rest = divmod(n, _INT_CHUNK)
        chunks.append(str(rest).zfill(_INT_CHUNK_DIGITS))
    chunks.append(str(n))
    return sign + "".join(reversed(chunks))


def to_text(value: Any) -> str:
    """
    Textual form used by raw writes.

    Strings pass through untouched; bool/None/int/float use their JSON spelling
    (locale-independent, no grouping). Integers of any length are written out in
    full. Anything else falls back to str().
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return _int_text(int(value))
    if value is None or isinstance(value, (bool, float)):
        # allow_nan keeps NaN/Infinity spelled the way JavaScript's String() does
        return json.dumps(value, allow_nan=True)
    return str(value)
