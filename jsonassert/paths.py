"""
Path resolution for JSON-like documents.

Paths are dot-separated chains of keys, with numeric indices written
either as ``[N]`` or as a plain ``.N`` step:

    "user.name"        -> data["user"]["name"]
    "items[0].id"      -> data["items"][0]["id"]
    "items.0.id"       -> same as above

Resolution never raises. Anything that cannot be followed (missing key,
out-of-range index, stepping into a primitive or ``None``) resolves to
the ``ABSENT`` sentinel, which is distinct from a stored ``None``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from jsonpath_ng.jsonpath import DatumInContext, Fields, Index

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"\[(\d+)\]", re.ASCII)
_DIGITS_PATTERN = re.compile(r"\d+", re.ASCII)


class _Absent:
    """Sentinel for a path that does not resolve to a value."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict) -> _Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def split_path(path: str) -> list[str]:
    """
    Split a path into its steps.

    ``[N]`` indices become ordinary steps, so ``"arr[0].id"`` and
    ``"arr.0.id"`` produce the same steps. A leading index (``"[0].id"``)
    does not produce an empty first step.
    """
    normalized = _INDEX_PATTERN.sub(r".\1", path)
    if path.startswith("[") and normalized.startswith("."):
        normalized = normalized[1:]
    return normalized.split(".")


def resolve_datum(document: Any, path: str) -> DatumInContext | None:
    """
    Resolve a path to the matching datum.

    Returns:
        The ``DatumInContext`` at the end of the path, or None if any
        step cannot be followed.
    """
    try:
        datum = DatumInContext.wrap(document)
        for step in split_path(path):
            datum = _child(datum, step)
            if datum is None:
                return None
        return datum
    except Exception as e:
        logger.debug(f"Failed to resolve path {path!r}: {type(e).__name__}: {e}")
        return None


def resolve(document: Any, path: str) -> Any:
    """
    Resolve a path against a document.

    Args:
        document: The JSON-like data to search
        path: Dot/bracket path, e.g. ``"arr[0].id"``

    Returns:
        The value at the path (possibly None), or ``ABSENT``
    """
    datum = resolve_datum(document, path)
    if datum is None:
        return ABSENT
    return datum.value


def _child(datum: DatumInContext, step: str) -> DatumInContext | None:
    """Follow a single step from a datum."""
    value = datum.value

    if isinstance(value, Mapping):
        if step not in value:
            return None
        # A bare "*" is a wildcard to Fields; keys are always literal here
        if step == "*":
            return DatumInContext(value[step], path=Fields(step), context=datum)
        matches = Fields(step).find(datum)

    elif isinstance(value, (list, tuple)):
        if not _DIGITS_PATTERN.fullmatch(step):
            return None
        matches = Index(int(step)).find(datum)

    else:
        return None

    return matches[0] if matches else None
