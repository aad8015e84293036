"""
Field value normalization.

Reduces an arbitrary field value to something the JSON encoder can write
without help: a scalar, a string, or a verbose text rendering of a
composite value. The order of the checks in value() matters; an error is
never unwrapped into its attributes, and a reference to an error still
resolves to the error's message.
"""

import dataclasses
import types
import weakref
from collections.abc import Mapping, Sequence, Set
from typing import Any

_BYTE_TYPES = (bytes, bytearray)

CYCLE_MARKER = "..."
NIL_TEXT = "<nil>"

# Composites nested deeper than this render as CYCLE_MARKER.
MAX_DEPTH = 64


def value(obj: Any) -> Any:
    """
    Normalize one field value for JSON output.

    Never raises. Values that are neither scalars, text, stringers nor
    composites are returned unchanged and left to the JSON encoder.

    Args:
        obj: Any field value.

    Returns:
        None, bool, int, float, str, or obj itself for unknown kinds.
    """
    # Errors first: a reference-wrapped error must still give its message.
    if isinstance(obj, BaseException):
        return str(obj)

    if isinstance(obj, weakref.ref):
        # A dead reference yields None, which encodes as null.
        return value(obj())

    if obj is None or isinstance(obj, (bool, int, float)):
        return obj

    if isinstance(obj, str):
        return obj

    if is_stringer(obj):
        return str(obj)

    if is_composite(obj):
        return _render(obj, frozenset())

    return obj


def is_stringer(obj: Any) -> bool:
    """Return True if obj's class provides its own text conversion."""
    if isinstance(obj, _BYTE_TYPES):
        return False
    return type(obj).__str__ is not object.__str__


def is_composite(obj: Any) -> bool:
    """Return True for records, sequences and mappings."""
    if isinstance(obj, str):
        return False
    return isinstance(obj, (Mapping, Sequence, Set)) or _is_record(obj)


def _is_record(obj: Any) -> bool:
    if isinstance(obj, (type, types.ModuleType)) or callable(obj):
        return False
    if dataclasses.is_dataclass(obj) or _is_namedtuple(obj):
        return True
    return hasattr(obj, "__dict__") or bool(_slot_names(type(obj)))


def _is_namedtuple(obj: Any) -> bool:
    return isinstance(obj, tuple) and hasattr(type(obj), "_fields")


def _slot_names(cls: type) -> list[str]:
    """Attribute names declared in __slots__ across the class hierarchy."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _record_items(obj: Any) -> list[tuple[str, Any]]:
    if dataclasses.is_dataclass(obj):
        return [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    if _is_namedtuple(obj):
        return list(zip(obj._fields, obj))

    # Unset slots have no value to show.
    items = [
        (name, getattr(obj, name))
        for name in _slot_names(type(obj))
        if hasattr(obj, name)
    ]
    if hasattr(obj, "__dict__"):
        items.extend(vars(obj).items())
    return items


def _sort_key(obj: Any, seen: frozenset) -> tuple:
    if isinstance(obj, (bool, int, float)):
        return (0, obj)
    if isinstance(obj, str):
        return (1, obj)
    return (2, _render(obj, seen))


def _render(obj: Any, seen: frozenset) -> str:
    """Verbose text for obj and everything nested inside it."""
    if isinstance(obj, BaseException):
        return str(obj)
    if isinstance(obj, weakref.ref):
        return _render(obj(), seen)
    if obj is None:
        return NIL_TEXT
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, int):
        return int.__repr__(obj)
    if isinstance(obj, float):
        return float.__repr__(obj)
    if isinstance(obj, str):
        return obj
    if is_stringer(obj):
        return str(obj)
    if not is_composite(obj):
        return repr(obj)

    # seen holds the composites on the path from the top-level value.
    if id(obj) in seen or len(seen) >= MAX_DEPTH:
        return CYCLE_MARKER
    seen = seen | {id(obj)}

    if dataclasses.is_dataclass(obj) or _is_namedtuple(obj):
        return _render_record(obj, seen)

    if isinstance(obj, Mapping):
        keys = sorted(obj.keys(), key=lambda k: _sort_key(k, seen))
        pairs = " ".join(
            f"{_render(k, seen)}:{_render(obj[k], seen)}" for k in keys
        )
        return "map[" + pairs + "]"

    if isinstance(obj, _BYTE_TYPES):
        return "[" + " ".join(str(b) for b in obj) + "]"

    if isinstance(obj, (Sequence, Set)):
        if isinstance(obj, Set):
            items = sorted(obj, key=lambda item: _sort_key(item, seen))
        else:
            items = obj
        return "[" + " ".join(_render(item, seen) for item in items) + "]"

    return _render_record(obj, seen)


def _render_record(obj: Any, seen: frozenset) -> str:
    fields = " ".join(
        f"{name}:{_render(item, seen)}" for name, item in _record_items(obj)
    )
    return "{" + fields + "}"
