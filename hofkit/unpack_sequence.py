"""Registry of how to spread a sequence into a function's arguments."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["register_unpack_sequence", "is_unpackable", "unpack_sequence"]

UnpackFn = Callable[[Callable[..., Any], Any], Any]

_registry: dict[type, UnpackFn] = {}


def register_unpack_sequence(seq_type: type, apply: UnpackFn) -> UnpackFn:
    """Register ``apply(f, seq)`` as the way to unpack ``seq_type``."""
    if not isinstance(seq_type, type):
        raise TypeError(f"{seq_type!r} is not a type")
    if not callable(apply):
        raise TypeError(f"{apply!r} is not callable")
    _registry[seq_type] = apply
    return apply


def _lookup(seq: Any) -> UnpackFn | None:
    for cls in type(seq).__mro__:
        apply = _registry.get(cls)
        if apply is not None:
            return apply
    return None


def is_unpackable(seq: Any) -> bool:
    """Tell whether a way to unpack ``seq`` is registered."""
    return _lookup(seq) is not None


def unpack_sequence(f: Callable[..., Any], seq: Any) -> Any:
    """Call ``f`` with the elements of ``seq`` as its arguments."""
    apply = _lookup(seq)
    if apply is None:
        raise TypeError(f"{type(seq).__name__} is not unpackable")
    return apply(f, seq)


register_unpack_sequence(tuple, lambda f, seq: f(*seq))