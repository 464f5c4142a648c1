"""Tagged wrappers around values, with uniform access to the wrapped value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

__all__ = ["Alias", "AliasStatic", "alias_value", "alias_tag", "has_tag"]


@dataclass(frozen=True)
class Alias:
    """Wrap a value with a user-chosen tag."""

    value: Any
    tag: Any = None


class AliasStatic:
    """Alias for a class whose value is one shared default-built instance.

    Every ``AliasStatic`` with the same class and tag sees the same value.
    """

    _storage: ClassVar[dict[tuple[Any, Any], Any]] = {}

    def __init__(self, cls: type, tag: Any = None) -> None:
        if not callable(cls):
            raise TypeError(f"{cls!r} cannot be constructed")
        self.cls = cls
        self.tag = tag

    @property
    def value(self) -> Any:
        key = (self.cls, self.tag)
        try:
            return self._storage[key]
        except KeyError:
            instance = self._storage[key] = self.cls()
            return instance

    def __repr__(self) -> str:
        return f"AliasStatic({self.cls!r}, tag={self.tag!r})"


def alias_value(a: Alias | AliasStatic) -> Any:
    """Return the value held by an alias."""
    if isinstance(a, (Alias, AliasStatic)):
        return a.value
    raise TypeError(f"{type(a).__name__} is not an alias")


def alias_tag(a: Alias | AliasStatic) -> Any:
    """Return the tag of an alias."""
    if isinstance(a, (Alias, AliasStatic)):
        return a.tag
    raise TypeError(f"{type(a).__name__} is not an alias")


def has_tag(obj: Any, tag: Any) -> bool:
    """Tell whether ``obj`` is an alias carrying ``tag``."""
    if not isinstance(obj, (Alias, AliasStatic)):
        return False
    return obj.tag == tag