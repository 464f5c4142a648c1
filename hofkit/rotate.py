"""Move the first argument of a call to the last position."""

from __future__ import annotations

from typing import Any, Callable

from hofkit.invocable import is_invocable

__all__ = ["RotateAdaptor", "rotate"]


class RotateAdaptor:
    """Call ``f(*rest, first)`` when called as ``(first, *rest)``."""

    def __init__(self, f: Callable[..., Any]) -> None:
        if not callable(f):
            raise TypeError(f"{f!r} is not callable")
        self.f = f

    def base_function(self) -> Callable[..., Any]:
        """Return the wrapped function."""
        return self.f

    def __call__(self, x: Any, *args: Any) -> Any:
        return self.f(*args, x)

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        if not args or kwargs:
            return False
        first, *rest = args
        return is_invocable(self.f, *rest, first)

    def __repr__(self) -> str:
        return f"RotateAdaptor({self.f!r})"


def rotate(f: Callable[..., Any]) -> RotateAdaptor:
    """Wrap ``f`` so its first argument is passed last."""
    return RotateAdaptor(f)