"""Function composition."""

from __future__ import annotations

from typing import Any, Callable

from hofkit.invocable import is_invocable

__all__ = ["ComposeAdaptor", "compose"]


class ComposeAdaptor:
    """Compose functions right to left: ``compose(f, g)(x) == f(g(x))``."""

    def __init__(self, *functions: Callable[..., Any]) -> None:
        if not functions:
            raise TypeError("compose needs at least one function")
        for f in functions:
            if not callable(f):
                raise TypeError(f"{f!r} is not callable")
        self.functions = functions

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        *outer, innermost = self.functions
        result = innermost(*args, **kwargs)
        for f in reversed(outer):
            result = f(result)
        return result

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        return is_invocable(self.functions[-1], *args, **kwargs)

    def __repr__(self) -> str:
        inner = ", ".join(repr(f) for f in self.functions)
        return f"ComposeAdaptor({inner})"


def compose(*args: Callable[..., Any]) -> ComposeAdaptor:
    """Compose functions so the output of each feeds the one before it."""
    return ComposeAdaptor(*args)