"""Combine several functions, calling the first that accepts the arguments."""

from __future__ import annotations

from typing import Any, Callable

from hofkit.invocable import NotInvocableError, is_invocable

__all__ = ["FirstOfAdaptor", "first_of"]


class FirstOfAdaptor:
    """Try each function in order and call the first one that is invocable.

    Order matters: a later function is never chosen while an earlier one
    accepts the arguments, even if the later one would fit them better.
    """

    def __init__(self, *functions: Callable[..., Any]) -> None:
        if not functions:
            raise TypeError("first_of needs at least one function")
        for f in functions:
            if not callable(f):
                raise TypeError(f"{f!r} is not callable")
        self.functions = functions

    def _select(self, *args: Any, **kwargs: Any) -> Callable[..., Any] | None:
        return next(
            (f for f in self.functions if is_invocable(f, *args, **kwargs)),
            None,
        )

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        f = self._select(*args, **kwargs)
        if f is None:
            raise NotInvocableError(
                "none of the functions can be called with these arguments"
            )
        return f(*args, **kwargs)

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        return self._select(*args, **kwargs) is not None

    def __repr__(self) -> str:
        inner = ", ".join(repr(f) for f in self.functions)
        return f"FirstOfAdaptor({inner})"


def first_of(*args: Callable[..., Any]) -> FirstOfAdaptor:
    """Combine functions so the first callable one handles each call."""
    return FirstOfAdaptor(*args)