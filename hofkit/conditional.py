"""Make a function callable only when a condition holds."""

from __future__ import annotations

from typing import Any, Callable

from hofkit.invocable import NotInvocableError, is_invocable

__all__ = ["IfAdaptor", "if_", "if_c"]


class IfAdaptor:
    """Wrap ``f`` so it is invocable only when ``condition`` is true."""

    def __init__(self, condition: bool, f: Callable[..., Any]) -> None:
        if not callable(f):
            raise TypeError(f"{f!r} is not callable")
        self.condition = bool(condition)
        self.f = f

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not self.condition:
            raise NotInvocableError("the condition for this function is false")
        return self.f(*args, **kwargs)

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        return self.condition and is_invocable(self.f, *args, **kwargs)

    def __repr__(self) -> str:
        return f"IfAdaptor({self.condition!r}, {self.f!r})"


def if_c(condition: Any, f: Callable[..., Any]) -> IfAdaptor:
    """Wrap ``f`` so it can be called only when ``condition`` is true."""
    return IfAdaptor(condition, f)


def if_(condition: Any) -> Callable[[Callable[..., Any]], IfAdaptor]:
    """Return a decorator that guards a function by ``condition``."""
    flag = bool(condition)

    def make(f: Callable[..., Any]) -> IfAdaptor:
        return IfAdaptor(flag, f)

    return make