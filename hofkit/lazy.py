"""Deferred calls with positional placeholders, in the manner of bind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from hofkit.invocable import NotInvocableError, is_invocable

__all__ = [
    "Placeholder",
    "LazyAdaptor",
    "LazyInvoker",
    "lazy",
    "is_bind_expression",
]


@dataclass(frozen=True)
class Placeholder:
    """Stand-in for the ``index``-th argument (counted from 1) of a later call."""

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError("placeholder index must be an integer")
        if self.index < 1:
            raise ValueError("placeholder index must be at least 1")

    def __call__(self, *args: Any) -> Any:
        """Return the argument this placeholder stands for."""
        if self.index > len(args):
            raise NotInvocableError(
                f"placeholder {self.index} needs at least {self.index} arguments, "
                f"got {len(args)}"
            )
        return args[self.index - 1]


def _required_arity(value: Any) -> int:
    if isinstance(value, Placeholder):
        return value.index
    if isinstance(value, LazyInvoker):
        return max((_required_arity(x) for x in value.bound), default=0)
    return 0


def _transform(value: Any, args: tuple[Any, ...]) -> Any:
    if isinstance(value, (Placeholder, LazyInvoker)):
        return value(*args)
    return value


class LazyInvoker:
    """A deferred call of ``f`` with bound arguments.

    When called, placeholders are replaced by the matching call arguments,
    nested bind expressions are evaluated with the same arguments, and every
    other bound value is passed as it is. Extra call arguments are ignored.
    """

    def __init__(self, f: Callable[..., Any], bound: tuple[Any, ...]) -> None:
        self.f = f
        self.bound = tuple(bound)

    def __call__(self, *args: Any) -> Any:
        return self.f(*(_transform(x, args) for x in self.bound))

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        if kwargs or len(args) < _required_arity(self):
            return False
        if any(
            isinstance(x, LazyInvoker) and not x.is_invocable_with(*args)
            for x in self.bound
        ):
            return False
        values = [
            x(*args) if isinstance(x, Placeholder) else x
            for x in self.bound
            if not isinstance(x, LazyInvoker)
        ]
        if len(values) != len(self.bound):
            return True
        return is_invocable(self.f, *values)

    def __repr__(self) -> str:
        inner = ", ".join(repr(x) for x in self.bound)
        return f"LazyInvoker({self.f!r}, ({inner}))"


class LazyAdaptor:
    """Wrap ``f`` so that calling it binds arguments instead of calling ``f``."""

    def __init__(self, f: Callable[..., Any]) -> None:
        if not callable(f):
            raise TypeError(f"{f!r} is not callable")
        self.f = f

    def base_function(self) -> Callable[..., Any]:
        """Return the wrapped function."""
        return self.f

    def __call__(self, *args: Any) -> LazyInvoker:
        return LazyInvoker(self.f, args)

    def __repr__(self) -> str:
        return f"LazyAdaptor({self.f!r})"


def lazy(f: Callable[..., Any]) -> LazyAdaptor:
    """Return a call wrapper whose calls build deferred calls of ``f``."""
    return LazyAdaptor(f)


def is_bind_expression(x: Any) -> bool:
    """Tell whether ``x`` is a deferred call built by ``lazy``."""
    return isinstance(x, LazyInvoker)