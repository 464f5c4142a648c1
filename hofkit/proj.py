"""Apply a projection to every argument before calling a function."""

from __future__ import annotations

from typing import Any, Callable

from hofkit.apply_eval import apply_eval
from hofkit.invocable import _call_binds, function_param_limit, is_invocable

__all__ = ["ProjAdaptor", "proj"]


def _accepts_positional(f: Callable[..., Any], count: int) -> bool:
    if count > function_param_limit(f):
        return False
    # Without the projected values only the arity can be checked.
    return _call_binds(f, (None,) * count, {}, check_types=False)


class ProjAdaptor:
    """Call ``f(p(x) for x in args)``, or just ``p`` on each argument.

    Projections are always evaluated from left to right. Without ``f`` the
    projection is called for its effect on each argument and ``None`` is
    returned.
    """

    def __init__(
        self,
        projection: Callable[[Any], Any],
        f: Callable[..., Any] | None = None,
    ) -> None:
        if not callable(projection):
            raise TypeError(f"{projection!r} is not callable")
        if f is not None and not callable(f):
            raise TypeError(f"{f!r} is not callable")
        self.projection = projection
        self.f = f

    def base_function(self) -> Callable[..., Any] | None:
        """Return the function the projected arguments are passed to."""
        return self.f

    def base_projection(self) -> Callable[[Any], Any]:
        """Return the projection."""
        return self.projection

    def __call__(self, *args: Any) -> Any:
        p = self.projection
        if self.f is None:
            for x in args:
                p(x)
            return None
        return apply_eval(self.f, *(lambda x=x: p(x) for x in args))

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        if kwargs:
            return False
        if not all(is_invocable(self.projection, x) for x in args):
            return False
        return self.f is None or _accepts_positional(self.f, len(args))

    def __repr__(self) -> str:
        return f"ProjAdaptor({self.projection!r}, {self.f!r})"


def proj(
    projection: Callable[[Any], Any], f: Callable[..., Any] | None = None
) -> ProjAdaptor:
    """Wrap ``f`` so that ``projection`` is applied to each argument first."""
    return ProjAdaptor(projection, f)