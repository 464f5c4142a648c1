"""Checks for whether a callable accepts a given set of arguments."""

from __future__ import annotations

import functools
import sys
import types
from dataclasses import dataclass, field
from typing import Any, Callable

__all__ = ["NotInvocableError", "is_invocable", "function_param_limit"]

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08


class NotInvocableError(TypeError):
    """Raised when a function cannot be called with the given arguments."""


def function_param_limit(f: Any) -> int:
    """Return the largest number of positional arguments ``f`` takes.

    A function can state its limit with a ``param_limit`` attribute;
    otherwise the limit is ``sys.maxsize``.
    """
    limit = getattr(f, "param_limit", None)
    if isinstance(limit, int) and not isinstance(limit, bool):
        return limit
    return sys.maxsize


def _matches(annotation: Any, value: Any) -> bool:
    if not isinstance(annotation, type):
        return True
    try:
        return isinstance(value, annotation)
    except TypeError:
        return True


@dataclass(frozen=True)
class _Spec:
    """The parameters of a Python-level callable."""

    positional: tuple[str, ...] = ()
    posonly: frozenset[str] = frozenset()
    kwonly: tuple[str, ...] = ()
    with_defaults: frozenset[str] = frozenset()
    varargs: str | None = None
    varkw: str | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    def accepts(self, args: tuple[Any, ...], kwargs: dict[str, Any], check_types: bool) -> bool:
        extra = args[len(self.positional):]
        if extra and self.varargs is None:
            return False
        assigned = dict(zip(self.positional, args))
        keyword_names = set(self.positional) | set(self.kwonly)
        extra_kw: dict[str, Any] = {}
        for name, value in kwargs.items():
            if name in keyword_names and name not in self.posonly:
                if name in assigned:
                    return False
                assigned[name] = value
            elif self.varkw is not None:
                extra_kw[name] = value
            else:
                return False
        for name in (*self.positional, *self.kwonly):
            if name not in assigned and name not in self.with_defaults:
                return False
        if not check_types:
            return True
        missing = object()
        if not all(
            _matches(self.annotations.get(name, missing), value)
            for name, value in assigned.items()
        ):
            return False
        if self.varargs is not None:
            annotation = self.annotations.get(self.varargs, missing)
            if not all(_matches(annotation, v) for v in extra):
                return False
        if self.varkw is not None:
            annotation = self.annotations.get(self.varkw, missing)
            if not all(_matches(annotation, v) for v in extra_kw.values()):
                return False
        return True


def _unwrap(fn: Any) -> Any:
    seen = set()
    while hasattr(fn, "__wrapped__") and id(fn) not in seen:
        seen.add(id(fn))
        fn = fn.__wrapped__
    return fn


def _function_spec(fn: types.FunctionType, skip: int) -> _Spec:
    code = fn.__code__
    names = code.co_varnames
    npos = code.co_argcount
    nkw = code.co_kwonlyargcount
    positional = names[:npos]
    kwonly = names[npos:npos + nkw]
    index = npos + nkw
    varargs = None
    if code.co_flags & _CO_VARARGS:
        varargs = names[index]
        index += 1
    varkw = names[index] if code.co_flags & _CO_VARKEYWORDS else None
    defaults = fn.__defaults__ or ()
    with_defaults = set(positional[len(positional) - len(defaults):]) if defaults else set()
    with_defaults |= set(fn.__kwdefaults__ or {})
    posonly = set(positional[:code.co_posonlyargcount])
    positional = positional[skip:]
    return _Spec(
        positional=positional,
        posonly=frozenset(posonly & set(positional)),
        kwonly=kwonly,
        with_defaults=frozenset(with_defaults),
        varargs=varargs,
        varkw=varkw,
        annotations=dict(getattr(fn, "__annotations__", None) or {}),
    )


def _spec_of(f: Any) -> _Spec | None:
    f = _unwrap(f)
    if isinstance(f, types.MethodType):
        func = _unwrap(f.__func__)
        return _function_spec(func, 1) if isinstance(func, types.FunctionType) else None
    if isinstance(f, types.FunctionType):
        return _function_spec(f, 0)
    if isinstance(f, type):
        init = _unwrap(f.__init__)
        if isinstance(init, types.FunctionType):
            return _function_spec(init, 1)
        new = _unwrap(f.__new__)
        if init is object.__init__ and new is object.__new__:
            return _Spec()
        if init is object.__init__ and isinstance(new, types.FunctionType):
            return _function_spec(new, 1)
        return None
    call = _unwrap(getattr(type(f), "__call__", None))
    if isinstance(call, types.FunctionType):
        return _function_spec(call, 1)
    return None


def _call_binds(
    f: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    check_types: bool = True,
) -> bool:
    """Tell whether the arguments bind to the parameters of ``f``.

    Callables whose parameters cannot be read are taken to accept anything.
    """
    if isinstance(f, functools.partial):
        return _call_binds(
            f.func, (*f.args, *args), {**f.keywords, **kwargs}, check_types
        )
    spec = _spec_of(f)
    if spec is None:
        return True
    return spec.accepts(tuple(args), dict(kwargs), check_types)


def is_invocable(f: Any, *args: Any, **kwargs: Any) -> bool:
    """Tell whether ``f(*args, **kwargs)`` is a valid call.

    The call is checked against the function's signature and against any
    plain class annotations on its parameters. Objects that know better can
    provide an ``is_invocable_with(*args, **kwargs)`` method.
    """
    if not callable(f):
        return False
    if len(args) > function_param_limit(f):
        return False
    if not isinstance(f, type):
        hook = getattr(f, "is_invocable_with", None)
        if callable(hook):
            return bool(hook(*args, **kwargs))
    return _call_binds(f, args, kwargs)