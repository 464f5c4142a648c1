# hofkit

Small building blocks for working with functions as values: call the first
function that accepts the arguments, guard a function by a condition,
compose, rotate arguments, project arguments, fix a result type, build lazy
call expressions with placeholders, and pipe values into functions with `|`.

The package has no dependencies beyond the standard library.

## Install

```
pip install hofkit
```

For running the tests:

```
pip install "hofkit[test]"
pytest
```

## A quick tour

```python
from hofkit.first_of import first_of
from hofkit.conditional import if_
from hofkit.compose import compose
from hofkit.rotate import rotate
from hofkit.proj import proj
from hofkit.result import result
from hofkit.lazy import lazy, Placeholder
from hofkit.pipable import pipable

# first_of: call the first function that can take the arguments
add_ints = first_of(if_(True)(lambda x, y: x + y), lambda x, y: 0)
assert add_ints(1, 2) == 3

# compose: compose(f, g)(x) == f(g(x))
inc = lambda x: x + 1
dec = lambda x: x - 1
assert compose(inc, dec, inc)(3) == 4

# rotate: move the first argument to the end
assert rotate(lambda a, b: a - b)(2, 5) == 3

# proj: apply a projection to each argument, left to right, before calling
assert proj(len, lambda a, b: a + b)("ab", "cde") == 5

# result: convert what a function returns
assert result(int, lambda x: x)(True) == 1

# lazy: build a call with placeholders, fill it in later
add = lambda x, y: x + y
increment = lazy(add)(Placeholder(1), 1)
assert increment(5) == 6

# pipable: pipe the first argument in with |
total = pipable(lambda x, y: x + y)
assert (1 | total(2)) == 3
assert total(1, 2) == 3
```

## Modules

- `hofkit.invocable` — `is_invocable(f, *args, **kwargs)` tells whether a
  call would bind to the parameters of `f`, also checking plain class
  annotations on those parameters. Callables whose parameters cannot be read
  are taken to accept anything. An object may answer for itself through an
  `is_invocable_with(*args, **kwargs)` method; the adaptors in this package
  all do. `function_param_limit(f)` returns the `param_limit` attribute of
  `f` when it is an integer, and `sys.maxsize` otherwise.
  `NotInvocableError` (a `TypeError`) is raised by the adaptors when no call
  is possible.
- `hofkit.first_of` — `first_of(*functions)` / `FirstOfAdaptor` calls the
  first function, in order, that is invocable with the arguments.
- `hofkit.conditional` — `if_(condition)` returns a decorator, and
  `if_c(condition, f)` wraps `f` directly, in an `IfAdaptor` that can only
  be called when the condition is true.
- `hofkit.compose` — `compose(*functions)` / `ComposeAdaptor`, applied right
  to left.
- `hofkit.rotate` — `rotate(f)` / `RotateAdaptor` calls `f(*rest, first)`.
- `hofkit.apply_eval` — `evaluate(x)` calls a nullary function;
  `apply_eval(f, *thunks)` evaluates each thunk left to right, then calls `f`
  with the results.
- `hofkit.proj` — `proj(projection, f=None)` / `ProjAdaptor`. Without `f`
  the projection is called on each argument for its effect and `None` is
  returned.
- `hofkit.result` — `result(result_type, f)` / `ResultAdaptor` converts the
  return value with `result_type`; a `result_type` of `None` discards it.
- `hofkit.lazy` — `lazy(f)` / `LazyAdaptor` binds arguments into a
  `LazyInvoker`. `Placeholder(n)` stands for the n-th argument (from 1) of
  the later call; nested invokers are evaluated with the same arguments;
  extra call arguments are ignored. `is_bind_expression(x)` tells whether
  `x` is a `LazyInvoker`.
- `hofkit.pipable` — `pipable(f)` / `PipableAdaptor` calls `f` when the
  arguments suffice, and otherwise returns a `PipeClosure` that takes the
  first argument through `|`. `x | pipable(f)` is `f(x)`.
- `hofkit.alias` — `Alias(value, tag)` and `AliasStatic(cls, tag)` wrap a
  value under a tag; `AliasStatic` shares one default-built instance per
  class and tag. `alias_value`, `alias_tag` and `has_tag` read them.
- `hofkit.static` — `Static(factory)` builds its function on first use and
  shares it among all wrappers of the same factory.
- `hofkit.unpack_sequence` — `register_unpack_sequence(seq_type, apply)`,
  `is_unpackable(seq)` and `unpack_sequence(f, seq)`; tuples are registered
  out of the box.

## What it does not do

hofkit is a library only: it has no command-line program. It does not
provide `apply`, `partial`, `match`, `infix`, `flip`, `limit` or operator
placeholders such as `_ + _`; invocability is judged from signatures and
annotations at call time, not from static types.