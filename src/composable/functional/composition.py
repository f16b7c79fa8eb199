"""Function composition.

``compose`` and ``pipe`` turn an ordered sequence of unary functions into a
single unary function. They differ only in the direction of application:

    - ``compose(f, g, h)(x) == f(g(h(x)))`` (right-to-left)
    - ``pipe(f, g, h)(x) == h(g(f(x)))`` (left-to-right)

Both return the identity function when called with no arguments, and both
obey the associative property, so compositions of compositions can be
regrouped freely::

    >>> scream = str.upper
    >>> exclaim = lambda s: f"{s}!"
    >>> repeat = lambda s: f"{s} {s}"
    >>> compose(repeat, exclaim, scream)("I love egghead")
    'I LOVE EGGHEAD! I LOVE EGGHEAD!'
    >>> pipe(scream, exclaim, repeat)("I love egghead")
    'I LOVE EGGHEAD! I LOVE EGGHEAD!'

Exceptions raised by any stage propagate unchanged and stop the evaluation;
no later stage runs.

The ``*_async`` variants build coroutine functions whose stages may be plain
functions or coroutine functions. An awaitable produced by a stage is
awaited before its value is handed to the next stage.
"""

import inspect
import typing as tp
from functools import reduce

__all__ = [
    "identity",
    "compose",
    "pipe",
    "compose_async",
    "pipe_async",
]

T = tp.TypeVar("T")

UnaryFunction = tp.Callable[[tp.Any], tp.Any]


def identity(value: T) -> T:
    """Return ``value`` unchanged."""
    return value


def _freeze(fns: tp.Sequence[UnaryFunction]) -> tp.Tuple[UnaryFunction, ...]:
    stages = tuple(fns)
    for position, fn in enumerate(stages):
        if not callable(fn):
            raise TypeError(
                f"Stage {position} is not callable: {type(fn).__name__!r}"
            )
    return stages


def _apply(acc: tp.Any, fn: UnaryFunction) -> tp.Any:
    return fn(acc)


def compose(*fns: UnaryFunction) -> UnaryFunction:
    """Compose unary functions right-to-left.

    Args:
        *fns: Unary functions. The last one receives the input value.

    Returns:
        A unary function ``h`` with ``h(x) == fns[0](fns[1](...fns[-1](x)))``.
        With no functions, ``h`` is the identity.

    Raises:
        TypeError: If any entry is not callable.
    """
    stages = _freeze(fns)[::-1]
    if not stages:
        return identity
    if len(stages) == 1:
        return stages[0]

    def composed(value):
        return reduce(_apply, stages, value)

    return composed


def pipe(*fns: UnaryFunction) -> UnaryFunction:
    """Compose unary functions left-to-right.

    Args:
        *fns: Unary functions. The first one receives the input value.

    Returns:
        A unary function ``h`` with ``h(x) == fns[-1](...fns[1](fns[0](x)))``.
        With no functions, ``h`` is the identity.

    Raises:
        TypeError: If any entry is not callable.
    """
    stages = _freeze(fns)
    if not stages:
        return identity
    if len(stages) == 1:
        return stages[0]

    def piped(value):
        return reduce(_apply, stages, value)

    return piped


async def _run_async(stages: tp.Tuple[UnaryFunction, ...], value: tp.Any) -> tp.Any:
    for fn in stages:
        value = fn(value)
        if inspect.isawaitable(value):
            value = await value
    return value


def compose_async(
    *fns: UnaryFunction,
) -> tp.Callable[[tp.Any], tp.Coroutine[tp.Any, tp.Any, tp.Any]]:
    """Right-to-left composition whose stages may be asynchronous.

    Returns:
        A coroutine function. Awaiting ``h(x)`` yields the same value
        ``compose`` would, with every awaitable stage result resolved first.
    """
    stages = _freeze(fns)[::-1]

    async def composed(value):
        return await _run_async(stages, value)

    return composed


def pipe_async(
    *fns: UnaryFunction,
) -> tp.Callable[[tp.Any], tp.Coroutine[tp.Any, tp.Any, tp.Any]]:
    """Left-to-right counterpart of :func:`compose_async`."""
    stages = _freeze(fns)

    async def piped(value):
        return await _run_async(stages, value)

    return piped
