"""Higher-order helpers: currying, partial application and call counting.

A curried function receives its arguments a few at a time, returning a new
function until it has all of them::

    >>> add = curry(lambda x, y: x + y)
    >>> add_five = add(5)
    >>> add_five(4)
    9
    >>> add(5, 4)
    9

Partially applied functions keep their supplied arguments in closure and
can be reused any number of times.
"""

import inspect
import logging
import typing as tp
from functools import partial, update_wrapper

from composable.logger.logger import get_logger

logger = get_logger("calls")

__all__ = ["arity", "curry", "partial_apply", "with_count"]

R = tp.TypeVar("R")

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def arity(fn: tp.Callable[..., tp.Any]) -> int:
    """Number of positional parameters ``fn`` requires.

    Parameters with defaults, ``*args``, ``**kwargs`` and keyword-only
    parameters are not counted.
    """
    params = inspect.signature(fn).parameters.values()
    return sum(
        1 for p in params if p.kind in _POSITIONAL and p.default is p.empty
    )


def curry(fn: tp.Callable[..., R], n: tp.Optional[int] = None) -> tp.Callable:
    """Curry ``fn`` over its first ``n`` positional arguments.

    Each call may supply one or more arguments. Once ``n`` have been
    collected, ``fn`` is evaluated. Surplus arguments in the final call are
    passed through to ``fn``.

    Args:
        fn: The function to curry.
        n: Number of positional arguments to collect. Defaults to
            ``arity(fn)``.

    Returns:
        The curried function. With ``n == 0`` the first call evaluates ``fn``.

    Raises:
        ValueError: If ``n`` is negative.
    """
    n = arity(fn) if n is None else n
    if n < 0:
        raise ValueError(f"Arity must be non-negative, got {n}")

    def collect(collected: tp.Tuple[tp.Any, ...]) -> tp.Callable:
        def curried(*args, **kwargs):
            supplied = collected + args
            if len(supplied) >= n:
                return fn(*supplied, **kwargs)
            if kwargs:
                return curry(partial(fn, **kwargs), n)(*supplied)
            return collect(supplied)

        return curried

    # update_wrapper skips attributes a partial or builtin does not carry
    return update_wrapper(collect(()), fn)


def partial_apply(fn: tp.Callable[..., R], *args: tp.Any) -> tp.Callable:
    """Bake ``args`` into ``fn`` and curry over whatever is left.

    >>> get_user = partial_apply(lambda base, path, uid: f"{base}{path}/{uid}", "https://x", "/users")
    >>> get_user(7)
    'https://x/users/7'
    """
    remaining = arity(fn) - len(args)
    if remaining < 0:
        raise TypeError(
            f"{getattr(fn, '__name__', fn)!r} takes {arity(fn)} positional "
            f"arguments but {len(args)} were supplied"
        )
    return curry(partial(fn, *args), remaining)


class with_count:
    """Wrap ``fn`` so that every call is counted.

    The wrapped result is returned unchanged. The running total is available
    as ``.count`` and each call is logged at DEBUG level.

    Example:
        >>> counted_add = with_count(lambda x, y: x + y)
        >>> counted_add(1, 2), counted_add(2, 2)
        (3, 4)
        >>> counted_add.count
        2
    """

    def __init__(
        self, fn: tp.Callable[..., R], log: tp.Optional[logging.Logger] = None
    ):
        self.fn = fn
        self.count = 0
        self.log = log if log is not None else logger
        update_wrapper(self, fn, updated=())

    def __call__(self, *args, **kwargs):
        self.count += 1
        self.log.debug(f"Call count: {self.count}")
        return self.fn(*args, **kwargs)
