"""Curried, data-last helpers for point-free compositions.

Each helper takes its configuration first and the data last, so partially
applied helpers slot straight into ``compose`` / ``pipe`` without naming an
intermediate argument.
"""

import typing as tp

from composable.functional.composition import compose

__all__ = [
    "map_",
    "filter_",
    "split",
    "join",
    "lower_case",
    "upper_case",
    "scream",
    "exclaim",
    "repeat",
    "slugify",
]

A = tp.TypeVar("A")
B = tp.TypeVar("B")


def map_(fn: tp.Callable[[A], B]) -> tp.Callable[[tp.Iterable[A]], tp.List[B]]:
    def mapped(items: tp.Iterable[A]) -> tp.List[B]:
        return [fn(item) for item in items]

    return mapped


def filter_(
    pred: tp.Callable[[A], bool],
) -> tp.Callable[[tp.Iterable[A]], tp.List[A]]:
    def filtered(items: tp.Iterable[A]) -> tp.List[A]:
        return [item for item in items if pred(item)]

    return filtered


def split(sep: str) -> tp.Callable[[str], tp.List[str]]:
    def splitter(text: str) -> tp.List[str]:
        return text.split(sep)

    return splitter


def join(sep: str) -> tp.Callable[[tp.Iterable[str]], str]:
    def joiner(items: tp.Iterable[str]) -> str:
        return sep.join(items)

    return joiner


def lower_case(text: str) -> str:
    return text.lower()


def upper_case(text: str) -> str:
    return text.upper()


scream = upper_case


def exclaim(text: str) -> str:
    return f"{text}!"


def repeat(text: str) -> str:
    return f"{text} {text}"


# Title -> url slug, one map over the whole list
slugify: tp.Callable[[tp.Iterable[str]], tp.List[str]] = map_(
    compose(join("-"), split(" "), lower_case)
)
