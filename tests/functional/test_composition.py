import asyncio

import pytest
from composable.functional.composition import (
    compose,
    pipe,
    compose_async,
    pipe_async,
    identity,
)
from composable.functional.pointfree import scream, exclaim, repeat


def f(x):
    return x + 1


def g(x):
    return x * 3


def h(x):
    return x - 7


@pytest.fixture
def values():
    return [-5, 0, 2, 4, 13]


def test_concrete_scenario():
    assert compose(repeat, exclaim, scream)("I love egghead") == (
        "I LOVE EGGHEAD! I LOVE EGGHEAD!"
    )
    assert pipe(scream, exclaim, repeat)("I love egghead") == (
        "I LOVE EGGHEAD! I LOVE EGGHEAD!"
    )


def test_nesting_matches_compose():
    assert compose(f, g)(2) == f(g(2)) == 7
    assert compose(f, g)(4) == 13


@pytest.mark.parametrize("builder", [compose, pipe])
def test_empty_sequence_is_identity(builder, values):
    fn = builder()
    for x in values + ["text", None]:
        assert fn(x) == x

    marker = object()
    assert fn(marker) is marker


def test_identity():
    obj = [1, 2]
    assert identity(obj) is obj


def test_single_function_equivalence(values):
    for x in values:
        assert compose(f)(x) == f(x) == pipe(f)(x)


def test_order_reversal(values):
    for x in values:
        assert compose(f, g)(x) == f(g(x))
        assert pipe(f, g)(x) == g(f(x))


def test_compose_pipe_mirror(values):
    for x in values:
        assert compose(f, g, h)(x) == pipe(h, g, f)(x)


def test_compose_associativity(values):
    flat = compose(f, g, h)
    left = compose(compose(f, g), h)
    right = compose(f, compose(g, h))
    for x in values:
        assert left(x) == right(x) == flat(x)


def test_pipe_associativity(values):
    flat = pipe(f, g, h)
    left = pipe(pipe(f, g), h)
    right = pipe(f, pipe(g, h))
    for x in values:
        assert left(x) == right(x) == flat(x)


def test_associativity_with_strings():
    comp1 = compose(repeat, exclaim, scream)
    comp2 = compose(compose(repeat, exclaim), scream)
    comp3 = compose(repeat, compose(exclaim, scream))
    assert comp1("x") == comp2("x") == comp3("x") == "X! X!"


def test_each_stage_runs_once_in_order():
    calls = []

    def stage(name):
        def run(x):
            calls.append(name)
            return x + [name]

        return run

    assert compose(stage("a"), stage("b"), stage("c"))([]) == ["c", "b", "a"]
    assert calls == ["c", "b", "a"]

    calls.clear()
    assert pipe(stage("a"), stage("b"), stage("c"))([]) == ["a", "b", "c"]
    assert calls == ["a", "b", "c"]


class Boom(Exception):
    pass


@pytest.fixture
def counted_stages():
    counts = {"first": 0, "failing": 0, "after": 0}

    def first(x):
        counts["first"] += 1
        return x

    def failing(x):
        counts["failing"] += 1
        raise Boom("stage failed")

    def after(x):
        counts["after"] += 1
        return x

    return counts, first, failing, after


def test_pipe_short_circuits_on_error(counted_stages):
    counts, first, failing, after = counted_stages
    with pytest.raises(Boom, match="stage failed"):
        pipe(first, failing, after)(1)
    assert counts == {"first": 1, "failing": 1, "after": 0}


def test_compose_short_circuits_on_error(counted_stages):
    counts, first, failing, after = counted_stages
    with pytest.raises(Boom):
        compose(after, failing, first)(1)
    assert counts == {"first": 1, "failing": 1, "after": 0}


def test_error_is_not_wrapped():
    err = KeyError("missing")

    def fail(_):
        raise err

    with pytest.raises(KeyError) as info:
        pipe(f, fail)(1)
    assert info.value is err


@pytest.mark.parametrize("builder", [compose, pipe, compose_async, pipe_async])
def test_non_callable_stage_rejected(builder):
    with pytest.raises(TypeError, match="Stage 1"):
        builder(f, "not a function")


def test_arguments_are_frozen():
    stages = [f, g]
    fn = pipe(*stages)
    stages.reverse()
    assert fn(2) == g(f(2))


async def _double_later(x):
    await asyncio.sleep(0)
    return x * 2


def test_async_variants_mix_sync_and_async():
    piped = pipe_async(f, _double_later, g)
    composed = compose_async(g, _double_later, f)
    assert asyncio.run(piped(2)) == g(f(2) * 2) == 18
    assert asyncio.run(composed(2)) == 18


def test_async_variants_empty_is_identity():
    assert asyncio.run(pipe_async()(5)) == 5
    assert asyncio.run(compose_async()("x")) == "x"


def test_async_short_circuits_on_error():
    ran = []

    async def failing(x):
        raise Boom("async stage failed")

    def after(x):
        ran.append(x)
        return x

    with pytest.raises(Boom, match="async stage failed"):
        asyncio.run(pipe_async(f, failing, after)(1))
    assert ran == []


def test_async_associativity():
    left = pipe_async(pipe_async(f, _double_later), h)
    right = pipe_async(f, pipe_async(_double_later, h))
    flat = pipe_async(f, _double_later, h)
    assert asyncio.run(left(3)) == asyncio.run(right(3)) == asyncio.run(flat(3)) == 1
