"""Benchmarks for nil classification and the Option combinators.

Run with: uv run pytest benchmarks/bench_option.py --benchmark-only -v
"""

import gc
import weakref

import msgspec
import pytest

from klaw_option import Some, filter_opt, flat_map_opt, map_opt, some


class _Payload:
    pass


@pytest.fixture
def live_payload():
    return _Payload()


@pytest.fixture
def dead_ref():
    payload = _Payload()
    ref = weakref.ref(payload)
    del payload
    gc.collect()
    return ref


@pytest.fixture
def dead_proxy():
    payload = _Payload()
    proxy = weakref.proxy(payload)
    del payload
    gc.collect()
    return proxy


class TestNilClassification:
    """Cost of some() for each kind of input."""

    def test_plain_value(self, benchmark):
        benchmark(some, 42)

    def test_none(self, benchmark):
        benchmark(some, None)

    def test_unset(self, benchmark):
        benchmark(some, msgspec.UNSET)

    def test_live_weakref(self, benchmark, live_payload):
        benchmark(some, weakref.ref(live_payload))

    def test_dead_weakref(self, benchmark, dead_ref):
        benchmark(some, dead_ref)

    def test_live_proxy(self, benchmark, live_payload):
        benchmark(some, weakref.proxy(live_payload))

    def test_dead_proxy(self, benchmark, dead_proxy):
        benchmark(some, dead_proxy)


class TestFilter:
    """Accepting is a pass-through; rejecting builds a PredicateError."""

    def test_accept(self, benchmark):
        benchmark(Some(10).filter, lambda x: x > 5)

    def test_reject(self, benchmark):
        benchmark(Some(1).filter, lambda x: x > 5)


class TestMapVersusFlatMap:
    """map() reclassifies its result through some(); flat_map() does not."""

    def test_map_present(self, benchmark):
        benchmark(map_opt, Some(5), lambda x: x * 2)

    def test_map_to_nil(self, benchmark):
        benchmark(map_opt, Some({"a": 1}), lambda d: d.get("b"))

    def test_flat_map_present(self, benchmark):
        benchmark(flat_map_opt, Some(5), lambda x: Some(x * 2))

    def test_flat_map_some_none(self, benchmark):
        benchmark(flat_map_opt, Some(5), lambda _: Some(None))


def test_free_function_pipeline(benchmark):
    """Parse, filter and map through the free functions."""

    def pipeline(text):
        parsed = some(text).map(int)
        return map_opt(filter_opt(parsed, lambda n: n > 0), lambda n: n * 2)

    result = benchmark(pipeline, "21")
    assert result == Some(42)
