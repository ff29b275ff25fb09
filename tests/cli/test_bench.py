from argparse import Namespace
from typing import Iterator

import pytest

from bytepack import Buffer
from bytepack.cli.bench import (
    BenchEntry,
    BenchRegistry,
    BenchResult,
    build_default_registry,
    execute,
    run_benchmark,
    run_benchmarks,
)


def fake_clock(step: float) -> Iterator[float]:
    now = 0.0
    while True:
        yield now
        now += step


def test_register_keeps_order_and_function() -> None:
    registry = BenchRegistry()

    @registry.register('first')
    def first() -> None:
        pass

    @registry.register('second', 'be slow')
    def second() -> None:
        pass

    assert len(registry) == 2
    assert [entry.title for entry in registry] == ['first', 'second']
    assert [entry.subtitle for entry in registry] == ['be fast', 'be slow']
    # the decorator returns the function unchanged
    assert registry.select()[0].func is first


def test_duplicate_registration() -> None:
    registry = BenchRegistry()
    registry.add(BenchEntry('a', 'b', lambda: None))
    with pytest.raises(ValueError):
        registry.add(BenchEntry('a', 'b', lambda: None))
    registry.add(BenchEntry('a', 'c', lambda: None))


def test_registries_are_independent() -> None:
    registry_1 = build_default_registry()
    registry_2 = BenchRegistry()
    assert len(registry_1) == 12
    assert len(registry_2) == 0


def test_select() -> None:
    registry = build_default_registry()
    titles = [entry.title for entry in registry.select('TUPLE')]
    assert titles == [
        'Construct a Buffer from tuple[Int8, Int16]',
        'Construct a Buffer from tuple[Int8, str]',
        'Construct a Buffer from list[tuple[Int8, str]]',
    ]
    assert registry.select('no such benchmark') == []
    assert len(registry.select(None)) == 12


def test_run_benchmark_with_fake_clock() -> None:
    calls = []
    entry = BenchEntry('count', 'be fast', lambda: calls.append(1))
    clock = fake_clock(0.25)
    result = run_benchmark(entry, duration=1.0, clock=lambda: next(clock))
    assert result == BenchResult('count', 'be fast', 4, 1.0)
    assert len(calls) == 4
    assert result.iterations_per_second == 4.0


def test_run_benchmark_runs_at_least_once() -> None:
    calls = []
    entry = BenchEntry('slow', 'be fast', lambda: calls.append(1))
    clock = fake_clock(10.0)
    result = run_benchmark(entry, duration=0.5, clock=lambda: next(clock))
    assert result.iterations == 1
    assert calls == [1]


def test_run_benchmark_invalid_duration() -> None:
    with pytest.raises(ValueError):
        run_benchmark(BenchEntry('a', 'b', lambda: None), duration=0)


def test_iterations_per_second_without_elapsed_time() -> None:
    assert BenchResult('a', 'b', 10, 0.0).iterations_per_second == 0.0


def test_default_benchmarks_build_buffers() -> None:
    for entry in build_default_registry():
        assert isinstance(entry.func(), Buffer)


def test_run_benchmarks() -> None:
    registry = build_default_registry()
    results = run_benchmarks(registry, duration=0.001, name_filter='list[')
    assert [result.title for result in results] == [
        'Construct a Buffer from list[Int8]',
        'Construct a Buffer from list[str]',
        'Construct a Buffer from list[tuple[Int8, str]]',
    ]
    for result in results:
        assert result.iterations >= 1
        assert result.elapsed > 0


def test_execute() -> None:
    results = execute(Namespace(duration=0.001, filter='Int32'))
    assert [result.title for result in results] == [
        'Construct a Buffer from Int32',
        'Construct a Buffer from UInt32',
    ]


def test_execute_uses_settings_duration() -> None:
    # unittests.yml sets a very short duration
    results = execute(Namespace(duration=None, filter='from str'))
    assert len(results) == 1
    assert results[0].elapsed > 0


def test_execute_no_match() -> None:
    with pytest.raises(SystemExit):
        execute(Namespace(duration=0.001, filter='nothing matches this'))

