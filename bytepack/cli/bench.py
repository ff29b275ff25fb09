# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Micro-benchmarks of buffer construction.

Benchmarks are plain callables kept in an explicit `BenchRegistry`, the runner calls each one in a loop for a fixed
amount of wall time and reports how many iterations fit in it. Run them with:

    bytepack-cli bench --duration 0.5 --filter tuple
"""

import sys
import time
from collections.abc import Iterator
from typing import Callable, NamedTuple, Optional, TypeVar

from structlog import get_logger

from bytepack.buffer import Buffer
from bytepack.types import Int8, Int16, Int32, UInt8, UInt16, UInt32

logger = get_logger()

F = TypeVar('F', bound=Callable[[], object])

DEFAULT_SUBTITLE = 'be fast'


class BenchEntry(NamedTuple):
    title: str
    subtitle: str
    func: Callable[[], object]

    def matches(self, name_filter: str) -> bool:
        return name_filter.lower() in f'{self.title} {self.subtitle}'.lower()


class BenchResult(NamedTuple):
    title: str
    subtitle: str
    iterations: int
    elapsed: float

    @property
    def iterations_per_second(self) -> float:
        if self.elapsed <= 0:
            return 0.0
        return self.iterations / self.elapsed


class BenchRegistry:
    """An ordered collection of benchmarks, entries run in the order they were registered."""

    def __init__(self) -> None:
        self._entries: list[BenchEntry] = []

    def add(self, entry: BenchEntry) -> None:
        if any(e.title == entry.title and e.subtitle == entry.subtitle for e in self._entries):
            raise ValueError(f'benchmark already registered: {entry.title} - {entry.subtitle}')
        self._entries.append(entry)

    def register(self, title: str, subtitle: str = DEFAULT_SUBTITLE) -> Callable[[F], F]:
        """Decorator that adds the decorated function to this registry and returns it unchanged."""
        def decorator(func: F) -> F:
            self.add(BenchEntry(title, subtitle, func))
            return func
        return decorator

    def select(self, name_filter: Optional[str] = None) -> list[BenchEntry]:
        if not name_filter:
            return list(self._entries)
        return [entry for entry in self._entries if entry.matches(name_filter)]

    def __iter__(self) -> Iterator[BenchEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def run_benchmark(entry: BenchEntry, *, duration: float, clock: Callable[[], float] = time.perf_counter) -> BenchResult:
    """Call `entry.func` until `duration` seconds have passed, it is always called at least once."""
    if duration <= 0:
        raise ValueError('duration must be positive')
    iterations = 0
    start = clock()
    deadline = start + duration
    while True:
        entry.func()
        iterations += 1
        now = clock()
        if now >= deadline:
            break
    return BenchResult(entry.title, entry.subtitle, iterations, now - start)


def run_benchmarks(
    registry: BenchRegistry,
    *,
    duration: float,
    name_filter: Optional[str] = None,
    clock: Callable[[], float] = time.perf_counter,
) -> list[BenchResult]:
    log = logger.new()
    entries = registry.select(name_filter)
    log.info('starting benchmarks', count=len(entries), duration=duration)
    results = []
    for entry in entries:
        result = run_benchmark(entry, duration=duration, clock=clock)
        log.info(
            'benchmark finished',
            title=result.title,
            subtitle=result.subtitle,
            iterations=result.iterations,
            per_second=round(result.iterations_per_second),
        )
        results.append(result)
    log.info('benchmarks finished', count=len(results))
    return results


def build_default_registry() -> BenchRegistry:
    """Benchmarks for building a buffer out of each kind of value."""
    registry = BenchRegistry()
    text = 'hello guys!'
    tuple_1 = (0x12, 0x0080)
    tuple_2 = (0x12, 'hello')
    list_1 = [0x12, 0x34, 0x56]
    list_2 = ['hello', 'guys', '!']
    list_3 = [(0x12, 'hello'), (0x34, 'guys'), (0x56, '!')]

    @registry.register('Construct a Buffer from Int8')
    def bench_int8() -> Buffer:
        return Buffer.of(Int8, -5)

    @registry.register('Construct a Buffer from UInt8')
    def bench_uint8() -> Buffer:
        return Buffer.of(UInt8, 250)

    @registry.register('Construct a Buffer from Int16')
    def bench_int16() -> Buffer:
        return Buffer.of(Int16, -31523)

    @registry.register('Construct a Buffer from UInt16')
    def bench_uint16() -> Buffer:
        return Buffer.of(UInt16, 45321)

    @registry.register('Construct a Buffer from Int32')
    def bench_int32() -> Buffer:
        return Buffer.of(Int32, -4532541)

    @registry.register('Construct a Buffer from UInt32')
    def bench_uint32() -> Buffer:
        return Buffer.of(UInt32, 4532541)

    @registry.register('Construct a Buffer from str')
    def bench_str() -> Buffer:
        return Buffer.of(str, text)

    @registry.register('Construct a Buffer from tuple[Int8, Int16]')
    def bench_tuple_int8_int16() -> Buffer:
        return Buffer.of(tuple[Int8, Int16], tuple_1)

    @registry.register('Construct a Buffer from tuple[Int8, str]')
    def bench_tuple_int8_str() -> Buffer:
        return Buffer.of(tuple[Int8, str], tuple_2)

    @registry.register('Construct a Buffer from list[Int8]')
    def bench_list_int8() -> Buffer:
        return Buffer.of(list[Int8], list_1)

    @registry.register('Construct a Buffer from list[str]')
    def bench_list_str() -> Buffer:
        return Buffer.of(list[str], list_2)

    @registry.register('Construct a Buffer from list[tuple[Int8, str]]')
    def bench_list_tuple() -> Buffer:
        return Buffer.of(list[tuple[Int8, str]], list_3)

    return registry


def create_parser():
    from bytepack.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('--duration', type=float, help='Seconds spent on each benchmark')
    parser.add_argument('--filter', type=str, help='Only run benchmarks whose name contains this text')
    return parser


def execute(args) -> list[BenchResult]:
    from bytepack.cli.util import check_or_exit
    from bytepack.conf.get_settings import get_global_settings

    duration = args.duration
    if duration is None:
        duration = get_global_settings().BENCH_DURATION_SECONDS
    check_or_exit(duration > 0, '--duration must be positive')

    registry = build_default_registry()
    results = run_benchmarks(registry, duration=duration, name_filter=args.filter)
    check_or_exit(bool(results), f'no benchmark matches {args.filter!r}')
    return results


def main():
    parser = create_parser()
    args = parser.parse_args(sys.argv[1:])
    execute(args)
