# primegen/engine.py
# Parallel prime search: N symmetric workers race draw -> test -> report
# until the coordinator has the requested count.

from __future__ import annotations
import concurrent.futures
import threading
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from . import config
from .candidates import CandidateSource
from .coordinator import DiscoveryEvent, ResultCoordinator, Sink, print_event
from .log import log
from .primality import PrimalityOracle

MIN_BITS = 32

class InvalidTarget(ValueError):
    pass

@dataclass(frozen=True)
class SearchTarget:
    byte_width: int
    count: int = 1

    def __post_init__(self):
        if self.byte_width * 8 < MIN_BITS:
            raise InvalidTarget(f"need at least {MIN_BITS} bits, got {self.byte_width * 8}")
        if self.count < 1:
            raise InvalidTarget(f"count must be >= 1, got {self.count}")

    @property
    def bits(self) -> int:
        return self.byte_width * 8

    @staticmethod
    def from_bits(bits: int, count: int = 1) -> "SearchTarget":
        if bits % 8 != 0:
            raise InvalidTarget(f"bits must be a multiple of 8, got {bits}")
        return SearchTarget(bits // 8, count)

class SearchEngine:

    def __init__(self, target: SearchTarget,
                 workers: Optional[int] = None,
                 source: Optional[CandidateSource] = None,
                 oracle: Optional[Callable[[int], bool]] = None,
                 sink: Optional[Sink] = print_event):
        self.target = target
        self.workers = max(1, workers or config.WORKERS)
        self.source = source or CandidateSource(target.byte_width)
        self.oracle = oracle or PrimalityOracle()
        self.coordinator = ResultCoordinator(target.count, sink=sink)
        self._halt = threading.Event()

    def _worker(self, idx: int) -> int:
        """Loop until done; returns the number of candidates tested."""
        coord, tested = self.coordinator, 0
        try:
            while not coord.is_done() and not self._halt.is_set():
                candidate = self.source.draw()
                tested += 1
                if self.oracle(candidate):
                    ev = coord.report(candidate)
                    if ev is not None:
                        log(f"worker={idx} found ordinal={ev.ordinal} bits={candidate.bit_length()}")
        except Exception as e:
            self._halt.set()
            log(f"worker={idx} failed: {e!r}")
            raise
        return tested

    def run(self) -> List[DiscoveryEvent]:
        """Block until the target count is reached and all workers exited."""
        t0 = time.perf_counter()
        log(f"search start bits={self.target.bits} count={self.target.count} workers={self.workers}")
        with concurrent.futures.ThreadPoolExecutor(max_workers=self.workers,
                                                   thread_name_prefix="primegen") as executor:
            futures = [executor.submit(self._worker, i) for i in range(self.workers)]
            tested, error = 0, None
            for future in concurrent.futures.as_completed(futures):
                try:
                    tested += future.result()
                except Exception as e:
                    if error is None:
                        error = e
        if error is not None:
            raise error
        ms = int((time.perf_counter() - t0) * 1000)
        log(f"search done found={self.coordinator.found} tested={tested} ms={ms}")
        return self.coordinator.events

def search(byte_width: int, count: int = 1, **kw) -> List[DiscoveryEvent]:
    return SearchEngine(SearchTarget(byte_width, count), **kw).run()
