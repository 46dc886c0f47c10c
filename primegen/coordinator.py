# primegen/coordinator.py
"""
Shared stop/report state for the search workers.

Every mutation happens under one lock, so ordinals are gap-free and the
found count can never pass the requested count, however many workers
report at once.
"""
from __future__ import annotations
import sys
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

@dataclass(frozen=True)
class DiscoveryEvent:
    ordinal: int
    value: int

    def line(self) -> str:
        return f"{self.ordinal}: {self.value}"

Sink = Callable[[DiscoveryEvent], None]

def print_event(ev: DiscoveryEvent, stream=None):
    """First event on its own line, later ones preceded by a blank line."""
    out = stream or sys.stdout
    prefix = "" if ev.ordinal == 1 else "\n"
    print(prefix + ev.line(), file=out, flush=True)

@dataclass
class SearchState:
    found: int = 0
    done: bool = False

class ResultCoordinator:

    def __init__(self, count: int, sink: Optional[Sink] = print_event):
        if count < 1:
            raise ValueError("count must be >= 1")
        self.count = count
        self.sink = sink
        self._lock = threading.Lock()
        self._state = SearchState()
        self._done = threading.Event()
        self._events: List[DiscoveryEvent] = []

    def report(self, value: int) -> Optional[DiscoveryEvent]:
        """Accept one prime. Returns the event, or None once the target was reached."""
        with self._lock:
            if self._state.done:
                return None
            self._state.found += 1
            ev = DiscoveryEvent(self._state.found, value)
            self._events.append(ev)
            if self.sink is not None:
                self.sink(ev)
            if self._state.found >= self.count:
                self._state.done = True
                self._done.set()
            return ev

    def is_done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    @property
    def found(self) -> int:
        with self._lock:
            return self._state.found

    @property
    def events(self) -> List[DiscoveryEvent]:
        with self._lock:
            return list(self._events)
