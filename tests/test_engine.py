import itertools
import threading
import pytest
import sympy

from primegen.candidates import CandidateSource
from primegen.engine import InvalidTarget, SearchEngine, SearchTarget, search
from primegen.primality import is_probable_prime

def test_target_from_bits():
    t = SearchTarget.from_bits(64, 3)
    assert (t.byte_width, t.count, t.bits) == (8, 3, 64)
    assert SearchTarget.from_bits(32).count == 1

@pytest.mark.parametrize("bits,count", [(31, 1), (16, 1), (0, 1), (-8, 1), (24, 1), (33, 1), (32, 0), (32, -2)])
def test_invalid_targets(bits, count):
    with pytest.raises(InvalidTarget):
        SearchTarget.from_bits(bits, count)

def test_invalid_target_is_value_error():
    assert issubclass(InvalidTarget, ValueError)

def test_finds_one_32_bit_prime():
    events = SearchEngine(SearchTarget(4, 1), workers=4, sink=None).run()
    assert len(events) == 1
    ev = events[0]
    assert ev.ordinal == 1
    assert 1 < ev.value < 2**32
    assert sympy.isprime(ev.value)

def test_finds_exact_count():
    events = SearchEngine(SearchTarget(4, 3), workers=4, sink=None).run()
    assert [e.ordinal for e in events] == [1, 2, 3]
    assert all(is_probable_prime(e.value) for e in events)

def test_larger_width():
    events = search(16, 2, workers=2, sink=None)
    assert len(events) == 2
    assert all(v < 2**128 and sympy.isprime(v) for v in (e.value for e in events))

def test_never_overshoots_with_permissive_oracle():
    counter = itertools.count(2)
    lock = threading.Lock()
    class Seq:
        def draw(self):
            with lock:
                return next(counter)
    engine = SearchEngine(SearchTarget(4, 5), workers=8, source=Seq(), oracle=lambda v: True, sink=None)
    events = engine.run()
    assert [e.ordinal for e in events] == [1, 2, 3, 4, 5]
    assert engine.coordinator.found == 5

def test_prints_events(capsys):
    SearchEngine(SearchTarget(4, 2), workers=2).run()
    lines = capsys.readouterr().out.split("\n")
    assert lines[0].startswith("1: ")
    assert lines[1] == ""
    assert lines[2].startswith("2: ")

def test_source_failure_stops_all_workers():
    lock = threading.Lock()
    draws = []
    class Flaky:
        def draw(self):
            with lock:
                draws.append(1)
                if len(draws) == 50:
                    raise OSError("entropy gone")
            return 91
    engine = SearchEngine(SearchTarget(4, 1), workers=4, source=Flaky(), oracle=lambda v: False, sink=None)
    with pytest.raises(OSError, match="entropy gone"):
        engine.run()
    assert not engine.coordinator.is_done()

def test_default_source_matches_width():
    engine = SearchEngine(SearchTarget(8, 1), workers=1, sink=None)
    assert isinstance(engine.source, CandidateSource)
    assert engine.source.byte_width == 8
