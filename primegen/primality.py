# primegen/primality.py
# Miller-Rabin probable-prime test with random witnesses.
# - witness bytes come from a non-secure WitnessSource, fresh per call
# - modular exponentiation via gmpy2

from __future__ import annotations
import random
from typing import Callable, Optional

import gmpy2
from gmpy2 import mpz

from . import config

DEFAULT_WITNESSES = 10

# ---------- Witness sources ----------

class WitnessSource:
    """Anything with ``randbytes(n) -> bytes``. Adequate randomness is enough here."""

    def randbytes(self, n: int) -> bytes:
        raise NotImplementedError

class RandomWitnessSource(WitnessSource):
    """``random.Random`` seeded from OS entropy at construction."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def randbytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)

def _draw_witness(src: WitnessSource, n: int, nbytes: int) -> mpz:
    """Rejection-sample a in [2, n-2) from nbytes-wide buffers."""
    while True:
        a = int.from_bytes(src.randbytes(nbytes), "little")
        if 2 <= a < n - 2:
            return mpz(a)

# ---------- Miller-Rabin ----------

def is_probable_prime(value: int, witnesses: int = DEFAULT_WITNESSES,
                      source: Optional[WitnessSource] = None) -> bool:
    """
    Miller-Rabin with ``witnesses`` random bases (<= 0 means the default 10).
    False positives occur with probability at most 4**-witnesses.

    No small-prime or even-number shortcuts. The only special case is
    value < 5, where [2, value-2) holds no witness at all: 2 and 3 are
    reported prime, 4 composite.
    """
    if value <= 1:
        return False
    if witnesses <= 0:
        witnesses = DEFAULT_WITNESSES
    if value < 5:
        return value != 4

    n = mpz(value)
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    if source is None:
        source = RandomWitnessSource()
    nbytes = (value.bit_length() + 7) // 8

    for _ in range(witnesses):
        a = _draw_witness(source, n, nbytes)
        x = gmpy2.powmod(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = gmpy2.powmod(x, 2, n)
            if x == 1:
                return False
            if x == n - 1:
                break
        if x != n - 1:
            return False
    return True

class PrimalityOracle:
    """Callable wrapper so the engine can be handed a tuned or stubbed test."""

    def __init__(self, witnesses: Optional[int] = None,
                 source_factory: Callable[[], WitnessSource] = RandomWitnessSource):
        self.witnesses = config.WITNESSES if witnesses is None else witnesses
        self.source_factory = source_factory

    def __call__(self, value: int) -> bool:
        return is_probable_prime(value, self.witnesses, self.source_factory())
