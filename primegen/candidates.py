# primegen/candidates.py
# Random prime candidates of a fixed byte width, drawn from a CSPRNG.

from __future__ import annotations
import secrets
from typing import Callable

RandBytes = Callable[[int], bytes]

class CandidateSource:
    """
    Draws unsigned integers from exactly ``byte_width`` secure random bytes.

    The top bit is not forced, so a draw can be shorter than 8*byte_width bits
    (and may even be 0 or 1; the primality test rejects those).
    ``secrets.token_bytes`` reads the OS generator and needs no locking, so one
    source is shared by every worker.
    """

    def __init__(self, byte_width: int, randbytes: RandBytes = secrets.token_bytes):
        if byte_width <= 0:
            raise ValueError("byte_width must be positive")
        self.byte_width = byte_width
        self._randbytes = randbytes

    def draw(self) -> int:
        buf = self._randbytes(self.byte_width)
        if len(buf) != self.byte_width:
            raise RuntimeError(f"random source returned {len(buf)} bytes, wanted {self.byte_width}")
        return int.from_bytes(buf, "little", signed=False)

def draw(byte_width: int) -> int:
    return CandidateSource(byte_width).draw()
