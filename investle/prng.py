"""
portable seeded pseudo-random generator.

mulberry32: a tiny 32-bit state-transition generator. the browser client
has to reproduce the exact same shuffle, so all arithmetic here is
mod 2**32 and ports bit-for-bit.
"""

MASK32 = 0xFFFFFFFF

# weyl sequence increment
GOLDEN_GAMMA = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """32-bit multiply, low 32 bits (Math.imul without the sign)."""
    return (a * b) & MASK32


class Mulberry32:
    """
    stateful mulberry32 generator producing floats in [0, 1).

    same seed → same sequence, on any runtime.
    """

    def __init__(self, seed: int):
        self.state = seed & MASK32

    def next_uint32(self) -> int:
        self.state = (self.state + GOLDEN_GAMMA) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return (t ^ (t >> 14)) & MASK32

    def next_float(self) -> float:
        return self.next_uint32() / 4294967296

    def __call__(self) -> float:
        return self.next_float()
