# src/labyrinth/rng.py
# Seeded generators whose output must match the reference platforms bit for bit.
# Any drift here changes every maze, so the integer arithmetic below mirrors
# 32-bit two's complement wrap-around where the reference relies on it.

from dataclasses import dataclass, field
from typing import List

# --- .NET System.Random (seeded constructor, Knuth subtractive generator) ---
MBIG = 0x7FFFFFFF  # int.MaxValue
MSEED = 161803398
INT_MIN = -0x80000000


def i32(v: int) -> int:
    """Wrap v to a signed 32-bit integer."""
    v &= 0xFFFFFFFF
    return v - 0x100000000 if v & 0x80000000 else v


def seed_table(seed: int) -> List[int]:
    """Return the 56-slot state table the .NET constructor builds for seed."""
    seed = i32(seed)
    subtraction = MBIG if seed == INT_MIN else abs(seed)
    mj = MSEED - subtraction
    table = [0] * 56
    table[55] = mj
    mk = 1
    for i in range(1, 55):
        ii = (21 * i) % 55
        table[ii] = mk
        mk = mj - mk
        if mk < 0:
            mk += MBIG
        mj = table[ii]
    for _ in range(4):
        for i in range(1, 56):
            # Slot 55 may start negative, so this subtraction can overflow.
            table[i] = i32(table[i] - table[1 + (i + 30) % 55])
            if table[i] < 0:
                table[i] += MBIG
    return table


class DotNetRandom:
    """`new System.Random(seed)` as used by the reference maze generator."""

    def __init__(self, seed: int):
        self.seed = seed
        self._table = seed_table(seed)
        self._inext = 0
        self._inextp = 21

    def _internal_sample(self) -> int:
        inext = self._inext + 1
        if inext >= 56:
            inext = 1
        inextp = self._inextp + 1
        if inextp >= 56:
            inextp = 1

        ret = self._table[inext] - self._table[inextp]
        if ret == MBIG:
            ret -= 1
        if ret < 0:
            ret += MBIG

        self._table[inext] = ret
        self._inext, self._inextp = inext, inextp
        return ret

    def _sample(self) -> float:
        return self._internal_sample() * (1.0 / MBIG)

    def next_int(self, bound: int) -> int:
        """Uniform int in [0, bound), i.e. Random.Next(bound)."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return int(self._sample() * bound)

    def next_double(self) -> float:
        return self._sample()


# --- java.util.Random (48-bit LCG) ---
LCG_MULT = 0x5DEECE66D
LCG_ADD = 0xB
LCG_MASK = (1 << 48) - 1


def scramble(seed: int) -> int:
    return (seed ^ LCG_MULT) & LCG_MASK


def lcg_next(state: int) -> int:
    return (state * LCG_MULT + LCG_ADD) & LCG_MASK


@dataclass
class JavaRandom:
    seed: int
    state: int = field(init=False)

    def __post_init__(self) -> None:
        self.state = scramble(self.seed)

    def next_bits(self, bits: int) -> int:
        self.state = lcg_next(self.state)
        return i32(self.state >> (48 - bits))

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound & -bound == bound:
            return (bound * self.next_bits(31)) >> 31
        while True:
            bits = self.next_bits(31)
            val = bits % bound
            # Java rejects the draw when bits - val + (bound-1) overflows int.
            if bits - val + (bound - 1) <= MBIG:
                return val

    def next_double(self) -> float:
        return ((self.next_bits(26) << 27) + self.next_bits(27)) * (1.0 / (1 << 53))


GENERATORS = {
    "dotnet": DotNetRandom,
    "java": JavaRandom,
}


def make_random(seed: int, flavor: str = "dotnet"):
    try:
        cls = GENERATORS[flavor]
    except KeyError:
        raise ValueError(
            f"unknown generator {flavor!r}; expected one of {sorted(GENERATORS)}"
        ) from None
    return cls(seed)
