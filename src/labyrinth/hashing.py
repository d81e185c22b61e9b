# src/labyrinth/hashing.py
# Rolling multiplicative hash used to turn a name into a maze seed.

from typing import Iterable, Iterator

HASH_SEED = 5381
HASH_MULTIPLIER = 33
HASH_MASK = 0x7FFFFFFF  # all bits except the sign


def utf16_units(text: str) -> Iterator[int]:
    """Yield UTF-16 code units; characters outside the BMP become surrogate pairs."""
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_string(text: str) -> int:
    h = HASH_SEED
    for unit in utf16_units(text):
        # Only the low 31 bits survive the final mask, so wrapping at 32 bits
        # keeps the value small without changing the result.
        h = (HASH_MULTIPLIER * h + unit) & 0xFFFFFFFF
    return h & HASH_MASK


def hash_name(name: str, dims: Iterable[int] = ()) -> int:
    """
    Composite hash of a name and structural parameters (e.g. rows, cols).
    Deterministic on every platform; this is the seed of the maze.
    """
    h = hash_string(name)
    for value in dims:
        h = (h * HASH_MULTIPLIER + value) & 0xFFFFFFFF
    return h & HASH_MASK
