# plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from alphabet import ALPHABET
from debug import debug
from errors import ConfigurationError

MAX_PAIRS = 13

Pair = tuple[str, str]


def swap(letter: str, pairs: Sequence[Sequence[str]]) -> str:
    """Return *letter*'s partner in *pairs*, or *letter* itself if unplugged."""
    for a, b in pairs:
        if letter == a:
            return b
        if letter == b:
            return a
    return letter


def normalise_pairs(pairs: Sequence[str | Sequence[str]]) -> list[Pair]:
    """Validate raw plug pairs and return them as upper-case ``(a, b)`` tuples."""
    if len(pairs) > MAX_PAIRS:
        raise ConfigurationError(f"Too many plugboard pairs ({len(pairs)}, max {MAX_PAIRS})")

    used: set[str] = set()
    result: list[Pair] = []
    for raw in pairs:
        if not isinstance(raw, Sequence) or len(raw) != 2:
            raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
        a, b = (str(ch).upper() for ch in raw)

        if a not in ALPHABET or b not in ALPHABET:
            bad = a if a not in ALPHABET else b
            raise ConfigurationError(f"Symbol {bad!r} not in alphabet")
        if a == b:
            raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
        if a in used or b in used:
            dup = a if a in used else b
            raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

        used.update((a, b))
        result.append((a, b))
    return result


class Plugboard:
    def __init__(self, pairs: Sequence[str | Sequence[str]] = ()) -> None:
        self.pairs: list[Pair] = normalise_pairs(pairs)
        self.mapping: dict[str, str] = {ch: ch for ch in ALPHABET}
        for a, b in self.pairs:
            self.mapping[a], self.mapping[b] = b, a

    def swap(self, letter: str) -> str:
        mapped = self.mapping[letter]
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(a + b for a, b in self.pairs)}>"
