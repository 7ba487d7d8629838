# rotor_and_reflector.py
from __future__ import annotations

from alphabet import ALPHABET, SIZE, index_of
from debug import debug
from errors import ConfigurationError


class Rotor:
    """One wheel: fixed wiring and notches, a ring setting, a moving position.

    ``position`` and ``ring_setting`` are 0-based (A=0). Only ``step()``
    moves the wheel once it sits in a machine.
    """

    def __init__(
        self,
        wiring: str,
        notches: str,
        ring_setting: int = 0,
        position: int = 0,
    ) -> None:
        if sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError("wiring must be a permutation of the alphabet")
        if not set(notches) <= set(ALPHABET):
            raise ConfigurationError("Notch characters must be in the alphabet")

        self.wiring = wiring
        self.notches = frozenset(notches)
        self.ring_setting = ring_setting % SIZE
        self.position = position % SIZE

        # integer lookup tables
        self._fwd = [index_of(c) for c in wiring]
        self._rev = [wiring.index(c) for c in ALPHABET]

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = (self.position + 1) % SIZE

    def at_notch(self) -> bool:
        return ALPHABET[self.position] in self.notches

    @property
    def window(self) -> str:
        """Letter showing through the machine's window."""
        return ALPHABET[self.position]

    # ── signal paths ---------------------------------------------
    def _through(self, table: list[int], letter: str) -> str:
        offset = self.position - self.ring_setting
        shifted = (index_of(letter) + offset) % SIZE
        return ALPHABET[(table[shifted] - offset) % SIZE]

    def forward(self, letter: str) -> str:
        out = self._through(self._fwd, letter)
        debug.log("rotor", f"{self.window} fwd {letter}->{out}")
        return out

    def backward(self, letter: str) -> str:
        out = self._through(self._rev, letter)
        debug.log("rotor", f"{self.window} bwd {letter}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Rotor pos={self.position} ring={self.ring_setting}>"


class Reflector:
    """Fixed turn-around wheel. Never moves, so one instance can be shared."""

    def __init__(self, wiring: str) -> None:
        if len(wiring) != SIZE or sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError("Reflector wiring must be a permutation of the alphabet")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = index_of(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ConfigurationError(
                    "Reflector wiring must be an involution with no fixed points"
                )

        self.wiring = wiring
        self._map = dict(zip(ALPHABET, wiring))

    def reflect(self, letter: str) -> str:
        out = self._map[letter]
        debug.log("reflector", f"{letter}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
