# enigma_machine.py  ─────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from alphabet import ALPHABET, SIZE, is_key
from debug import debug
from errors import ConfigurationError
from plugboard import Plugboard
from rotor_and_reflector import Rotor
from wheels import DEFAULT_REFLECTOR, reflector as lookup_reflector, rotor_spec

ROTOR_COUNT = 3


def _fold(ch: str) -> str:
    """Upper-case a passthrough character unless that would change its length."""
    up = ch.upper()
    return up if len(up) == 1 else ch


def _check_settings(label: str, values: Sequence[int]) -> list[int]:
    """Exactly one integer in 0-25 per rotor."""
    values = list(values)
    if len(values) != ROTOR_COUNT:
        raise ConfigurationError(
            f"Need exactly {ROTOR_COUNT} {label}, got {len(values)}"
        )
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise ConfigurationError(f"{label} must be integers, got {v!r}")
        if not 0 <= v < SIZE:
            raise ConfigurationError(f"{label} value {v} out of range 0-{SIZE - 1}")
    return values


class EnigmaMachine:
    """Three rotors, a reflector and a plugboard.

    ``rotor_ids``, ``positions`` and ``ring_settings`` are ordered
    left, middle, right. Every setting is checked here, so a machine that
    exists can encipher any text without failing.
    """

    def __init__(
        self,
        rotor_ids: Sequence[int],
        positions: Sequence[int],
        ring_settings: Sequence[int],
        plugboard_pairs: Sequence[str | Sequence[str]] = (),
        *,
        reflector: str = DEFAULT_REFLECTOR,
    ) -> None:
        rotor_ids = list(rotor_ids)
        if len(rotor_ids) != ROTOR_COUNT:
            raise ConfigurationError(
                f"Need exactly {ROTOR_COUNT} rotors, got {len(rotor_ids)}"
            )
        specs = [rotor_spec(r) for r in rotor_ids]
        positions = _check_settings("positions", positions)
        rings = _check_settings("ring settings", ring_settings)

        self.rotor_ids: list[int] = rotor_ids
        self.rotors: list[Rotor] = [
            Rotor(spec.wiring, spec.notches, ring, pos)
            for spec, ring, pos in zip(specs, rings, positions)
        ]
        self.reflector = lookup_reflector(reflector)
        self.plugboard = Plugboard(plugboard_pairs)

    # ── state ───────────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        return "".join(r.window for r in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def step_rotors(self) -> None:
        """Advance the wheels for one key-press, double-step included."""
        left, middle, right = self.rotors

        # read both notches before anything moves
        middle_at_notch = middle.at_notch()
        right_at_notch = right.at_notch()

        if middle_at_notch:
            left.step()
        if right_at_notch or middle_at_notch:
            middle.step()
        right.step()

        debug.log("stepping", f"window {self.window}")

    # ── encipher one letter  ────────────────────────────────────

    def encrypt_char(self, letter: str) -> str:
        letter = letter.upper()
        if len(letter) != 1 or letter not in ALPHABET:
            raise ValueError(f"Invalid character {letter!r} for the alphabet.")

        self.step_rotors()

        signal = self.plugboard.swap(letter)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        out = self.plugboard.swap(signal)
        debug.log("encipher", f"{letter}->{out}")
        return out

    def process(self, text: str) -> str:
        """Encipher every letter of *text*; anything else is only upper-cased."""
        return "".join(
            self.encrypt_char(ch) if is_key(ch) else _fold(ch)
            for ch in text
        )

    def __repr__(self) -> str:
        return (
            f"<EnigmaMachine rotors={self.rotor_ids} window={self.window} "
            f"{self.plugboard!r}>"
        )
