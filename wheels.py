# wheels.py
from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from errors import ConfigurationError
from rotor_and_reflector import Reflector


class RotorSpec(NamedTuple):
    name: str
    wiring: str
    notches: str


# ────────────────────────────────────────────────────────────────────────
#  Rotor catalogue (index = rotor ID)
# ────────────────────────────────────────────────────────────────────────

ROTOR_CATALOG: Tuple[RotorSpec, ...] = (
    RotorSpec("I",    "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    RotorSpec("II",   "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    RotorSpec("III",  "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    RotorSpec("IV",   "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    RotorSpec("V",    "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    RotorSpec("VI",   "JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    RotorSpec("VII",  "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    RotorSpec("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
)

_BY_NAME: Dict[str, int] = {spec.name: i for i, spec in enumerate(ROTOR_CATALOG)}


def rotor_spec(rotor_id: int) -> RotorSpec:
    if isinstance(rotor_id, bool) or not isinstance(rotor_id, int):
        raise ConfigurationError(f"Rotor ID must be an integer, got {rotor_id!r}")
    if not 0 <= rotor_id < len(ROTOR_CATALOG):
        raise ConfigurationError(
            f"Rotor ID {rotor_id} out of range 0-{len(ROTOR_CATALOG) - 1}"
        )
    return ROTOR_CATALOG[rotor_id]


def rotor_id(label: int | str) -> int:
    """Resolve ``"II"``, ``"ii"``, ``"1"`` or ``1`` to a catalogue ID."""
    if isinstance(label, int) and not isinstance(label, bool):
        return label
    text = str(label).strip().upper()
    if text.isdigit():
        return int(text)
    try:
        return _BY_NAME[text]
    except KeyError:
        names = ", ".join(_BY_NAME)
        raise ConfigurationError(f"Unknown rotor {label!r}. Expected one of {names}")


# ────────────────────────────────────────────────────────────────────────
#  Reflectors (immutable, shared by every machine)
# ────────────────────────────────────────────────────────────────────────

REFLECTORS: Dict[str, Reflector] = {
    "A": Reflector("EJMZALYXVBWFCRQUONTSPIKHGD"),
    "B": Reflector("YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "C": Reflector("FVPJIAOYEDRZXWGCTKUQSBNMHL"),
}

DEFAULT_REFLECTOR = "A"


def reflector(name: str) -> Reflector:
    try:
        return REFLECTORS[name.upper()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            f"Unknown reflector {name!r}. Expected one of {', '.join(REFLECTORS)}"
        )


__all__ = [
    "DEFAULT_REFLECTOR",
    "REFLECTORS",
    "ROTOR_CATALOG",
    "RotorSpec",
    "reflector",
    "rotor_id",
    "rotor_spec",
]
