# machine_settings.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from alphabet import ALPHABET
from enigma_machine import EnigmaMachine
from errors import ConfigurationError
from wheels import DEFAULT_REFLECTOR, rotor_id, rotor_spec

REQUIRED_KEYS = {"rotors", "positions", "rings"}


def parse_positions(raw: Any) -> List[int]:
    """Accept ``[0, 3, 20]``, ``"0 3 20"`` or a window string like ``"ADU"``."""
    values = raw
    if isinstance(raw, str):
        text = raw.strip().upper()
        if text and all(ch in ALPHABET for ch in text):
            return [ALPHABET.index(ch) for ch in text]
        values = text.replace(",", " ").split()
    try:
        return [_setting(v) for v in values]
    except (TypeError, ValueError):
        raise ConfigurationError(f"Cannot read settings from {raw!r}")


def _setting(value: Any) -> int:
    """One integer setting: a whole number or a digit string."""
    if isinstance(value, str):
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"not an integer: {value!r}")
    return value


@dataclass(slots=True)
class MachineSettings:
    """Everything needed to rebuild the same machine twice (a key sheet line)."""

    rotors: List[int]
    positions: List[int]
    rings: List[int]
    plugs: List[str] = field(default_factory=list)
    reflector: str = DEFAULT_REFLECTOR

    # ––– dict / JSON ––––––––––––––––––––––––––––––––––––––––––––

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")

        rotors = data["rotors"]
        if isinstance(rotors, str):
            rotors = rotors.replace(",", " ").split()

        plugs = data.get("plugs", [])
        if isinstance(plugs, str):
            plugs = plugs.split()

        try:
            rotor_ids = [rotor_id(r) for r in rotors]
            plug_pairs = ["".join(p).upper() for p in plugs]
        except TypeError:
            raise ConfigurationError(f"Cannot read rotors {rotors!r} or plugs {plugs!r}")

        return cls(
            rotors=rotor_ids,
            positions=parse_positions(data["positions"]),
            rings=parse_positions(data["rings"]),
            plugs=plug_pairs,
            reflector=str(data.get("reflector", DEFAULT_REFLECTOR)).upper(),
        )

    def to_dict(self) -> dict:
        return {
            "rotors": [rotor_spec(r).name for r in self.rotors],
            "positions": list(self.positions),
            "rings": list(self.rings),
            "plugs": list(self.plugs),
            "reflector": self.reflector,
        }

    @classmethod
    def load(cls, path: str | Path) -> "MachineSettings":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"{path}: not valid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: expected a JSON object")
        return cls.from_dict(data)

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        self.build()    # refuse to write a sheet that cannot be used
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return path

    # ––– machines –––––––––––––––––––––––––––––––––––––––––––––––

    def build(self) -> EnigmaMachine:
        """A fresh machine; two calls never share rotor state."""
        return EnigmaMachine(
            self.rotors,
            self.positions,
            self.rings,
            self.plugs,
            reflector=self.reflector,
        )
