# alphabet.py
from __future__ import annotations

import string

ALPHABET: str = string.ascii_uppercase
SIZE: int = len(ALPHABET)

_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def index_of(letter: str) -> int:
    """Letter → integer signal (A=0 … Z=25)."""
    try:
        return _INDEX[letter]
    except KeyError:
        raise ValueError(f"Invalid character {letter!r} for the alphabet.")


def letter_at(signal: int) -> str:
    return ALPHABET[signal % SIZE]


def is_key(ch: str) -> bool:
    """True for characters the keyboard can press (ASCII letters, any case)."""
    return len(ch) == 1 and ch.upper() in _INDEX
