# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from alphabet import ALPHABET, SIZE
from machine_settings import MachineSettings
from plugboard import MAX_PAIRS
from wheels import REFLECTORS, ROTOR_CATALOG

DEFAULT_PAIRS = 10      # the wartime key sheets used ten cables

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate(rng: Random | SystemRandom, pair_count: int = DEFAULT_PAIRS) -> MachineSettings:
    """One random key-sheet line: three distinct rotors, positions, rings, plugs."""
    return MachineSettings(
        rotors=rng.sample(range(len(ROTOR_CATALOG)), 3),
        positions=[rng.randrange(SIZE) for _ in range(3)],
        rings=[rng.randrange(SIZE) for _ in range(3)],
        plugs=choose_pairs(pair_count, rng),
        reflector=rng.choice(sorted(REFLECTORS)),
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a daily Enigma key sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=DEFAULT_PAIRS,
        help=f"Number of plugboard cables, 0-{MAX_PAIRS} (default: {DEFAULT_PAIRS})",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    if not 0 <= args.pairs <= MAX_PAIRS:
        sys.exit(f"--pairs must be between 0 and {MAX_PAIRS}")

    settings = generate(build_rng(args.seed), args.pairs)
    settings.save(args.outfile)

    cfg = settings.to_dict()
    window = "".join(ALPHABET[p] for p in settings.positions)
    print(f"Wrote {args.outfile}\n"
        f"   rotors      : {' '.join(cfg['rotors'])}\n"
        f"   reflector   : {cfg['reflector']}\n"
        f"   window      : {window}\n"
        f"   plug pairs  : {len(settings.plugs)}")


if __name__ == "__main__":
    main()
