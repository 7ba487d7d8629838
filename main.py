# main.py
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List

from debug import COMPONENTS, Debug, debug
from errors import ConfigurationError
from machine_settings import MachineSettings
from wheels import DEFAULT_REFLECTOR, REFLECTORS, ROTOR_CATALOG

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches for the front end (not part of the key)."""

    verify: bool = True             # run the output back through a fresh machine
    block: int = 0                  # group letters in blocks of N when printing, 0 = off


def group(text: str, block: int) -> str:
    """Split *text* into space-separated blocks; the classic five-letter groups."""
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


# ────────────────────────────────────────────────────────────────────────
#  1. Settings from JSON or from flags
# ────────────────────────────────────────────────────────────────────────


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    if args.config:
        return MachineSettings.load(args.config)
    return MachineSettings.from_dict(
        {
            "rotors": args.rotors,
            "positions": args.positions,
            "rings": args.rings,
            "plugs": args.plugs,
            "reflector": args.reflector,
        }
    )


# ────────────────────────────────────────────────────────────────────────
#  2. Encipher + optional round-trip check
# ────────────────────────────────────────────────────────────────────────


def run_message(settings: MachineSettings, cfg: Config, text: str) -> List[str]:
    """Return the lines to print for one message."""
    output = settings.build().process(text)
    lines = [f"Output: {group(output, cfg.block)}"]
    if cfg.verify:
        lines.append(f"Check:  {settings.build().process(output)}")
    return lines


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    names = " ".join(spec.name for spec in ROTOR_CATALOG)
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the flags below.")
    p.add_argument("--rotors", nargs=3, default=["I", "II", "III"], metavar="ROTOR", help=f"Left, middle, right rotor ({names}) or IDs 0-{len(ROTOR_CATALOG) - 1}. Default: I II III")
    p.add_argument("--positions", default="AAA", help="Start positions as letters (ADU) or numbers (\"0 3 20\"). Default: AAA")
    p.add_argument("--rings", default="AAA", help="Ring settings as letters or numbers. Default: AAA")
    p.add_argument("--plugs", nargs="*", default=[], metavar="PAIR", help="Plugboard pairs, e.g. AB CD EF")
    p.add_argument("--reflector", choices=sorted(REFLECTORS), default=DEFAULT_REFLECTOR, help=f"Reflector wheel. Default: {DEFAULT_REFLECTOR}")
    p.add_argument("--block", type=int, default=0, help="Print output in groups of N characters. Default: off")
    p.add_argument("--no-verify", dest="verify", action="store_false", help="Skip the decrypt-back check.")
    p.add_argument("--debug", nargs="+", choices=[*COMPONENTS, "all"], default=[], metavar="COMPONENT", help=f"Log machine internals: {', '.join(COMPONENTS)} or all")
    p.add_argument("--log-file", metavar="FILE", help="Also write debug output to FILE.")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    if args.debug:
        Debug.configure(log_to=args.log_file)
        debug.enable(*args.debug)

    try:
        settings = settings_from_args(args)
        settings.build()            # fail before reading any input
    except (ConfigurationError, OSError) as exc:
        raise SystemExit(f"Invalid machine settings: {exc}")

    cfg = Config(verify=args.verify, block=args.block)

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        print("\n".join(run_message(settings, cfg, args.message)))
        return

    # interactive REPL ---------------------------------------------------
    source = Path(args.config).name if args.config else "command line"
    print(f"Machine settings from {source}. Type blank line to quit.")
    while True:
        try:
            txt = input("\nMessage: ")
        except EOFError:
            break
        if not txt.strip():
            break
        print("\n".join(run_message(settings, cfg, txt)))


if __name__ == "__main__":
    main()
