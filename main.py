# main.py
from __future__ import annotations

import argparse, json
import sys
from pathlib import Path
from typing import Sequence

from debug import COMPONENTS, Debug
from errors import EnigmaError
from machine import Machine, create_machine
from settings import Configuration, default_configuration
from suites import SUITES
from utilities import (
    describe_models,
    group_blocks,
    parse_plug_pairs,
    parse_ring_settings,
    preprocess_message,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


# ────────────────────────────────────────────────────────────────────────
#  1. Settings loading
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> Configuration:
    """Read a JSON settings file; absent keys take the model's defaults."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise EnigmaError(f"{path}: expected a JSON object")
    return Configuration.from_dict(data)


def save_config(cfg: Configuration, path: str | Path) -> None:
    Path(path).write_text(json.dumps(cfg.to_dict(), indent=2), encoding="utf-8")


def build_configuration(args: argparse.Namespace) -> Configuration:
    """File (or model defaults) first, then any command-line overrides."""
    if args.config:
        cfg = load_config(args.config)
        if args.model and args.model != cfg.model:
            raise EnigmaError(f"--model {args.model} conflicts with {args.config} ({cfg.model})")
    else:
        cfg = default_configuration(args.model or "I")

    changes: dict = {}
    if args.rotors:
        changes["rotors"] = args.rotors.split()
    if args.positions:
        changes["positions"] = args.positions.strip().upper()
    if args.rings:
        changes["ring_settings"] = parse_ring_settings(args.rings)
    if args.reflector:
        changes["reflector"] = args.reflector
    if args.plugs is not None:
        changes["plugboard"] = parse_plug_pairs(args.plugs)

    return cfg.evolve(**changes) if changes else cfg


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor cipher machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive prompt starts.")
    p.add_argument("--model", choices=list(SUITES), help="Machine model. Default: I")
    p.add_argument("--rotors", metavar="NAMES", help='Wheel order left to right, e.g. "I II III".')
    p.add_argument("--positions", metavar="LETTERS", help="Starting window letters, e.g. AAA.")
    p.add_argument("--rings", metavar="RINGS", help='Ring settings 0-25 ("0 0 0") or letters ("AAA").')
    p.add_argument("--reflector", metavar="NAME", help="Reflector name, e.g. B.")
    p.add_argument("--plugs", metavar="PAIRS", help='Plugboard pairs, e.g. "AB CD EF".')
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON.")
    p.add_argument("--save", metavar="FILE", help="Write the starting settings to JSON and continue.")
    p.add_argument("--block", type=int, default=5, help="Display group size (0 for none). Default: 5")
    p.add_argument("--list-models", action="store_true", help="Show every model with its wheels and exit.")
    p.add_argument("--debug", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT",
                   help=f"Log a component ({', '.join(COMPONENTS)}). Repeatable.")
    return p.parse_args(argv)


def run_message(machine: Machine, text: str, block: int) -> str:
    clean = preprocess_message(text)
    cipher = machine.encipher_text(clean)
    return group_blocks(cipher, block) if block > 0 else cipher


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    if args.list_models:
        print(describe_models())
        return 0

    if args.debug:
        debug.enable(*args.debug)

    try:
        start = build_configuration(args)
        if args.save:
            save_config(start, args.save)
    except (EnigmaError, OSError, json.JSONDecodeError) as e:
        sys.exit(f"Failed to load configuration: {e}")

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        machine = create_machine(start)
        print(run_message(machine, args.message, args.block))
        print("Positions:", "".join(machine.current_positions()), file=sys.stderr)
        return 0

    # interactive prompt -------------------------------------------------
    print(f"{start!r}")
    print("Each line starts again from these settings. Blank line to quit.")
    while True:
        try:
            txt = input("\nText > ")
        except EOFError:
            break
        if not txt.strip():
            break
        machine = create_machine(start)
        print(run_message(machine, txt, args.block))
    return 0


if __name__ == "__main__":
    sys.exit(main())
