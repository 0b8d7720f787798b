# utilities.py
from __future__ import annotations

from typing import Dict, List

from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET
from suites import SUITES, slot_labels

# ────────────────────────────────────────────────────────────────────────
#  0. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str, alpha: str = ALPHABET) -> str:
    """Upper‑case and drop everything outside *alpha* (spaces included)."""
    return "".join(ch for ch in msg.upper() if ch in alpha)


def group_blocks(text: str, block: int = 5) -> str:
    """Traditional five-letter display groups."""
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


# ────────────────────────────────────────────────────────────────────────
#  1. Command-line value parsing
# ────────────────────────────────────────────────────────────────────────


def parse_plug_pairs(raw: str | List[str] | None) -> Dict[str, str]:
    """``"AB CD"`` → ``{"A": "B", "B": "A", "C": "D", "D": "C"}``.

    Only the shape is checked here; pairing rules are enforced when the
    Configuration is built.
    """
    if not raw:
        return {}
    pairs = raw.split() if isinstance(raw, str) else raw
    board: Dict[str, str] = {}
    for p in pairs:
        p = p.upper()
        if len(p) != 2:
            raise ConfigurationError(f"Pair {p!r} must be exactly 2 characters.")
        a, b = p
        if board.get(a, b) != b or board.get(b, a) != a:
            dup = a if a in board else b
            raise ConfigurationError(f"Char {dup!r} already used.")
        board[a], board[b] = b, a
    return board


def parse_ring_settings(raw: str) -> List[int]:
    """Rings as numbers 0-25 (``"0 0 5"``) or letters (``"AAF"``)."""
    raw = raw.strip().upper()
    if raw.isalpha():
        return [ALPHABET.index(ch) for ch in raw]
    try:
        return [int(item) for item in raw.replace(",", " ").split()]
    except ValueError:
        raise ConfigurationError(f"Cannot read ring settings {raw!r}") from None


# ────────────────────────────────────────────────────────────────────────
#  2. Catalog listing
# ────────────────────────────────────────────────────────────────────────


def describe_models() -> str:
    lines: List[str] = []
    for v in SUITES.values():
        lines.append(f"{v.id:<8} {v.label}")
        for idx, label in enumerate(slot_labels(v.stack)):
            lines.append(f"    {label:<7} {' '.join(v.rotors_for_slot(idx))}")
        lines.append(f"    {'REFL':<7} {' '.join(v.reflectors)}")
        lines.append(f"    {'PLUGS':<7} {'yes' if v.plugboard else 'no'}")
    return "\n".join(lines)


__all__ = [
    "preprocess_message",
    "group_blocks",
    "parse_plug_pairs",
    "parse_ring_settings",
    "describe_models",
]
