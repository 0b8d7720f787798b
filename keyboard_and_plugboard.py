# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable, Mapping

from debug import Debug
from errors import ConfigurationError, InputError

debug = Debug()

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)

_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


# ── alphabet codec ────────────────────────────────────────────────
def to_index(letter: str) -> int:
    """A→0 … Z→25. Anything else raises ``KeyError``."""
    return _INDEX[letter]


def to_letter(index: int) -> str:
    """0→A … 25→Z, reducing *index* mod 26 first (negatives included)."""
    return ALPHABET[index % SIZE]


def shift(index: int, offset: int) -> int:
    return (index + offset) % SIZE


def is_letter(symbol: object) -> bool:
    return isinstance(symbol, str) and symbol in _INDEX


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        if not isinstance(letter, str):
            raise InputError(f"Keystroke must be a letter, got {type(letter).__name__}")
        try:
            signal = self.alpha_to_index[letter]
        except KeyError:
            raise InputError(
                f"Invalid keystroke {letter!r}: expected one letter A-Z."
            ) from None
        debug.log("keyboard", "%s->%d", letter, signal)
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]


# ── Plugboard ─────────────────────────────────────────────────────
PlugEntries = Mapping[str, str] | Iterable[str | tuple[str, str]]


def _iter_pairs(entries: PlugEntries) -> Iterable[tuple[str, str]]:
    if isinstance(entries, Mapping):
        yield from entries.items()
        return
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Iterable):
        raise ConfigurationError(
            f"Plugboard must be a mapping or a list of pairs, got {type(entries).__name__}"
        )
    for raw in entries:
        # normalise to (a, b)
        if isinstance(raw, str) or not isinstance(raw, Iterable):
            pair = raw
        else:
            pair = tuple(raw)
        if not isinstance(pair, (str, tuple)) or len(pair) != 2:
            raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
        a, b = pair
        yield a, b


def normalise_plugboard(entries: PlugEntries | None) -> dict[str, str]:
    """Validate plugboard *entries* and return the full symmetric mapping.

    *entries* is either a mapping (``{"A": "B", "B": "A"}``) or a sequence of
    pairs (``["AB", ("C", "D")]``). A one-sided mapping entry is read as a
    cable between both letters; contradicting entries are rejected.
    """
    partner: dict[str, str] = {}
    if not entries:
        return partner

    for a, b in _iter_pairs(entries):
        if not is_letter(a) or not is_letter(b):
            bad = a if not is_letter(a) else b
            raise ConfigurationError(f"Plugboard symbol {bad!r} is not a letter A-Z")
        if a == b:
            raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
        for x, y in ((a, b), (b, a)):
            if partner.get(x, y) != y:
                raise ConfigurationError(
                    f"Letter {x!r} already plugged to {partner[x]!r}, cannot also plug to {y!r}"
                )
        # passed validation → commit swap
        partner[a], partner[b] = b, a

    return dict(sorted(partner.items()))


class Plugboard:
    def __init__(self, entries: PlugEntries | None = None) -> None:
        self.mapping: Mapping[str, str] = normalise_plugboard(entries)

    @classmethod
    def wired(cls, mapping: Mapping[str, str]) -> "Plugboard":
        """Wrap a mapping already produced by :func:`normalise_plugboard`."""
        board = cls.__new__(cls)
        board.mapping = mapping
        return board

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        letter = to_letter(signal)
        mapped = self.mapping.get(letter, letter)
        debug.log("plugboard", "%d->%s->%s", signal, letter, mapped)
        return to_index(mapped)

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def pairs(self) -> list[str]:
        return [a + b for a, b in self.mapping.items() if a < b]

    def __len__(self) -> int:
        return len(self.mapping) // 2

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs())}>"
