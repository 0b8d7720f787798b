# rotor_and_reflector.py
from __future__ import annotations

from dataclasses import dataclass, field

from debug import Debug
from keyboard_and_plugboard import ALPHABET, SIZE, shift, to_index

debug = Debug()


@dataclass(frozen=True, slots=True)
class Rotor:
    """One catalog wheel: fixed wiring plus its turnover notch letters.

    Position and ring setting are *not* stored here; they belong to the
    configuration and arrive as the ``offset`` argument of the signal helpers.
    """

    name: str
    wiring: str
    notches: frozenset[str] = frozenset()
    _fwd: tuple[int, ...] = field(init=False, repr=False, compare=False)
    _rev: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(ALPHABET):
            raise ValueError(f"Rotor {self.name}: wiring must be a permutation of A-Z")
        notches = frozenset(self.notches)
        if not notches <= set(ALPHABET):
            raise ValueError(f"Rotor {self.name}: notch characters must be in A-Z")

        # integer lookup tables
        object.__setattr__(self, "notches", notches)
        object.__setattr__(self, "_fwd", tuple(to_index(c) for c in self.wiring))
        object.__setattr__(self, "_rev", tuple(self.wiring.index(c) for c in ALPHABET))

    def at_notch(self, letter: str) -> bool:
        return letter in self.notches

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int, offset: int) -> int:
        mapped = self._fwd[shift(sig, offset)]
        out = shift(mapped, -offset)
        debug.log("rotor", "%s fwd %d->%d (offset %d)", self.name, sig, out, offset)
        return out

    def backward(self, sig: int, offset: int) -> int:
        mapped = self._rev[shift(sig, offset)]
        out = shift(mapped, -offset)
        debug.log("rotor", "%s rev %d->%d (offset %d)", self.name, sig, out, offset)
        return out

    def __repr__(self) -> str:
        return f"<Rotor {self.name} notches={''.join(sorted(self.notches)) or '-'}>"


@dataclass(frozen=True, slots=True)
class Reflector:
    name: str
    wiring: str
    _map: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.wiring) != SIZE:
            raise ValueError(f"Reflector {self.name}: wiring length must be {SIZE}")

        # ensure involution property (w[i] = j ⇒ w[j] = i)
        table = tuple(to_index(c) for c in self.wiring)
        for i, j in enumerate(table):
            if table[j] != i:
                raise ValueError(f"Reflector {self.name}: wiring must be an involution")
        object.__setattr__(self, "_map", table)

    def reflect(self, sig: int) -> int:
        out = self._map[sig]
        debug.log("reflector", "%s %d->%d", self.name, sig, out)
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
