# suites.py
"""Machine models and the wheels each one is allowed to carry."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from errors import ConfigurationError, UnknownReflector, UnknownRotor
from rotor_and_reflector import Rotor, Reflector
from wheels import GREEK_ROTORS, REFLECTORS, ROTORS


@dataclass(frozen=True, slots=True)
class MachineVariant:
    """One historical model.

    ``rotors`` lists the stepping wheels, ``auxiliary`` the non-stepping
    leftmost wheels of a 4-rotor stack (empty for 3-rotor models).
    """

    id: str
    label: str
    rotors: Tuple[str, ...]
    reflectors: Tuple[str, ...]
    stack: int = 3
    plugboard: bool = True
    auxiliary: Tuple[str, ...] = ()
    default_rotors: Tuple[str, ...] = ()
    default_reflector: str = ""
    description: str = ""

    @property
    def has_auxiliary_slot(self) -> bool:
        return self.stack == 4

    # ── catalog lookups ─────────────────────────────────────────
    def rotor(self, name: str) -> Rotor:
        if name in self.rotors:
            return ROTORS[name]
        if name in self.auxiliary:
            return GREEK_ROTORS[name]
        raise UnknownRotor(name, self.id)

    def reflector(self, name: str) -> Reflector:
        if name not in self.reflectors:
            raise UnknownReflector(name, self.id)
        return REFLECTORS[name]

    def rotors_for_slot(self, index: int) -> Tuple[str, ...]:
        """Wheel names that may sit in slot *index* (0 = leftmost)."""
        if not 0 <= index < self.stack:
            raise ConfigurationError(
                f"Slot {index} out of range for {self.stack}-rotor model {self.id}"
            )
        if self.has_auxiliary_slot and index == 0:
            return self.auxiliary
        return self.rotors

    def check_slot(self, index: int, name: str) -> None:
        if name not in self.rotors_for_slot(index):
            if self.has_auxiliary_slot and index == 0:
                raise ConfigurationError(
                    f"Slot 0 of model {self.id} takes an auxiliary rotor "
                    f"({', '.join(self.auxiliary)}), not {name!r}"
                )
            if name in self.auxiliary:
                raise ConfigurationError(
                    f"Auxiliary rotor {name!r} only fits slot 0 of model {self.id}"
                )
            raise UnknownRotor(name, self.id)


def slot_labels(count: int) -> Tuple[str, ...]:
    if count == 4:
        return ("GREEK", "LEFT", "MIDDLE", "RIGHT")
    if count == 3:
        return ("LEFT", "MIDDLE", "RIGHT")
    raise ConfigurationError(f"Stack length must be 3 or 4, got {count}")


# ────────────────────────────────────────────────────────────────────────
#  Model table
# ────────────────────────────────────────────────────────────────────────

_STANDARD = ("I", "II", "III", "IV", "V")
_NAVAL = _STANDARD + ("VI", "VII", "VIII")

SUITES: Dict[str, MachineVariant] = {
    v.id: v
    for v in (
        MachineVariant(
            id="I",
            label="Enigma I (Heer/Luftwaffe)",
            rotors=_STANDARD,
            reflectors=("A", "B", "C"),
            default_rotors=("I", "II", "III"),
            default_reflector="B",
            description="Standard Army/Air Force machine, 3 rotors from I-V.",
        ),
        MachineVariant(
            id="M3",
            label="Enigma M3 (Kriegsmarine)",
            rotors=_NAVAL,
            reflectors=("B", "C"),
            default_rotors=("I", "II", "III"),
            default_reflector="B",
            description="Navy machine, 3 rotors selected from 8.",
        ),
        MachineVariant(
            id="M4",
            label="Enigma M4 (U-Boat)",
            rotors=_NAVAL,
            reflectors=("B_Thin", "C_Thin"),
            stack=4,
            auxiliary=("Beta", "Gamma"),
            default_rotors=("Beta", "I", "II", "III"),
            default_reflector="B_Thin",
            description="U-Boat 4-rotor machine. First rotor must be Beta/Gamma.",
        ),
        MachineVariant(
            id="Norway",
            label="Norenigma (Police)",
            rotors=("N_I", "N_II", "N_III", "N_IV", "N_V"),
            reflectors=("N",),
            default_rotors=("N_I", "N_II", "N_III"),
            default_reflector="N",
            description="Post-war rewired Enigma used by the Norwegian police.",
        ),
        MachineVariant(
            id="SwissK",
            label="Enigma K (Swiss)",
            rotors=("K_I", "K_II", "K_III"),
            reflectors=("K",),
            plugboard=False,
            default_rotors=("K_I", "K_II", "K_III"),
            default_reflector="K",
            description="Commercial variant used by the Swiss Army. No plugboard.",
        ),
        MachineVariant(
            id="Railway",
            label="Enigma R (Railway)",
            rotors=("R_I", "R_II", "R_III"),
            reflectors=("R",),
            plugboard=False,
            default_rotors=("R_I", "R_II", "R_III"),
            default_reflector="R",
            description="Reichsbahn machine. Rewired rotors, no plugboard.",
        ),
    )
}


def get_variant(model: str) -> MachineVariant:
    try:
        return SUITES[model]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown model {model!r}. Expected one of {list(SUITES)}"
        ) from None
