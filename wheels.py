# wheels.py
"""Wheel database: every rotor and reflector the emulator knows about.

Built once at import and never mutated. Which wheels a machine may actually
use is decided per model in ``suites.py``.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from rotor_and_reflector import Rotor, Reflector


def _rotor(name: str, wiring: str, notches: str = "") -> Rotor:
    return Rotor(name, wiring, frozenset(notches))


# ────────────────────────────────────────────────────────────────────────
#  Rotors
# ────────────────────────────────────────────────────────────────────────

# Wehrmacht / Kriegsmarine -----------------------------------------------
I    = _rotor("I",    "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q")
II   = _rotor("II",   "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E")
III  = _rotor("III",  "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V")
IV   = _rotor("IV",   "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J")
V    = _rotor("V",    "VZBRGITYUPSDNHLXAWMJQOFECK", "Z")
VI   = _rotor("VI",   "JPGVOUMFYQBENHZRDKASXLICTW", "ZM")
VII  = _rotor("VII",  "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM")
VIII = _rotor("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM")

# Greek (M4 fourth wheel, never steps) -----------------------------------
BETA  = _rotor("Beta",  "LEYJVCNIXWPBQMDRTAKZGFUHOS")
GAMMA = _rotor("Gamma", "FSOKANUERHMBTIYCWLQPZXVGJD")

# Norenigma ---------------------------------------------------------------
N_I   = _rotor("N_I",   "WTOKASUYVRBXJHQCPZEFMDINLG", "Q")
N_II  = _rotor("N_II",  "GJLPUBSWEMCTQVHXAFZDRONYKI", "E")
N_III = _rotor("N_III", "JWFMCPNOHRYIDXBVGQLTAEZKSU", "V")
N_IV  = _rotor("N_IV",  "FGZJMVXEPBWSHQCTOIARYKNDLU", "J")
N_V   = _rotor("N_V",   "HEJXQOTZBVFDASCILWPGYNMURK", "Z")

# Swiss K -----------------------------------------------------------------
K_I   = _rotor("K_I",   "PEZUOHXSCVFMTBGLRINQJWAYDK", "Q")
K_II  = _rotor("K_II",  "ZOUESYDKFWPCIQXHMVBLGNJRAT", "E")
K_III = _rotor("K_III", "EHRVXGAOBQUSIMZFLYNWKTPDJC", "V")

# Reichsbahn --------------------------------------------------------------
R_I   = _rotor("R_I",   "JGDQOXUSCAMIFRVTPNEWKBLZYH", "Q")
R_II  = _rotor("R_II",  "NTZPSFBOKMWRCJDIVLAEYUXHGQ", "E")
R_III = _rotor("R_III", "JVIUBHTCDYAKEQZPOSGXNRMWFL", "V")

# ────────────────────────────────────────────────────────────────────────
#  Reflectors
# ────────────────────────────────────────────────────────────────────────

A      = Reflector("A",      "EJMZALYXVBWFCRQUONTSPIKHGD")
B      = Reflector("B",      "YRUHQSLDPXNGOKMIEBFZCWVJAT")
C      = Reflector("C",      "FVPJIAOYEDRZXWGCTKUQSBNMHL")
B_THIN = Reflector("B_Thin", "ENKQAUYWJICOPBLMDXZVFTHRGS")
C_THIN = Reflector("C_Thin", "RDOBJNTKVEHMLFCWZAXGYIPSUQ")
N      = Reflector("N",      "MOWJYPUXNDSRAIBFVLKZGQCHET")
K      = Reflector("K",      "IMETCGFRAYSQBZXWLHKDVUPOJN")
R      = Reflector("R",      "QYHOGNECVPUZTFDJAXWMKISRBL")

# Build the lookup dicts -------------------------------------------------

ROTORS: Mapping[str, Rotor] = MappingProxyType({
    r.name: r
    for r in (I, II, III, IV, V, VI, VII, VIII,
              N_I, N_II, N_III, N_IV, N_V,
              K_I, K_II, K_III,
              R_I, R_II, R_III)
})

GREEK_ROTORS: Mapping[str, Rotor] = MappingProxyType({
    r.name: r for r in (BETA, GAMMA)
})

REFLECTORS: Mapping[str, Reflector] = MappingProxyType({
    r.name: r for r in (A, B, C, B_THIN, C_THIN, N, K, R)
})

__all__ = ["ROTORS", "GREEK_ROTORS", "REFLECTORS"]
