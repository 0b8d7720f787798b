# stepping.py
"""Rotor stepping: the odometer with the historical double-step.

Only the three rightmost wheels ever move. In a 4-rotor stack the leftmost
(Greek) wheel is carried along untouched.
"""
from __future__ import annotations

from typing import AbstractSet, Sequence, Tuple

from debug import Debug
from keyboard_and_plugboard import shift, to_index, to_letter
from settings import Configuration

debug = Debug()


def step_positions(
    positions: Sequence[str],
    notches: Sequence[AbstractSet[str]],
) -> Tuple[str, ...]:
    """Return the position vector after one key-press.

    *notches* runs parallel to *positions*. Notch membership is tested
    against the positions as they were *before* this key-press.
    """
    if len(positions) != len(notches):
        raise ValueError("positions and notches must have the same length")
    if len(positions) < 3:
        raise ValueError("stepping needs at least three rotors")

    right, mid, left = len(positions) - 1, len(positions) - 2, len(positions) - 3

    # decide which rotors step (two-phase clarity)
    mid_at_notch = positions[mid] in notches[mid]
    right_at_notch = positions[right] in notches[right]

    step_L = mid_at_notch
    step_M = mid_at_notch or right_at_notch

    new = list(positions)
    new[right] = to_letter(shift(to_index(positions[right]), 1))
    if step_M:
        new[mid] = to_letter(shift(to_index(positions[mid]), 1))
    if step_L:
        new[left] = to_letter(shift(to_index(positions[left]), 1))

    debug.log(
        "stepping",
        "%s->%s (mid_notch=%s, right_notch=%s)",
        "".join(positions), "".join(new), mid_at_notch, right_at_notch,
    )
    return tuple(new)


def advance(configuration: Configuration) -> Configuration:
    """The configuration one key-press later. Nothing but positions changes."""
    notches = [rotor.notches for rotor in configuration.rotor_definitions()]
    return configuration.with_positions(
        step_positions(configuration.positions, notches)
    )
