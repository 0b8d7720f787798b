# signal_path.py
from __future__ import annotations

from debug import Debug
from keyboard_and_plugboard import Keyboard, Plugboard, to_index
from settings import Configuration

debug = Debug()

KEYBOARD = Keyboard()


def rotor_offsets(configuration: Configuration) -> list[int]:
    """Per-rotor ``position - ring`` shift, left to right."""
    return [
        to_index(pos) - ring
        for pos, ring in zip(configuration.positions, configuration.ring_settings)
    ]


def encipher(configuration: Configuration, letter: str) -> str:
    """Run one letter through plugboard, rotors, reflector and back.

    Pure: reads *configuration* as it is and never steps. For a fixed
    configuration the mapping is its own inverse.
    """
    rotors = configuration.rotor_definitions()
    reflector = configuration.reflector_definition()
    plugboard = Plugboard.wired(configuration.plugboard)
    offsets = rotor_offsets(configuration)

    signal = KEYBOARD.forward(letter)
    signal = plugboard.forward(signal)

    for rotor, offset in zip(reversed(rotors), reversed(offsets)):
        signal = rotor.forward(signal, offset)

    signal = reflector.reflect(signal)

    for rotor, offset in zip(rotors, offsets):
        signal = rotor.backward(signal, offset)

    signal = plugboard.backward(signal)
    out_ch = KEYBOARD.backward(signal)
    debug.log("encipher", "%s->%s at %s", letter, out_ch, "".join(configuration.positions))
    return out_ch
