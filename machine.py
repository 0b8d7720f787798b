# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from typing import Any, Mapping

from debug import Debug
from errors import InputError
from keyboard_and_plugboard import is_letter
from settings import Configuration
from signal_path import encipher
from stepping import advance

debug = Debug()


class Machine:
    """One physical machine: a Configuration plus the key-press operation.

    The only state that ever changes is the position vector, and only
    through :meth:`keystroke`. Anything else (wheel order, rings, reflector,
    plugboard) means building a new Configuration and a new Machine.
    """

    def __init__(self, configuration: Configuration) -> None:
        if not isinstance(configuration, Configuration):
            raise TypeError(
                f"Machine needs a Configuration, got {type(configuration).__name__}"
            )
        self._configuration = configuration

    # ── key-press ───────────────────────────────────────────────

    def keystroke(self, letter: str) -> str:
        """Step the rotors, then encipher *letter* at the new positions."""
        if not is_letter(letter):
            raise InputError(f"Invalid keystroke {letter!r}: expected one letter A-Z.")

        stepped = advance(self._configuration)
        out_ch = encipher(stepped, letter)

        # commit only once both halves succeeded
        self._configuration = stepped
        return out_ch

    def encipher_text(self, text: str) -> str:
        """Press every letter of *text* in turn. *text* must be clean A-Z."""
        bad = next((ch for ch in text if not is_letter(ch)), None)
        if bad is not None:
            raise InputError(f"Invalid keystroke {bad!r} in text: expected letters A-Z.")
        return "".join(self.keystroke(ch) for ch in text)

    # ── queries ─────────────────────────────────────────────────

    def current_positions(self) -> tuple[str, ...]:
        return self._configuration.positions

    def current_configuration(self) -> Configuration:
        return self._configuration

    def __repr__(self) -> str:
        return f"<Machine {self._configuration.model} pos={''.join(self.current_positions())}>"


def create_machine(configuration: Configuration | Mapping[str, Any]) -> Machine:
    """Build a Machine; a plain dict is validated into a Configuration first."""
    if isinstance(configuration, Mapping):
        configuration = Configuration.from_dict(configuration)
    debug.log("config", "new machine for %r", configuration)
    return Machine(configuration)
