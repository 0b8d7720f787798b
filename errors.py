# errors.py
"""Error taxonomy for the machine core.

Everything raised here is a caller-side mistake reported synchronously;
nothing is transient or worth retrying.
"""
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every error the machine core raises."""


class ConfigurationError(EnigmaError):
    """A machine setup violates one of the configuration invariants."""


class UnknownRotor(ConfigurationError):
    def __init__(self, name: str, model: str) -> None:
        super().__init__(f"Rotor {name!r} is not available on model {model!r}")
        self.name = name
        self.model = model


class UnknownReflector(ConfigurationError):
    def __init__(self, name: str, model: str) -> None:
        super().__init__(f"Reflector {name!r} is not available on model {model!r}")
        self.name = name
        self.model = model


class InputError(EnigmaError):
    """A keystroke was not exactly one letter A-Z."""


# names used by the presentation layer
InvalidConfiguration = ConfigurationError
InvalidInput = InputError

__all__ = [
    "EnigmaError",
    "ConfigurationError",
    "UnknownRotor",
    "UnknownReflector",
    "InputError",
    "InvalidConfiguration",
    "InvalidInput",
]
