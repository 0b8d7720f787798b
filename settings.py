# settings.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import SIZE, is_letter, normalise_plugboard
from rotor_and_reflector import Rotor, Reflector
from suites import MachineVariant, get_variant

debug = Debug()


def _sequence(value: Any, what: str) -> Tuple[Any, ...]:
    if isinstance(value, (Mapping, bytes)) or value is None:
        raise ConfigurationError(f"{what} must be a list, got {type(value).__name__}")
    try:
        return tuple(value)
    except TypeError:
        raise ConfigurationError(
            f"{what} must be a list, got {type(value).__name__}"
        ) from None


def _names(value: str | Iterable[str]) -> Tuple[str, ...]:
    # "I II III" and ["I", "II", "III"] are both accepted
    names = tuple(value.split()) if isinstance(value, str) else _sequence(value, "Rotors")
    for name in names:
        if not isinstance(name, str):
            raise ConfigurationError(f"Rotor name {name!r} must be a string")
    return names


def _letters(value: str | Iterable[str]) -> Tuple[str, ...]:
    # "ADU" and ["A", "D", "U"] are both accepted
    return _sequence(value, "Positions")


@dataclass(frozen=True, slots=True)
class Configuration:
    """A complete, validated machine setup.

    Instances are immutable values: the constructor checks every invariant
    and raises :class:`ConfigurationError` on the first violation, so an
    invalid ``Configuration`` never exists. Deriving a new setup goes through
    :meth:`with_positions`, :meth:`evolve`, :meth:`with_plug` or
    :meth:`without_plug`, each of which builds (and re-validates) a new value.

    Lists are ordered left to right. Ring settings are 0-25 (A=0).
    """

    model: str
    rotors: Tuple[str, ...]
    positions: Tuple[str, ...]
    ring_settings: Tuple[int, ...]
    reflector: str
    plugboard: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotors", _names(self.rotors))
        object.__setattr__(self, "positions", _letters(self.positions))
        object.__setattr__(self, "ring_settings", _sequence(self.ring_settings, "Ring settings"))
        object.__setattr__(
            self, "plugboard", MappingProxyType(normalise_plugboard(self.plugboard))
        )
        self._validate()
        debug.log("config", "built %r", self)

    # ── invariants ──────────────────────────────────────────────
    def _validate(self) -> None:
        variant = get_variant(self.model)
        if not isinstance(self.reflector, str):
            raise ConfigurationError(f"Reflector name {self.reflector!r} must be a string")

        count = len(self.rotors)
        if len(self.positions) != count:
            raise ConfigurationError(
                f"{count} rotors but {len(self.positions)} positions"
            )
        if len(self.ring_settings) != count:
            raise ConfigurationError(
                f"{count} rotors but {len(self.ring_settings)} ring settings"
            )
        if count != variant.stack:
            raise ConfigurationError(
                f"Model {variant.id} takes {variant.stack} rotors, got {count}"
            )

        for index, name in enumerate(self.rotors):
            variant.check_slot(index, name)

        for letter in self.positions:
            if not is_letter(letter):
                raise ConfigurationError(f"Rotor position {letter!r} is not a letter A-Z")

        for ring in self.ring_settings:
            if isinstance(ring, bool) or not isinstance(ring, int) or not 0 <= ring < SIZE:
                raise ConfigurationError(f"Ring setting {ring!r} must be an integer 0-{SIZE - 1}")

        variant.reflector(self.reflector)

        if self.plugboard and not variant.plugboard:
            raise ConfigurationError(f"Model {variant.id} has no plugboard")

    # ── catalog views ───────────────────────────────────────────
    @property
    def variant(self) -> MachineVariant:
        return get_variant(self.model)

    def rotor_definitions(self) -> Tuple[Rotor, ...]:
        variant = self.variant
        return tuple(variant.rotor(name) for name in self.rotors)

    def reflector_definition(self) -> Reflector:
        return self.variant.reflector(self.reflector)

    # ── derivation ──────────────────────────────────────────────
    def with_positions(self, positions: str | Iterable[str]) -> "Configuration":
        return replace(self, positions=_letters(positions))

    def evolve(self, **changes: Any) -> "Configuration":
        """Return a new Configuration with *changes* applied."""
        return replace(self, **changes)

    def with_plug(self, a: str, b: str) -> "Configuration":
        """Cable *a* to *b*, first unplugging whatever either letter held."""
        board = dict(self.plugboard)
        for letter in (a, b):
            partner = board.pop(letter, None)
            if partner is not None:
                board.pop(partner, None)
        board[a], board[b] = b, a
        return replace(self, plugboard=board)

    def without_plug(self, letter: str) -> "Configuration":
        board = dict(self.plugboard)
        partner = board.pop(letter, None)
        if partner is not None:
            board.pop(partner, None)
        return replace(self, plugboard=board)

    # ── serialisation helpers ───────────────────────────────────
    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "rotors": list(self.rotors),
            "positions": list(self.positions),
            "ring_settings": list(self.ring_settings),
            "reflector": self.reflector,
            "plugboard": dict(self.plugboard),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        """Build from a plain dict; missing keys fall back to the model defaults."""
        base = default_configuration(data.get("model", "I"))
        return base.evolve(**{k: data[k] for k in _FIELDS if k in data and k != "model"})

    def __hash__(self) -> int:
        return hash((
            self.model,
            self.rotors,
            self.positions,
            self.ring_settings,
            self.reflector,
            tuple(self.plugboard.items()),
        ))

    def __repr__(self) -> str:
        plugs = " ".join(a + b for a, b in self.plugboard.items() if a < b)
        return (
            f"<Configuration {self.model} rotors={' '.join(self.rotors)} "
            f"pos={''.join(self.positions)} rings={list(self.ring_settings)} "
            f"refl={self.reflector} plugs=[{plugs}]>"
        )


_FIELDS = ("model", "rotors", "positions", "ring_settings", "reflector", "plugboard")


def default_configuration(model: str = "I") -> Configuration:
    """The factory setting for *model*: default wheels at ``A``, rings 0."""
    variant = get_variant(model)
    count = variant.stack
    return Configuration(
        model=variant.id,
        rotors=variant.default_rotors,
        positions=("A",) * count,
        ring_settings=(0,) * count,
        reflector=variant.default_reflector,
    )
