"""Shared fixtures for the rotor machine tests."""
from __future__ import annotations

import pytest

from machine import Machine, create_machine
from settings import Configuration, default_configuration


@pytest.fixture()
def enigma_i() -> Configuration:
    """Enigma I, rotors I II III at AAA, rings 0, reflector B, no plugs."""
    return default_configuration("I")


@pytest.fixture()
def make_machine():
    """Factory: build a Machine from keyword overrides on a model's defaults."""

    def _make(model: str = "I", **changes) -> Machine:
        cfg = default_configuration(model)
        return create_machine(cfg.evolve(**changes) if changes else cfg)

    return _make
