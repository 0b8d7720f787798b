"""Machine façade: keystroke, queries, known answers."""
from __future__ import annotations

import pytest

from errors import ConfigurationError, InputError, InvalidInput
from machine import Machine, create_machine
from settings import Configuration, default_configuration


class TestKnownAnswers:
    def test_enigma_i_default(self, make_machine) -> None:
        assert make_machine().encipher_text("AAAAA") == "BDZGO"

    def test_enigma_i_ring_settings(self, make_machine) -> None:
        machine = make_machine(ring_settings=(1, 1, 1))
        assert machine.encipher_text("AAAAA") == "EWTYX"

    def test_m3_matches_enigma_i(self, make_machine) -> None:
        assert make_machine("M3").encipher_text("AAAAA") == "BDZGO"

    def test_m4_beta_thin_b_matches_three_rotor_b(self, make_machine) -> None:
        # Beta at A with ring 0 and thin B behaves like reflector B
        assert make_machine("M4").encipher_text("AAAAA") == "BDZGO"

    def test_m4_gamma_thin_c_matches_three_rotor_c(self, make_machine) -> None:
        m4 = make_machine("M4", rotors=("Gamma", "I", "II", "III"), reflector="C_Thin")
        m3 = make_machine("M3", reflector="C")
        assert m4.encipher_text("HELLOWORLD") == m3.encipher_text("HELLOWORLD")


class TestKeystroke:
    def test_step_precedes_encrypt(self, enigma_i: Configuration) -> None:
        machine = create_machine(enigma_i)
        out = machine.keystroke("A")
        assert machine.current_positions() == ("A", "A", "B")
        assert out == "B"

    def test_double_step_through_machine(self, make_machine) -> None:
        machine = make_machine(positions="ADU")
        seen = []
        for _ in range(3):
            machine.keystroke("A")
            seen.append("".join(machine.current_positions()))
        assert seen == ["ADV", "AEW", "BFX"]

    def test_construction_does_not_step(self, enigma_i: Configuration) -> None:
        assert create_machine(enigma_i).current_positions() == ("A", "A", "A")

    @pytest.mark.parametrize("bad", ["a", "AB", "", "1", " ", None])
    def test_bad_input_leaves_state_unchanged(self, enigma_i: Configuration, bad) -> None:
        machine = create_machine(enigma_i)
        machine.keystroke("H")
        before = machine.current_configuration()
        with pytest.raises(InputError):
            machine.keystroke(bad)
        assert machine.current_configuration() == before

    def test_encipher_text_is_all_or_nothing(self, enigma_i: Configuration) -> None:
        machine = create_machine(enigma_i)
        with pytest.raises(InvalidInput):
            machine.encipher_text("ABC1")
        assert machine.current_positions() == ("A", "A", "A")

    def test_configuration_snapshot_is_immutable_value(self, enigma_i: Configuration) -> None:
        machine = create_machine(enigma_i)
        snap = machine.current_configuration()
        machine.keystroke("A")
        assert snap.positions == ("A", "A", "A")
        assert machine.current_configuration() is not snap


class TestProperties:
    def test_reciprocity(self, make_machine) -> None:
        plain = "WETTERVORHERSAGEBISKAYA"
        settings = dict(
            rotors=("II", "IV", "V"),
            positions="BLA",
            ring_settings=(1, 20, 11),
            plugboard=dict(zip("AVBSCGDLFUHZINKMOW", "VASBGCLDUFZHNIMKWO")),
        )
        cipher = make_machine(**settings).encipher_text(plain)
        assert cipher != plain
        assert make_machine(**settings).encipher_text(cipher) == plain

    def test_single_letter_reciprocity_from_restored_state(self, enigma_i: Configuration) -> None:
        state = enigma_i.with_positions("QEV")
        y = create_machine(state).keystroke("X")
        assert create_machine(state).keystroke(y) == "X"

    def test_determinism(self, enigma_i: Configuration) -> None:
        cfg = enigma_i.evolve(rotors=("III", "I", "II"), plugboard={"E": "T", "Q": "Z"})
        a, b = create_machine(cfg), create_machine(Configuration.from_dict(cfg.to_dict()))
        text = "DETERMINISMISABSOLUTE" * 20
        assert a.encipher_text(text) == b.encipher_text(text)
        assert a.current_positions() == b.current_positions()

    def test_machines_are_independent(self, make_machine) -> None:
        a, b = make_machine(), make_machine()
        a.encipher_text("AAAA")
        assert b.current_positions() == ("A", "A", "A")
        assert b.keystroke("A") == "B"

    @pytest.mark.parametrize("model", ["SwissK", "Railway", "Norway"])
    def test_every_model_round_trips(self, model: str) -> None:
        cfg = default_configuration(model).with_positions("XYZ")
        cipher = create_machine(cfg).encipher_text("ATTACKATDAWN")
        assert create_machine(cfg).encipher_text(cipher) == "ATTACKATDAWN"


class TestCreateMachine:
    def test_from_dict(self) -> None:
        machine = create_machine({"model": "I", "positions": ["A", "A", "A"]})
        assert machine.encipher_text("AAAAA") == "BDZGO"

    def test_invalid_dict(self) -> None:
        with pytest.raises(ConfigurationError):
            create_machine({"model": "M4", "rotors": ["I", "II", "III", "IV"]})

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            Machine("I II III")  # type: ignore[arg-type]
