"""Command-line front end and text helpers."""
from __future__ import annotations

import json

import pytest

import main
from errors import ConfigurationError
from settings import Configuration, default_configuration
from utilities import (
    describe_models,
    group_blocks,
    parse_plug_pairs,
    parse_ring_settings,
    preprocess_message,
)


class TestUtilities:
    def test_preprocess_message(self) -> None:
        assert preprocess_message("Hello, World 42!") == "HELLOWORLD"

    def test_group_blocks(self) -> None:
        assert group_blocks("BDZGOWCXLT", 5) == "BDZGO WCXLT"
        assert group_blocks("ABCDEFG", 3) == "ABC DEF G"

    def test_parse_plug_pairs(self) -> None:
        assert parse_plug_pairs("ab CD") == {"A": "B", "B": "A", "C": "D", "D": "C"}
        assert parse_plug_pairs("") == {}

    @pytest.mark.parametrize("raw", ["ABC", "AB AC"])
    def test_parse_plug_pairs_rejects(self, raw: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_plug_pairs(raw)

    def test_parse_ring_settings(self) -> None:
        assert parse_ring_settings("0 5 25") == [0, 5, 25]
        assert parse_ring_settings("1,2,3") == [1, 2, 3]
        assert parse_ring_settings("abz") == [0, 1, 25]
        with pytest.raises(ConfigurationError):
            parse_ring_settings("1 x 3")

    def test_describe_models(self) -> None:
        text = describe_models()
        assert "M4" in text
        assert "GREEK   Beta Gamma" in text


class TestCli:
    def test_one_shot_message(self, capsys) -> None:
        assert main.main(["-m", "aaaaa aaaaa"]) == 0
        out, err = capsys.readouterr()
        assert out.splitlines()[0].startswith("BDZGO ")
        assert "Positions: AAK" in err

    def test_flags_override_defaults(self, capsys) -> None:
        main.main(["-m", "AAAAA", "--rings", "BBB", "--block", "0"])
        assert capsys.readouterr().out.strip() == "EWTYX"

    def test_m4_model(self, capsys) -> None:
        main.main(["--model", "M4", "-m", "AAAAA"])
        assert capsys.readouterr().out.strip() == "BDZGO"

    def test_config_file_round_trip(self, tmp_path, capsys) -> None:
        path = tmp_path / "settings.json"
        main.main(["--positions", "ADU", "--plugs", "AB", "--save", str(path), "-m", "A"])
        capsys.readouterr()
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["positions"] == ["A", "D", "U"]
        assert main.load_config(path) == default_configuration("I").evolve(
            positions="ADU", plugboard={"A": "B"}
        )

    def test_decrypts_what_it_encrypts(self, tmp_path, capsys) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"model": "Norway", "positions": "OSL"}), encoding="utf-8")
        main.main(["--config", str(path), "-m", "RAILXLINEXBROKEN", "--block", "0"])
        cipher = capsys.readouterr().out.strip()
        main.main(["--config", str(path), "-m", cipher, "--block", "0"])
        assert capsys.readouterr().out.strip() == "RAILXLINEXBROKEN"

    def test_bad_configuration_exits(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main.main(["--model", "SwissK", "--plugs", "AB", "-m", "A"])
        assert "no plugboard" in str(exc.value.code)

    @pytest.mark.parametrize(
        "data", [{"rotors": 5}, {"plugboard": [["A", "B", "C"]]}, {"model": ["I"]}, {"ring_settings": None}]
    )
    def test_malformed_config_file_exits(self, tmp_path, data: dict) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main.main(["--config", str(path), "-m", "A"])
        assert "Failed to load configuration" in str(exc.value.code)

    def test_model_conflicting_with_file(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        main.save_config(default_configuration("M3"), path)
        with pytest.raises(SystemExit):
            main.main(["--config", str(path), "--model", "I", "-m", "A"])

    def test_list_models(self, capsys) -> None:
        assert main.main(["--list-models"]) == 0
        assert "Railway" in capsys.readouterr().out

    def test_interactive_prompt(self, monkeypatch, capsys) -> None:
        lines = iter(["aaaaa", "aaaaa", ""])
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))
        assert main.main([]) == 0
        out = capsys.readouterr().out
        # every line restarts from the same settings
        assert out.count("BDZGO") == 2

    def test_build_configuration_returns_configuration(self) -> None:
        args = main.parse_args(["--rotors", "V I IV", "--reflector", "C"])
        cfg = main.build_configuration(args)
        assert isinstance(cfg, Configuration)
        assert cfg.rotors == ("V", "I", "IV")
