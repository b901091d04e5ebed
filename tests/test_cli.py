"""
tests/test_cli.py
=================
Tests for the password-strength command line entry point.
"""
import json
import logging

import pytest

from password_strength_tester import cli
from password_strength_tester.config import default_settings, save_json

pytestmark = pytest.mark.usefixtures("settings_path")


class TestCheckCommand:

    def test_strong_password(self, capsys):
        assert cli.main(["check", "Password123!"]) == 0
        out = capsys.readouterr().out
        assert "Strength: Strong" in out
        assert "Score: 80/100" in out
        assert "Suggested replacement" not in out

    def test_weak_password_prints_suggestion(self, capsys):
        assert cli.main(["check", "password"]) == 0
        out = capsys.readouterr().out
        assert "Strength: Weak" in out
        assert "Suggested replacement: " in out

    def test_json_output(self, capsys):
        assert cli.main(["check", "Password123", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"strength": "Medium", "score": 50}

    def test_prompts_when_no_argument(self, capsys, monkeypatch):
        monkeypatch.setattr(cli, "getpass", lambda prompt: "P@ssw0rd!2024$XyZ")
        assert cli.main(["check"]) == 0
        assert "Strength: Very Strong" in capsys.readouterr().out

    def test_empty_password_is_an_error(self, capsys):
        assert cli.main(["check", ""]) == 2
        assert "Error: Password is required" in capsys.readouterr().out


class TestGenerateCommand:

    def test_defaults(self, capsys):
        assert cli.main(["generate"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert len(lines[0]) == 9

    def test_count_and_length(self, capsys):
        assert cli.main(["generate", "--length", "14", "--count", "3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert all(len(line) == 14 for line in lines)

    def test_category_flags(self, capsys):
        args = ["generate", "--length", "6", "--upper", "0", "--lower", "0", "--numbers", "6", "--special", "0"]
        assert cli.main(args) == 0
        assert capsys.readouterr().out.strip().isdigit()

    def test_settings_file(self, capsys, tmp_path):
        path = tmp_path / "custom.json"
        settings = default_settings()
        settings["generator"]["length"] = 20
        save_json(path, settings)
        assert cli.main(["generate", "--settings", str(path)]) == 0
        assert len(capsys.readouterr().out.strip()) == 20

    def test_flags_override_settings_file(self, capsys, tmp_path):
        path = tmp_path / "custom.json"
        save_json(path, {"generator": {"length": 20}})
        assert cli.main(["generate", "--settings", str(path), "--length", "11"]) == 0
        assert len(capsys.readouterr().out.strip()) == 11

    def test_minimums_exceed_length(self, capsys):
        assert cli.main(["generate", "--length", "5"]) == 2
        assert "Error: Total character counts cannot exceed password length" in capsys.readouterr().out

    def test_count_must_be_positive(self, capsys):
        assert cli.main(["generate", "--count", "0"]) == 2
        assert "Error:" in capsys.readouterr().out

    def test_verbose_logs_under_module_logger(self, caplog):
        caplog.set_level(logging.DEBUG, logger="password_strength_tester")
        assert cli.main(["--verbose", "generate"]) == 0
        assert any(
            record.name == "password_strength_tester.cli" and "Generating 1 password" in record.getMessage()
            for record in caplog.records
        )


class TestInitSettingsCommand:

    def test_writes_default_location(self, capsys, settings_path):
        assert cli.main(["init-settings"]) == 0
        assert settings_path.exists()
        assert "Wrote default settings" in capsys.readouterr().out

    def test_existing_file_kept(self, capsys, tmp_path):
        path = tmp_path / "s.json"
        save_json(path, {"generator": {"length": 30}})
        assert cli.main(["init-settings", "--settings", str(path)]) == 0
        assert "Settings already present" in capsys.readouterr().out
        assert json.loads(path.read_text(encoding="utf-8"))["generator"]["length"] == 30

    def test_force(self, capsys, tmp_path):
        path = tmp_path / "s.json"
        save_json(path, {"generator": {"length": 30}})
        assert cli.main(["init-settings", "--settings", str(path), "--force"]) == 0
        assert json.loads(path.read_text(encoding="utf-8")) == default_settings()
