import json
import logging

import pytest

from reading_coach.config import CoachSettings, get_settings, load_settings
from reading_coach.config.introspection import get_config_info, main
from reading_coach.constants import (
    DEFAULT_VOICE_NAME,
    EVALUATION_MODEL,
    SPEECH_MODEL,
    SUGGESTION_MODEL,
)

pytestmark = pytest.mark.unit


class TestCoachSettings:
    def test_defaults_without_environment(self):
        settings = load_settings()
        assert settings.api_key is None
        assert settings.speech_model == SPEECH_MODEL
        assert settings.evaluation_model == EVALUATION_MODEL
        assert settings.suggestion_model == SUGGESTION_MODEL
        assert settings.voice_name == DEFAULT_VOICE_NAME

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("GEMINI_EVALUATION_MODEL", "gemini-test")
        settings = load_settings()
        assert settings.api_key == "env-key"
        assert settings.evaluation_model == "gemini-test"

    def test_reads_bare_api_key_variable(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "bare-key")
        assert load_settings().api_key == "bare-key"

    def test_blank_key_is_treated_as_missing(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "  ")
        assert load_settings().api_key is None

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=file-key\nGEMINI_VOICE_NAME=Puck\n")
        settings = load_settings(env_file)
        assert settings.api_key == "file-key"
        assert settings.voice_name == "Puck"

    def test_settings_are_frozen(self):
        settings = CoachSettings(api_key="k")
        with pytest.raises(Exception):  # noqa: B017
            settings.api_key = "other"

    def test_repr_and_dict_never_expose_key(self):
        settings = CoachSettings(api_key="super-secret")
        assert "super-secret" not in repr(settings)
        assert settings.to_dict()["api_key"] == "[SET]"


class TestProcessSettings:
    def test_missing_key_warns_once(self, caplog):
        with caplog.at_level(logging.WARNING, logger="reading_coach.config"):
            first = get_settings()
            second = get_settings()

        assert first is second
        warnings = [r for r in caplog.records if "API_KEY" in r.getMessage()]
        assert len(warnings) == 1

    def test_configured_key_does_not_warn(self, monkeypatch, caplog):
        monkeypatch.setenv("GEMINI_API_KEY", "k")
        with caplog.at_level(logging.WARNING, logger="reading_coach.config"):
            assert get_settings().api_key == "k"
        assert not caplog.records


class TestIntrospection:
    def test_config_info_masks_key(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "secret")
        info = get_config_info()
        assert info["status"] == "valid"
        assert info["config"]["api_key"] == "[SET]"
        assert "secret" not in json.dumps(info)
        assert info["warnings"] == []

    def test_config_info_warns_without_key(self):
        info = get_config_info()
        assert info["config"]["api_key"] == "[NOT SET]"
        assert len(info["warnings"]) == 1

    def test_json_cli(self, capsys):
        main(["--json"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["status"] == "valid"

    def test_check_cli_exits_zero_when_valid(self):
        with pytest.raises(SystemExit) as exc:
            main(["--check"])
        assert exc.value.code == 0

    def test_check_cli_exits_nonzero_on_invalid_value(self, monkeypatch):
        monkeypatch.setenv("GEMINI_EVALUATION_MODEL", "")
        with pytest.raises(SystemExit) as exc:
            main(["--check"])
        assert exc.value.code == 1
