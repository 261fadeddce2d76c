"""
Tests for settings and the user .env helpers.
"""

import pytest
from pydantic import ValidationError

from core.config import AppSettings, _parse_env_lines, write_user_env_vars


class TestAppSettings:
    def test_defaults(self, settings):
        assert settings.customer_name == "John Doe"
        assert settings.payment_gateway == "stripe"
        assert settings.min_name_length == 3
        assert settings.min_age == 18
        assert settings.flavors_path is None
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SOLID_LAB_PAYMENT_GATEWAY", "PAYPAL")
        monkeypatch.setenv("SOLID_LAB_MIN_AGE", "21")
        monkeypatch.setenv("SOLID_LAB_LOG_LEVEL", "debug")

        settings = AppSettings(_env_file=None)

        assert settings.payment_gateway == "paypal"
        assert settings.min_age == 21
        assert settings.log_level == "DEBUG"

    def test_project_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SOLID_LAB_CUSTOMER_NAME=Grace Hopper\n", encoding="utf-8")

        settings = AppSettings(_env_file=env_file)

        assert settings.customer_name == "Grace Hopper"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"payment_gateway": "bitcoin"},
            {"min_age": -1},
            {"log_level": "chatty"},
            {"customer_name": ""},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, **overrides)


class TestUserEnvFile:
    def test_parse_env_lines(self):
        text = '# comment\nA=1\n\nB = "two"\nnot-a-pair\n'
        assert _parse_env_lines(text) == {"A": "1", "B": "two"}

    def test_write_merges_existing_values(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"
        write_user_env_vars({"B": "2", "A": "1"}, env_path)
        write_user_env_vars({"A": "updated", "C": None}, env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert lines[1:] == ["A=updated", "B=2"]
