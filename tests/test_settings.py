"""
Tests for Settings validation and environment overrides
"""

import pytest
from pydantic import ValidationError
from mbitselect.providers.board import MicrobitVersion
from mbitselect.services.settings import Settings


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings.from_args(environ={})

        assert settings.fallback is MicrobitVersion.V1
        assert settings.verbose is False


class TestFallbackValidation:
    """Closed-set fallback values"""

    @pytest.mark.parametrize("identifier", MicrobitVersion.identifiers())
    def test_accepts_every_identifier(self, identifier):
        settings = Settings.from_args(fallback=identifier, environ={})

        assert str(settings.fallback) == identifier

    @pytest.mark.parametrize("value", ["", "microbit-v3", "Microbit", "v1"])
    def test_rejects_unknown(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Settings.from_args(fallback=value, environ={})

        assert 'must be one of "microbit" or "microbit-v2"' in str(exc_info.value)

    def test_accepts_enum_member(self):
        assert Settings(fallback=MicrobitVersion.V2).fallback is MicrobitVersion.V2


class TestEnvironment:
    """MBITSELECT_* variables provide defaults for missing flags"""

    def test_fallback_from_env(self):
        settings = Settings.from_args(environ={"MBITSELECT_FALLBACK": "microbit-v2"})

        assert settings.fallback is MicrobitVersion.V2

    def test_flag_overrides_env(self):
        settings = Settings.from_args(fallback="microbit", environ={"MBITSELECT_FALLBACK": "microbit-v2"})

        assert settings.fallback is MicrobitVersion.V1

    def test_invalid_env_fallback(self):
        with pytest.raises(ValidationError):
            Settings.from_args(environ={"MBITSELECT_FALLBACK": "nope"})

    @pytest.mark.parametrize("value,expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("", False)])
    def test_verbose_from_env(self, value, expected):
        settings = Settings.from_args(environ={"MBITSELECT_VERBOSE": value})

        assert settings.verbose is expected

    def test_verbose_flag_overrides_env(self):
        settings = Settings.from_args(verbose=True, environ={"MBITSELECT_VERBOSE": "0"})

        assert settings.verbose is True
