import os
import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from rangegen import (
    InvalidRangeError,
    RangeConfig,
    RangeStepper,
    StepperError,
    StepperSettings,
    configure_logging,
    get_settings,
    set_settings,
)
from rangegen.core.config import DEBUG_CHECKS_ENV, LOG_LEVEL_ENV


class TestStepperSettings:
    """Settings defaults and environment loading."""

    def test_defaults(self):
        settings = StepperSettings()
        assert settings.debug_checks is False
        assert settings.log_level == "WARNING"

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_from_env_truthy(self, monkeypatch, raw):
        monkeypatch.setenv(DEBUG_CHECKS_ENV, raw)
        assert StepperSettings.from_env().debug_checks is True

    @pytest.mark.parametrize("raw", ["", "0", "false", "off"])
    def test_from_env_falsy(self, monkeypatch, raw):
        monkeypatch.setenv(DEBUG_CHECKS_ENV, raw)
        assert StepperSettings.from_env().debug_checks is False

    def test_from_env_log_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert StepperSettings.from_env().log_level == "DEBUG"

    def test_from_env_reads_dotenv_in_working_directory(self, monkeypatch, tmp_path):
        """A .env in the caller's working directory is found and read."""
        monkeypatch.delenv(DEBUG_CHECKS_ENV, raising=False)
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        (tmp_path / ".env").write_text(f"{DEBUG_CHECKS_ENV}=1\n{LOG_LEVEL_ENV}=info\n")
        monkeypatch.chdir(tmp_path)

        settings = StepperSettings.from_env()

        assert settings.debug_checks is True
        assert settings.log_level == "INFO"

    def test_from_env_dotenv_leaves_environ_untouched(self, monkeypatch, tmp_path):
        monkeypatch.delenv(DEBUG_CHECKS_ENV, raising=False)
        (tmp_path / ".env").write_text(f"{DEBUG_CHECKS_ENV}=1\n")
        monkeypatch.chdir(tmp_path)

        StepperSettings.from_env()

        assert DEBUG_CHECKS_ENV not in os.environ

    def test_environment_overrides_dotenv(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text(f"{DEBUG_CHECKS_ENV}=1\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(DEBUG_CHECKS_ENV, "0")

        assert StepperSettings.from_env().debug_checks is False

    def test_get_settings_reads_dotenv_when_unset(self, monkeypatch, tmp_path):
        monkeypatch.delenv(DEBUG_CHECKS_ENV, raising=False)
        (tmp_path / ".env").write_text(f"{DEBUG_CHECKS_ENV}=yes\n")
        monkeypatch.chdir(tmp_path)
        set_settings(None)

        with pytest.raises(InvalidRangeError):
            RangeStepper(0, 0, 10)

    def test_get_settings_reads_env_when_unset(self, monkeypatch):
        monkeypatch.setenv(DEBUG_CHECKS_ENV, "1")
        set_settings(None)
        assert get_settings().debug_checks is True

    def test_set_settings_replaces_active(self):
        settings = StepperSettings(debug_checks=True, log_level="INFO")
        set_settings(settings)
        assert get_settings() is settings


class TestDebugChecks:
    """Opt-in rejection of ranges that never terminate."""

    def test_off_by_default(self):
        stepper = RangeStepper(0, 0, 10)
        assert stepper.advance() == 0
        assert stepper.advance() == 0

    @pytest.mark.parametrize(
        "min_value,step,max_value",
        [(0, 0, 10), (0.0, 0.0, 1.0), (0, -1, 10)],
    )
    def test_rejects_non_terminating(self, min_value, step, max_value):
        with pytest.raises(InvalidRangeError) as exc_info:
            RangeStepper(min_value, step, max_value, check=True)
        assert exc_info.value.step_size == step

    @pytest.mark.parametrize(
        "min_value,step,max_value",
        [(0, 5, 20), (-2.3, 1.2, 5.7), (10, 1, 0), (10, -1, 0)],
    )
    def test_accepts_terminating(self, min_value, step, max_value):
        checked = list(RangeStepper(min_value, step, max_value, check=True))
        unchecked = list(RangeStepper(min_value, step, max_value))
        assert checked == unchecked

    def test_settings_enable_checks(self):
        set_settings(StepperSettings(debug_checks=True))
        with pytest.raises(InvalidRangeError):
            RangeStepper(0, 0, 10)

    def test_explicit_check_overrides_settings(self):
        set_settings(StepperSettings(debug_checks=True))
        assert RangeStepper(0, 0, 10, check=False).current() == 0

    def test_error_taxonomy(self):
        with pytest.raises(StepperError):
            RangeStepper(0, 0, 10, check=True)
        with pytest.raises(ValueError):
            RangeStepper(0, 0, 10, check=True)

    def test_rejection_is_logged(self):
        messages = []
        handler_id = logger.add(messages.append, level="ERROR")
        try:
            with pytest.raises(InvalidRangeError):
                RangeStepper(0, -1, 10, check=True)
        finally:
            logger.remove(handler_id)

        assert len(messages) == 1
        assert "negative step never reaches max" in messages[0]


class TestRangeConfig:
    """Declarative range descriptions."""

    def test_build(self):
        stepper = RangeConfig(min_value=0, step_size=5, max_value=20).build()
        assert list(stepper) == [0, 5, 10, 15]

    def test_default_step(self):
        assert RangeConfig(min_value=3, max_value=6).step_size == 1

    def test_build_returns_fresh_steppers(self):
        config = RangeConfig(min_value=0, max_value=3)
        first = config.build()
        list(first)
        assert list(config.build()) == [0, 1, 2]

    def test_build_with_check(self):
        with pytest.raises(InvalidRangeError):
            RangeConfig(min_value=0, step_size=0, max_value=1).build(check=True)

    def test_frozen(self):
        config = RangeConfig(min_value=0, max_value=3)
        with pytest.raises(ValidationError):
            config.min_value = 1

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            RangeConfig(min_value="low", max_value=3)

    def test_parse_three_parts(self):
        config = RangeConfig.parse("-2.3:1.2:5.7")
        assert config == RangeConfig(min_value=-2.3, step_size=1.2, max_value=5.7)

    def test_parse_two_parts(self):
        config = RangeConfig.parse("0:20")
        assert config.step_size == 1
        assert isinstance(config.max_value, int)

    @pytest.mark.parametrize("text", ["5", "0:1:2:3", "a:b", "0::3"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            RangeConfig.parse(text)


class TestConfigureLogging:
    def test_uses_settings_level(self):
        set_settings(StepperSettings(log_level="ERROR"))
        try:
            handler_id = configure_logging()
            assert isinstance(handler_id, int)
        finally:
            logger.remove()
            logger.add(sys.stderr)
