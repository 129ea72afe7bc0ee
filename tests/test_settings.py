# tests/test_settings.py

import logging

import pytest

from core.logging_setup import DEFAULT_FORMAT, configure_logging
from core.settings import LOG_LEVEL_ENV, Settings


def test_defaults():
    s = Settings()
    assert (s.input_unit, s.output_unit, s.places) == ("M", "M", 2)
    assert s.log_level == "WARNING"
    assert s.log_level_value == logging.WARNING


def test_units_are_normalized_to_symbols():
    s = Settings(input_unit="feet", output_unit="centimeter")
    assert (s.input_unit, s.output_unit) == ("FT", "CM")


def test_invalid_values_raise():
    with pytest.raises(ValueError):
        Settings(input_unit="yard")
    with pytest.raises(ValueError):
        Settings(places=-1)


def test_from_env_reads_log_level():
    assert Settings.from_env({LOG_LEVEL_ENV: "debug"}).log_level == "DEBUG"
    assert Settings.from_env({LOG_LEVEL_ENV: "chatty"}).log_level == "WARNING"
    assert Settings.from_env({}).log_level == "WARNING"


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    assert Settings.from_env().log_level_value == logging.INFO


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    old_level = root.level
    try:
        configure_logging(logging.DEBUG)
        configure_logging(logging.INFO)
        ours = [h for h in root.handlers if h.get_name() == "unit_converter"]
        assert len(ours) == 1
        assert ours[0].formatter._fmt == DEFAULT_FORMAT
        assert root.level == logging.INFO
    finally:
        for h in [h for h in root.handlers if h.get_name() == "unit_converter"]:
            root.removeHandler(h)
        root.setLevel(old_level)
