import pytest

from postip import constants
from postip.config import ConfigError, TooltipConfig


def test_defaults_come_from_constants():
    config = TooltipConfig()
    assert config.default_timeout == constants.DEFAULT_TIMEOUT
    assert config.border_width == constants.DEFAULT_BORDER_WIDTH
    assert config.internal_border_width == constants.DEFAULT_INTERNAL_BORDER_WIDTH
    assert config.max_columns is None
    assert config.header_height_fallback is True


def test_configure_updates_and_coerces():
    config = TooltipConfig()
    config.configure(default_timeout="2.5", border_width=0, max_rows=4)
    assert config.default_timeout == 2.5
    assert config.border_width == 0
    assert config.max_rows == 4


def test_from_mapping():
    config = TooltipConfig.from_mapping({"max_columns": 40, "style_name": "warning"})
    assert config.max_columns == 40
    assert config.style_name == "warning"
    assert TooltipConfig.from_mapping(None) == TooltipConfig()


@pytest.mark.parametrize(
    "overrides",
    [
        {"unknown_key": 1},
        {"border_width": -1},
        {"internal_border_width": "wide"},
        {"max_columns": 0},
        {"max_rows": True},
        {"inspector_timeout": 0},
        {"style_name": ""},
    ],
)
def test_invalid_settings_raise(overrides):
    with pytest.raises(ConfigError):
        TooltipConfig().configure(**overrides)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        TooltipConfig(border_width=-3)
