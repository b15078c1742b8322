# tests/llmwire/conf/test_settings.py
import pytest

from llmwire.conf import DEFAULTS, Settings, settings


def test_defaults_are_visible():
    s = Settings(environ={})
    assert dict(s) == {"ENCODER_SORT_KEYS": False, "STRICT_KEY_ORDER": True, "TRACING_ENABLED": True}
    assert len(s) == len(DEFAULTS)


def test_wire_literals_are_not_settings():
    for key in ("AUTO_FORMAT_WIRE_TYPE", "AUTO_FORMAT_DECODE_LITERAL", "STRUCTURED_OUTPUT_WIRE_TYPE"):
        assert key not in DEFAULTS
        assert key not in Settings(environ={})


@pytest.mark.parametrize("raw, expected", [("false", False), ("0", False), ("OFF", False), ("yes", True), (" 1 ", True)])
def test_environment_overrides_defaults(raw, expected):
    s = Settings(environ={"LLMWIRE_STRICT_KEY_ORDER": raw})
    assert s["STRICT_KEY_ORDER"] is expected


def test_environment_ignores_unknown_and_unprefixed_keys():
    s = Settings(environ={"LLMWIRE_NOPE": "1", "TRACING_ENABLED": "false"})
    assert "NOPE" not in s
    assert s["TRACING_ENABLED"] is True


def test_invalid_environment_value_raises():
    with pytest.raises(ValueError, match="LLMWIRE_TRACING_ENABLED"):
        Settings(environ={"LLMWIRE_TRACING_ENABLED": "maybe"})


def test_setitem_and_delitem_touch_only_override_layer():
    s = Settings(environ={})
    s["ENCODER_SORT_KEYS"] = 1
    assert s["ENCODER_SORT_KEYS"] is True
    del s["ENCODER_SORT_KEYS"]
    assert s["ENCODER_SORT_KEYS"] is False
    assert DEFAULTS["ENCODER_SORT_KEYS"] is False


def test_unknown_key_raises_key_error():
    s = Settings(environ={})
    with pytest.raises(KeyError):
        s["NOPE"]
    with pytest.raises(KeyError):
        s["NOPE"] = True


def test_reset_drops_overrides_but_keeps_environment():
    s = Settings(environ={"LLMWIRE_TRACING_ENABLED": "false"})
    s["STRICT_KEY_ORDER"] = False
    s["TRACING_ENABLED"] = True
    s.reset()
    assert s["STRICT_KEY_ORDER"] is True
    assert s["TRACING_ENABLED"] is False


def test_module_settings_instance_is_shared():
    from llmwire.conf.settings import settings as same
    assert same is settings
