import pytest
from levellog.core.context import LogContext, default_context, get_minimum
from levellog.core.errors import InvalidLevelError
from levellog.core.levels import Level
from levellog.system.settings import LogSettings


def test_defaults():
    s = LogSettings()
    assert s.minimum == "TRACE"
    assert s.color is True


def test_normalize_coerces_bad_values():
    s = LogSettings(minimum="loud", color="yes").normalize()
    assert s.minimum == "TRACE"
    assert s.color is True


def test_normalize_strict_raises():
    with pytest.raises(InvalidLevelError):
        LogSettings(minimum="loud").normalize(strict=True)


def test_from_mapping_ignores_unknown_keys():
    s = LogSettings.from_mapping({"minimum": "warning", "color": False, "rotate": True})
    assert s.minimum == "WARN"
    assert s.color is False


def test_apply_to_default_context():
    LogSettings(minimum="error").apply()
    assert get_minimum() is Level.ERROR


def test_apply_to_own_context_leaves_default_alone():
    ctx = LogContext()
    LogSettings(minimum="fatal", color=False).apply(ctx)
    assert ctx.minimum is Level.FATAL and ctx.color is False
    assert default_context.minimum is Level.TRACE
