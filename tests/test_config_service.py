"""Test JSON configuration loading."""

import json

import pytest

from services.impl.config_service import ConfigService


def test_dot_notation_access(configFile, tmp_path):
    """Nested keys are reachable with dot notation."""
    config = ConfigService(str(configFile))

    assert config.getAppName() == "PxSort"
    assert config.get("storage.pngCompression") == 6
    assert config.getPngCompression() == 6
    assert config.getMaxWorkers() == 3
    assert config.getPicturesDirectory() == str(tmp_path / "Pictures")
    assert config.get("storage.missing.deeper", "fallback") == "fallback"
    assert config.get("app.name.length") is None
    assert config.getServiceConfig("worker") == {"maxWorkers": 3}
    assert config.getServiceConfig("nothing") == {}


def test_defaults_for_missing_sections(tmp_path):
    """Absent settings fall back to defaults."""
    path = tmp_path / "empty.json"
    path.write_text("{}", encoding="utf-8")

    config = ConfigService(str(path))

    assert config.getAppName() == "MediaStore"
    assert config.getPngCompression() == 9
    assert config.getMaxWorkers() == 2
    assert config.getDebugBasePath() == "output/debug"
    assert config.isDebugEnabled() is False
    assert config.getPicturesDirectory().endswith("Pictures")


def test_debug_toggle(tmp_path):
    """Debug state is read from config and can be changed at runtime."""
    path = tmp_path / "debug.json"
    path.write_text(json.dumps({"debug": {"enabled": True}}), encoding="utf-8")

    config = ConfigService(str(path))
    assert config.isDebugEnabled() is True

    config.setDebugEnabled(False)
    assert config.isDebugEnabled() is False


@pytest.mark.parametrize("content", [None, "{not json", "[1, 2, 3]"])
def test_unloadable_config_raises(tmp_path, content):
    """Missing, malformed or non-object configs fail construction."""
    path = tmp_path / "config.json"
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with pytest.raises(RuntimeError):
        ConfigService(str(path))
