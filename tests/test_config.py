"""Tests for sdklog.config - layered configuration resolution."""

import json

import pytest

from sdklog import Channel, InvalidChannel, LoggerConfig, MultilineMode
from sdklog.config import config_from_env, load_json, resolve_config


# ---------------------------------------------------------------------------
# LoggerConfig
# ---------------------------------------------------------------------------
class TestLoggerConfig:

    def test_defaults(self):
        config = LoggerConfig().validate()
        assert config.level is Channel.INFO
        assert config.prefix == ""
        assert config.indent == 0
        assert config.multiline is MultilineMode.INLINE
        assert config.indent_when_suppressed is True

    def test_validate_returns_copy(self):
        config = LoggerConfig(level='warn')
        validated = config.validate()
        assert validated is not config
        assert config.level == 'warn'
        assert validated.level is Channel.WARN

    def test_invalid_level(self):
        with pytest.raises(InvalidChannel):
            LoggerConfig(level='loud').validate()

    @pytest.mark.parametrize("indent", ["2", 1.5, True, None])
    def test_invalid_indent(self, indent):
        with pytest.raises(ValueError, match="indent"):
            LoggerConfig(indent=indent).validate()

    def test_invalid_multiline(self):
        with pytest.raises(ValueError, match="multiline"):
            LoggerConfig(multiline='sideways').validate()

    def test_none_prefix_normalized(self):
        assert LoggerConfig(prefix=None).validate().prefix == ""

    def test_from_mapping_ignores_unknown_keys(self):
        config = LoggerConfig.from_mapping({'level': 'debug', 'colour': 'red'})
        assert config.level == 'debug'


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------
class TestLoadJson:

    def test_missing_file(self, tmp_path):
        assert load_json(tmp_path / "missing.json") == {}

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_json(path) == {}

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_json(path) == {}

    def test_object(self, tmp_path):
        path = tmp_path / "ok.json"
        path.write_text(json.dumps({"level": "log"}), encoding="utf-8")
        assert load_json(path) == {"level": "log"}


class TestConfigFromEnv:

    def test_empty(self):
        assert config_from_env({}) == {}

    def test_values(self):
        env = {
            "SDKLOG_LEVEL": "debug",
            "SDKLOG_PREFIX": "ci",
            "SDKLOG_INDENT": "4",
            "SDKLOG_MULTILINE": "below",
            "SDKLOG_INDENT_WHEN_SUPPRESSED": "no",
            "UNRELATED": "x",
        }
        assert config_from_env(env) == {
            "level": "debug",
            "prefix": "ci",
            "indent": 4,
            "multiline": "below",
            "indent_when_suppressed": False,
        }

    def test_bad_indent(self):
        with pytest.raises(ValueError, match="SDKLOG_INDENT"):
            config_from_env({"SDKLOG_INDENT": "two"})


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------
class TestResolveConfig:

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "sdklog.json"
        path.write_text(json.dumps({
            "level": "log", "prefix": "file", "indent": 2,
        }), encoding="utf-8")
        return path

    def test_defaults_only(self):
        config = resolve_config(environ={})
        assert config.level is Channel.INFO

    def test_file_layer(self, config_file):
        config = resolve_config(path=config_file, environ={})
        assert config.level is Channel.LOG
        assert config.prefix == "file"
        assert config.indent == 2

    def test_env_beats_file(self, config_file):
        config = resolve_config(path=config_file,
                                environ={"SDKLOG_LEVEL": "warn"})
        assert config.level is Channel.WARN
        assert config.prefix == "file"

    def test_overrides_beat_env(self, config_file):
        config = resolve_config({"level": "trace", "prefix": None},
                                path=config_file,
                                environ={"SDKLOG_LEVEL": "warn",
                                         "SDKLOG_PREFIX": "env"})
        assert config.level is Channel.TRACE
        assert config.prefix == "env"

    def test_uses_os_environ(self, monkeypatch):
        monkeypatch.setenv("SDKLOG_LEVEL", "error")
        assert resolve_config().level is Channel.ERROR
