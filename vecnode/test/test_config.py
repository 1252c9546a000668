import os
import sys
import logging
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

import pytest
from pydantic import ValidationError
from vecnode.config import EditorSettings, configure_logging, load_settings

ENV_VARS = ("VECNODE_LOG_LEVEL", "VECNODE_LOG_FORMAT", "VECNODE_NODE_SPACING")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores whatever load_dotenv writes later
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestEditorSettings:

    def setup_method(self):
        # Stub: Setup logic here
        pass

    def teardown_method(self):
        # Stub: Cleanup logic here
        pass

    def test_defaults(self):
        settings = EditorSettings()
        assert settings.log_level == "WARNING"
        assert settings.node_spacing == 180.0
        assert "%(message)s" in settings.log_format

    def test_log_level_is_normalised(self):
        assert EditorSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            EditorSettings(log_level="chatty")

    @pytest.mark.parametrize("spacing", [0, -10.0])
    def test_non_positive_spacing_rejected(self, spacing):
        with pytest.raises(ValidationError):
            EditorSettings(node_spacing=spacing)


class TestLoadSettings:

    def test_without_environment(self, clean_env):
        assert load_settings() == EditorSettings()

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("VECNODE_LOG_LEVEL", "info")
        clean_env.setenv("VECNODE_NODE_SPACING", "240")

        settings = load_settings()

        assert settings.log_level == "INFO"
        assert settings.node_spacing == 240.0

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("VECNODE_LOG_LEVEL=ERROR\nVECNODE_NODE_SPACING=90\n")

        settings = load_settings(str(env_file))

        assert settings.log_level == "ERROR"
        assert settings.node_spacing == 90.0

    def test_bad_environment_value(self, clean_env):
        clean_env.setenv("VECNODE_NODE_SPACING", "-1")
        with pytest.raises(ValidationError):
            load_settings()


class TestConfigureLogging:

    def test_configure_logging_sets_root_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(EditorSettings(log_level="debug"))

        assert calls == [{"level": "DEBUG", "format": EditorSettings().log_format}]
