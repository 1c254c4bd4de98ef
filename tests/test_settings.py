"""Unit tests for configuration loading."""

from pathlib import Path

from train_finder.config import load_settings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self):
        """Without environment the data file is data.json."""
        settings = load_settings()
        assert settings.data_file == Path("data.json")
        assert settings.log_level == "WARNING"

    def test_environment(self, monkeypatch, tmp_path):
        """Environment variables override the defaults."""
        monkeypatch.setenv("TRAINS_DATA_FILE", str(tmp_path / "trains.json"))
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.data_file == tmp_path / "trains.json"
        assert settings.log_level == "DEBUG"

    def test_argument_wins(self, monkeypatch, tmp_path):
        """An explicit data file beats the environment."""
        monkeypatch.setenv("TRAINS_DATA_FILE", "ignored.json")
        assert load_settings(data_file=tmp_path / "x.json").data_file == tmp_path / "x.json"
