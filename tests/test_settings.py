"""Tests for environment-driven settings."""

from pathlib import Path

from loopx.config import Settings, build_mirror
from loopx.storage import HttpMirror, NullMirror


class TestSettings:
    """Test Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.database_path.name == "progress.db"
        assert settings.mirror_url is None
        assert not settings.mirror_active
        assert settings.log_level == "INFO"

    def test_overrides(self, tmp_path):
        settings = Settings.from_env(
            {
                "LOOPX_DATA_DIR": str(tmp_path),
                "LOOPX_MIRROR_URL": "https://scores.example",
                "LOOPX_MIRROR_TIMEOUT": "2.5",
                "LOOPX_LOG_LEVEL": "debug",
            }
        )
        assert settings.database_path == tmp_path / "progress.db"
        assert settings.mirror_active
        assert settings.mirror_timeout == 2.5
        assert settings.log_level == "DEBUG"

    def test_db_path_wins(self, tmp_path):
        settings = Settings.from_env(
            {"LOOPX_DATA_DIR": str(tmp_path), "LOOPX_DB_PATH": "/srv/loopx.db"}
        )
        assert settings.database_path == Path("/srv/loopx.db")

    def test_feature_flag_disables_mirror(self):
        settings = Settings.from_env(
            {"LOOPX_MIRROR_URL": "https://scores.example", "LOOPX_MIRROR_ENABLED": "false"}
        )
        assert not settings.mirror_active


class TestBuildMirror:
    """Test mirror selection."""

    def test_disabled(self):
        assert isinstance(build_mirror(Settings()), NullMirror)

    async def test_enabled(self):
        mirror = build_mirror(Settings(mirror_url="https://scores.example"))
        assert isinstance(mirror, HttpMirror)
        assert mirror.base_url == "https://scores.example"
        await mirror.close()
