"""
Tests for application settings.
"""

from userapi.core.config import Settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults_bind_all_interfaces_on_3000(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("USERAPI_PORT", "8080")
        monkeypatch.setenv("USERAPI_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.log_level == "DEBUG"

    def test_rate_limiting_off_by_default(self) -> None:
        assert Settings(_env_file=None).rate_limit_enabled is False
