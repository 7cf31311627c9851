"""
Unit tests for environment-driven Settings.
"""

import pytest

from headshot_gateway.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        settings = Settings(_env_file=None)
        assert settings.gemini_model == "gemini-2.5-flash-image-preview"
        assert settings.upload_max_bytes == 10 * 1024 * 1024
        assert settings.credential_configured is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        monkeypatch.setenv("UPLOAD_MAX_SIZE_MB", "5")
        monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "30")
        settings = Settings(_env_file=None)
        assert settings.gemini_api_key == "from-env"
        assert settings.credential_configured is True
        assert settings.upload_max_bytes == 5 * 1024 * 1024
        assert settings.upstream_timeout_seconds == 30.0

    def test_blank_key_is_not_configured(self) -> None:
        assert Settings(gemini_api_key="   ", _env_file=None).credential_configured is False

    @pytest.mark.parametrize(
        "origins, expected",
        [
            ("*", ["*"]),
            ("http://a.test, http://b.test", ["http://a.test", "http://b.test"]),
            ("http://a.test,*", ["*"]),
        ],
    )
    def test_cors_origin_list(self, origins: str, expected: list[str]) -> None:
        assert Settings(cors_origins=origins, _env_file=None).cors_origin_list == expected
