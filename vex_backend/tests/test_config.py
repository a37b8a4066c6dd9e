"""
Tests for server settings.
"""

import pytest
from pydantic import ValidationError

from vex_backend.config import DEFAULT_LOG_FORMAT, ServerSettings


class TestServerSettings:
    """Test ServerSettings defaults and validation."""

    def test_defaults(self) -> None:
        settings = ServerSettings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.log_level == "INFO"
        assert settings.log_format == DEFAULT_LOG_FORMAT

    @pytest.mark.parametrize("port", ["8080", ":8080", " :8080 ", 8080])
    def test_port_forms(self, port: object) -> None:
        assert ServerSettings(port=port).port == 8080  # type: ignore

    @pytest.mark.parametrize("port", [-1, 65536, "http", ":", ""])
    def test_invalid_port(self, port: object) -> None:
        with pytest.raises(ValidationError):
            ServerSettings(port=port)  # type: ignore[arg-type]

    def test_port_zero_is_allowed(self) -> None:
        assert ServerSettings(port=0).port == 0

    @pytest.mark.parametrize("host", ["", "   "])
    def test_blank_host(self, host: str) -> None:
        with pytest.raises(ValidationError):
            ServerSettings(host=host)

    def test_log_level_is_upper_cased(self) -> None:
        assert ServerSettings(log_level=" debug ").log_level == "DEBUG"

    def test_is_immutable(self) -> None:
        settings = ServerSettings()

        with pytest.raises(ValidationError):
            settings.port = 9000  # type: ignore[misc]

    @pytest.mark.parametrize(
        "host,port,url",
        [
            ("127.0.0.1", 8080, "http://127.0.0.1:8080"),
            ("0.0.0.0", 80, "http://0.0.0.0:80"),
            ("localhost", 9000, "http://localhost:9000"),
            ("::1", 8080, "http://[::1]:8080"),
        ],
    )
    def test_url(self, host: str, port: int, url: str) -> None:
        assert ServerSettings(host=host, port=port).url == url


class TestFromEnv:
    """Test building settings from environment variables."""

    def test_empty_environment_gives_defaults(self) -> None:
        assert ServerSettings.from_env({}) == ServerSettings()

    def test_reads_all_variables(self) -> None:
        settings = ServerSettings.from_env(
            {
                "SERVER_HOST": "0.0.0.0",
                "SERVER_PORT": ":9090",
                "LOG_LEVEL": "warning",
                "LOG_FORMAT": "%(message)s",
            }
        )

        assert settings.host == "0.0.0.0"
        assert settings.port == 9090
        assert settings.log_level == "WARNING"
        assert settings.log_format == "%(message)s"

    def test_empty_values_are_ignored(self) -> None:
        settings = ServerSettings.from_env(
            {"SERVER_HOST": "", "SERVER_PORT": ""}
        )

        assert settings.host == "127.0.0.1"
        assert settings.port == 8080

    def test_unrelated_variables_are_ignored(self) -> None:
        settings = ServerSettings.from_env({"PORT": "1234", "HOST": "x"})

        assert settings == ServerSettings()

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ValidationError):
            ServerSettings.from_env({"SERVER_PORT": "not-a-port"})

    def test_defaults_to_process_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SERVER_HOST", "0.0.0.0")
        monkeypatch.setenv("SERVER_PORT", "8181")

        settings = ServerSettings.from_env()

        assert settings.host == "0.0.0.0"
        assert settings.port == 8181
