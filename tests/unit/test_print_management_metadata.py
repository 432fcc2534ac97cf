"""Tests for scripts/print_management_metadata.py."""

from unittest.mock import patch

import orjson
import pytest
from scripts.print_management_metadata import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_OK,
    EXIT_PORT_UNASSIGNED,
    main,
)


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("scripts.print_management_metadata.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def configured_env(monkeypatch):
    monkeypatch.setenv("INSTANCE_HOSTNAME", "host")
    monkeypatch.setenv("SERVER_PORT", "8080")
    monkeypatch.setenv("SERVER_CONTEXT_PATH", "/app")


class TestMain:
    def test_prints_urls(self, configured_env, capsys):
        assert main([]) == EXIT_OK

        out = capsys.readouterr().out
        assert "http://host:8080/app/actuator/health" in out
        assert "http://host:8080/app/actuator/info" in out
        assert "managementPort:       8080" in out
        assert "secureHealthCheckUrl" not in out

    def test_prints_secure_url_when_enabled(self, configured_env, monkeypatch, capsys):
        monkeypatch.setenv("INSTANCE_SECURE_PORT_ENABLED", "yes")

        assert main([]) == EXIT_OK

        assert "https://host:8080/app/actuator/health" in capsys.readouterr().out

    def test_prints_json(self, configured_env, monkeypatch, capsys):
        monkeypatch.setenv("MANAGEMENT_PORT", "9000")

        assert main(["--json"]) == EXIT_OK

        payload = orjson.loads(capsys.readouterr().out)
        assert payload == {
            "health_check_url": "http://host:9000/actuator/health",
            "status_page_url": "http://host:9000/actuator/info",
            "management_port": 9000,
        }

    def test_unassigned_port(self, configured_env, monkeypatch, capsys):
        monkeypatch.setenv("MANAGEMENT_PORT", "0")

        assert main([]) == EXIT_PORT_UNASSIGNED
        assert capsys.readouterr().out == ""

    def test_configuration_error(self, configured_env, monkeypatch):
        monkeypatch.setenv("INSTANCE_HOSTNAME", "bad host")

        assert main([]) == EXIT_CONFIGURATION_ERROR

    def test_verbose_flag_controls_logging(self, configured_env, no_logging_setup):
        main(["--verbose"])

        no_logging_setup.assert_called_once_with(user_friendly=False)
