import pytest

from management_metadata.exceptions import ApplicationError, ConfigurationError


def test_default_message():
    assert str(ConfigurationError()) == "Configuration is invalid or missing"


def test_keyword_context_becomes_attributes():
    err = ConfigurationError("bad", field="x", value=123)
    assert isinstance(err, ApplicationError)
    assert (err.field, err.value) == ("x", 123)


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (
            ConfigurationError.invalid_value,
            ("SERVER_PORT", 70000, "Port must be between 0 and 65535"),
            "Invalid value for SERVER_PORT: 70000. Port must be between 0 and 65535",
        ),
        (ConfigurationError.invalid_value, ("name", 5), "Invalid value for name: 5"),
        (ConfigurationError.missing_value, ("param", "context"), "param is missing or empty: context"),
        (ConfigurationError.missing_value, ("param",), "param is missing or empty"),
    ],
)
def test_configuration_error_factories(factory, args, expected):
    exc = factory(*args)
    assert isinstance(exc, ConfigurationError)
    assert str(exc) == expected


def test_url_construction_failed_message():
    exc = ConfigurationError.url_construction_failed("http", "host", 8080, "/app", "/health")

    assert str(exc) == (
        "Failed to construct url for scheme: http, hostName: host port: 8080 "
        "contextPath: /app statusPath: /health"
    )
    assert exc.context_path == "/app"
    assert exc.sub_path == "/health"


def test_url_construction_failed_appends_reason():
    exc = ConfigurationError.url_construction_failed("http", "", 8080, "/", "/", reason="hostname is empty")
    assert str(exc).endswith("(hostname is empty)")
