"""Tests for runtime entrypoint commands and application bootstrap."""

import json

import pytest
from fastapi.testclient import TestClient

from app.bootstrap import bootstrap_create_application
from app.config import config_load_settings
from app.main import main

_REQUIRED_ENVIRONMENT = {
    "POSTGRES_USER": "postgres",
    "POSTGRES_PASSWORD": "postgres",
    "POSTGRES_DB": "app",
    "POSTGRES_HOST": "localhost",
    "POSTGRES_PORT": "5432",
    "REDIS_HOST": "localhost",
    "REDIS_PORT": "6379",
    "JWT_SECRET": "test-secret-value",
}


@pytest.fixture
def required_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Populate required variables and isolate from any local `.env` file.

    Returns:
        pytest.MonkeyPatch: Monkeypatch fixture for further overrides.
    """

    monkeypatch.chdir(tmp_path)
    for variable_name, variable_value in _REQUIRED_ENVIRONMENT.items():
        monkeypatch.setenv(variable_name, variable_value)
    return monkeypatch


def test_main_exits_with_status_1_on_invalid_configuration(required_environment: pytest.MonkeyPatch) -> None:
    """Terminate immediately when required configuration is absent.

    Returns:
        None: Assertions validate fail-fast exit.

    Raises:
        AssertionError: Raised when the process would keep running.
    """

    required_environment.delenv("JWT_SECRET")

    with pytest.raises(SystemExit) as exit_info:
        main(["token-issue", "--subject", "user-42"])

    assert exit_info.value.code == 1


def test_main_token_commands_issue_and_verify(
    required_environment: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Issue a token and verify it back through the CLI.

    Returns:
        None: Assertions validate CLI token flow.

    Raises:
        AssertionError: Raised when claims differ.
    """

    _ = required_environment
    main(["token-issue", "--subject", "user-42", "--role", "admin"])
    token = capsys.readouterr().out.strip()

    main(["token-verify", "--token", token])
    claims = json.loads(capsys.readouterr().out)

    assert claims["sub"] == "user-42"
    assert claims["role"] == "admin"
    assert "email" not in claims


def test_main_token_verify_exits_with_status_1_for_invalid_token(required_environment: pytest.MonkeyPatch) -> None:
    """Exit with status 1 when the token does not verify.

    Returns:
        None: Assertions validate CLI rejection.

    Raises:
        AssertionError: Raised when an invalid token is accepted.
    """

    _ = required_environment
    with pytest.raises(SystemExit) as exit_info:
        main(["token-verify", "--token", "not-a-token"])

    assert exit_info.value.code == 1


def test_bootstrap_create_application_serves_health_for_unreachable_stores(
    required_environment: pytest.MonkeyPatch,
) -> None:
    """Serve a structured `error` report with HTTP 200 when neither store accepts connections.

    Returns:
        None: Assertions validate the fully wired health endpoint.

    Raises:
        AssertionError: Raised when the endpoint fails or the payload differs.
    """

    required_environment.setenv("POSTGRES_HOST", "127.0.0.1")
    required_environment.setenv("POSTGRES_PORT", "1")
    required_environment.setenv("REDIS_HOST", "127.0.0.1")
    required_environment.setenv("REDIS_PORT", "1")
    required_environment.setenv("HEALTH_PROBE_TIMEOUT_SECONDS", "0.5")
    application = bootstrap_create_application(config_load_settings())

    with TestClient(application) as client:
        root_response = client.get("/")
        health_response = client.get("/api/v1/health")

    assert root_response.status_code == 200
    assert health_response.status_code == 200
    assert health_response.json() == {"status": "error", "postgres": False, "redis": False}
