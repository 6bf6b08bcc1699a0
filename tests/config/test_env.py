from __future__ import annotations

import os

import pytest

from nowplaying.config import (
    ConfigurationError,
    MissingConfigurationError,
    optional_env_var,
    optional_float_env_var,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRESENT_VAR", "value")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["PRESENT_VAR", "MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)
    assert "PRESENT_VAR" not in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_require_env_var_strips_whitespace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMP_VAR", " 123 ")

    assert os.getenv("TEMP_VAR") == " 123 "
    assert require_env_var("TEMP_VAR") == "123"


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLANK_VAR", "  ")
    monkeypatch.delenv("UNSET_VAR", raising=False)

    assert optional_env_var("BLANK_VAR") is None
    assert optional_env_var("UNSET_VAR") is None


def test_optional_float_env_var_parses_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMEOUT_VAR", "2.5")

    assert optional_float_env_var("TIMEOUT_VAR") == 2.5


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_optional_float_env_var_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("TIMEOUT_VAR", raw)

    with pytest.raises(ConfigurationError, match="TIMEOUT_VAR"):
        optional_float_env_var("TIMEOUT_VAR")
