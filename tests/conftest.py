"""
Pytest configuration and fixtures for formcheck tests

This module provides shared fixtures for unit and integration tests.
"""
from pathlib import Path
from typing import Callable

import pytest
import yaml

from formcheck.core.rules import DirectorRegistry, FieldPolicy


ENV_VARS = (
    "LOG_LEVEL",
    "LOG_FORMAT",
    "FORMCHECK_RECIPES_PATH",
    "FORMCHECK_FIELDS_PATH",
    "METRICS_PORT",
)


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise config, policy and pipeline together"
    )


# =======================
# RULE FIXTURES
# =======================

@pytest.fixture
def registry() -> DirectorRegistry:
    """Registry with the built-in username and password recipes"""
    return DirectorRegistry()


@pytest.fixture
def signup_policy() -> FieldPolicy:
    """Policy for a signup form: username and password mandatory, bio optional"""
    return (
        FieldPolicy()
        .mandatory("username", "username")
        .mandatory("password", "password")
        .optional("bio")
    )


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def write_yaml(tmp_path) -> Callable[[dict, str], Path]:
    """
    Write a mapping to a YAML file under tmp_path

    Returns:
        Function taking (content, filename) and returning the file path
    """
    def _write(content: dict, filename: str = "config.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(yaml.safe_dump(content, sort_keys=False))
        return path

    return _write


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example signup configuration shipped in config/"""
    return Path(__file__).resolve().parent.parent / "config" / "fields.yaml"


# =======================
# ENVIRONMENT FIXTURES
# =======================

@pytest.fixture
def clean_env(monkeypatch):
    """
    Remove formcheck environment variables for the duration of a test

    Variables set during the test (e.g. by load_dotenv) are removed again
    afterwards.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
