"""Pytest configuration and shared fixtures for the serini test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by hypothesis")


@pytest.fixture
def ini_file(tmp_path: Path) -> Path:
    """Provide a small INI document on disk.

    Returns
    -------
    Path
        Path to a UTF-8 file with a root section and one ``[database]`` section.

    """
    path = tmp_path / "config.ini"
    path.write_text(
        "name = My App\nport = 8080\n\n[database]\nhost = localhost\n; password =\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_ini() -> str:
    """Provide an INI document exercising comments, escapes and indentation.

    Returns
    -------
    str
        INI text with a root section and two named sections.

    """
    return """# Application settings
name = My App
port = 8080
motd = Welcome\\nto \\"My App\\" \\; enjoy

[database]
    host = localhost
    port = 5432
    ; password =

[cache]
ttl = 3600
enabled = true
"""
