"""
Pytest configuration and shared fixtures for r4gen tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from r4gen.codegen import ControllerDefinition, GeneratorService
from r4gen.codegen.templates import CSharpPrinter
from r4gen.utils.config import Settings


# Settings fixtures
@pytest.fixture
def settings():
    """Default generator settings."""
    return Settings()


@pytest.fixture
def custom_settings():
    """Settings with a non-default namespace and helpers prefix."""
    return Settings(generated_namespace="Project.R4", helpers_prefix="Links")


# Service fixtures
@pytest.fixture
def service(settings):
    """Generator service with default settings."""
    return GeneratorService(settings)


@pytest.fixture
def printer(settings):
    """C# printer with default settings."""
    return CSharpPrinter(settings)


# Controller fixtures
@pytest.fixture
def mixed_controllers():
    """Root and area view-only controllers next to a regular controller."""
    return [
        ControllerDefinition(name="Shared"),
        ControllerDefinition(name="Shared", area="Admin"),
        ControllerDefinition(name="Shared", namespace="Project"),
    ]


@pytest.fixture
def application_controllers():
    """A small application: root and area controllers, real and view-only."""
    return [
        ControllerDefinition(name="Home", namespace="Shop.Controllers"),
        ControllerDefinition(name="Shared"),
        ControllerDefinition(name="Users", area="Admin", namespace="Shop.Areas.Admin.Controllers"),
        ControllerDefinition(name="Shared", area="Admin"),
        ControllerDefinition(name="Reports", area="Billing"),
        ControllerDefinition(name="Account", namespace="Shop.Controllers"),
    ]


@pytest.fixture
def controllers_file(tmp_path):
    """Controller metadata written to a JSON file."""
    path = tmp_path / "controllers.json"
    path.write_text(json.dumps([
        {"name": "Home", "namespace": "Shop.Controllers"},
        {"name": "Shared"},
        {"name": "Shared", "area": "Admin"},
        {"name": "Users", "area": "Admin", "namespace": "Shop.Areas.Admin.Controllers"},
    ]))
    return path


def pytest_collection_modifyitems(config, items):
    """Add markers based on test path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "filecheck" in str(item.fspath):
            item.add_marker(pytest.mark.filecheck)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "filecheck: FileCheck-style validation of generated C#"
    )
