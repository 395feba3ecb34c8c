"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from cmseditlink import (
    AdminSectionRegistry,
    EditLinkConfig,
    LinkScaffolder,
    ModelAdminSection,
    RecordBase,
)


def pytest_configure(config):
    for marker in ("unit", "link", "section", "record", "config", "utils"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Records
# =============================================================================


class Group(RecordBase):
    pass


class Member(RecordBase):
    pass


class Library(RecordBase):
    __namespace__ = "App\\Model"


class Book(RecordBase):
    __namespace__ = "App\\Model"


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Return a config with one section per sample record domain."""
    return {
        "admin_url_base": "admin",
        "sections": [
            {
                "name": "security",
                "url_segment": "security",
                "managed_models": ["Group"],
            },
            {
                "name": "library",
                "url_segment": "library",
                "managed_models": {"App\\Model\\Library": "Libraries"},
                "model_tabs": True,
            },
        ],
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def group() -> Group:
    return Group(2)


@pytest.fixture
def member() -> Member:
    return Member(2)


@pytest.fixture
def library() -> Library:
    return Library(1)


@pytest.fixture
def book() -> Book:
    return Book(7)


@pytest.fixture
def security_section() -> ModelAdminSection:
    """Section mounted at 'security' (no admin prefix) that manages groups."""
    return ModelAdminSection("security", "security", ["Group"])


@pytest.fixture
def registry(security_section: ModelAdminSection) -> AdminSectionRegistry:
    return AdminSectionRegistry([security_section])


@pytest.fixture
def scaffolder(registry: AdminSectionRegistry) -> LinkScaffolder:
    return LinkScaffolder(registry)


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Write the minimal config and point CMSEDITLINK_CONFIG at it."""
    config_path = tmp_path / "cmseditlink.json"
    config_path.write_text(json.dumps(minimal_config_dict))
    monkeypatch.setenv("CMSEDITLINK_CONFIG", str(config_path))
    return config_path


@pytest.fixture
def minimal_edit_link_config(minimal_config_dict: dict) -> EditLinkConfig:
    return EditLinkConfig(**minimal_config_dict)
