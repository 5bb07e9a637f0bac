"""
Tests for the distribution layout declared in pyproject.toml.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@pytest.fixture
def package_find():
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["tool"]["setuptools"]["packages"]["find"]


def test_service_packages_installed(package_find):
    assert "shared*" in package_find["include"]
    assert "service_events*" in package_find["include"]


def test_mocks_and_tests_not_installed(package_find):
    assert not any(p.startswith("mocks") for p in package_find["include"])
    assert "mocks*" in package_find["exclude"]
    assert "*tests*" in package_find["exclude"]
