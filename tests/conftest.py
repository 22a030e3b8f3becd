"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "dependencies": {
    "express": "^4.18.0",
    "lodash": "~4.17.21"
  },
  "devDependencies": {
    "eslint": "^8.0.0"
  }
}
"""


@pytest.fixture
def write_manifest():
    """Write a package.json into a directory and return its path."""

    def _write(directory, data):
        directory.mkdir(parents=True, exist_ok=True)
        manifest = directory / "package.json"
        manifest.write_text(data if isinstance(data, str) else json.dumps(data))
        return manifest

    return _write


@pytest.fixture
def project_dir(tmp_path, sample_package_json):
    """Create a project with a package.json and a nested source directory."""
    (tmp_path / "project" / "src" / "lib").mkdir(parents=True)
    (tmp_path / "project" / "package.json").write_text(sample_package_json)
    return tmp_path / "project"
