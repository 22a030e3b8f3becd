"""Tests for package.json parsing."""

import pytest

from core.errors import MalformedManifestError
from core.models import Manifest
from core.parse_node import parse_package_json, read_manifest


class TestPackageJsonParser:
    """Test package.json parsing."""

    def test_parse_dependencies(self, sample_package_json):
        """Should parse both dependency groups."""
        manifest = parse_package_json(sample_package_json)

        assert isinstance(manifest, Manifest)
        assert manifest.ecosystem == "node"
        assert manifest.raw == sample_package_json
        assert manifest.names("dependencies") == {"express", "lodash"}
        assert manifest.names("devDependencies") == {"eslint"}

    def test_entries_keep_file_order(self, sample_package_json):
        """Entries come out in file order, dependencies first."""
        manifest = parse_package_json(sample_package_json)

        assert [entry.name for entry in manifest.entries] == ["express", "lodash", "eslint"]
        assert manifest.entries[0].spec == "^4.18.0"
        assert manifest.entries[2].group == "devDependencies"

    def test_missing_fields_are_empty(self):
        """Absent dependency fields are treated as empty."""
        manifest = parse_package_json('{"name": "bare"}')
        assert manifest.entries == []

    def test_null_field_is_empty(self):
        """A null dependency field is treated as empty."""
        manifest = parse_package_json('{"dependencies": null, "devDependencies": {"x": "1.0.0"}}')
        assert manifest.names("dependencies") == set()
        assert manifest.names("devDependencies") == {"x"}

    def test_non_string_spec(self):
        """Non-string specifiers keep the name but drop the spec."""
        manifest = parse_package_json('{"dependencies": {"odd": 1}}')
        assert manifest.entries[0].name == "odd"
        assert manifest.entries[0].spec is None

    def test_invalid_json(self):
        """Should raise MalformedManifestError for invalid JSON."""
        with pytest.raises(MalformedManifestError, match="Invalid JSON"):
            parse_package_json('{"dependencies": ')

    def test_top_level_not_object(self):
        """Top-level arrays are rejected."""
        with pytest.raises(MalformedManifestError, match="JSON object"):
            parse_package_json('["express"]')

    def test_field_not_object(self):
        """A dependency field must be an object."""
        with pytest.raises(MalformedManifestError, match="devDependencies"):
            parse_package_json('{"devDependencies": ["jest"]}')

    def test_malformed_is_value_error(self):
        """Callers catching ValueError still see parse failures."""
        with pytest.raises(ValueError):
            parse_package_json("not json")

    def test_read_manifest(self, project_dir):
        """Should read a manifest from disk and remember its path."""
        path = project_dir / "package.json"
        manifest = read_manifest(path)

        assert manifest.path == path
        assert "express" in manifest.names("dependencies")

    def test_read_manifest_error_mentions_path(self, tmp_path):
        """Errors from files include the file path."""
        path = tmp_path / "package.json"
        path.write_text("{oops")

        with pytest.raises(MalformedManifestError) as exc_info:
            read_manifest(path)

        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_read_manifest_invalid_utf8(self, tmp_path):
        """Undecodable bytes are reported as a malformed manifest."""
        path = tmp_path / "package.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(MalformedManifestError, match="Invalid UTF-8") as exc_info:
            read_manifest(path)

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
