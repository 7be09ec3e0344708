"""Tests for the check CLI command."""

import json

import pytest

from pagewire.cli.main import app


@pytest.fixture
def schema_files(tmp_path):
    """Provided and consumed filter schemas in both file formats."""
    provides = tmp_path / "provides.yaml"
    provides.write_text("search: string\nstatus: string[]\n")
    tolerant = tmp_path / "tolerant.json"
    tolerant.write_text(json.dumps({"search?": "string", "region?": "string"}))
    paged = tmp_path / "paged.yaml"
    paged.write_text("search: string\npage: integer\n")
    return provides, tolerant, paged


class TestCheckCommand:
    """Test suite for `pagewire check`."""

    def test_compatible_schemas(self, runner, schema_files):
        """Verify compatible schemas exit 0 and show each consumed property."""
        # Arrange
        provides, tolerant, _ = schema_files

        # Act
        result = runner.invoke(app, ["check", str(provides), str(tolerant)])

        # Assert
        assert result.exit_code == 0
        assert "Schemas are compatible" in result.output
        assert "region" in result.output

    def test_incompatible_schemas(self, runner, schema_files):
        """Verify a missing required property fails the check."""
        # Arrange
        provides, _, paged = schema_files

        # Act
        result = runner.invoke(app, ["check", str(provides), str(paged)])

        # Assert
        assert result.exit_code == 1
        assert 'Required property "page" is missing' in result.output

    def test_json_output(self, runner, schema_files):
        """Verify JSON output carries per-property statuses."""
        # Arrange
        provides, tolerant, _ = schema_files

        # Act
        result = runner.invoke(app, ["check", str(provides), str(tolerant), "--json"])

        # Assert
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["compatible"] is True
        assert [(d["property"], d["status"]) for d in data["details"]] == [
            ("search", "compatible"),
            ("region", "optional-missing"),
        ]

    def test_invalid_schema_document(self, runner, schema_files, tmp_path):
        """Verify unparseable schemas are reported without a traceback."""
        # Arrange
        provides, _, _ = schema_files
        bad = tmp_path / "bad.yaml"
        bad.write_text("search: strnig\n")

        # Act
        result = runner.invoke(app, ["check", str(provides), str(bad), "--json"])

        # Assert
        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"].startswith("Failed to check schemas:")

    def test_check_needs_no_catalog(self, runner, schema_files):
        """Verify the check command works without a configured catalog."""
        # Arrange
        provides, _, _ = schema_files

        # Act
        result = runner.invoke(app, ["check", str(provides), str(provides), "--json"])

        # Assert
        assert result.exit_code == 0
        assert json.loads(result.stdout)["summary"] == "Schemas are compatible"
