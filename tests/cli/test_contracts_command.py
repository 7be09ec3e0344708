"""Tests for the contracts CLI command group."""

import json

from pagewire.cli.main import app


class TestContractsList:
    """Test suite for `pagewire contracts list`."""

    def test_list_table(self, runner, catalog_file):
        """Verify every component with a contract is listed."""
        # Act
        result = runner.invoke(app, ["-c", str(catalog_file), "contracts", "list"])

        # Assert
        assert result.exit_code == 0
        assert "Component contracts" in result.output
        for key in ("GenericFilters", "SalesOrdersTable", "CustomerDetails", "PagedTable"):
            assert key in result.output
        assert "CustomerSidebar" not in result.output

    def test_list_json(self, runner, catalog_file):
        """Verify JSON output lists names of provided and consumed namespaces."""
        # Act
        result = runner.invoke(app, ["-c", str(catalog_file), "contracts", "list", "--json"])

        # Assert
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        rows = {row["component_key"]: row for row in data["components"]}
        assert rows["SalesOrdersTable"]["provides"] == ["selection"]
        assert rows["SalesOrdersTable"]["consumes"] == ["filters"]
        assert rows["PagedTable"]["description"] == "Table with paging"
        assert data["load_failures"] == []

    def test_catalog_from_environment(self, runner, catalog_file, monkeypatch):
        """Verify PAGEWIRE_CATALOG is used when --catalog is not given."""
        # Arrange
        monkeypatch.setenv("PAGEWIRE_CATALOG", str(catalog_file))

        # Act
        result = runner.invoke(app, ["contracts", "list", "--json"])

        # Assert
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["components"]) == 4

    def test_missing_catalog(self, runner):
        """Verify a helpful error when no catalog is configured."""
        # Act
        result = runner.invoke(app, ["contracts", "list"])

        # Assert
        assert result.exit_code == 1
        assert "No component catalog configured" in result.output

    def test_invalid_log_level(self, runner, catalog_file, monkeypatch):
        """Verify bad configuration is reported before any command runs."""
        # Arrange
        monkeypatch.setenv("PAGEWIRE_LOG_LEVEL", "chatty")

        # Act
        result = runner.invoke(app, ["-c", str(catalog_file), "contracts", "list"])

        # Assert
        assert result.exit_code == 1
        assert "Invalid log_level" in result.output


class TestContractsShow:
    """Test suite for `pagewire contracts show`."""

    def test_show_contract(self, runner, catalog_file):
        """Verify provides and consumes schemas are displayed."""
        # Act
        result = runner.invoke(app, ["-c", str(catalog_file), "contracts", "show", "SalesOrdersTable"])

        # Assert
        assert result.exit_code == 0
        assert "Provides:" in result.output
        assert "selection: {rows: string[]}" in result.output
        assert "filters: {search?: string, status?: string[]}" in result.output

    def test_show_contract_json(self, runner, catalog_file):
        """Verify JSON output carries the full contract."""
        # Act
        result = runner.invoke(
            app, ["-c", str(catalog_file), "contracts", "show", "PagedTable", "--json"]
        )

        # Assert
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["component_key"] == "PagedTable"
        filters = data["contract"]["consumes"]["filters"]
        assert filters["kind"] == "object"
        assert sorted(filters["required"]) == ["page", "search"]

    def test_show_component_without_contract(self, runner, catalog_file):
        """Verify catalog members without a contract are reported as such."""
        # Act
        result = runner.invoke(
            app, ["-c", str(catalog_file), "contracts", "show", "CustomerSidebar", "--json"]
        )

        # Assert
        assert result.exit_code == 1
        assert json.loads(result.stdout) == {
            "error": "Failed to show contract: Component 'CustomerSidebar' has no contract"
        }

    def test_show_unknown_component(self, runner, catalog_file):
        """Verify unknown keys list the available components."""
        # Act
        result = runner.invoke(app, ["-c", str(catalog_file), "contracts", "show", "Nope", "--json"])

        # Assert
        assert result.exit_code == 1
        error = json.loads(result.stdout)["error"]
        assert "Unknown component 'Nope'" in error
        assert "GenericFilters" in error
