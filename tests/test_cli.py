"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner
from graphql import parse, print_ast

from gql_inline.cli import main
from gql_inline.core.compiler import CompileResult, RelayCompiler
from gql_inline.core.errors import CompilerError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def operations_file(tmp_path, navigation_operations):
    path = tmp_path / "operations.graphql"
    path.write_text(navigation_operations)
    return path


class TestInlineCommand:
    """Tests for `gql-inline inline`."""

    def test_prints_inlined_document(self, runner, operations_file):
        result = runner.invoke(main, ["inline", str(operations_file)])
        assert result.exit_code == 0
        assert "timesheets_protected" in result.output
        assert "fragment" not in result.output

    def test_writes_output_file(self, runner, operations_file, tmp_path):
        output = tmp_path / "out" / "inlined.graphql"
        result = runner.invoke(main, ["inline", str(operations_file), "-o", str(output)])
        assert result.exit_code == 0
        assert print_ast(parse(output.read_text())).startswith("query NavigationQuery")

    def test_json_success(self, runner, operations_file):
        result = runner.invoke(main, ["inline", str(operations_file), "--json"])
        payload = json.loads(result.output)
        assert result.exit_code == 0
        assert payload["success"] is True
        assert "error" not in payload

    def test_json_failure(self, runner, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("query Q { ...Missing }")
        result = runner.invoke(main, ["inline", str(path), "--json"])
        payload = json.loads(result.output)
        assert result.exit_code == 1
        assert payload == {"success": False, "error": 'Fragment "Missing" not found'}

    def test_syntax_error(self, runner, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("query Q {")
        result = runner.invoke(main, ["inline", str(path)])
        assert result.exit_code == 1
        assert "Syntax Error" in result.output


class TestSplitCommand:
    """Tests for `gql-inline split`."""

    def test_writes_grouped_files(self, runner, operations_file, tmp_path):
        output = tmp_path / "src"
        result = runner.invoke(main, ["split", str(operations_file), "-o", str(output)])
        assert result.exit_code == 0
        assert sorted(p.name for p in output.iterdir()) == [
            "Navigation.js",
            "PermissionsProvider.js",
        ]
        assert (output / "Navigation.js").read_text().startswith("graphql`query NavigationQuery")

    def test_typescript(self, runner, operations_file, tmp_path):
        output = tmp_path / "src"
        result = runner.invoke(
            main, ["split", str(operations_file), "-o", str(output), "-l", "typescript"]
        )
        assert result.exit_code == 0
        assert (output / "Navigation.ts").exists()

    def test_unmatched_brace(self, runner, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("query A { a")
        result = runner.invoke(main, ["split", str(path), "-o", str(tmp_path / "src")])
        assert result.exit_code == 1
        assert "No matching closing brace found for definition A" in result.output


class TestCompileCommand:
    """Tests for `gql-inline compile`."""

    @pytest.fixture
    def schema_file(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query { current_user: users } type users { id: ID }")
        return path

    def test_writes_artifacts(self, runner, monkeypatch, schema_file, operations_file, tmp_path):
        def compile(self, schema, operations):
            return CompileResult(stdout="", stderr="", results={"A.graphql.js": "artifact"})

        monkeypatch.setattr(RelayCompiler, "compile", compile)
        output = tmp_path / "generated"
        result = runner.invoke(
            main,
            ["compile", "-s", str(schema_file), "-p", str(operations_file), "-o", str(output)],
        )
        assert result.exit_code == 0
        assert (output / "A.graphql.js").read_text() == "artifact"

    def test_compiler_failure(self, runner, monkeypatch, schema_file, operations_file, tmp_path):
        def compile(self, schema, operations):
            raise CompilerError("Relay compiler exited with code 1", stderr="bad")

        monkeypatch.setattr(RelayCompiler, "compile", compile)
        result = runner.invoke(
            main,
            ["compile", "-s", str(schema_file), "-p", str(operations_file), "-o", str(tmp_path / "g")],
        )
        assert result.exit_code == 1
        assert "exited with code 1" in result.output
