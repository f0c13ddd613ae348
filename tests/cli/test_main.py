"""Tests for the CLI commands."""

import json
import os

import pytest

from src.cli.main import main

SETTINGS = ("MAX_SCHEMA_DEPTH", "RESPONSE_USAGE_MATCH", "SHOW_ANOMALIES", "SHOW_INLINE_SCHEMAS")

SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Test API", "version": "1.0.0"},
    "paths": {
        "/a": {
            "get": {
                "parameters": [{"name": "ids", "in": "query", "schema": {"type": "array", "items": {"type": "object"}}}],
                "responses": {
                    "200": {
                        "description": "ok",
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/A"}}},
                    }
                },
            }
        }
    },
    "components": {
        "schemas": {
            "A": {"type": "object"},
            "B": {"type": "string", "enum": ["x", "y"]},
            "C": {"type": "boolean"},
            "Alias": {"$ref": "#/components/schemas/A"},
        }
    },
}


@pytest.fixture
def spec_file(tmp_path):
    saved = {name: os.environ.pop(name) for name in SETTINGS if name in os.environ}
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(SPEC))
    yield path
    for name in SETTINGS:
        os.environ.pop(name, None)
    os.environ.update(saved)


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / "audit.env"
    path.write_text("")
    return path


class TestCli:
    """Test cases for the component-audit CLI."""

    def test_audit_prints_findings(self, spec_file, env_file, capsys):
        """Test the human-readable audit report."""
        main(["audit", str(spec_file), "--config", str(env_file)])

        lines = capsys.readouterr().out.splitlines()
        assert "Schema B is never used" in lines
        assert "Schema C is never used" in lines
        assert "Schema A is never used" not in lines
        assert "Unexpected schema reference Alias => #/components/schemas/A" in lines

    def test_audit_inline_schemas(self, spec_file, tmp_path, capsys):
        """Test that inline complex schemas are shown when enabled."""
        env_file = tmp_path / "inline.env"
        env_file.write_text("SHOW_INLINE_SCHEMAS=true\nSHOW_ANOMALIES=false\n")

        main(["audit", str(spec_file), "--config", str(env_file)])

        out = capsys.readouterr().out
        assert "Inline complex parameter schema for ids in GET /a" in out
        assert "Unexpected schema reference" not in out

    def test_audit_json(self, spec_file, env_file, capsys):
        """Test the JSON audit report."""
        main(["audit", str(spec_file), "--config", str(env_file), "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data["unused"]["schemas"] == ["B", "C"]
        assert data["anomalies"][0]["location"] == "Alias"

    def test_classify(self, spec_file, env_file, capsys):
        """Test the classify command."""
        main(["classify", str(spec_file), "--config", str(env_file)])

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["schemas complex: A", "schemas complex: B", "schemas simple: C"]

    def test_missing_file_exits(self, env_file, tmp_path):
        """Test that an unreadable document exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["audit", str(tmp_path / "missing.json"), "--config", str(env_file)])

        assert exc_info.value.code == 1

    def test_no_command_prints_help(self, capsys):
        """Test running without a command."""
        main([])

        assert "component-audit" in capsys.readouterr().out

    def test_anomalies_are_reported_once(self, spec_file, env_file, capsys):
        """Test that anomalies are printed in the report and not also logged without -v."""
        main(["audit", str(spec_file), "--config", str(env_file)])

        captured = capsys.readouterr()
        assert captured.out.count("Unexpected schema reference Alias") == 1
        assert "Unexpected schema reference" not in captured.err
