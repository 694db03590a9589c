"""
Tests for the diagnostic command line.
"""

import json

import pytest

from wiseowl import __main__ as cli
from wiseowl.config import settings


@pytest.fixture
def manifest(tmp_path, monkeypatch):
    path = tmp_path / "wiseOwl.json"
    path.write_text(json.dumps([
        {"name": "getAllUsers", "description": "List users"},
        {"name": "stopAgent", "description": "Stop the assistant"},
        {"name": "legacyExport", "description": "Not in any category"},
    ]), encoding="utf-8")
    monkeypatch.setattr(settings, "MANIFEST_PATH", path)
    return path


class TestMain:
    """main() exit codes and output."""

    def test_query(self, manifest, capsys):
        assert cli.main(["stopAgent"]) == 0

        out = capsys.readouterr().out
        assert "Query: 'stopAgent'" in out
        assert "  - stopAgent" in out

    def test_audit(self, manifest, capsys):
        assert cli.main(["audit"]) == 0

        out = capsys.readouterr().out
        assert "Uncategorized manifest tools: 1" in out

    def test_missing_manifest(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(settings, "MANIFEST_PATH", tmp_path / "missing.json")

        assert cli.main(["stopAgent"]) == 1
        assert capsys.readouterr().err
