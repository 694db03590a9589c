"""
Tests for tool manifest loading.
"""

import json

import pytest

from wiseowl.tool_selector import ManifestError, ToolDescriptor, load_tool_manifest, parse_tool_manifest

SAMPLE_MANIFEST = [
    {
        "name": "getAllBooks",
        "description": "List every book",
        "parameters": {"type": "object", "properties": {"page": {"type": "integer"}}},
        "apiMethod": "GET",
        "apiEndpoint": "/api/books",
    },
    {
        "name": "createBook",
        "description": "Create a book",
        "parameters": {"type": "object", "properties": {}},
        "apiMethod": "post",
        "apiEndpoint": "/api/books",
    },
    {
        "name": "stopAgent",
        "description": "Stop the assistant",
        "parameters": {},
    },
]


class TestParseManifest:
    """parse_tool_manifest on decoded JSON."""

    def test_fields_mapped(self):
        tools = parse_tool_manifest(SAMPLE_MANIFEST)

        assert [t.name for t in tools] == ['getAllBooks', 'createBook', 'stopAgent']
        assert tools[0].http_method == 'GET'
        assert tools[0].http_endpoint == '/api/books'
        assert tools[0].parameters == SAMPLE_MANIFEST[0]["parameters"]

    def test_method_normalized(self):
        assert parse_tool_manifest(SAMPLE_MANIFEST)[1].http_method == 'POST'

    def test_optional_metadata(self):
        tool = parse_tool_manifest(SAMPLE_MANIFEST)[2]

        assert tool.http_method is None
        assert tool.http_endpoint is None

    def test_alternative_keys(self):
        tools = parse_tool_manifest([
            {"name": "deleteBook", "httpMethod": "DELETE", "httpEndpoint": "/api/books/{id}"},
        ])

        assert tools[0].http_method == 'DELETE'
        assert tools[0].http_endpoint == '/api/books/{id}'
        assert tools[0].description == ''

    def test_duplicates_keep_first(self):
        tools = parse_tool_manifest([
            {"name": "stopAgent", "description": "first"},
            {"name": "stopAgent", "description": "second"},
        ])

        assert len(tools) == 1
        assert tools[0].description == 'first'

    @pytest.mark.parametrize("data", [
        {"name": "notAList"},
        [{"description": "no name"}],
        [{"name": ""}],
        ["getAllBooks"],
        [{"name": "patchBook", "apiMethod": "PATCH"}],
    ])
    def test_malformed(self, data):
        with pytest.raises(ManifestError):
            parse_tool_manifest(data)


class TestLoadManifest:
    """load_tool_manifest from disk."""

    def test_load(self, tmp_path):
        path = tmp_path / "wiseOwl.json"
        path.write_text(json.dumps(SAMPLE_MANIFEST, ensure_ascii=False), encoding="utf-8")

        tools = load_tool_manifest(path)

        assert [t.name for t in tools] == ['getAllBooks', 'createBook', 'stopAgent']

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError):
            load_tool_manifest(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(ManifestError):
            load_tool_manifest(str(path))


class TestCompletionTool:
    """ToolDescriptor.to_completion_tool."""

    def test_function_format(self):
        tool = parse_tool_manifest(SAMPLE_MANIFEST)[0]

        assert tool.to_completion_tool() == {
            "type": "function",
            "function": {
                "name": "getAllBooks",
                "description": "List every book",
                "parameters": SAMPLE_MANIFEST[0]["parameters"],
            },
        }

    def test_missing_parameters(self):
        payload = ToolDescriptor(name="stopAgent").to_completion_tool()

        assert payload["function"]["parameters"] == {"type": "object", "properties": {}}

    def test_manifest_error_is_value_error(self):
        assert issubclass(ManifestError, ValueError)
