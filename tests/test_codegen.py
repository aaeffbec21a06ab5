"""Tests for serialization and curl rendering."""

import json
import shlex

import pytest
import yaml

from gqlrest.codegen import (
    UnsupportedFormatError,
    format_from_path,
    render_curl,
    render_spec,
    write_spec,
)

_SPEC = {
    "openapi": "3.0.3",
    "info": {"title": "T", "version": "1"},
    "paths": {
        "/graphql": {
            "post": {
                "requestBody": {
                    "content": {
                        "application/json": {
                            "example": {
                                "query": "query GetUser($id: ID!) {\n  user(id: $id) { id }\n}\n",
                                "variables": {"id": "id"},
                            },
                        },
                    },
                },
            },
        },
    },
}


class TestRenderSpec:
    """Test YAML/JSON output."""

    def test_yaml_round_trip(self):
        assert yaml.safe_load(render_spec(_SPEC, "yaml")) == _SPEC

    def test_yaml_keeps_key_order(self):
        output = render_spec(_SPEC, "yml")
        assert output.index("openapi") < output.index("info") < output.index("paths")

    def test_yaml_multiline_as_block(self):
        assert "query: |" in render_spec(_SPEC, "yaml")

    def test_json(self):
        assert json.loads(render_spec(_SPEC, "JSON")) == _SPEC

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError):
            render_spec(_SPEC, "toml")


class TestWriteSpec:
    def test_file(self, tmp_path):
        path = tmp_path / "openapi.json"
        write_spec(_SPEC, path, "json")
        assert json.loads(path.read_text()) == _SPEC

    def test_stdout(self, capsys):
        write_spec(_SPEC, None, "yaml")
        assert yaml.safe_load(capsys.readouterr().out) == _SPEC


class TestFormatFromPath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [("out.json", "json"), ("out.YAML", "yaml"), ("out.yml", "yaml"), ("out.txt", "yaml")],
    )
    def test_extension(self, path, expected):
        assert format_from_path(path) == expected

    def test_default_kept_for_unknown(self):
        assert format_from_path("spec", "json") == "json"


class TestRenderCurl:
    """The command must survive a POSIX shell round trip."""

    def test_command_shape(self):
        curl = render_curl("https://api.example.com/graphql", "{ a }", {})
        args = shlex.split(curl)
        assert args[:3] == ["curl", "-X", "POST"]
        assert args[3] == "https://api.example.com/graphql"
        assert args[4:6] == ["-H", "Content-Type: application/json"]
        assert args[6] == "-d"

    def test_body_is_compact_json(self):
        curl = render_curl("https://api.example.com/graphql", "{ a }", {"id": "id"})
        body = shlex.split(curl)[-1]
        assert body == '{"query":"{ a }","variables":{"id":"id"}}'

    def test_single_quotes_escaped(self):
        variables = {"name": "O'Brien"}
        curl = render_curl("https://api.example.com/graphql", "{ a }", variables)
        assert json.loads(shlex.split(curl)[-1])["variables"] == variables

    def test_single_line(self):
        curl = render_curl("https://x.test/graphql", "query {\n  a\n}\n", {})
        assert "\n" not in curl
