"""Serialize the OpenAPI document and render the example curl command."""

from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path
from typing import Any

import jinja2
import yaml

TEMPLATE_DIR = Path(__file__).parent / "templates"

DEFAULT_FORMAT = "yaml"
FORMATS = ("yaml", "yml", "json")

_EXTENSION_FORMATS: dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class UnsupportedFormatError(ValueError):
    """Raised for output formats other than yaml or json."""


class _SpecDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings (query text) as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_SpecDumper.add_representer(str, _represent_str)


def format_from_path(path: str | Path, default: str = DEFAULT_FORMAT) -> str:
    """Infer the output format from a file extension."""
    return _EXTENSION_FORMATS.get(Path(path).suffix.lower(), default)


def render_spec(spec: dict[str, Any], fmt: str = DEFAULT_FORMAT) -> str:
    """Serialize the OpenAPI document as YAML or JSON."""
    fmt = fmt.lower()
    if fmt in ("yaml", "yml"):
        return yaml.dump(
            spec,
            Dumper=_SpecDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    if fmt == "json":
        return json.dumps(spec, indent=2, ensure_ascii=False) + "\n"
    raise UnsupportedFormatError(f"unknown format: {fmt}")


def write_spec(
    spec: dict[str, Any],
    out_path: str | Path | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Write the document to out_path, or stdout when no path is given."""
    output = render_spec(spec, fmt)
    if not out_path:
        sys.stdout.write(output)
        return
    Path(out_path).write_text(output, encoding="utf-8")


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["shell_quote"] = shlex.quote
    return env


def render_curl(endpoint: str, query: str, variables: dict[str, Any]) -> str:
    """Render a curl command that POSTs the query and variables."""
    body = json.dumps(
        {"query": query, "variables": variables},
        separators=(",", ":"),
        ensure_ascii=False,
    )
    template = _environment().get_template("curl.sh.j2")
    return template.render(endpoint=endpoint, body=body).rstrip("\n")
