"""
Tool manifest loading.

The backend publishes its tools as a JSON list (``wiseOwl.json``) of
objects with ``name``, ``description``, ``parameters`` and optional
``apiMethod``/``apiEndpoint`` fields.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .models import HTTP_METHODS, ToolDescriptor
from ..utils import log


class ManifestError(ValueError):
    """Raised when a tool manifest cannot be read or is malformed."""


def _first(entry: Dict[str, Any], *keys: str):
    for key in keys:
        if entry.get(key) is not None:
            return entry[key]
    return None


def parse_tool_entry(entry: Any, index: int = 0) -> ToolDescriptor:
    """Build a ToolDescriptor from one decoded manifest entry."""
    if not isinstance(entry, dict):
        raise ManifestError(f"Tool entry #{index} is not an object")

    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestError(f"Tool entry #{index} has no name")

    method = _first(entry, "apiMethod", "httpMethod", "http_method")
    if method is not None:
        method = str(method).upper()
        if method not in HTTP_METHODS:
            raise ManifestError(f"Tool {name!r} has unsupported HTTP method {method!r}")

    return ToolDescriptor(
        name=name,
        description=entry.get("description") or "",
        parameters=entry.get("parameters"),
        http_method=method,
        http_endpoint=_first(entry, "apiEndpoint", "httpEndpoint", "http_endpoint"),
    )


def parse_tool_manifest(data: Any) -> List[ToolDescriptor]:
    """
    Convert decoded manifest JSON into tool descriptors.

    Order is preserved. Duplicate names keep the first occurrence.
    """
    if not isinstance(data, list):
        raise ManifestError("Tool manifest must be a JSON list")

    tools: List[ToolDescriptor] = []
    seen = set()
    for index, entry in enumerate(data):
        tool = parse_tool_entry(entry, index)
        if tool.name in seen:
            log.warning(f"[MANIFEST] Duplicate tool {tool.name!r} ignored")
            continue
        seen.add(tool.name)
        tools.append(tool)
    return tools


def load_tool_manifest(path: Union[str, Path]) -> List[ToolDescriptor]:
    """Read and parse a tool manifest file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read tool manifest {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in tool manifest {path}: {e}") from e

    tools = parse_tool_manifest(data)
    log.info(f"[MANIFEST] Loaded {len(tools)} tools from {path}")
    return tools
