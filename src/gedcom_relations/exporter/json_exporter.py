"""
json_exporter.py
Read-only JSON dump of a FamilyGraph.

This exporter:
- Converts dataclasses to dictionaries (NOT strings)
- Keeps pointers as raw strings, resolved or not
- Is deterministic: insertion order of the graph is preserved
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gedcom_relations.logging import get_logger
from gedcom_relations.registry.entities import FamilyGraph

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - Enums -> their value
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def graph_to_dict(graph: FamilyGraph) -> Dict[str, Any]:
    """Convert the in-memory graph into a JSON-safe dict."""
    return {
        "counts": {
            "people": len(graph.people),
            "families": len(graph.families),
        },
        "people": {ptr: _to_json_compatible(p) for ptr, p in graph.people.items()},
        "families": {ptr: _to_json_compatible(f) for ptr, f in graph.families.items()},
    }


def serialize_graph_to_json_string(graph: FamilyGraph, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(graph_to_dict(graph), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(graph_to_dict(graph), indent=indent, ensure_ascii=False)


def export_graph_json(graph: FamilyGraph, output_path: str | Path, indent: int | None = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting graph JSON to: %s (INDI=%d, FAM=%d)",
        output_path,
        len(graph.people),
        len(graph.families),
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_graph_to_json_string(graph, indent=indent))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path
