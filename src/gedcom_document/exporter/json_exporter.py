"""
json_exporter.py
Structured JSON exporter for GedcomDocument objects.

This exporter:
- Converts dataclasses to dictionaries (NOT strings)
- Writes enums as their GEDCOM / string values
- Keeps every collection in file order
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gedcom_document.logging import get_logger
from gedcom_document.records.entities import GedcomDocument

log = get_logger("json_exporter")

COLLECTIONS = (
    "submitters",
    "submissions",
    "individuals",
    "families",
    "repositories",
    "sources",
    "multimedia",
    "notes",
)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums -> their value
    - Primitives pass through
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_document_dict(document: GedcomDocument) -> Dict[str, Any]:
    """
    Convert a parsed document into a JSON-safe dict.
    """
    data: Dict[str, Any] = {
        "counts": document.counts(),
        "header": _to_json_compatible(document.header),
    }
    for name in COLLECTIONS:
        data[name] = _to_json_compatible(getattr(document, name))
    data["custom_data"] = _to_json_compatible(document.custom_data)
    data["diagnostics"] = _to_json_compatible(document.diagnostics)
    return data


def serialize_document_to_json_string(document: GedcomDocument, indent: int | None = 2) -> str:
    return json.dumps(
        build_document_dict(document),
        indent=indent,
        ensure_ascii=False,
    )


def export_document_json(document: GedcomDocument, output_path: str | Path, indent: int | None = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    counts = document.counts()
    log.info(
        "Exporting document JSON to: %s "
        "(INDI=%d, FAM=%d, SOUR=%d, REPO=%d, OBJE=%d)",
        output_path,
        counts["individuals"],
        counts["families"],
        counts["sources"],
        counts["repositories"],
        counts["multimedia"],
    )

    json_str = serialize_document_to_json_string(document, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
    return output_path
