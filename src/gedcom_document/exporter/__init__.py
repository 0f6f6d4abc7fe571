"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    build_document_dict,
    export_document_json,
    serialize_document_to_json_string,
)

__all__ = [
    "build_document_dict",
    "export_document_json",
    "serialize_document_to_json_string",
]
