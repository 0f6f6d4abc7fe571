"""
parser_core.py
High-level parsing entry point with logging integration.
"""

from __future__ import annotations

import os
import time
from typing import Optional

from gedcom_document.config import GPConfig, get_config
from gedcom_document.loader.file_loader import load_file
from gedcom_document.loader.tokenizer import Source, Tokenizer
from gedcom_document.logging import get_logger
from gedcom_document.records.build_document import parse_document
from gedcom_document.records.entities import GedcomDocument


class GedcomParser:
    """
    High-level parser:
      - loads the file (for parse_file)
      - tokenizes and assembles the document in one forward pass
      - keeps the last document and its diagnostics for inspection

    Args:
        config: Configuration to use; defaults to ``get_config()``.
        strict: Overrides ``parser.strict`` from the configuration.
    """

    def __init__(self, config: Optional[GPConfig] = None, *, strict: Optional[bool] = None):
        self.cfg = config if config is not None else get_config()
        self.strict = self.cfg.strict if strict is None else strict
        self.log = get_logger("parser_core")
        self.document: Optional[GedcomDocument] = None

        self.log.debug("Parser initialized (strict=%s).", self.strict)

    def parse(self, source: Source) -> GedcomDocument:
        """Parse GEDCOM text (or an iterable of text chunks)."""
        t0 = time.perf_counter()
        tokenizer = Tokenizer(source, strict=self.strict)

        try:
            document = parse_document(tokenizer)
        except Exception:
            self.log.exception("Parse failed at %s.", tokenizer.debug_location())
            raise

        if self.cfg.debug:
            self.log.debug(
                "Parsed %d lines in %.3fs",
                tokenizer.line,
                time.perf_counter() - t0,
            )

        self.document = document
        return document

    def parse_file(self, path: str | os.PathLike, encoding: Optional[str] = None) -> GedcomDocument:
        self.log.info("Parsing GEDCOM file: %s", path)
        return self.parse(load_file(path, encoding=encoding))


def parse(source: Source, *, strict: Optional[bool] = None) -> GedcomDocument:
    """Parse GEDCOM text into a GedcomDocument; ``strict=None`` follows the config."""
    return GedcomParser(strict=strict).parse(source)


def parse_file(path: str | os.PathLike, *, strict: Optional[bool] = None) -> GedcomDocument:
    """Read and parse a GEDCOM file."""
    return GedcomParser(strict=strict).parse_file(path)
