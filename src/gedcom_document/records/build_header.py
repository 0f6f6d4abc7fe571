"""
HEAD record builder.

The header describes the file rather than the family tree: which product
wrote it, for whom, in which encoding and under which GEDCOM version.
"""

from __future__ import annotations

from gedcom_document.core.diagnostics import DiagnosticKind
from gedcom_document.loader.subset_parser import (
    parse_subset,
    report,
    report_dropped_custom,
    skip_block,
)
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import (
    ConcPolicy,
    ContinuedText,
    take_line_value,
    take_optional_value,
)
from gedcom_document.records.build_common import build_address, build_date
from gedcom_document.records.build_note import build_note
from gedcom_document.records.entities import (
    Copyright,
    Corporation,
    Encoding,
    GedcomMeta,
    HeadPlace,
    HeadSource,
    HeadSourceData,
    Header,
)


def build_header(tokenizer: Tokenizer, level: int) -> Header:
    header = Header()
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "GEDC":
            header.gedcom = build_gedcom_meta(tokenizer, line_level)
        elif tag == "CHAR":
            header.encoding = build_encoding(tokenizer, line_level)
        elif tag == "SOUR":
            header.source = build_head_source(tokenizer, line_level)
        elif tag == "DEST":
            header.destination = take_line_value(tokenizer)
        elif tag == "DATE":
            header.date = build_date(tokenizer, line_level)
        elif tag == "TIME":
            _time_outside_date(tokenizer, line_level)
        elif tag == "SUBM":
            header.submitter_tag = take_line_value(tokenizer)
        elif tag == "SUBN":
            header.submission_tag = take_line_value(tokenizer)
        elif tag == "FILE":
            header.filename = take_line_value(tokenizer)
        elif tag == "COPR":
            header.copyright = build_copyright(tokenizer, line_level)
        elif tag == "LANG":
            header.language = take_line_value(tokenizer)
        elif tag == "PLAC":
            header.place = build_head_place(tokenizer, line_level)
        elif tag == "NOTE":
            header.note = build_note(tokenizer, line_level)
        else:
            return False
        return True

    header.custom_data = parse_subset(tokenizer, level, handle, context="Header")
    return header


def _time_outside_date(tokenizer: Tokenizer, level: int) -> None:
    report(
        tokenizer,
        DiagnosticKind.INVALID_VALUE,
        "TIME outside DATE in header",
        tag="TIME",
        context="Header",
    )
    skip_block(tokenizer, level)


def build_gedcom_meta(tokenizer: Tokenizer, level: int) -> GedcomMeta:
    meta = GedcomMeta()
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "VERS":
            meta.version = take_line_value(tokenizer)
        elif tag == "FORM":
            meta.form = take_line_value(tokenizer)
            _build_gedcom_form(tokenizer, line_level, meta)
        else:
            return False
        return True

    meta.custom_data = parse_subset(tokenizer, level, handle, context="GedcomMeta")
    return meta


def _build_gedcom_form(tokenizer: Tokenizer, level: int, meta: GedcomMeta) -> None:
    # 5.5.1 has "3 VERS" under FORM; 7.0 does not
    def handle(tag: str, line_level: int) -> bool:
        if tag == "VERS":
            meta.form_version = take_line_value(tokenizer)
            return True
        return False

    custom = parse_subset(tokenizer, level, handle, context="GedcomMeta.FORM")
    report_dropped_custom(tokenizer, custom, "GedcomMeta.FORM")


def build_encoding(tokenizer: Tokenizer, level: int) -> Encoding:
    encoding = Encoding(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "VERS":
            encoding.version = take_line_value(tokenizer)
        else:
            return False
        return True

    encoding.custom_data = parse_subset(tokenizer, level, handle, context="Encoding")
    return encoding


def build_head_source(tokenizer: Tokenizer, level: int) -> HeadSource:
    """HEAD.SOUR: the approved system id of the product that wrote the file."""
    source = HeadSource(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "VERS":
            source.version = take_line_value(tokenizer)
        elif tag == "NAME":
            source.name = take_line_value(tokenizer)
        elif tag == "CORP":
            source.corporation = build_corporation(tokenizer, line_level)
        elif tag == "DATA":
            source.data = build_head_source_data(tokenizer, line_level)
        else:
            return False
        return True

    source.custom_data = parse_subset(tokenizer, level, handle, context="HeadSource")
    return source


def build_corporation(tokenizer: Tokenizer, level: int) -> Corporation:
    corporation = Corporation(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "ADDR":
            corporation.address = build_address(tokenizer, line_level)
        elif tag == "PHON":
            corporation.phone = take_line_value(tokenizer)
        elif tag == "EMAIL":
            corporation.email = take_line_value(tokenizer)
        elif tag == "FAX":
            corporation.fax = take_line_value(tokenizer)
        elif tag == "WWW":
            corporation.website = take_line_value(tokenizer)
        else:
            return False
        return True

    corporation.custom_data = parse_subset(tokenizer, level, handle, context="Corporation")
    return corporation


def build_head_source_data(tokenizer: Tokenizer, level: int) -> HeadSourceData:
    data = HeadSourceData(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "DATE":
            data.date = build_date(tokenizer, line_level)
        elif tag == "COPR":
            data.copyright = build_copyright(tokenizer, line_level)
        else:
            return False
        return True

    data.custom_data = parse_subset(tokenizer, level, handle, context="HeadSourceData")
    return data


def build_copyright(tokenizer: Tokenizer, level: int) -> Copyright:
    """
    COPR: the first line goes to ``value``, CONT/CONC lines to ``continued``.
    """
    copr = Copyright(value=take_optional_value(tokenizer))
    continued = ContinuedText(tokenizer, ConcPolicy.DIRECT, take_value=False)

    def handle(tag: str, line_level: int) -> bool:
        return continued.handle(tag)

    copr.custom_data = parse_subset(tokenizer, level, handle, context="Copyright")
    text = continued.text
    # drop the newline the first CONT contributed
    copr.continued = text[1:] if text and text.startswith("\n") else text
    return copr


def build_head_place(tokenizer: Tokenizer, level: int) -> HeadPlace:
    """HEAD.PLAC.FORM: "City, County, State, Country" -> list of jurisdictions."""
    place = HeadPlace()
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "FORM":
            form = take_line_value(tokenizer)
            place.form = [part.strip() for part in form.split(",")]
        else:
            return False
        return True

    place.custom_data = parse_subset(tokenizer, level, handle, context="HeadPlace")
    return place
