"""
Builders for the small leaf substructures shared by many records.

Every builder is called with the tokenizer on the structure's own tag and
the depth of that line, consumes the tag, its value and its children, and
returns with the tokenizer on the next line at or above ``level``.
"""

from __future__ import annotations

from gedcom_document.loader.subset_parser import parse_subset, skip_duplicate
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import (
    ConcPolicy,
    ContinuedText,
    take_line_value,
    take_optional_value,
)
from gedcom_document.records.entities import (
    Address,
    Date,
    MultimediaFileRefn,
    MultimediaFormat,
    MultimediaLink,
    Translation,
    UserReferenceNumber,
)


def build_date(tokenizer: Tokenizer, level: int) -> Date:
    date = Date(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "TIME":
            date.time = take_line_value(tokenizer)
        else:
            return False
        return True

    date.custom_data = parse_subset(tokenizer, level, handle, context="Date")
    return date


def build_address(tokenizer: Tokenizer, level: int) -> Address:
    address = Address()
    text = ContinuedText(tokenizer, ConcPolicy.DIRECT)

    def handle(tag: str, line_level: int) -> bool:
        if text.handle(tag):
            return True
        if tag == "ADR1":
            address.adr1 = take_line_value(tokenizer)
        elif tag == "ADR2":
            address.adr2 = take_line_value(tokenizer)
        elif tag == "ADR3":
            address.adr3 = take_line_value(tokenizer)
        elif tag == "CITY":
            address.city = take_line_value(tokenizer)
        elif tag == "STAE":
            address.state = take_line_value(tokenizer)
        elif tag == "POST":
            address.post = take_line_value(tokenizer)
        elif tag == "CTRY":
            address.country = take_line_value(tokenizer)
        else:
            return False
        return True

    address.custom_data = parse_subset(tokenizer, level, handle, context="Address")
    address.value = text.text
    return address


def build_translation(tokenizer: Tokenizer, level: int) -> Translation:
    translation = Translation(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "MIME":
            translation.mime = take_line_value(tokenizer)
        elif tag == "LANG":
            translation.language = take_line_value(tokenizer)
        else:
            return False
        return True

    translation.custom_data = parse_subset(tokenizer, level, handle, context="Translation")
    return translation


def build_user_reference(tokenizer: Tokenizer, level: int) -> UserReferenceNumber:
    refn = UserReferenceNumber(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "TYPE":
            refn.user_reference_type = take_line_value(tokenizer)
        else:
            return False
        return True

    refn.custom_data = parse_subset(tokenizer, level, handle, context="UserReferenceNumber")
    return refn


def build_multimedia_format(tokenizer: Tokenizer, level: int) -> MultimediaFormat:
    form = MultimediaFormat(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag in ("TYPE", "MEDI"):
            form.source_media_type = take_line_value(tokenizer)
        else:
            return False
        return True

    form.custom_data = parse_subset(tokenizer, level, handle, context="MultimediaFormat")
    return form


def build_file_refn(tokenizer: Tokenizer, level: int) -> MultimediaFileRefn:
    file = MultimediaFileRefn(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "TITL":
            file.title = take_line_value(tokenizer)
        elif tag == "FORM":
            file.form = build_multimedia_format(tokenizer, line_level)
        else:
            return False
        return True

    file.custom_data = parse_subset(tokenizer, level, handle, context="MultimediaFileRefn")
    return file


def build_multimedia_link(tokenizer: Tokenizer, level: int) -> MultimediaLink:
    """OBJE inside a record: either "n OBJE @M1@" or an inline file description."""
    link = MultimediaLink(xref=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "FILE":
            if link.file is not None:
                skip_duplicate(tokenizer, tag, line_level, "MultimediaLink")
            else:
                link.file = build_file_refn(tokenizer, line_level)
        elif tag == "FORM":
            link.form = build_multimedia_format(tokenizer, line_level)
        elif tag == "TITL":
            link.title = take_line_value(tokenizer)
        else:
            return False
        return True

    link.custom_data = parse_subset(tokenizer, level, handle, context="MultimediaLink")
    return link
