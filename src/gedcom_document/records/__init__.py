from __future__ import annotations

from .build_document import parse_document
from .entities import (
    Address,
    ChangeDate,
    Date,
    Event,
    Family,
    FamilyLink,
    GedcomDocument,
    Gender,
    Header,
    Individual,
    MultimediaLink,
    MultimediaRecord,
    Name,
    Note,
    Pedigree,
    Place,
    Relation,
    Repository,
    Source,
    SourceCitation,
    Submission,
    Submitter,
)

__all__ = [
    "Address",
    "ChangeDate",
    "Date",
    "Event",
    "Family",
    "FamilyLink",
    "GedcomDocument",
    "Gender",
    "Header",
    "Individual",
    "MultimediaLink",
    "MultimediaRecord",
    "Name",
    "Note",
    "Pedigree",
    "Place",
    "Relation",
    "Repository",
    "Source",
    "SourceCitation",
    "Submission",
    "Submitter",
    "parse_document",
]
