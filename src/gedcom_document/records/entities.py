from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from gedcom_document.core.diagnostics import Diagnostic
from gedcom_document.loader.subset_parser import UserDefinedData

# Cross-reference identifiers are kept as opaque strings, e.g. "@I1@".
Xref = str


# -----------------------------
# Enumerations
# -----------------------------

class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    NONBINARY = "N"
    UNKNOWN = "U"


class Relation(str, Enum):
    SPOUSE = "Spouse"
    CHILD = "Child"


class Pedigree(str, Enum):
    ADOPTED = "adopted"
    BIRTH = "birth"
    FOSTER = "foster"
    SEALING = "sealing"


# -----------------------------
# Shared substructures
# -----------------------------

@dataclass(slots=True)
class Date:
    value: Optional[str] = None
    time: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)

    def datetime(self) -> Optional[str]:
        """Return "<date> <time>" when both parts are present."""
        if self.value is None or self.time is None:
            return None
        return f"{self.value} {self.time}"


@dataclass(slots=True)
class Address:
    """
    ADDR substructure. ``value`` is the free-form address with CONT lines
    joined by newlines; the ADR1/ADR2/... children are kept separately.
    """
    value: Optional[str] = None
    adr1: Optional[str] = None
    adr2: Optional[str] = None
    adr3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    post: Optional[str] = None
    country: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Translation:
    value: Optional[str] = None
    mime: Optional[str] = None
    language: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class UserReferenceNumber:
    value: Optional[str] = None
    user_reference_type: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Note:
    """
    NOTE structure, either inline (a substructure) or a shared record at
    level 0, in which case ``xref`` is set. A NOTE whose value is a pointer
    ("@N1@") references a shared note; the pointer is kept as the value.
    """
    xref: Optional[Xref] = None
    value: Optional[str] = None
    mime: Optional[str] = None
    translation: Optional[Translation] = None
    citations: List["SourceCitation"] = field(default_factory=list)
    language: Optional[str] = None
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    change_date: Optional["ChangeDate"] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class ChangeDate:
    """CHAN: the last time the enclosing record was modified."""
    date: Optional[Date] = None
    note: Optional[Note] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Place:
    value: Optional[str] = None
    form: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class MultimediaFormat:
    value: Optional[str] = None
    source_media_type: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class MultimediaFileRefn:
    value: Optional[str] = None
    title: Optional[str] = None
    form: Optional[MultimediaFormat] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class MultimediaLink:
    """
    OBJE inside another record: a pointer to a multimedia record or an
    inline description of the file.
    """
    xref: Optional[Xref] = None
    file: Optional[MultimediaFileRefn] = None
    # FORM and TITL show up as siblings of FILE in some exports.
    form: Optional[MultimediaFormat] = None
    title: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class SourceCitationData:
    date: Optional[Date] = None
    text: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class SourceCitation:
    xref: Xref = ""
    page: Optional[str] = None
    data: Optional[SourceCitationData] = None
    quality: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Event:
    """
    Event or attribute detail (BIRT, MARR, OCCU, ...).

    ``value`` holds the line value: "Y" for asserted events, the descriptor
    for attributes such as OCCU.
    """
    tag: str
    value: Optional[str] = None
    date: Optional[Date] = None
    place: Optional[Place] = None
    address: Optional[Address] = None
    event_type: Optional[str] = None
    cause: Optional[str] = None
    age: Optional[str] = None
    agency: Optional[str] = None
    husband_age: Optional[str] = None
    wife_age: Optional[str] = None
    family_xref: Optional[Xref] = None
    adopted_by: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


# -----------------------------
# Header
# -----------------------------

@dataclass(slots=True)
class GedcomMeta:
    """HEAD.GEDC: the GEDCOM version and form the file claims."""
    version: Optional[str] = None
    form: Optional[str] = None
    form_version: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Encoding:
    value: Optional[str] = None
    version: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Copyright:
    value: Optional[str] = None
    # CONT lines, joined by newlines
    continued: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Corporation:
    value: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    fax: Optional[str] = None
    website: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class HeadSourceData:
    value: Optional[str] = None
    date: Optional[Date] = None
    copyright: Optional[Copyright] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class HeadSource:
    """HEAD.SOUR: the product that produced the file."""
    value: Optional[str] = None
    version: Optional[str] = None
    name: Optional[str] = None
    corporation: Optional[Corporation] = None
    data: Optional[HeadSourceData] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class HeadPlace:
    form: List[str] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Header:
    gedcom: Optional[GedcomMeta] = None
    encoding: Optional[Encoding] = None
    source: Optional[HeadSource] = None
    destination: Optional[str] = None
    date: Optional[Date] = None
    submitter_tag: Optional[Xref] = None
    submission_tag: Optional[Xref] = None
    filename: Optional[str] = None
    copyright: Optional[Copyright] = None
    language: Optional[str] = None
    place: Optional[HeadPlace] = None
    note: Optional[Note] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


# -----------------------------
# Top-level records
# -----------------------------

@dataclass(slots=True)
class Name:
    value: Optional[str] = None
    given: Optional[str] = None
    surname: Optional[str] = None
    prefix: Optional[str] = None
    surname_prefix: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    name_type: Optional[str] = None
    citations: List[SourceCitation] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class FamilyLink:
    """FAMC / FAMS: the individual's membership of a family."""
    xref: Xref
    relation: Relation
    pedigree: Optional[Pedigree] = None
    notes: List[Note] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Individual:
    xref: Optional[Xref] = None
    names: List[Name] = field(default_factory=list)
    sex: Gender = Gender.UNKNOWN
    families: List[FamilyLink] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    attributes: List[Event] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None
    automated_record_id: Optional[str] = None
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)

    @property
    def name(self) -> Optional[Name]:
        """The first (preferred) NAME, if any."""
        return self.names[0] if self.names else None

    def add_family(self, link: FamilyLink) -> bool:
        """Add a family link unless one to the same family exists already."""
        if any(existing.xref == link.xref for existing in self.families):
            return False
        self.families.append(link)
        return True


@dataclass(slots=True)
class Family:
    """
    FAM record. HUSB and WIFE are kept as the two partner pointers; no
    gender checks are made.
    """
    xref: Optional[Xref] = None
    individual1: Optional[Xref] = None
    individual2: Optional[Xref] = None
    children: List[Xref] = field(default_factory=list)
    num_children: Optional[int] = None
    events: List[Event] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None
    automated_record_id: Optional[str] = None
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class RecordedEvent:
    """SOUR.DATA.EVEN: which events the source records, when and where."""
    value: Optional[str] = None
    date: Optional[str] = None
    place: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class SourceData:
    events: List[RecordedEvent] = field(default_factory=list)
    agency: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class RepoCitation:
    xref: Xref = ""
    call_number: Optional[str] = None
    media_type: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Source:
    xref: Optional[Xref] = None
    data: Optional[SourceData] = None
    abbreviation: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    publication_facts: Optional[str] = None
    text: Optional[str] = None
    repo_citations: List[RepoCitation] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None
    automated_record_id: Optional[str] = None
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Repository:
    xref: Optional[Xref] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None
    automated_record_id: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Submitter:
    """Submitter of the data, ie. who reported the genealogy facts."""
    xref: Optional[Xref] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    language: Optional[str] = None
    multimedia: List[MultimediaLink] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None
    automated_record_id: Optional[str] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class Submission:
    xref: Optional[Xref] = None
    name_of_family_file: Optional[str] = None
    temple_code: Optional[str] = None
    submitter_link: Optional[Xref] = None
    generations_of_ancestors: Optional[str] = None
    generations_of_descendants: Optional[str] = None
    ordinance_process_flag: Optional[str] = None
    automated_record_id: Optional[str] = None
    note: Optional[Note] = None
    change_date: Optional[ChangeDate] = None
    custom_data: List[UserDefinedData] = field(default_factory=list)


@dataclass(slots=True)
class MultimediaRecord:
    xref: Optional[Xref] = None
    files: List[MultimediaFileRefn] = field(default_factory=list)
    form: Optional[MultimediaFormat] = None
    title: Optional[str] = None
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    citations: List[SourceCitation] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None
    notes: List[Note] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)

    @property
    def file(self) -> Optional[MultimediaFileRefn]:
        return self.files[0] if self.files else None


# -----------------------------
# Document
# -----------------------------

@dataclass(slots=True)
class GedcomDocument:
    """
    Everything parsed from one GEDCOM file, in file order per collection.
    """
    header: Optional[Header] = None
    submitters: List[Submitter] = field(default_factory=list)
    submissions: List[Submission] = field(default_factory=list)
    individuals: List[Individual] = field(default_factory=list)
    families: List[Family] = field(default_factory=list)
    repositories: List[Repository] = field(default_factory=list)
    sources: List[Source] = field(default_factory=list)
    multimedia: List[MultimediaRecord] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    custom_data: List[UserDefinedData] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        """Record counts per collection."""
        return {
            "submitters": len(self.submitters),
            "submissions": len(self.submissions),
            "individuals": len(self.individuals),
            "families": len(self.families),
            "repositories": len(self.repositories),
            "sources": len(self.sources),
            "multimedia": len(self.multimedia),
            "notes": len(self.notes),
        }
