"""Table ranges and typed row records.

Cell positions in every table are fixed. Handlers read cells through the named fields below rather
than by index, and a row shorter than its table requires is reported as `MalformedRow` instead of
being silently read past its end.

Google Sheets drops trailing empty cells from each row, so trailing optional columns (notes) default
to an empty string.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from src.sheets.gateway import LookupUnavailable

HOSPITAL_INFO_RANGE = "hospital_info!A:B"
DEPARTMENTS_RANGE = "departments!A:E"
DOCTORS_RANGE = "doctors!A:G"
LAB_REPORTS_RANGE = "lab_reports!A:F"
BILLING_RANGE = "billing!A:C"
FAQS_RANGE = "faqs!A:B"


class MalformedRow(LookupUnavailable):
    """Raised when a row has fewer cells than its table schema requires."""


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


@dataclass(frozen=True)
class HospitalFact:
    """`hospital_info`: [key, value]. The table has no header row."""

    min_cells: ClassVar[int] = 2

    key: str
    value: str

    @classmethod
    def from_row(cls, row: Sequence[str]) -> HospitalFact:
        return cls(key=row[0].strip(), value=row[1])


@dataclass(frozen=True)
class Department:
    """`departments`: [id, name, description, location, contact]."""

    min_cells: ClassVar[int] = 5

    id: str
    name: str
    description: str
    location: str
    contact: str

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Department:
        return cls(id=row[0], name=row[1], description=row[2], location=row[3], contact=row[4])


@dataclass(frozen=True)
class Doctor:
    """`doctors`: [id, name, department, available_days, available_hours, notes, ...]."""

    min_cells: ClassVar[int] = 5

    id: str
    name: str
    department: str
    available_days: str
    available_hours: str
    notes: str = ""

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Doctor:
        return cls(
            id=row[0],
            name=row[1],
            department=row[2],
            available_days=row[3],
            available_hours=row[4],
            notes=_cell(row, 5),
        )


@dataclass(frozen=True)
class LabReport:
    """`lab_reports`: [sample_id, ..., status (index 4), note (index 5)]."""

    min_cells: ClassVar[int] = 5

    sample_id: str
    status: str
    note: str = ""

    @classmethod
    def from_row(cls, row: Sequence[str]) -> LabReport:
        return cls(sample_id=row[0].strip(), status=row[4].strip(), note=_cell(row, 5))


@dataclass(frozen=True)
class BillingItem:
    """`billing`: [service, typical_cost, note]."""

    min_cells: ClassVar[int] = 2

    service: str
    typical_cost: str
    note: str = ""

    @classmethod
    def from_row(cls, row: Sequence[str]) -> BillingItem:
        return cls(service=row[0], typical_cost=row[1], note=_cell(row, 2))


@dataclass(frozen=True)
class FaqEntry:
    """`faqs`: [keyword_or_question, answer]."""

    min_cells: ClassVar[int] = 2

    keyword: str
    answer: str

    @classmethod
    def from_row(cls, row: Sequence[str]) -> FaqEntry:
        return cls(keyword=row[0], answer=row[1])


RowT = TypeVar("RowT", HospitalFact, Department, Doctor, LabReport, BillingItem, FaqEntry)


def _is_blank(row: Sequence[str]) -> bool:
    return all(not cell.strip() for cell in row)


def parse_rows(
        rows: Iterable[Sequence[str]],
        row_type: type[RowT],
        *,
        has_header: bool = True,
) -> list[RowT]:
    """Convert raw table rows into typed records, in source order.

    The first row is a header and is skipped unless `has_header` is false. Fully blank rows are
    skipped.

    Raises:
        MalformedRow: If a non-blank row has fewer cells than `row_type.min_cells`.
    """

    records: list[RowT] = []
    for number, row in enumerate(rows):
        if has_header and number == 0:
            continue
        if _is_blank(row):
            continue
        if len(row) < row_type.min_cells:
            raise MalformedRow(
                f"{row_type.__name__} row {number} has {len(row)} cells, "
                f"expected at least {row_type.min_cells}"
            )
        records.append(row_type.from_row(row))
    return records


def facts_by_key(rows: Iterable[Sequence[str]]) -> dict[str, str]:
    """Index `hospital_info` rows by key; the first occurrence of a duplicate key wins."""

    facts: dict[str, str] = {}
    for fact in parse_rows(rows, HospitalFact, has_header=False):
        facts.setdefault(fact.key, fact.value)
    return facts
