"""Row matching rules shared by the lookup handlers.

All rules are deterministic and preserve source row order, so "first match" always means the
earliest matching row in the table.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeVar

from src.tables.rows import FaqEntry

T = TypeVar("T")

# (hospital_info key, presentation template) pairs, in reply order.
FactTemplate = tuple[str, str]


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring containment."""

    return needle.lower() in haystack.lower()


def first_containing(records: Iterable[T], field: Callable[[T], str], query: str) -> T | None:
    """Return the first record whose `field` contains `query` (case-insensitive)."""

    return next((r for r in records if contains_ci(field(r), query)), None)


def all_containing(records: Iterable[T], field: Callable[[T], str], query: str) -> list[T]:
    """Return every record whose `field` contains `query` (case-insensitive), in row order."""

    return [r for r in records if contains_ci(field(r), query)]


def first_exact(records: Iterable[T], field: Callable[[T], str], value: str) -> T | None:
    """Return the first record whose `field` equals `value` exactly."""

    return next((r for r in records if field(r) == value), None)


def first_faq_match(entries: Iterable[FaqEntry], utterance: str) -> FaqEntry | None:
    """Return the first FAQ entry whose keyword occurs in the utterance.

    The test is the reverse of the other lookups: the lowercased utterance must contain the
    lowercased keyword. Entries with a blank keyword never match.
    """

    text = utterance.lower()
    for entry in entries:
        keyword = entry.keyword.strip().lower()
        if keyword and keyword in text:
            return entry
    return None


def compose_facts(facts: Mapping[str, str], templates: Sequence[FactTemplate]) -> list[str]:
    """Render each template whose key is present; missing keys are silently omitted."""

    return [template.format(facts[key]) for key, template in templates if key in facts]
