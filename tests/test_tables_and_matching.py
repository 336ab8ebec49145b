"""Tests for typed row parsing and the matching rules."""

from __future__ import annotations

import pytest

from src.fulfillment.matching import (
    all_containing,
    compose_facts,
    first_containing,
    first_exact,
    first_faq_match,
)
from src.tables.rows import (
    BillingItem,
    Department,
    Doctor,
    FaqEntry,
    LabReport,
    MalformedRow,
    facts_by_key,
    parse_rows,
)


def test_parse_rows_skips_header_and_blank_rows() -> None:
    rows = [
        ["id", "name", "description", "floor", "contact"],
        ["D1", "Cardiology", "Heart", "2nd floor", "ext 201"],
        [],
        ["", "  "],
        ["D2", "Pediatrics", "Children", "1st floor", "ext 105"],
    ]

    departments = parse_rows(rows, Department)

    assert [d.name for d in departments] == ["Cardiology", "Pediatrics"]
    assert departments[0].location == "2nd floor"
    assert departments[0].contact == "ext 201"


def test_parse_rows_defaults_trailing_optional_cells() -> None:
    doctors = parse_rows([["h"], ["1", "Iyer", "Pediatrics", "Mon", "9-12"]], Doctor)
    reports = parse_rows([["h"], ["S1", "p", "t", "d", "Ready"]], LabReport)
    items = parse_rows([["h"], ["Pharmacy", "Varies"]], BillingItem)

    assert doctors[0].notes == ""
    assert reports[0] == LabReport(sample_id="S1", status="Ready", note="")
    assert items[0].note == ""


def test_parse_rows_rejects_short_rows() -> None:
    with pytest.raises(MalformedRow):
        parse_rows([["h"], ["S1", "p", "t", "Ready"]], LabReport)


def test_header_only_table_is_empty() -> None:
    assert parse_rows([["keyword", "answer"]], FaqEntry) == []
    assert parse_rows([], FaqEntry) == []


def test_facts_by_key_has_no_header_and_first_duplicate_wins() -> None:
    facts = facts_by_key([["hours", "9-5"], ["hours", "24x7"], ["parking", "B1"]])

    assert facts == {"hours": "9-5", "parking": "B1"}


def test_facts_by_key_rejects_key_without_value() -> None:
    with pytest.raises(MalformedRow):
        facts_by_key([["hours"]])


def test_compose_facts_silently_omits_missing_keys() -> None:
    templates = (("hours", "Hours: {}."), ("holidays", "Holidays: {}."))

    assert compose_facts({"holidays": "Sundays"}, templates) == ["Holidays: Sundays."]
    assert compose_facts({}, templates) == []


def test_containment_rules_are_case_insensitive_and_ordered() -> None:
    names = ["Sharma", "Shankar", "Iyer"]

    assert first_containing(names, str, "SHA") == "Sharma"
    assert all_containing(names, str, "sha") == ["Sharma", "Shankar"]
    assert all_containing(names, str, "xyz") == []


def test_first_exact_does_not_match_prefixes() -> None:
    assert first_exact(["S1234", "S12"], str, "S123") is None
    assert first_exact(["S1234", "S123"], str, "S123") == "S123"


def test_faq_match_checks_keyword_inside_utterance() -> None:
    entries = [
        FaqEntry(keyword="", answer="blank"),
        FaqEntry(keyword="Insurance", answer="first"),
        FaqEntry(keyword="insurance plans", answer="second"),
    ]

    assert first_faq_match(entries, "Do you take insurance plans?").answer == "first"
    assert first_faq_match(entries, "insur") is None
