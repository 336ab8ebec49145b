"""Lookup handlers, one per intent.

Each handler issues at most one gateway fetch, applies its matching rule and returns an `Outcome`.
Gateway failures propagate as `LookupUnavailable`; the dispatcher turns them into the generic
apology.

Doctor disambiguation is stateless: when several doctors match, the user is asked to pick one, but
nothing carries the candidate list into the next request. The follow-up is handled as a fresh
request.
"""

from __future__ import annotations

from collections import Counter

from src.fulfillment.matching import (
    FactTemplate,
    all_containing,
    compose_facts,
    first_containing,
    first_exact,
    first_faq_match,
)
from src.fulfillment.outcome import (
    AmbiguousMatch,
    Answer,
    Canned,
    CannedReply,
    Clarify,
    NoMatch,
    Outcome,
    Subject,
)
from src.fulfillment.schema import IntentRequest
from src.sheets.gateway import TableGateway
from src.tables.rows import (
    BILLING_RANGE,
    DEPARTMENTS_RANGE,
    DOCTORS_RANGE,
    FAQS_RANGE,
    HOSPITAL_INFO_RANGE,
    LAB_REPORTS_RANGE,
    BillingItem,
    Department,
    Doctor,
    FaqEntry,
    LabReport,
    facts_by_key,
    parse_rows,
)

HOURS_FACTS: tuple[FactTemplate, ...] = (
    ("hours", "Hospital hours: {}."),
    ("holidays", "Holidays: {}."),
)

LOCATION_FACTS: tuple[FactTemplate, ...] = (
    ("address", "We're located at: {}."),
    ("directions", "{}."),
    ("parking", "Parking: {}."),
)

LAB_STATUS_HINTS: dict[str, str] = {
    "Ready": "You can collect your report from the lab reception.",
    "Delivered": "Report has been delivered to your doctor.",
}

ASK_DEPARTMENT = (
    "Which department are you looking for? We have Cardiology, Pediatrics, Orthopedics, and more."
)
ASK_DOCTOR_OR_DEPARTMENT = "Could you specify which doctor or department you're looking for?"
ASK_SAMPLE_ID = "Please provide your sample ID to check the lab report status."
ASK_SERVICE = "Which service are you asking about? (consultation, lab, pharmacy, or inpatient)"


def _sentence(text: str) -> str:
    return f"{text}." if text else ""


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def _candidate_labels(doctors: list[Doctor]) -> tuple[str, ...]:
    """One label per matching row; names shared by several rows carry their department."""

    counts = Counter(d.name for d in doctors)
    return tuple(f"{d.name} ({d.department})" if counts[d.name] > 1 else d.name for d in doctors)


async def welcome(request: IntentRequest, gateway: TableGateway) -> Outcome:
    return Canned(CannedReply.welcome)


async def fallback(request: IntentRequest, gateway: TableGateway) -> Outcome:
    return Canned(CannedReply.fallback)


async def _hospital_facts(gateway: TableGateway, templates: tuple[FactTemplate, ...]) -> Outcome:
    facts = facts_by_key(await gateway.fetch(HOSPITAL_INFO_RANGE))
    sentences = compose_facts(facts, templates)
    if not sentences:
        return NoMatch(Subject.hospital_info)
    return Answer(" ".join(sentences))


async def hospital_hours(request: IntentRequest, gateway: TableGateway) -> Outcome:
    return await _hospital_facts(gateway, HOURS_FACTS)


async def location(request: IntentRequest, gateway: TableGateway) -> Outcome:
    return await _hospital_facts(gateway, LOCATION_FACTS)


async def department_info(request: IntentRequest, gateway: TableGateway) -> Outcome:
    """Describe the first department whose name contains `department_name`."""

    query = request.parameter("department_name")
    if not query:
        return Clarify(ASK_DEPARTMENT)

    departments = parse_rows(await gateway.fetch(DEPARTMENTS_RANGE), Department)
    department = first_containing(departments, lambda d: d.name, query)
    if department is None:
        return NoMatch(Subject.department, query)

    return Answer(
        f"{department.name} Department: {department.description}. "
        f"Located on {department.location}. Contact: {department.contact}."
    )


async def doctor_availability(request: IntentRequest, gateway: TableGateway) -> Outcome:
    """Look doctors up by name, or by department when no name was given.

    Zero matches is a no-match, one match is described in full, several matches are listed back so
    the user can pick one.
    """

    doctor_name = request.parameter("doctor_name")
    department_name = request.parameter("department_name")
    if not doctor_name and not department_name:
        return Clarify(ASK_DOCTOR_OR_DEPARTMENT)

    doctors = parse_rows(await gateway.fetch(DOCTORS_RANGE), Doctor)
    if doctor_name:
        matches = all_containing(doctors, lambda d: d.name, doctor_name)
    else:
        matches = all_containing(doctors, lambda d: d.department, department_name or "")

    if not matches:
        return NoMatch(Subject.doctor, doctor_name or department_name or "")
    if len(matches) > 1:
        return AmbiguousMatch(_candidate_labels(matches))

    doctor = matches[0]
    return Answer(
        _join(
            f"Dr. {doctor.name} ({doctor.department}): "
            f"Available {doctor.available_days} from {doctor.available_hours}.",
            _sentence(doctor.notes),
        )
    )


async def lab_report_status(request: IntentRequest, gateway: TableGateway) -> Outcome:
    """Report the status of the sample whose ID equals `sample_id` exactly."""

    sample_id = request.parameter("sample_id")
    if not sample_id:
        return Clarify(ASK_SAMPLE_ID)

    reports = parse_rows(await gateway.fetch(LAB_REPORTS_RANGE), LabReport)
    report = first_exact(reports, lambda r: r.sample_id, sample_id)
    if report is None:
        return NoMatch(Subject.lab_report, sample_id)

    return Answer(
        _join(
            f"Sample {sample_id}: Status is {report.status}.",
            LAB_STATUS_HINTS.get(report.status, ""),
            _sentence(report.note),
        )
    )


async def billing_query(request: IntentRequest, gateway: TableGateway) -> Outcome:
    service = request.parameter("service")
    if not service:
        return Clarify(ASK_SERVICE)

    items = parse_rows(await gateway.fetch(BILLING_RANGE), BillingItem)
    item = first_containing(items, lambda i: i.service, service)
    if item is None:
        return NoMatch(Subject.billing, service)

    return Answer(
        _join(
            f"{item.service} service: Typical cost {item.typical_cost}.",
            _sentence(item.note),
        )
    )


async def faq_general(request: IntentRequest, gateway: TableGateway) -> Outcome:
    """Answer from the first FAQ row whose keyword occurs in the raw utterance."""

    entries = parse_rows(await gateway.fetch(FAQS_RANGE), FaqEntry)
    entry = first_faq_match(entries, request.query_text)
    if entry is None:
        return NoMatch(Subject.faq)
    return Answer(entry.answer)
