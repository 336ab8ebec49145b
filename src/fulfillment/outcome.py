"""Handler outcomes.

Handlers never build apology strings themselves. They return one of the outcome records below, and
only the response formatter turns an outcome into text. This keeps each failure kind (missing
parameter, no match, ambiguous match, lookup unavailable) observable in tests and logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class OutcomeKind(StrEnum):
    """Internal outcome kinds, used for diagnostics."""

    answer = "answer"
    missing_parameter = "missing_parameter"
    no_match = "no_match"
    ambiguous_match = "ambiguous_match"
    lookup_unavailable = "lookup_unavailable"
    canned = "canned"


class Subject(StrEnum):
    """What a no-match lookup was about; selects the apology template."""

    hospital_info = "hospital_info"
    department = "department"
    doctor = "doctor"
    lab_report = "lab_report"
    billing = "billing"
    faq = "faq"


class CannedReply(StrEnum):
    welcome = "welcome"
    fallback = "fallback"


@dataclass(frozen=True)
class Answer:
    """A substantive answer fragment; the formatter appends the disclaimer."""

    text: str
    kind = OutcomeKind.answer


@dataclass(frozen=True)
class Clarify:
    """A required parameter was missing; `question` is sent back as-is."""

    question: str
    kind = OutcomeKind.missing_parameter


@dataclass(frozen=True)
class NoMatch:
    """The lookup completed but no row satisfied the matching rule."""

    subject: Subject
    query: str = ""
    kind = OutcomeKind.no_match


@dataclass(frozen=True)
class AmbiguousMatch:
    """Several rows matched; `candidates` are listed back to the user in row order."""

    candidates: tuple[str, ...]
    kind = OutcomeKind.ambiguous_match


@dataclass(frozen=True)
class Unavailable:
    """The data source failed or returned rows that do not fit the schema."""

    kind = OutcomeKind.lookup_unavailable


@dataclass(frozen=True)
class Canned:
    """A static reply that needs no lookup."""

    reply: CannedReply
    kind = OutcomeKind.canned


Outcome = Answer | Clarify | NoMatch | AmbiguousMatch | Unavailable | Canned
