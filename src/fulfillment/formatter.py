"""Response formatter: the only place where outcomes become user-facing text."""

from __future__ import annotations

from src.fulfillment.outcome import (
    AmbiguousMatch,
    Answer,
    Canned,
    CannedReply,
    Clarify,
    NoMatch,
    Outcome,
    Subject,
    Unavailable,
)

DISCLAIMER = "This is demo info — please call reception at {helpline} to confirm."
GENERIC_APOLOGY = "I'm sorry, I don't have that info in the demo. Please call {helpline} for help."

NO_MATCH_TEMPLATES: dict[Subject, str] = {
    Subject.hospital_info: GENERIC_APOLOGY,
    Subject.department: (
        "I couldn't find information for the {query} department. "
        "Please call {helpline} for assistance."
    ),
    Subject.doctor: "No doctors found. Please call {helpline} for assistance.",
    Subject.lab_report: (
        "No lab report found for sample ID {query}. "
        "Please check the ID and try again, or call {helpline}."
    ),
    Subject.billing: (
        "I don't have billing information for {query}. Please call {helpline} for assistance."
    ),
    Subject.faq: GENERIC_APOLOGY,
}

AMBIGUOUS_DOCTOR_TEMPLATE = "I found multiple doctors: {candidates}. Which one are you looking for?"

CANNED_TEMPLATES: dict[CannedReply, str] = {
    CannedReply.welcome: (
        "Hello! I'm the hospital receptionist assistant. I can help with: doctor schedules, "
        "department info, lab report status, billing queries, registration info, hospital hours, "
        "and emergency contacts. How can I help you today?"
    ),
    CannedReply.fallback: (
        "I'm not sure I understand. I can help with: 1) Doctor schedules, 2) Department info, "
        "3) Lab reports, 4) Billing queries. Which would you like? "
        "Or call {helpline} for immediate assistance."
    ),
}


class ResponseFormatter:
    """Renders outcomes with the process-wide reception helpline substituted in."""

    def __init__(self, helpline: str) -> None:
        self.helpline = helpline

    def disclaimer(self) -> str:
        return DISCLAIMER.format(helpline=self.helpline)

    def render(self, outcome: Outcome) -> str:
        """Return the final reply text for `outcome`."""

        if isinstance(outcome, Answer):
            return f"{outcome.text} {self.disclaimer()}"
        if isinstance(outcome, Clarify):
            return outcome.question
        if isinstance(outcome, NoMatch):
            template = NO_MATCH_TEMPLATES[outcome.subject]
            return template.format(query=outcome.query, helpline=self.helpline)
        if isinstance(outcome, AmbiguousMatch):
            return AMBIGUOUS_DOCTOR_TEMPLATE.format(candidates=", ".join(outcome.candidates))
        if isinstance(outcome, Canned):
            return CANNED_TEMPLATES[outcome.reply].format(helpline=self.helpline)
        if isinstance(outcome, Unavailable):
            return GENERIC_APOLOGY.format(helpline=self.helpline)
        raise TypeError(f"unsupported outcome: {outcome!r}")
