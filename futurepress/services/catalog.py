"""Static catalog for the future-retrospective form.

Wizard steps, strategy archetypes, evidence-strength labels and the seed
record for a brand-new draft. Everything here is data; the services that
consume it never branch on raw strings directly.
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from futurepress.schemas.drafts import DraftRecord

from .normalize import compact


class StepId(str, Enum):
    FRAME = "frame"
    CONTEXT = "context"
    PROBLEM = "problem"
    SOLUTION = "solution"
    EVIDENCE = "evidence"
    STAKEHOLDER = "stakeholder"
    HEADLINE = "headline"
    REVIEW = "review"


# Display order of the wizard
STEPS: List[Dict[str, str]] = [
    {"id": StepId.FRAME.value, "title": "Setup"},
    {"id": StepId.CONTEXT.value, "title": "Horizon"},
    {"id": StepId.PROBLEM.value, "title": "Current reality"},
    {"id": StepId.SOLUTION.value, "title": "Mechanism"},
    {"id": StepId.EVIDENCE.value, "title": "Proof"},
    {"id": StepId.STAKEHOLDER.value, "title": "Voices (optional)"},
    {"id": StepId.HEADLINE.value, "title": "Headline"},
    {"id": StepId.REVIEW.value, "title": "Finalize"},
]

STEP_IDS = frozenset(s["id"] for s in STEPS)


class Archetype(str, Enum):
    PORTFOLIO = "portfolio"
    GRANT = "grant"


ARCHETYPES: Dict[Archetype, Dict[str, str]] = {
    Archetype.PORTFOLIO: {
        "label": "Portfolio strategy",
        "description": (
            "Define the outcome the portfolio must deliver and the system-level "
            "mechanism that makes it inevitable."
        ),
    },
    Archetype.GRANT: {
        "label": "Grant investment",
        "description": (
            "Anchor on one investment and the outcome it creates, then show how it "
            "scales beyond a single grantee."
        ),
    },
}


def resolve_archetype(value: Any) -> Archetype:
    """Map a raw archetype id onto the enum; unknown or empty -> the first one."""
    try:
        return Archetype(compact(value))
    except ValueError:
        return Archetype.PORTFOLIO


def archetype_label(value: Any) -> str:
    return ARCHETYPES[resolve_archetype(value)]["label"]


class EvidenceStrength(str, Enum):
    RANDOMIZED_TRIAL = "randomized_trial"
    QUASI_EXPERIMENTAL = "quasi_experimental"
    OBSERVATIONAL = "observational"
    INTERNAL_ANALYTICS = "internal_analytics"
    ANECDOTAL = "anecdotal"
    NONE = "none"


NOT_SPECIFIED = "Not specified"

EVIDENCE_STRENGTH_LABELS: Dict[EvidenceStrength, str] = {
    EvidenceStrength.RANDOMIZED_TRIAL: "Randomized trial",
    EvidenceStrength.QUASI_EXPERIMENTAL: "Quasi-experimental",
    EvidenceStrength.OBSERVATIONAL: "Observational",
    EvidenceStrength.INTERNAL_ANALYTICS: "Internal analytics",
    EvidenceStrength.ANECDOTAL: "Anecdotal",
    EvidenceStrength.NONE: NOT_SPECIFIED,
}


def parse_evidence_strength(value: Any) -> Optional[EvidenceStrength]:
    try:
        return EvidenceStrength(compact(value))
    except ValueError:
        return None


def evidence_strength_label(value: Any) -> str:
    """Human label for an evidence-strength token; unknown -> "Not specified"."""
    strength = parse_evidence_strength(value)
    if strength is None:
        return NOT_SPECIFIED
    return EVIDENCE_STRENGTH_LABELS[strength]


# Seed values for a brand-new strategy; every other field starts empty
DEFAULT_LOCATION = "NEW YORK"
DEFAULT_INTERNAL_SPEAKER = "Foundation Leadership"
DEFAULT_EXTERNAL_SPEAKER = "Program Partner"
DEFAULT_CONFIDENCE = 70
DEFAULT_HORIZON_YEARS = 5


def _years_after(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year + years)
    except ValueError:
        # Feb 29 -> Feb 28
        return today.replace(year=today.year + years, day=28)


def default_draft(today: date) -> Dict[str, Any]:
    """Return a fresh record shaped like the one the form starts from.

    `today` is explicit so the result is reproducible; the target date is
    placed DEFAULT_HORIZON_YEARS ahead of it.
    """
    record = DraftRecord(
        location=DEFAULT_LOCATION,
        future_date=_years_after(today, DEFAULT_HORIZON_YEARS).isoformat(),
        internal_speaker=DEFAULT_INTERNAL_SPEAKER,
        external_speaker=DEFAULT_EXTERNAL_SPEAKER,
        confidence=DEFAULT_CONFIDENCE,
        archetype=Archetype.PORTFOLIO.value,
    )
    return record.to_fields()
