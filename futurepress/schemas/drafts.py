"""Pydantic schemas for draft records and the derived feedback.

These are the typed contracts between the form host and the backend for:
- The flat draft record (camelCase on the wire, snake_case in Python)
- Linter flags and headline rewrites
- Coach results (score + warnings + suggestions)
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


# ---------------------------
# Draft Record
# ---------------------------

class DraftRecord(BaseModel):
    """One future-retrospective strategy as the form holds it.

    No field is required. Text fields that arrive as non-strings are treated
    as absent (""); `confidence` outside 0-100 is dropped to None. Unknown keys
    are kept so the host can round-trip fields this service does not read.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    # Identity / context
    program_name: str = ""
    grantee_org: str = ""
    grantee_focus: str = ""
    location: str = ""
    future_date: str = ""
    archetype: str = ""

    # Problem framing
    problem: str = ""
    beneficiary: str = ""
    problem_scope: str = ""
    denominator_included: str = ""
    denominator_excluded: str = ""
    denominator_unit: str = ""
    denominator_source: str = ""

    # Mechanism
    solution: str = ""
    scale_mechanism: str = ""

    # Evidence
    evidence: str = ""
    evidence_summary: str = ""
    evidence_strength: str = ""
    key_uncertainties: str = ""
    evidence_sources: str = ""
    effect_range: str = ""
    sinatra_skeptic: str = ""
    sinatra_why_undeniable: str = ""

    # Headline metrics
    headline: str = ""
    subheadline: str = ""
    success_metric: str = ""
    baseline_metric: str = ""
    comparator_metric: str = ""
    metric_timeframe: str = ""
    cost_per_outcome: str = ""

    # Voices
    internal_quote: str = ""
    internal_speaker: str = ""
    external_quote: str = ""
    external_speaker: str = ""

    # Decision notes
    decision_to_inform: str = ""
    key_risks: str = ""
    kill_criteria: str = ""
    next_experiment: str = ""
    confidence: Optional[int] = None

    @field_validator("*", mode="before")
    @classmethod
    def _text_or_blank(cls, v: Any, info: ValidationInfo) -> Any:
        if info.field_name == "confidence":
            return v
        return v if isinstance(v, str) else ""

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence_in_range(cls, v: Any) -> Optional[int]:
        if isinstance(v, bool) or not isinstance(v, (int, float, str)):
            return None
        try:
            n = float(v)
        except ValueError:
            return None
        if n != n or n < 0 or n > 100:
            return None
        return int(round(n))

    def to_fields(self) -> Dict[str, Any]:
        """camelCase mapping, the shape every draft service reads."""
        return self.model_dump(by_alias=True)


# ---------------------------
# Feedback
# ---------------------------

Severity = Literal["warn", "info"]


class Flag(BaseModel):
    id: str
    title: str
    detail: str
    severity: Severity = "warn"


class Rewrite(BaseModel):
    label: str
    headline: str


class HeadlineLintResult(BaseModel):
    flags: List[Flag] = Field(default_factory=list)
    rewrites: List[Rewrite] = Field(default_factory=list)


class CoachResult(BaseModel):
    score: int = Field(ge=0, le=100)
    warnings: List[Flag] = Field(default_factory=list)
    suggestions: List[Flag] = Field(default_factory=list)


# ---------------------------
# Request/Response
# ---------------------------

class DraftReq(BaseModel):
    data: DraftRecord = Field(default_factory=DraftRecord)


class CandidatesResp(BaseModel):
    candidates: List[str]


class PressReleaseResp(BaseModel):
    text: str


class StepInfo(BaseModel):
    id: str
    title: str
