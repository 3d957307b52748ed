"""Heuristic coach: step-aware warnings, suggestions and a 0-100 score.

Purpose
-------
Give fast, deterministic critique of a draft's rigor at whichever wizard
step the user is on: missing denominators, numbers, mechanisms, evidence,
voices and headline metrics. No model call is made; the same record always
produces the same result.

Scoring
-------
The score starts at START_SCORE and each triggered warning subtracts its
rule's penalty; the total is clamped to 0-100. Suggestions never cost
points. Rules run in table order:

1. the global jargon check (every step),
2. the rule table for the requested step (unknown steps have none),
3. the terminal "decision-grade" suggestion when at most one warning fired.

Notes
-----
- Penalties and thresholds are product tuning carried over as-is.
- Unknown or missing fields always take the "missing" branch of a rule.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Union

from futurepress.schemas.drafts import CoachResult, Flag

from .catalog import EvidenceStrength, StepId, parse_evidence_strength
from .normalize import as_fields, compact, contains_number, has_text, word_count, year_from_date
from .terms import has_process_language, jargon_across

logger = logging.getLogger(__name__)

START_SCORE = 100
DEFAULT_PENALTY = 6
JARGON_PENALTY = 4
MAX_JARGON_HITS = 6
MAX_HEADLINE_CHARS = 120
MAX_HEADLINE_WORDS = 20
MIN_MECHANISM_WORDS = 10
MIN_QUOTE_WORDS = 10

# Narrative fields scanned for jargon regardless of step
JARGON_FIELDS = ("problem", "solution", "scaleMechanism", "evidence", "evidenceSummary")

Fields = Dict[str, Any]
Detail = Union[str, Callable[[Fields], str]]


@dataclass(frozen=True)
class CoachRule:
    """One row of a coach table.

    `penalty` > 0 makes the rule a warning; 0 makes it a suggestion.
    `detail` may be a callable when the text depends on the record.
    """

    id: str
    title: str
    detail: Detail
    applies: Callable[[Fields], bool]
    penalty: int = DEFAULT_PENALTY

    @property
    def is_warning(self) -> bool:
        return self.penalty > 0

    def flag(self, fields: Fields) -> Flag:
        detail = self.detail(fields) if callable(self.detail) else self.detail
        return Flag(
            id=self.id,
            title=self.title,
            detail=detail,
            severity="warn" if self.is_warning else "info",
        )


def _suggest(rule_id: str, title: str, detail: Detail, applies: Callable[[Fields], bool] = lambda f: True) -> CoachRule:
    return CoachRule(rule_id, title, detail, applies, penalty=0)


# ---------------------------
# Predicates
# ---------------------------

def missing(name: str) -> Callable[[Fields], bool]:
    return lambda f: not has_text(f.get(name))


def lacks_number(name: str) -> Callable[[Fields], bool]:
    return lambda f: has_text(f.get(name)) and not contains_number(f.get(name))


def fewer_words(name: str, n: int) -> Callable[[Fields], bool]:
    return lambda f: has_text(f.get(name)) and word_count(f.get(name)) < n


def _future_year(f: Fields) -> str:
    return year_from_date(f.get("futureDate"))


def _strength_unset(f: Fields) -> bool:
    return not has_text(f.get("evidenceStrength")) or parse_evidence_strength(
        f.get("evidenceStrength")
    ) is EvidenceStrength.NONE


def _headline(f: Fields) -> str:
    return compact(f.get("headline"))


def _jargon_hits(f: Fields) -> List[str]:
    return jargon_across(f.get(name) for name in JARGON_FIELDS)


# ---------------------------
# Rule tables
# ---------------------------

GLOBAL_RULES: List[CoachRule] = [
    CoachRule(
        "global.jargon",
        "Some language reads as jargon.",
        lambda f: "Consider replacing: " + ", ".join(_jargon_hits(f)[:MAX_JARGON_HITS]),
        lambda f: bool(_jargon_hits(f)),
        JARGON_PENALTY,
    ),
]

STEP_RULES: Dict[str, List[CoachRule]] = {
    StepId.CONTEXT.value: [
        CoachRule("context.future-date", "Missing target success date.", "Pick a concrete date to anchor the strategy.", missing("futureDate")),
        CoachRule("context.location", "Missing location.", "Leadership will ask where this is true.", missing("location")),
        CoachRule("context.grantee-org", "Missing grantee organization.", "Name who is delivering this work.", missing("granteeOrg")),
        CoachRule("context.grantee-focus", "Missing grantee focus area.", "State what they are trying to change.", missing("granteeFocus")),
        _suggest(
            "context.board-framing",
            "Board framing tip.",
            lambda f: f'Use "By {_future_year(f)}..." language for accountability.',
            lambda f: bool(_future_year(f)),
        ),
    ],
    StepId.PROBLEM.value: [
        CoachRule("problem.empty", "Current reality is empty.", "State the friction clearly and concretely.", missing("problem")),
        CoachRule("problem.no-number", "Current reality lacks a number.", "Add a baseline rate, gap, or count.", lacks_number("problem"), 8),
        CoachRule("problem.beneficiary", "Beneficiary is unclear.", "Name who experiences the problem.", missing("beneficiary")),
        CoachRule("problem.scope", "Scope is missing.", "Board audiences need scale.", missing("problemScope")),
        CoachRule(
            "problem.scope-no-number",
            "Scope field does not include a number.",
            "Use a number plus unit (for example, 120 schools).",
            lacks_number("problemScope"),
            6,
        ),
        CoachRule(
            "problem.denominator",
            "Denominator is missing.",
            "Define the full population that must be different.",
            missing("denominatorIncluded"),
            10,
        ),
        CoachRule(
            "problem.denominator-unit",
            "Denominator unit is missing.",
            "Specify units such as students, teachers, or schools.",
            missing("denominatorUnit"),
            8,
        ),
        CoachRule(
            "problem.denominator-source",
            "Denominator source is missing.",
            "Cite where the denominator estimate comes from.",
            missing("denominatorSource"),
            8,
        ),
        _suggest("problem.denominator-wording", "Credibility tip.", 'Use "All X in Y" wording for denominator clarity.'),
    ],
    StepId.SOLUTION.value: [
        CoachRule("solution.empty", "Mechanism of change is empty.", "Describe the single change that made outcomes move.", missing("solution")),
        CoachRule(
            "solution.short",
            "Mechanism is very short.",
            "Add how this changes behavior or incentives.",
            fewer_words("solution", MIN_MECHANISM_WORDS),
            5,
        ),
        CoachRule(
            "solution.scale-mechanism",
            "Mechanism of scale is missing.",
            "Name the distribution path: policy, partner, procurement, or platform.",
            missing("scaleMechanism"),
            10,
        ),
        CoachRule(
            "solution.evidence-summary",
            "Evidence summary is missing.",
            "Summarize the strongest evidence and sample context.",
            missing("evidenceSummary"),
            10,
        ),
        CoachRule(
            "solution.evidence-strength",
            "Evidence strength is not selected.",
            "Classify evidence type for decision confidence.",
            _strength_unset,
            8,
        ),
        CoachRule(
            "solution.uncertainties",
            "Key uncertainties are missing.",
            "List what could break transferability or confidence.",
            missing("keyUncertainties"),
            8,
        ),
        CoachRule(
            "solution.proof",
            "Undeniable proof is missing.",
            "Name the single result that would convince a skeptic.",
            missing("evidence"),
            10,
        ),
        CoachRule(
            "solution.proof-no-number",
            "Proof point lacks a number.",
            "Specify measured change or benchmark.",
            lacks_number("evidence"),
            6,
        ),
        CoachRule(
            "solution.why-undeniable",
            "Why this is undeniable is missing.",
            "Explain why this result travels beyond one site.",
            missing("sinatraWhyUndeniable"),
        ),
    ],
    StepId.STAKEHOLDER.value: [
        CoachRule("stakeholder.internal-quote", "Internal quote is missing.", "Connect results to strategy and inevitability.", missing("internalQuote")),
        CoachRule("stakeholder.external-quote", "Beneficiary quote is missing.", "Add a lived before and after signal.", missing("externalQuote")),
        CoachRule(
            "stakeholder.external-quote-short",
            "Beneficiary quote is very short.",
            "Add a specific before-to-after detail.",
            fewer_words("externalQuote", MIN_QUOTE_WORDS),
            4,
        ),
        _suggest("stakeholder.tone", "Tone check.", "Avoid generic praise; include a specific observed change."),
    ],
    StepId.HEADLINE.value: [
        CoachRule(
            "headline.empty",
            "Headline is empty.",
            "Use the generated options as a starting point.",
            lambda f: not _headline(f),
            12,
        ),
        CoachRule(
            "headline.long",
            "Headline is long.",
            f"Aim for under {MAX_HEADLINE_CHARS} characters.",
            lambda f: len(_headline(f)) > MAX_HEADLINE_CHARS,
            4,
        ),
        CoachRule(
            "headline.wordy",
            "Headline is wordy.",
            "Aim for 10-20 words.",
            lambda f: word_count(_headline(f)) > MAX_HEADLINE_WORDS,
            4,
        ),
        CoachRule(
            "headline.process",
            "Headline reads like process, not outcome.",
            "Replace activity language with a measurable result.",
            lambda f: has_process_language(_headline(f)) and not contains_number(_headline(f)),
            6,
        ),
        CoachRule("headline.success-metric", "Success metric is missing.", "Include a measurable threshold.", missing("successMetric"), 10),
        CoachRule(
            "headline.success-metric-no-number",
            "Success metric lacks a number.",
            "Add explicit magnitude (percent, points, dollars).",
            lacks_number("successMetric"),
            8,
        ),
        CoachRule("headline.baseline", "Baseline metric is missing.", "State where the population starts.", missing("baselineMetric"), 8),
        CoachRule("headline.comparator", "Comparator metric is missing.", "State compared to what.", missing("comparatorMetric"), 8),
        CoachRule("headline.timeframe", "Metric timeframe is missing.", "State when this outcome should hold.", missing("metricTimeframe"), 8),
        CoachRule("headline.beneficiary", "Beneficiary is missing.", "Name who benefits at a glance.", missing("beneficiary"), 6),
        _suggest("headline.pattern", "Drafting tip.", "A strong pattern is: metric + population + date + location."),
    ],
    StepId.REVIEW.value: [
        CoachRule("review.denominator", "Denominator is missing.", "Common source of decision confusion.", missing("denominatorIncluded"), 10),
        CoachRule(
            "review.scale-mechanism",
            "Scale mechanism is missing.",
            "Board will ask how this moves beyond pilots.",
            missing("scaleMechanism"),
            10,
        ),
        CoachRule(
            "review.success-metric",
            "Success metric is missing.",
            "Without it, strategy quality is hard to judge.",
            missing("successMetric"),
            12,
        ),
        _suggest(
            "review.decision",
            "Decision-use boost.",
            "Specify the funding or strategy decision this should inform.",
            missing("decisionToInform"),
        ),
        _suggest("review.risks", "Risk clarity.", "Add top risks or failure modes to improve realism.", missing("keyRisks")),
        _suggest("review.kill-criteria", "Discipline check.", "Add kill criteria for faster course correction.", missing("killCriteria")),
    ],
}

DECISION_GRADE = _suggest(
    "global.decision-grade",
    "Make it decision-grade.",
    "Add a cost or implementation constraint to tighten decision relevance.",
)
DECISION_GRADE_MAX_WARNINGS = 1


def rules_for_step(step_id: Any) -> List[CoachRule]:
    """Global rules followed by the step's own table (empty for unknown steps)."""
    return GLOBAL_RULES + STEP_RULES.get(compact(step_id), [])


def get_heuristic_coach_feedback(step_id: Any, data: Any) -> CoachResult:
    """Evaluate the draft at `step_id` and return score, warnings, suggestions."""
    fields = as_fields(data)
    warnings: List[Flag] = []
    suggestions: List[Flag] = []
    penalty = 0

    for rule in rules_for_step(step_id):
        if not rule.applies(fields):
            continue
        if rule.is_warning:
            warnings.append(rule.flag(fields))
            penalty += rule.penalty
        else:
            suggestions.append(rule.flag(fields))

    score = max(0, min(START_SCORE, START_SCORE - penalty))

    if len(warnings) <= DECISION_GRADE_MAX_WARNINGS:
        suggestions.append(DECISION_GRADE.flag(fields))

    logger.debug(
        "coach step=%s score=%d warnings=%d suggestions=%d",
        compact(step_id) or "-",
        score,
        len(warnings),
        len(suggestions),
    )
    return CoachResult(score=score, warnings=warnings, suggestions=suggestions)
