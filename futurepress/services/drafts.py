"""Deterministic headline and subheadline generators.

Purpose
-------
Seed the headline step with concise, scannable suggestions built only from
what the user already entered (metric, population, scope, date, location,
baseline, comparator, mechanism, evidence, cost). Nothing is invented.

Notes
-----
- Candidates come out most-complete-information first, in a fixed order.
- Every candidate is compacted, word-trimmed, and de-duplicated
  case-insensitively (first occurrence wins).
"""
from __future__ import annotations

import logging
from typing import Any, List

from .catalog import EvidenceStrength, evidence_strength_label, parse_evidence_strength
from .normalize import as_fields, compact, dedupe, has_text, join_non_empty, trim_to_words, year_from_date

logger = logging.getLogger(__name__)

HEADLINE_MAX_WORDS = 20
SUBHEADLINE_MAX_WORDS = 28

DEFAULT_BENEFICIARY = "students"
DEFAULT_PROGRAM_NAME = "the grant"
FALLBACK_OUTCOME = "improve reading outcomes"


def _subject(fields: dict) -> str:
    """Scope plus beneficiary, with a generic population when none is given."""
    beneficiary = compact(fields.get("beneficiary")) or DEFAULT_BENEFICIARY
    return join_non_empty([fields.get("problemScope"), beneficiary])


def _finish(candidates: List[str], max_words: int) -> List[str]:
    # trim before dedupe so two long drafts cannot collapse into equal output
    return dedupe(trim_to_words(c, max_words) for c in candidates)


def generate_headline_candidates(data: Any) -> List[str]:
    """Return headline suggestions for a draft record (mapping or DraftRecord)."""
    fields = as_fields(data)
    success = compact(fields.get("successMetric"))
    baseline = compact(fields.get("baselineMetric"))
    comparator = compact(fields.get("comparatorMetric"))
    timeframe = compact(fields.get("metricTimeframe"))
    location = compact(fields.get("location"))
    year = year_from_date(fields.get("futureDate"))

    subject = _subject(fields)
    where = f"in {location}" if location else ""
    by = f"by {year}" if year else ""

    candidates: List[str] = []

    if success:
        candidates.append(join_non_empty([success, "for", subject, by, where]))
        candidates.append(join_non_empty([subject, "reach", success, by, where]))
        if year:
            candidates.append(join_non_empty(["By", year, subject, "reach", success, where]))
    else:
        candidates.append(join_non_empty([subject, FALLBACK_OUTCOME, by, where]))

    if success and baseline:
        candidates.append(join_non_empty([subject, "move from", baseline, "to", success, by]))
        if timeframe:
            candidates.append(
                join_non_empty([subject, "move from", baseline, "to", success, "in", timeframe, where])
            )

    if success and comparator:
        candidates.append(join_non_empty([subject, "reach", success, "vs", comparator, by, where]))

    out = _finish(candidates, HEADLINE_MAX_WORDS)
    logger.debug("generated %d headline candidates", len(out))
    return out


def generate_subheadline_candidates(data: Any) -> List[str]:
    """Return subheadline suggestions; the generic program line is always last."""
    fields = as_fields(data)
    program = compact(fields.get("programName")) or DEFAULT_PROGRAM_NAME
    success = compact(fields.get("successMetric"))
    location = compact(fields.get("location"))
    year = year_from_date(fields.get("futureDate"))
    scale = compact(fields.get("scaleMechanism"))
    evidence = compact(fields.get("evidenceSummary")) or compact(fields.get("evidence"))
    strength = fields.get("evidenceStrength")
    uncertainties = compact(fields.get("keyUncertainties"))
    cost = compact(fields.get("costPerOutcome"))

    population = _subject(fields)
    where = f"in {location}" if location else ""
    by = f"by {year}" if year else ""

    candidates: List[str] = []

    if scale and success:
        candidates.append(
            join_non_empty([program, "scaled through", scale + ",", "helping", population, where, "reach", success, by])
        )

    if success:
        candidates.append(join_non_empty([program, "aims for", success, "for", population, where, by]))

    if evidence:
        candidates.append(join_non_empty(["Evidence to date:", evidence]))

    if has_text(strength) and parse_evidence_strength(strength) is not EvidenceStrength.NONE:
        candidates.append(join_non_empty(["Evidence base:", evidence_strength_label(strength)]))

    if uncertainties:
        candidates.append(join_non_empty(["Open uncertainties remain:", uncertainties]))

    if cost:
        candidates.append(join_non_empty(["Estimated cost per outcome:", cost]))

    candidates.append(join_non_empty([program, "clarifies what winning looks like for", population, where, by]))

    out = _finish(candidates, SUBHEADLINE_MAX_WORDS)
    logger.debug("generated %d subheadline candidates", len(out))
    return out
