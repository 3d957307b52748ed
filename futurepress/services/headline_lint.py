"""Headline quality linter.

Checks one headline against its supporting metric fields and returns
independent flags plus gated rewrite suggestions. Each check is a row in
HEADLINE_RULES and runs in table order; every rule that applies is
reported, not only the first.

Fields read: headline, successMetric, beneficiary, problemScope, futureDate,
location, baselineMetric, comparatorMetric, metricTimeframe.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from futurepress.schemas.drafts import Flag, HeadlineLintResult, Rewrite

from .normalize import as_fields, compact, contains_number, digits_only, join_non_empty, trim_to_words, word_count, year_from_date
from .terms import has_process_language

MAX_HEADLINE_WORDS = 20
MAX_CLAUSE_SEPARATORS = 2

_CLAUSE_SEP_RE = re.compile(r",|:|;| and | but ")


@dataclass(frozen=True)
class _Headline:
    text: str
    lower: str
    fields: Dict[str, Any]

    def field(self, name: str) -> str:
        return compact(self.fields.get(name))


@dataclass(frozen=True)
class LintRule:
    id: str
    title: str
    detail: str
    applies: Callable[[_Headline], bool]
    severity: str = "warn"

    def flag(self) -> Flag:
        return Flag(id=self.id, title=self.title, detail=self.detail, severity=self.severity)


def _digits_visible(value: str, headline: str) -> bool:
    """True when every digit run of `value` appears verbatim in `headline`."""
    runs = digits_only(value)
    return not runs or all(run in headline for run in runs.split(" "))


def _clause_separators(lower: str) -> int:
    return len(_CLAUSE_SEP_RE.findall(lower))


def _population_missing(h: _Headline) -> bool:
    beneficiary = h.field("beneficiary")
    if not beneficiary:
        return False
    token = beneficiary.split(" ")[0].lower()
    return token not in h.lower


HEADLINE_RULES: List[LintRule] = [
    LintRule(
        "process-no-outcome",
        "Process headline; missing outcome.",
        "Avoid activity headlines without a measurable result.",
        lambda h: has_process_language(h.text) and not contains_number(h.text),
    ),
    LintRule(
        "missing-number",
        "Headline lacks a number.",
        "Board audiences expect a clear threshold or metric.",
        lambda h: not contains_number(h.text),
    ),
    LintRule(
        "word-count-high",
        "Headline is wordy.",
        "Aim for 10-20 words.",
        lambda h: word_count(h.text) > MAX_HEADLINE_WORDS,
    ),
    LintRule(
        "too-many-clauses",
        "Headline stacks too many clauses.",
        "Keep one idea: metric, population, date, place.",
        lambda h: _clause_separators(h.lower) > MAX_CLAUSE_SEPARATORS,
    ),
    LintRule(
        "metric-mismatch",
        "Metric not in headline.",
        "Pull the success metric into the headline for clarity.",
        lambda h: not _digits_visible(h.field("successMetric"), h.text),
    ),
    LintRule(
        "baseline-missing",
        "Baseline metric is missing.",
        "State where the population starts.",
        lambda h: not h.field("baselineMetric"),
    ),
    LintRule(
        "comparator-missing",
        "Comparator metric is missing.",
        "State compared to what.",
        lambda h: not h.field("comparatorMetric"),
    ),
    LintRule(
        "timeframe-missing",
        "Metric timeframe is missing.",
        "State when this outcome should hold.",
        lambda h: not h.field("metricTimeframe"),
    ),
    LintRule(
        "population-missing",
        "Population not in headline.",
        "Name who benefits so the outcome feels grounded.",
        _population_missing,
    ),
    LintRule(
        "baseline-not-visible",
        "Baseline not in headline.",
        "Show the starting point so the change reads at a glance.",
        lambda h: bool(h.field("baselineMetric")) and not _digits_visible(h.field("baselineMetric"), h.text),
    ),
]


# ---------------------------
# Rewrites
# ---------------------------

def _rewrites(h: _Headline) -> List[Rewrite]:
    success = h.field("successMetric")
    baseline = h.field("baselineMetric")
    comparator = h.field("comparatorMetric")
    timeframe = h.field("metricTimeframe")
    location = h.field("location")
    subject = join_non_empty([h.field("problemScope"), h.field("beneficiary")])
    year = year_from_date(h.fields.get("futureDate"))

    if not (success and subject):
        return []

    by = f"by {year}" if year else ""
    where = f"in {location}" if location else ""

    drafts: List[tuple[str, str]] = [
        ("Outcome-first", join_non_empty([success, "for", subject, by, where])),
        ("Population-first", join_non_empty([subject, "reach", success, by, where])),
    ]
    if baseline:
        window = f"over {timeframe}" if timeframe else by
        drafts.append(("Baseline-to-target", join_non_empty([subject, "move from", baseline, "to", success, window, where])))
    if comparator:
        drafts.append(("Versus comparator", join_non_empty([subject, "reach", success, "vs", comparator, by, where])))

    return [Rewrite(label=label, headline=trim_to_words(text, MAX_HEADLINE_WORDS)) for label, text in drafts if text]


def headline_lint(data: Any) -> HeadlineLintResult:
    """Lint `data["headline"]` against the supporting fields in the same record.

    Never raises for missing or malformed fields; an empty headline still
    reports missing-number and whichever absence checks apply.
    """
    fields = as_fields(data)
    text = compact(fields.get("headline"))
    h = _Headline(text=text, lower=text.lower(), fields=fields)

    flags = [rule.flag() for rule in HEADLINE_RULES if rule.applies(h)]
    return HeadlineLintResult(flags=flags, rewrites=_rewrites(h))
