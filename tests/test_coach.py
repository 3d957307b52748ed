import pytest

from futurepress.services.catalog import STEP_IDS
from futurepress.services.coach import (
    DEFAULT_PENALTY,
    GLOBAL_RULES,
    STEP_RULES,
    get_heuristic_coach_feedback,
    rules_for_step,
)

from conftest import GOOD_DRAFT


def _ids(flags):
    return [f.id for f in flags]


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

def test_penalties_are_in_tuning_range():
    for rules in [GLOBAL_RULES, *STEP_RULES.values()]:
        for rule in rules:
            assert rule.penalty == 0 or 4 <= rule.penalty <= 12, rule.id


def test_rule_ids_are_unique():
    ids = [r.id for rules in [GLOBAL_RULES, *STEP_RULES.values()] for r in rules]
    assert len(ids) == len(set(ids))


def test_unknown_step_runs_only_global_rules():
    assert rules_for_step("frame") == GLOBAL_RULES
    assert rules_for_step("nope") == GLOBAL_RULES
    assert rules_for_step(None) == GLOBAL_RULES


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def test_headline_step_with_everything_missing():
    result = get_heuristic_coach_feedback(
        "headline",
        {
            "headline": "",
            "successMetric": "",
            "baselineMetric": "",
            "comparatorMetric": "",
            "metricTimeframe": "",
            "beneficiary": "",
        },
    )
    assert result.score == 100 - 12 - 10 - 8 - 8 - 8 - 6
    assert _ids(result.warnings) == [
        "headline.empty",
        "headline.success-metric",
        "headline.baseline",
        "headline.comparator",
        "headline.timeframe",
        "headline.beneficiary",
    ]
    assert _ids(result.suggestions) == ["headline.pattern"]


def test_headline_step_length_and_process_checks():
    long_process = "We proudly launched an ambitious new statewide partnership " + " ".join(["together"] * 16)
    result = get_heuristic_coach_feedback("headline", dict(GOOD_DRAFT, headline=long_process))
    ids = _ids(result.warnings)
    assert ids == ["headline.long", "headline.wordy", "headline.process"]
    assert result.score == 100 - 4 - 4 - 6


def test_headline_success_metric_without_number():
    result = get_heuristic_coach_feedback("headline", dict(GOOD_DRAFT, successMetric="most students reading"))
    assert _ids(result.warnings) == ["headline.success-metric-no-number"]
    assert result.score == 92


def test_context_step_and_board_framing():
    result = get_heuristic_coach_feedback("context", {"futureDate": "2031-06-01"})
    assert _ids(result.warnings) == ["context.location", "context.grantee-org", "context.grantee-focus"]
    assert result.score == 100 - 3 * DEFAULT_PENALTY
    assert result.suggestions[0].detail == 'Use "By 2031..." language for accountability.'


def test_context_step_without_usable_date():
    result = get_heuristic_coach_feedback("context", {"futureDate": "soon"})
    assert "context.future-date" not in _ids(result.warnings)
    assert "context.board-framing" not in _ids(result.suggestions)


def test_problem_step_numbers_and_denominators():
    result = get_heuristic_coach_feedback(
        "problem",
        {"problem": "Too many kids cannot read", "beneficiary": "kids", "problemScope": "all schools"},
    )
    assert _ids(result.warnings) == [
        "problem.no-number",
        "problem.scope-no-number",
        "problem.denominator",
        "problem.denominator-unit",
        "problem.denominator-source",
    ]
    assert result.score == 100 - 8 - 6 - 10 - 8 - 8
    assert _ids(result.suggestions) == ["problem.denominator-wording"]


def test_solution_step_short_mechanism_and_weak_evidence():
    data = dict(GOOD_DRAFT, solution="Phonics for all.", evidenceStrength="none", evidence="Teachers loved it")
    result = get_heuristic_coach_feedback("solution", data)
    assert _ids(result.warnings) == ["solution.short", "solution.evidence-strength", "solution.proof-no-number"]
    assert result.score == 100 - 5 - 8 - 6


def test_solution_step_everything_missing():
    result = get_heuristic_coach_feedback("solution", {})
    assert _ids(result.warnings) == [
        "solution.empty",
        "solution.scale-mechanism",
        "solution.evidence-summary",
        "solution.evidence-strength",
        "solution.uncertainties",
        "solution.proof",
        "solution.why-undeniable",
    ]
    assert result.score == 100 - 6 - 10 - 10 - 8 - 8 - 10 - 6


def test_stakeholder_step():
    result = get_heuristic_coach_feedback("stakeholder", {"internalQuote": "Proud day.", "externalQuote": "It helped."})
    assert _ids(result.warnings) == ["stakeholder.external-quote-short"]
    assert result.score == 96
    assert _ids(result.suggestions) == ["stakeholder.tone", "global.decision-grade"]


def test_review_step_suggestions_carry_no_penalty():
    result = get_heuristic_coach_feedback("review", {})
    assert _ids(result.warnings) == ["review.denominator", "review.scale-mechanism", "review.success-metric"]
    assert result.score == 100 - 10 - 10 - 12
    assert _ids(result.suggestions) == ["review.decision", "review.risks", "review.kill-criteria"]
    assert {f.severity for f in result.suggestions} == {"info"}


# ---------------------------------------------------------------------------
# Global rules
# ---------------------------------------------------------------------------

def test_jargon_warning_lists_hits_once():
    data = dict(GOOD_DRAFT, problem="We leverage synergy across the ecosystem to reach 40% of families", solution=GOOD_DRAFT["solution"] + " Leverage it.")
    result = get_heuristic_coach_feedback("problem", data)
    assert _ids(result.warnings) == ["global.jargon"]
    assert result.warnings[0].detail == "Consider replacing: leverage, synergy, ecosystem"
    assert result.score == 96
    assert _ids(result.suggestions) == ["problem.denominator-wording", "global.decision-grade"]


def test_jargon_hits_capped_at_six():
    text = "leverage synergy holistic paradigm ecosystem optimize capacity building stakeholders utilize robust"
    result = get_heuristic_coach_feedback("frame", {"evidenceSummary": text})
    assert result.warnings[0].detail == "Consider replacing: leverage, synergy, holistic, paradigm, ecosystem, optimize"


def test_decision_grade_suggestion_only_with_few_warnings():
    clean = get_heuristic_coach_feedback("frame", {})
    assert clean.score == 100
    assert clean.warnings == []
    assert _ids(clean.suggestions) == ["global.decision-grade"]

    noisy = get_heuristic_coach_feedback("review", {})
    assert "global.decision-grade" not in _ids(noisy.suggestions)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

ODD_INPUTS = [
    None,
    {},
    {"headline": 12, "solution": ["a"], "evidenceStrength": {"x": 1}, "confidence": -40},
    {"futureDate": "31/31/31", "confidence": 1000, "externalQuote": None},
]


@pytest.mark.parametrize("step_id", sorted(STEP_IDS) + ["unknown"])
@pytest.mark.parametrize("data", ODD_INPUTS)
def test_score_always_in_bounds(step_id, data):
    result = get_heuristic_coach_feedback(step_id, data)
    assert 0 <= result.score <= 100


@pytest.mark.parametrize("step_id", sorted(STEP_IDS))
def test_good_draft_is_clean_at_every_step(step_id):
    result = get_heuristic_coach_feedback(step_id, GOOD_DRAFT)
    assert result.warnings == []
    assert result.score == 100
    assert result.suggestions[-1].id == "global.decision-grade"


@pytest.mark.parametrize("step_id", sorted(STEP_IDS))
def test_feedback_is_deterministic(step_id):
    first = get_heuristic_coach_feedback(step_id, GOOD_DRAFT)
    second = get_heuristic_coach_feedback(step_id, dict(GOOD_DRAFT))
    assert first.model_dump() == second.model_dump()


@pytest.mark.parametrize("field", sorted(GOOD_DRAFT))
def test_removing_a_field_never_removes_warnings(field):
    reduced = {k: v for k, v in GOOD_DRAFT.items() if k != field}
    for step_id in STEP_IDS:
        before = len(get_heuristic_coach_feedback(step_id, GOOD_DRAFT).warnings)
        after = len(get_heuristic_coach_feedback(step_id, reduced).warnings)
        assert after >= before


@pytest.mark.parametrize(
    "field",
    [
        "futureDate", "location", "granteeOrg", "granteeFocus",
        "problem", "beneficiary", "problemScope", "denominatorIncluded", "denominatorUnit", "denominatorSource",
        "solution", "scaleMechanism", "evidenceSummary", "evidenceStrength", "keyUncertainties", "evidence",
        "sinatraWhyUndeniable", "internalQuote", "externalQuote",
        "headline", "successMetric", "baselineMetric", "comparatorMetric", "metricTimeframe",
    ],
)
def test_removing_a_checked_field_costs_points(field):
    reduced = dict(GOOD_DRAFT, **{field: ""})
    total = sum(get_heuristic_coach_feedback(s, reduced).score for s in STEP_IDS)
    assert total < 100 * len(STEP_IDS)


def test_blanking_a_weak_field_keeps_the_warning_count():
    weak = dict(GOOD_DRAFT, problem="Too many kids cannot read")
    before = len(get_heuristic_coach_feedback("problem", weak).warnings)
    after = len(get_heuristic_coach_feedback("problem", dict(weak, problem="")).warnings)
    assert before == after == 1


def test_input_is_not_mutated():
    data = dict(GOOD_DRAFT)
    get_heuristic_coach_feedback("headline", data)
    assert data == GOOD_DRAFT
