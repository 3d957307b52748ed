"""Fixed term lists and the substring detector that scans drafts against them.

Two lists, two jobs:
- JARGON_TERMS flags corporate tone anywhere in the narrative fields.
- PROCESS_TERMS flags headlines that describe an activity instead of a
  measured outcome.

Matching is a case-insensitive substring test on the compacted text; no
stemming ("launch" also catches "launched"). Keep entries lowercase.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from .normalize import compact

JARGON_TERMS: tuple[str, ...] = (
    "leverage",
    "synergy",
    "holistic",
    "paradigm",
    "ecosystem",
    "optimize",
    "capacity building",
    "stakeholders",
    "utilize",
    "robust",
)

PROCESS_TERMS: tuple[str, ...] = (
    "launch",
    "announce",
    "partner",
    "partnership",
    "convene",
    "coalition",
    "initiative",
    "pilot",
    "rollout",
    "collaborate",
    "capacity building",
    "empower",
    "support",
    "strengthen",
    "invest",
    "investment",
    "grant",
    "funding",
)


def find_terms(text: Any, terms: Sequence[str]) -> List[str]:
    """Return the terms found in `text`, de-duplicated, in `terms` order."""
    lowered = compact(text).lower()
    if not lowered:
        return []
    return list(dict.fromkeys(t for t in terms if t in lowered))


def find_jargon(text: Any) -> List[str]:
    return find_terms(text, JARGON_TERMS)


def find_process_terms(text: Any) -> List[str]:
    return find_terms(text, PROCESS_TERMS)


def has_process_language(text: Any) -> bool:
    return bool(find_process_terms(text))


def jargon_across(values: Iterable[Any]) -> List[str]:
    """Jargon hits over several fields, first-seen order, no repeats."""
    hits: List[str] = []
    for value in values:
        hits.extend(find_jargon(value))
    return list(dict.fromkeys(hits))
