"""Field normalization helpers shared by every draft service.

Purpose
-------
Draft records arrive straight from the form host: values may be missing,
padded with whitespace, or not strings at all. Every generator, linter and
coach rule reads fields through these helpers so "missing" means the same
thing everywhere (absent, empty, whitespace-only or non-string).
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping

from pydantic import BaseModel

_WS_RE = re.compile(r"\s+")
# ASCII only; \d would also match non-Latin digits
_DIGITS_RE = re.compile(r"[0-9]+")
_BARE_YEAR_RE = re.compile(r"[0-9]{4}")

TRUNCATION_MARKER = "..."


def compact(value: Any) -> str:
    """Collapse internal whitespace runs to one space and trim; non-strings -> ""."""
    if not isinstance(value, str):
        return ""
    return _WS_RE.sub(" ", value).strip()


def has_text(value: Any) -> bool:
    return bool(compact(value))


def contains_number(value: Any) -> bool:
    return _DIGITS_RE.search(compact(value)) is not None


def digits_only(value: Any) -> str:
    """Return every maximal digit run, space-joined, in order of appearance."""
    return " ".join(_DIGITS_RE.findall(compact(value)))


def word_count(value: Any) -> int:
    text = compact(value)
    return len(text.split(" ")) if text else 0


def join_non_empty(parts: Iterable[Any], sep: str = " ") -> str:
    """Compact each part, drop the empty ones, join the rest."""
    return sep.join(p for p in (compact(x) for x in parts) if p)


def trim_to_words(text: Any, max_words: int = 20) -> str:
    """Keep at most `max_words` words; mark truncation with a trailing ellipsis."""
    words = [w for w in compact(text).split(" ") if w]
    if len(words) <= max_words:
        return " ".join(words)
    return " ".join(words[:max_words]) + TRUNCATION_MARKER


def dedupe(items: Iterable[Any]) -> List[str]:
    """Compact, drop empties and case-insensitive repeats (first one wins)."""
    seen = set()
    out: List[str] = []
    for item in items:
        text = compact(item)
        if not text:
            continue
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(text)
    return out


def year_from_date(value: Any) -> str:
    """Calendar year of an ISO date/datetime (or a bare 4-digit year), else ""."""
    text = compact(value)
    if not text:
        return ""
    if _BARE_YEAR_RE.fullmatch(text):
        return text
    try:
        return str(datetime.fromisoformat(text).year)
    except ValueError:
        return ""


def as_fields(data: Any) -> Dict[str, Any]:
    """Return a plain camelCase mapping for a DraftRecord, a mapping, or None."""
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if isinstance(data, Mapping):
        return dict(data)
    return {}
