"""Plain-text assembly of the internal future-retrospective press release.

Produces the same block of text the form offers for copying: banner,
headline, subheadline, dateline paragraph, quotes, challenge, solution and
proof. Missing headline/subheadline and core fields render as bracketed
placeholders so gaps stay visible in the draft.
"""
from __future__ import annotations

from typing import Any, List

from .catalog import archetype_label
from .normalize import as_fields, compact

BANNER = "Internal Draft — Future Retrospective"
NOT_FOR_DISTRIBUTION = "Not for distribution"


def _or(value: Any, fallback: str) -> str:
    return compact(value) or fallback


def _quote(text: Any, speaker: Any, fallback_speaker: str) -> str:
    quote = compact(text)
    if not quote:
        return ""
    return f'"{quote}" — {_or(speaker, fallback_speaker)}'


def build_press_release_text(data: Any, current_year: int) -> str:
    """Return the full press release as newline-joined text.

    `current_year` dates "The Challenge" section; pass it in so the output
    depends only on the arguments.
    """
    f = as_fields(data)
    program = _or(f.get("programName"), "[Program name]")
    location = _or(f.get("location"), "[Location]")
    future_date = _or(f.get("futureDate"), "[Target date]")
    beneficiary = _or(f.get("beneficiary"), "[Beneficiary]")
    grantee_org = compact(f.get("granteeOrg"))
    grantee_focus = compact(f.get("granteeFocus"))
    evidence = compact(f.get("evidence"))

    dateline = (
        f"{location} — {future_date} — Today, the Foundation marked the successful "
        f"conclusion of {program}, an initiative that has fundamentally changed the "
        f"landscape for {beneficiary}."
    )
    if grantee_org:
        focus = f", focused on {grantee_focus}" if grantee_focus else ""
        dateline += f" The work was led by {grantee_org}{focus}."

    lines: List[str] = [
        BANNER,
        NOT_FOR_DISTRIBUTION,
        f"Archetype: {archetype_label(f.get('archetype'))}",
        _or(f.get("headline"), "[Future Headline Goes Here]"),
        _or(f.get("subheadline"), "[Optional subheadline: add scale + mechanism + time window]"),
        dateline,
        _quote(f.get("internalQuote"), f.get("internalSpeaker"), "Internal speaker"),
        f"The Challenge ({current_year})",
        _or(f.get("problem"), "[Add current reality]"),
        "The Solution",
        _or(f.get("solution"), "[Add mechanism]"),
        f"The Metric That Mattered: {evidence}" if evidence else "",
        _quote(f.get("externalQuote"), f.get("externalSpeaker"), "External speaker"),
    ]
    return "\n".join(line for line in lines if line)
