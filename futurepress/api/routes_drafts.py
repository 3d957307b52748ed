import logging
from datetime import date

from fastapi import APIRouter

from futurepress.schemas.drafts import (
    CandidatesResp,
    DraftReq,
    HeadlineLintResult,
    PressReleaseResp,
)
from futurepress.services.catalog import default_draft
from futurepress.services.drafts import generate_headline_candidates, generate_subheadline_candidates
from futurepress.services.headline_lint import headline_lint
from futurepress.services.press_release import build_press_release_text

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/drafts", tags=["drafts"])


@router.get("/default")
def get_default_draft():
    """Return the seed record for a brand-new strategy (target date five years out)."""
    return default_draft(date.today())


@router.post("/headlines", response_model=CandidatesResp)
def headline_candidates(body: DraftReq) -> CandidatesResp:
    """Suggest headlines built only from the fields already entered."""
    candidates = generate_headline_candidates(body.data)
    logger.debug("headline candidates: %d", len(candidates))
    return CandidatesResp(candidates=candidates)


@router.post("/subheadlines", response_model=CandidatesResp)
def subheadline_candidates(body: DraftReq) -> CandidatesResp:
    return CandidatesResp(candidates=generate_subheadline_candidates(body.data))


@router.post("/headline-lint", response_model=HeadlineLintResult)
def lint_headline(body: DraftReq) -> HeadlineLintResult:
    """Lint `data.headline` against the draft's metric fields.

    - Flags are independent and come back in rule order
    - Rewrites only appear when a success metric and a population exist
    """
    result = headline_lint(body.data)
    logger.debug("headline lint: %s", [f.id for f in result.flags])
    return result


@router.post("/press-release", response_model=PressReleaseResp)
def press_release(body: DraftReq) -> PressReleaseResp:
    """Assemble the internal press release text for copying or printing."""
    return PressReleaseResp(text=build_press_release_text(body.data, date.today().year))
