import logging
from typing import List

from fastapi import APIRouter, HTTPException

from futurepress.schemas.drafts import CoachResult, DraftReq, StepInfo
from futurepress.services.catalog import STEP_IDS, STEPS
from futurepress.services.coach import get_heuristic_coach_feedback

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/coach", tags=["coach"])


@router.get("/steps", response_model=List[StepInfo])
def list_steps():
    """Return the wizard steps in display order."""
    return STEPS


@router.post("/{step_id}", response_model=CoachResult)
def coach_step(step_id: str, body: DraftReq) -> CoachResult:
    """Run the heuristic coach for one wizard step.

    Deterministic and side-effect free; the host may call it on every edit.
    """
    if step_id not in STEP_IDS:
        raise HTTPException(status_code=400, detail=f"Unknown step: {step_id}")

    result = get_heuristic_coach_feedback(step_id, body.data)
    logger.info("coach %s: score=%d warnings=%d", step_id, result.score, len(result.warnings))
    return result
