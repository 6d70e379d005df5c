import logging

from fastapi import APIRouter, Depends, Query
from pydantic import NaiveDatetime

from app.core.auth import require_admin, require_user
from app.core.errors import EntityNotFoundException
from app.core.payload import json_payload, payload_openapi
from app.models.recommendation import Recommendation
from app.repositories.recommendation import RecommendationRepository, get_recommendation_repository
from app.schemas.common import BIGINT_MAX, BIGINT_MIN
from app.schemas.recommendation import RecommendationRead, RecommendationUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/recommendation", tags=["recommendation"])

ISO_HINT = "in iso format, e.g. YYYY-mm-ddTHH:MM:SS"


@router.get("/all", response_model=list[RecommendationRead], dependencies=[Depends(require_user)])
def list_recommendations(
    repo: RecommendationRepository = Depends(get_recommendation_repository),
):
    """List all recommendations."""
    return repo.find_all()


@router.get("", response_model=RecommendationRead, dependencies=[Depends(require_user)])
def get_recommendation(
    recommendation_id: int = Query(..., alias="id", ge=BIGINT_MIN, le=BIGINT_MAX),
    repo: RecommendationRepository = Depends(get_recommendation_repository),
):
    """Get a single recommendation."""
    recommendation = repo.find_by_id(recommendation_id)
    if recommendation is None:
        raise EntityNotFoundException(Recommendation, recommendation_id)
    return recommendation


@router.post("/post", response_model=RecommendationRead, dependencies=[Depends(require_admin)])
def create_recommendation(
    requester_email: str = Query(..., alias="requesterEmail"),
    professor_email: str = Query(..., alias="professorEmail"),
    explanation: str = Query(...),
    date_requested: NaiveDatetime = Query(..., alias="dateRequested", description=f"date requested ({ISO_HINT})"),
    date_needed: NaiveDatetime = Query(..., alias="dateNeeded", description=f"date needed ({ISO_HINT})"),
    done: bool = Query(...),
    repo: RecommendationRepository = Depends(get_recommendation_repository),
):
    """Create a new recommendation."""
    logger.info(f"dateRequested={date_requested}")
    logger.info(f"dateNeeded={date_needed}")

    recommendation = Recommendation(
        requester_email=requester_email,
        professor_email=professor_email,
        explanation=explanation,
        date_requested=date_requested,
        date_needed=date_needed,
        done=done,
    )
    return repo.save(recommendation)


@router.put(
    "",
    response_model=RecommendationRead,
    dependencies=[Depends(require_admin)],
    openapi_extra=payload_openapi(RecommendationUpdate),
)
def update_recommendation(
    incoming: RecommendationUpdate = Depends(json_payload(RecommendationUpdate)),
    recommendation_id: int = Query(..., alias="id", ge=BIGINT_MIN, le=BIGINT_MAX),
    repo: RecommendationRepository = Depends(get_recommendation_repository),
):
    """
    Replace every field of an existing recommendation with the payload's.
    The id comes from the query string; any id in the payload is ignored.
    """
    logger.info(f"incoming = {incoming}")
    recommendation = repo.find_by_id(recommendation_id)
    if recommendation is None:
        raise EntityNotFoundException(Recommendation, recommendation_id)

    recommendation.requester_email = incoming.requester_email
    recommendation.professor_email = incoming.professor_email
    recommendation.explanation = incoming.explanation
    recommendation.date_requested = incoming.date_requested
    recommendation.date_needed = incoming.date_needed
    recommendation.done = incoming.done
    return repo.save(recommendation)
