import logging

from fastapi import APIRouter, Depends, Query
from pydantic import NaiveDatetime

from app.core.auth import require_admin, require_user
from app.core.errors import EntityNotFoundException
from app.core.payload import json_payload, payload_openapi
from app.models.menu_item_review import MenuItemReview
from app.repositories.menu_item_review import MenuItemReviewRepository, get_menu_item_review_repository
from app.schemas.common import BIGINT_MAX, BIGINT_MIN, INT_MAX, INT_MIN, GenericMessage
from app.schemas.menu_item_review import MenuItemReviewRead, MenuItemReviewUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/MenuItemReview", tags=["MenuItemReview"])


@router.get("/all", response_model=list[MenuItemReviewRead], dependencies=[Depends(require_user)])
def list_menu_item_reviews(
    repo: MenuItemReviewRepository = Depends(get_menu_item_review_repository),
):
    """List all menu item reviews."""
    return repo.find_all()


@router.get("", response_model=MenuItemReviewRead, dependencies=[Depends(require_user)])
def get_menu_item_review(
    review_id: int = Query(..., alias="id", ge=BIGINT_MIN, le=BIGINT_MAX),
    repo: MenuItemReviewRepository = Depends(get_menu_item_review_repository),
):
    """Get a single review."""
    review = repo.find_by_id(review_id)
    if review is None:
        raise EntityNotFoundException(MenuItemReview, review_id)
    return review


@router.post("/post", response_model=MenuItemReviewRead, dependencies=[Depends(require_admin)])
def create_menu_item_review(
    item_id: int = Query(..., alias="itemId", ge=BIGINT_MIN, le=BIGINT_MAX),
    reviewer_email: str = Query(..., alias="reviewerEmail"),
    stars: int = Query(..., ge=INT_MIN, le=INT_MAX),
    comments: str = Query(...),
    date_reviewed: NaiveDatetime = Query(
        ..., alias="dateReviewed", description="in iso format, e.g. YYYY-mm-ddTHH:MM:SS"
    ),
    repo: MenuItemReviewRepository = Depends(get_menu_item_review_repository),
):
    """Create a new review."""
    logger.info(f"dateReviewed={date_reviewed}")

    review = MenuItemReview(
        item_id=item_id,
        reviewer_email=reviewer_email,
        stars=stars,
        comments=comments,
        date_reviewed=date_reviewed,
    )
    return repo.save(review)


@router.delete("", response_model=GenericMessage, dependencies=[Depends(require_admin)])
def delete_menu_item_review(
    review_id: int = Query(..., alias="id", ge=BIGINT_MIN, le=BIGINT_MAX),
    repo: MenuItemReviewRepository = Depends(get_menu_item_review_repository),
):
    """Delete a review."""
    review = repo.find_by_id(review_id)
    if review is None:
        raise EntityNotFoundException(MenuItemReview, review_id)

    repo.delete(review)
    return GenericMessage(message=f"MenuItemReview with id {review_id} deleted")


@router.put(
    "",
    response_model=MenuItemReviewRead,
    dependencies=[Depends(require_admin)],
    openapi_extra=payload_openapi(MenuItemReviewUpdate),
)
def update_menu_item_review(
    incoming: MenuItemReviewUpdate = Depends(json_payload(MenuItemReviewUpdate)),
    review_id: int = Query(..., alias="id", ge=BIGINT_MIN, le=BIGINT_MAX),
    repo: MenuItemReviewRepository = Depends(get_menu_item_review_repository),
):
    """Update a review. Every field is overwritten from the payload; the id is not."""
    review = repo.find_by_id(review_id)
    if review is None:
        raise EntityNotFoundException(MenuItemReview, review_id)

    review.item_id = incoming.item_id
    review.reviewer_email = incoming.reviewer_email
    review.stars = incoming.stars
    review.comments = incoming.comments
    review.date_reviewed = incoming.date_reviewed
    return repo.save(review)
