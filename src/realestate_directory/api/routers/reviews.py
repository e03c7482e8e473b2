"""
Reviews Router

Endpoints for reading and writing reviews of agencies and agents.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session as DbSession

from src.realestate_directory.api.auth import get_current_session
from src.realestate_directory.api.dependencies import get_db
from src.realestate_directory.api.schemas import ReviewCreate, ReviewList
from src.realestate_directory.exceptions import InvalidReviewError, ProfileNotFoundError
from src.realestate_directory.models.enums import Role
from src.realestate_directory.models.profiles import Review, Session
from src.realestate_directory.services.auth_service import has_role
from src.realestate_directory.services.review_service import ReviewService

router = APIRouter(prefix="/api/v1/reviews", tags=["reviews"])


@router.get("/{target_id}", response_model=ReviewList)
def list_reviews(target_id: str, db: DbSession = Depends(get_db)):
    """
    Reviews of an agency or agent, oldest first.

    Returns:
        Reviews and their average rating (null without reviews)
    """
    service = ReviewService(db)
    return ReviewList(
        target_id=target_id,
        average_rating=service.average_rating(target_id),
        reviews=service.reviews_for(target_id),
    )


@router.post("/{target_id}", response_model=Review, status_code=status.HTTP_201_CREATED)
def add_review(
    target_id: str,
    review: ReviewCreate,
    db: DbSession = Depends(get_db),
    current: Session = Depends(get_current_session),
):
    """
    Review an agency or agent as the signed-in consumer.

    Raises:
        HTTPException: 403 for non-consumers, 404 for unknown targets,
            422 for ratings outside 1..5
    """
    if not has_role(current, Role.CONSUMER):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only consumers can write reviews")

    try:
        return ReviewService(db).add_review(
            review.target_type, target_id, current, review.rating, review.comment
        )
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidReviewError as e:
        raise HTTPException(status_code=422, detail=str(e))
