"""
Review Service

Consumer reviews of agencies and agents.
"""
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session as DbSession

from src.realestate_directory.db.repository import DirectoryRepository, ReviewRepository
from src.realestate_directory.exceptions import InvalidReviewError, ProfileNotFoundError
from src.realestate_directory.models.enums import EntityType, ReviewTarget
from src.realestate_directory.models.profiles import Review, Session
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class ReviewService:
    def __init__(self, session: DbSession, repository: Optional[DirectoryRepository] = None,
                 reviews: Optional[ReviewRepository] = None):
        self.session = session
        self.repository = repository or DirectoryRepository()
        self.reviews = reviews or ReviewRepository()

    def add_review(self, target_type: ReviewTarget, target_id: str, author: Session,
                   rating: int, comment: str = "") -> Review:
        """
        Record a review and refresh the target's score.

        Args:
            target_type: agency or agent
            target_id: Reviewed profile id
            author: Signed-in reviewer
            rating: Whole stars, 1 to 5
            comment: Free text

        Returns:
            The stored review

        Raises:
            InvalidReviewError: Rating outside 1..5
            ProfileNotFoundError: Target does not exist
        """
        target_type = ReviewTarget(target_type)
        if isinstance(rating, bool) or not isinstance(rating, int) \
                or not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidReviewError(f"Rating must be a whole number from {MIN_RATING} to {MAX_RATING}")

        entity_type = EntityType(target_type.value)
        target = self.repository.get(self.session, entity_type, target_id)
        if target is None:
            raise ProfileNotFoundError(entity_type.value, target_id)

        review = Review(
            id=uuid.uuid4().hex,
            target_id=target_id,
            target_type=target_type,
            author_id=author.user_id,
            author_name=author.name,
            rating=rating,
            comment=(comment or "").strip(),
        )
        self.reviews.add(self.session, review)
        logger.info("review_added", target_type=target_type.value, target_id=target_id, rating=rating)

        if target_type == ReviewTarget.AGENCY:
            target.reviews_score = self.average_rating(target_id) or 0
            self.repository.save(self.session, target)
            logger.debug("agency_reviews_score_refreshed", id=target_id, score=target.reviews_score)

        return review

    def reviews_for(self, target_id: str) -> List[Review]:
        return self.reviews.list_for_target(self.session, target_id)

    def average_rating(self, target_id: str) -> Optional[float]:
        """Mean rating rounded to one decimal, or None without reviews."""
        average = self.reviews.average_rating(self.session, target_id)
        return round(average, 1) if average is not None else None
