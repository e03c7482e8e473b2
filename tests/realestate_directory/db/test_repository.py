"""
Tests for Repository Pattern

Tests record round trips, ordering, status filtering and review queries.
"""
from src.realestate_directory.db.models import DirectoryEntry
from src.realestate_directory.db.repository import (
    DirectoryRepository,
    ReviewRepository,
    entity_type_of,
)
from src.realestate_directory.models.enums import (
    EntityType,
    ListingStatus,
    ProfileStatus,
    ReviewTarget,
)
from src.realestate_directory.models.profiles import AgencyProfile, Review


class TestDirectoryRepository:
    """Tests for DirectoryRepository."""

    def test_add_and_get(self, test_db, make_agency):
        """Test a record comes back as the same pydantic model."""
        repo = DirectoryRepository()
        agency = make_agency("a1", status=ProfileStatus.PENDING)

        repo.add(test_db, agency)
        test_db.commit()

        found = repo.get(test_db, EntityType.AGENCY, "a1")
        assert isinstance(found, AgencyProfile)
        assert found == agency

    def test_get_wrong_kind_is_none(self, test_db, make_agency):
        repo = DirectoryRepository()
        repo.add(test_db, make_agency("a1"))

        assert repo.get(test_db, EntityType.AGENT, "a1") is None
        assert repo.get(test_db, EntityType.AGENCY, "missing") is None

    def test_list_in_insertion_order(self, test_db, make_agency):
        repo = DirectoryRepository()
        for record_id in ("c", "a", "b"):
            repo.add(test_db, make_agency(record_id))

        assert [agency.id for agency in repo.list(test_db, EntityType.AGENCY)] == ["c", "a", "b"]

    def test_list_filters_kind_and_status(self, test_db, make_agency, make_agent, make_property):
        repo = DirectoryRepository()
        repo.add(test_db, make_agency("a1"))
        repo.add(test_db, make_agency("a2", status=ProfileStatus.PENDING))
        repo.add(test_db, make_agent("g1"))
        repo.add(test_db, make_property("p1", status=ListingStatus.UNPUBLISHED))

        approved = repo.list(test_db, EntityType.AGENCY, statuses=[ProfileStatus.APPROVED])
        assert [agency.id for agency in approved] == ["a1"]
        assert len(repo.list(test_db, EntityType.AGENCY)) == 2
        assert repo.list(test_db, EntityType.PROPERTY, statuses=[ListingStatus.PUBLISHED]) == []

    def test_invalid_payload_skipped(self, test_db, make_agency):
        """Test rows that no longer validate are skipped, not fatal."""
        repo = DirectoryRepository()
        repo.add(test_db, make_agency("a1"))
        test_db.add(DirectoryEntry(id="broken", seq=99, entity_type="agency", payload={"name": "x"}))
        test_db.flush()

        assert [agency.id for agency in repo.list(test_db, EntityType.AGENCY)] == ["a1"]

    def test_get_by_email_case_insensitive(self, test_db, make_agency):
        repo = DirectoryRepository()
        repo.add(test_db, make_agency("a1", email="office@harbour.com"))

        assert repo.get_by_email(test_db, EntityType.AGENCY, " Office@Harbour.com ").id == "a1"
        assert repo.get_by_email(test_db, EntityType.AGENT, "office@harbour.com") is None
        assert repo.get_by_email(test_db, EntityType.AGENCY, "") is None

    def test_update_status(self, test_db, make_agency):
        repo = DirectoryRepository()
        repo.add(test_db, make_agency("a1", status=ProfileStatus.PENDING))

        updated = repo.update_status(test_db, EntityType.AGENCY, "a1", ProfileStatus.APPROVED)

        assert updated.status == ProfileStatus.APPROVED
        assert repo.get(test_db, EntityType.AGENCY, "a1").status == ProfileStatus.APPROVED
        assert test_db.get(DirectoryEntry, "a1").status == "approved"

    def test_update_status_not_found(self, test_db):
        repo = DirectoryRepository()
        assert repo.update_status(test_db, EntityType.AGENCY, "missing", ProfileStatus.APPROVED) is None

    def test_save_overwrites_payload(self, test_db, make_agency):
        repo = DirectoryRepository()
        agency = make_agency("a1")
        repo.add(test_db, agency)

        agency.reviews_score = 4.5
        repo.save(test_db, agency)

        assert repo.get(test_db, EntityType.AGENCY, "a1").reviews_score == 4.5

    def test_count(self, test_db, make_agency, make_property):
        repo = DirectoryRepository()
        repo.add(test_db, make_agency("a1"))
        repo.add(test_db, make_property("p1"))
        assert repo.count(test_db) == 2

    def test_entity_type_of(self, make_agency, make_service_provider, make_property):
        assert entity_type_of(make_agency()) == EntityType.AGENCY
        assert entity_type_of(make_service_provider()) == EntityType.SERVICE
        assert entity_type_of(make_property()) == EntityType.PROPERTY


class TestReviewRepository:
    """Tests for ReviewRepository."""

    def _review(self, review_id, rating, target_id="a1"):
        return Review(
            id=review_id,
            target_id=target_id,
            target_type=ReviewTarget.AGENCY,
            author_id="c1",
            author_name="Jo Citizen",
            rating=rating,
            comment="Great service",
        )

    def test_list_for_target(self, test_db):
        repo = ReviewRepository()
        repo.add(test_db, self._review("r1", 5))
        repo.add(test_db, self._review("r2", 3))
        repo.add(test_db, self._review("r3", 1, target_id="other"))

        reviews = repo.list_for_target(test_db, "a1")
        assert [review.id for review in reviews] == ["r1", "r2"]
        assert reviews[0].comment == "Great service"
        assert reviews[0].target_type == ReviewTarget.AGENCY

    def test_average_rating(self, test_db):
        repo = ReviewRepository()
        repo.add(test_db, self._review("r1", 5))
        repo.add(test_db, self._review("r2", 4))

        assert repo.average_rating(test_db, "a1") == 4.5
        assert repo.average_rating(test_db, "nobody") is None
