"""
Tests for ApprovalService
"""
import pytest

from src.realestate_directory.db.repository import DirectoryRepository
from src.realestate_directory.exceptions import InvalidStatusTransition, ProfileNotFoundError
from src.realestate_directory.models.enums import EntityType, ProfileStatus
from src.realestate_directory.services.approval_service import ApprovalService, can_transition

APPROVED = ProfileStatus.APPROVED
PENDING = ProfileStatus.PENDING
REJECTED = ProfileStatus.REJECTED
SUSPENDED = ProfileStatus.SUSPENDED


@pytest.fixture
def approvals(test_db):
    return ApprovalService(test_db)


class TestTransitions:
    @pytest.mark.parametrize("current,requested,allowed", [
        (PENDING, APPROVED, True),
        (REJECTED, APPROVED, True),
        (SUSPENDED, APPROVED, True),
        (APPROVED, APPROVED, False),
        (PENDING, REJECTED, True),
        (APPROVED, REJECTED, True),
        (SUSPENDED, REJECTED, True),
        (REJECTED, REJECTED, False),
        (APPROVED, SUSPENDED, True),
        (PENDING, SUSPENDED, False),
        (REJECTED, SUSPENDED, False),
        (SUSPENDED, SUSPENDED, False),
        (APPROVED, PENDING, False),
    ])
    def test_can_transition(self, current, requested, allowed):
        assert can_transition(current, requested) is allowed


class TestApprovalService:
    def test_list_all_statuses(self, test_db, approvals, make_agency):
        repo = DirectoryRepository()
        repo.add(test_db, make_agency("a1", status=PENDING))
        repo.add(test_db, make_agency("a2", status=APPROVED))
        repo.add(test_db, make_agency("a3", status=REJECTED))

        assert [agency.id for agency in approvals.list_profiles(EntityType.AGENCY)] == ["a1", "a2", "a3"]

    def test_approve_then_suspend(self, test_db, approvals, make_agent):
        DirectoryRepository().add(test_db, make_agent("g1", status=PENDING))

        assert approvals.set_status(EntityType.AGENT, "g1", APPROVED).status == APPROVED
        assert approvals.set_status(EntityType.AGENT, "g1", SUSPENDED).status == SUSPENDED

    def test_suspend_pending_rejected(self, test_db, approvals, make_agent):
        DirectoryRepository().add(test_db, make_agent("g1", status=PENDING))

        with pytest.raises(InvalidStatusTransition):
            approvals.set_status(EntityType.AGENT, "g1", SUSPENDED)
        assert DirectoryRepository().get(test_db, EntityType.AGENT, "g1").status == PENDING

    def test_unknown_profile(self, approvals):
        with pytest.raises(ProfileNotFoundError):
            approvals.set_status(EntityType.SERVICE, "missing", APPROVED)

    def test_consumers_not_moderated(self, approvals):
        with pytest.raises(ValueError):
            approvals.list_profiles(EntityType.CONSUMER)

    def test_approved_profile_becomes_searchable(self, test_db, approvals, make_service_provider):
        repo = DirectoryRepository()
        repo.add(test_db, make_service_provider("s1", status=PENDING))
        visible = [APPROVED]
        assert repo.list(test_db, EntityType.SERVICE, statuses=visible) == []

        approvals.set_status(EntityType.SERVICE, "s1", APPROVED)
        assert [p.id for p in repo.list(test_db, EntityType.SERVICE, statuses=visible)] == ["s1"]
