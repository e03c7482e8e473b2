"""
Directory Exceptions

Errors raised by the registration, approval and review services. Search
never raises these: bad search input degrades to a wider result instead.
"""


class DirectoryError(Exception):
    """Base class for directory domain errors."""


class DuplicateEmailError(DirectoryError):
    """An account of the same kind already uses this email."""

    def __init__(self, entity_type: str, email: str):
        self.entity_type = entity_type
        self.email = email
        super().__init__(f"A {entity_type} account already exists for {email}")


class ProfileNotFoundError(DirectoryError):
    """No record of the requested kind has this id."""

    def __init__(self, entity_type: str, record_id: str):
        self.entity_type = entity_type
        self.record_id = record_id
        super().__init__(f"{entity_type} not found: {record_id}")


class InvalidStatusTransition(DirectoryError):
    """The requested moderation action is not allowed from the current status."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change status from {current} to {requested}")


class InvalidReviewError(DirectoryError):
    """Review input failed validation (rating out of range, bad target)."""


class NotProfileOwnerError(DirectoryError):
    """The signed-in account may not edit this profile."""

    def __init__(self, entity_type: str, record_id: str):
        self.entity_type = entity_type
        self.record_id = record_id
        super().__init__(f"Only the owner can edit {entity_type} {record_id}")
