#!/usr/bin/env python3
"""
Exceptions raised by the matching engine and its data collaborators.

Callers (CLI, HTTP layer, batch scheduler) decide how these map to
user-visible failures. Nothing here is retried internally.
"""


class MatchingException(Exception):
    """Base exception for matching service errors."""
    pass


class NotFoundError(MatchingException):
    """Raised when a referenced entity does not exist."""

    entity = "Entity"

    def __init__(self, entity_id, message=None):
        self.entity_id = entity_id
        super().__init__(message or f"{self.entity} not found: {entity_id}")


class JobNotFoundError(NotFoundError):
    """Raised when a job posting is missing or not active."""
    entity = "Job"


class CandidateNotFoundError(NotFoundError):
    """Raised when a candidate profile is missing."""
    entity = "Candidate"


class ApplicationNotFoundError(NotFoundError):
    """Raised when an application is missing."""
    entity = "Application"


class InvalidInputError(MatchingException):
    """Raised when caller-supplied arguments are malformed."""
    pass
