#!/usr/bin/env python3
"""
Domain exceptions for matching and scout campaigns.

Every error carries a ``kind`` so callers (the HTTP layer, bulk-send result
builders) can report a structured kind + message instead of free text.
"""

from typing import Any, Optional


class TechScoutError(Exception):
    """Base class for all domain errors."""
    kind = "TechScoutError"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"type": self.kind, "error": self.message}


class ValidationError(TechScoutError):
    """Malformed input, rejected before any data access."""
    kind = "Validation"


class NotFoundError(TechScoutError):
    kind = "NotFound"


class TechnologyNotFoundError(NotFoundError):
    def __init__(self, technology_id: Any):
        super().__init__(f"Technology {technology_id} not found", technology_id=technology_id)


class InvitationNotFoundError(NotFoundError):
    def __init__(self, invitation_id: Any):
        super().__init__(f"Invitation {invitation_id} not found", invitation_id=invitation_id)


class CampaignNotFoundError(NotFoundError):
    def __init__(self, campaign_id: str):
        super().__init__(f"Campaign {campaign_id} not found", campaign_id=campaign_id)


class NotAuthorizedError(TechScoutError):
    kind = "NotAuthorized"


class DuplicateInvitationError(TechScoutError):
    """The (company, student, job posting) triple already has an invitation."""
    kind = "DuplicateInvitation"

    def __init__(self, company_id: int, student_id: int, job_posting_id: int):
        super().__init__(
            f"Company {company_id} already invited student {student_id} "
            f"to job posting {job_posting_id}",
            company_id=company_id,
            student_id=student_id,
            job_posting_id=job_posting_id,
        )
        self.student_id = student_id


class PreconditionFailedError(TechScoutError):
    """The invitation is not in the state the operation requires."""
    kind = "PreconditionFailed"


class AlreadyRespondedError(PreconditionFailedError):
    def __init__(self, invitation_id: Any, status: Optional[str] = None):
        message = f"Invitation {invitation_id} has already been responded to"
        if status:
            message += f" (status: {status})"
        super().__init__(message, invitation_id=invitation_id, status=status)


class CannotCancelRespondedInvitationError(PreconditionFailedError):
    def __init__(self, invitation_id: Any, status: Optional[str] = None):
        super().__init__(
            f"Invitation {invitation_id} cannot be cancelled once responded to",
            invitation_id=invitation_id,
            status=status,
        )


class TransientStoreError(TechScoutError):
    """Persistence temporarily unavailable. Safe to retry at the boundary."""
    kind = "TransientStoreError"
