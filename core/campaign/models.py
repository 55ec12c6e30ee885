#!/usr/bin/env python3
"""
Campaign Models - Invitations, bulk results and campaign statistics.

A campaign is not a stored entity: it is the campaign_id shared by the
invitations created in one bulk send.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class InvitationStatus(str, Enum):
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


class Decision(str, Enum):
    ACCEPT = "accept"
    REJECT = "reject"

    @property
    def status(self) -> InvitationStatus:
        if self is Decision.ACCEPT:
            return InvitationStatus.ACCEPTED
        return InvitationStatus.REJECTED


class SkipReason(str, Enum):
    DUPLICATE_INVITATION = "DuplicateInvitation"
    TECH_FILTER_MISMATCH = "TechFilterMismatch"
    NOT_FOUND = "NotFound"


@dataclass
class Invitation:
    """One scout sent by a company to a student for a job posting."""
    company_id: int
    student_id: int
    job_posting_id: int
    message: str
    status: InvitationStatus = InvitationStatus.SENT
    campaign_id: Optional[str] = None
    is_bulk_sent: bool = False
    scout_template_id: Optional[int] = None
    sent_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    id: Any = None

    @property
    def is_pending(self) -> bool:
        return self.status == InvitationStatus.SENT


@dataclass(frozen=True)
class ScoutTemplate:
    """Reusable scout message owned by a company."""
    id: int
    company_id: int
    name: str
    message: str
    subject: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class SkippedRecipient:
    student_id: int
    reason: SkipReason
    message: str = ""


@dataclass
class BulkScoutResult:
    campaign_id: str
    created: List[Invitation] = field(default_factory=list)
    skipped: List[SkippedRecipient] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)


@dataclass
class CampaignStats:
    """Aggregate response state of one campaign. Derived, never persisted."""
    campaign_id: str
    total_sent: int = 0
    counts: Dict[str, int] = field(default_factory=lambda: {s.value: 0 for s in InvitationStatus})
    acceptance_rate: float = 0.0
    company_id: Optional[int] = None
    job_posting_id: Optional[int] = None
    sent_at: Optional[datetime] = None

    @property
    def accepted(self) -> int:
        return self.counts[InvitationStatus.ACCEPTED.value]

    @property
    def rejected(self) -> int:
        return self.counts[InvitationStatus.REJECTED.value]

    @property
    def expired(self) -> int:
        return self.counts[InvitationStatus.EXPIRED.value]

    @property
    def pending(self) -> int:
        return self.counts[InvitationStatus.SENT.value]
