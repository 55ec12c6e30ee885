#!/usr/bin/env python3
"""
Campaign service - individual scouts, bulk campaigns and responses.

Each public method is one transaction: commit on success, rollback on any
error so a failed bulk send leaves no partial campaign behind.
"""

import logging
from typing import Any, Callable, Optional, TypeVar
from sqlalchemy.orm import Session

from core.campaign.aggregator import CampaignAggregator
from core.campaign.manager import CampaignManager
from core.campaign.models import CampaignStats, Invitation
from core.config_loader import AppConfig
from core.scorer import MatchScorer
from database.repositories import CandidateRepository, InvitationRepository
from ..models.requests import CampaignCreate, InvitationCreate, InvitationResponseRequest
from ..models.responses import (
    CampaignCreateResponse,
    CampaignListResponse,
    CampaignStatsResponse,
    CampaignStatsSummary,
    ExpireResponse,
    InvitationListResponse,
    InvitationResponse,
    InvitationSummary,
    MessageResponse,
    SkippedRecipientSummary,
)
from ..utils import safe_datetime_iso, safe_str

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_invitation_summary(invitation: Invitation) -> InvitationSummary:
    return InvitationSummary(
        id=safe_str(invitation.id),
        company_id=invitation.company_id,
        student_id=invitation.student_id,
        job_posting_id=invitation.job_posting_id,
        campaign_id=invitation.campaign_id,
        is_bulk_sent=invitation.is_bulk_sent,
        scout_template_id=invitation.scout_template_id,
        message=invitation.message,
        status=invitation.status.value,
        sent_at=safe_datetime_iso(invitation.sent_at),
        responded_at=safe_datetime_iso(invitation.responded_at),
    )


def to_stats_summary(stats: CampaignStats) -> CampaignStatsSummary:
    return CampaignStatsSummary(
        campaign_id=stats.campaign_id,
        company_id=stats.company_id,
        job_posting_id=stats.job_posting_id,
        total_sent=stats.total_sent,
        accepted=stats.accepted,
        rejected=stats.rejected,
        expired=stats.expired,
        pending=stats.pending,
        acceptance_rate=stats.acceptance_rate,
        sent_at=safe_datetime_iso(stats.sent_at),
    )


class CampaignService:
    """Service for scout invitations and campaigns."""

    def __init__(self, db: Session, config: AppConfig):
        self.db = db
        invitations = InvitationRepository(db, config.store)
        self.manager = CampaignManager(
            store=invitations,
            candidate_store=CandidateRepository(db, config.store),
            scorer=MatchScorer(config.scoring),
            config=config.campaign,
        )
        self.aggregator = CampaignAggregator(invitations)

    def _in_transaction(self, operation: Callable[[], T]) -> T:
        try:
            result = operation()
            self.db.commit()
            return result
        except Exception:
            self.db.rollback()
            raise

    def create_invitation(self, request: InvitationCreate) -> InvitationResponse:
        invitation = self._in_transaction(lambda: self.manager.create_individual(
            sender=request.company_id,
            recipient=request.student_id,
            job_posting=request.job_posting_id,
            message=request.message,
        ))
        return InvitationResponse(success=True, invitation=to_invitation_summary(invitation))

    def create_campaign(self, request: CampaignCreate) -> CampaignCreateResponse:
        recipient_filter = request.recipient_filter.to_match_query() if request.recipient_filter else None
        result = self._in_transaction(lambda: self.manager.create_bulk(
            sender=request.company_id,
            recipients=request.student_ids,
            job_posting=request.job_posting_id,
            message=request.message,
            template_id=request.template_id,
            recipient_filter=recipient_filter,
        ))
        return CampaignCreateResponse(
            success=True,
            campaign_id=result.campaign_id,
            created_count=result.created_count,
            created=[to_invitation_summary(inv) for inv in result.created],
            skipped=[
                SkippedRecipientSummary(student_id=s.student_id, reason=s.reason.value, message=s.message)
                for s in result.skipped
            ],
        )

    def respond(self, invitation_id: Any, request: InvitationResponseRequest) -> InvitationResponse:
        invitation = self._in_transaction(
            lambda: self.manager.respond(invitation_id, request.student_id, request.decision)
        )
        return InvitationResponse(success=True, invitation=to_invitation_summary(invitation))

    def cancel(self, invitation_id: Any, company_id: int) -> MessageResponse:
        self._in_transaction(lambda: self.manager.cancel(invitation_id, company_id))
        return MessageResponse(success=True, message=f"Invitation {invitation_id} cancelled")

    def expire_stale(self) -> ExpireResponse:
        count = self._in_transaction(self.manager.expire_stale)
        return ExpireResponse(success=True, expired_count=count)

    def get_stats(self, campaign_id: str, company_id=None) -> CampaignStatsResponse:
        stats = self.aggregator.stats(campaign_id, company_id)
        return CampaignStatsResponse(success=True, stats=to_stats_summary(stats))

    def list_campaigns(self, company_id: int) -> CampaignListResponse:
        campaigns = self.aggregator.list_campaigns(company_id)
        return CampaignListResponse(
            success=True,
            count=len(campaigns),
            campaigns=[to_stats_summary(s) for s in campaigns],
        )

    def list_invitations(
        self,
        student_id: Optional[int] = None,
        company_id: Optional[int] = None,
        status: Optional[str] = None
    ) -> InvitationListResponse:
        invitations = self.manager.list_invitations(student_id=student_id, company_id=company_id, status=status)
        return InvitationListResponse(
            success=True,
            count=len(invitations),
            invitations=[to_invitation_summary(inv) for inv in invitations],
        )

    def get_invitation(self, invitation_id: Any, user_id: Optional[int] = None) -> InvitationResponse:
        invitation = self.manager.get_invitation(invitation_id, viewer=user_id)
        return InvitationResponse(success=True, invitation=to_invitation_summary(invitation))
