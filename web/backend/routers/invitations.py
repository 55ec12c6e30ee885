#!/usr/bin/env python3
"""
Invitation endpoints - individual scouts, listing, responses and cancellation.
"""

import uuid
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from core.exceptions import ValidationError
from ..dependencies import get_app_config, get_db
from ..services.campaign_service import CampaignService
from ..models.requests import InvitationCreate, InvitationResponseRequest
from ..models.responses import ExpireResponse, InvitationListResponse, InvitationResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/invitations", tags=["invitations"])


def validate_uuid(invitation_id: str) -> uuid.UUID:
    """Validate that invitation_id is a valid UUID format."""
    try:
        return uuid.UUID(invitation_id)
    except ValueError:
        raise ValidationError(f"Invalid invitation_id format: {invitation_id}. Must be a valid UUID.")


@router.post("", response_model=InvitationResponse, status_code=201)
def create_invitation(
    request: InvitationCreate,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Send one scout from a company to a student for a job posting."""
    return CampaignService(db, config).create_invitation(request)


@router.get("", response_model=InvitationListResponse)
def list_invitations(
    student_id: Optional[int] = Query(None, description="Invitations received by this student"),
    company_id: Optional[int] = Query(None, description="Invitations sent by this company"),
    status: Optional[str] = Query(None, description="sent, accepted, rejected or expired"),
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """List invitations for exactly one of student_id or company_id, most recent first."""
    return CampaignService(db, config).list_invitations(
        student_id=student_id,
        company_id=company_id,
        status=status,
    )


@router.get("/{invitation_id}", response_model=InvitationResponse)
def get_invitation(
    invitation_id: str,
    user_id: Optional[int] = Query(None, description="Student or company viewing the invitation"),
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Get one invitation. When user_id is given it must be the student or the company."""
    return CampaignService(db, config).get_invitation(validate_uuid(invitation_id), user_id)


@router.post("/expire", response_model=ExpireResponse)
def expire_invitations(
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Expire every pending invitation older than the configured expiry window."""
    return CampaignService(db, config).expire_stale()


@router.post("/{invitation_id}/respond", response_model=InvitationResponse)
def respond_to_invitation(
    invitation_id: str,
    request: InvitationResponseRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Accept or reject an invitation as the invited student."""
    return CampaignService(db, config).respond(validate_uuid(invitation_id), request)


@router.delete("/{invitation_id}", response_model=MessageResponse)
def cancel_invitation(
    invitation_id: str,
    company_id: int = Query(..., description="Company that sent the invitation"),
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Cancel a pending invitation. Responded invitations cannot be cancelled."""
    return CampaignService(db, config).cancel(validate_uuid(invitation_id), company_id)
