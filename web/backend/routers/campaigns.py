#!/usr/bin/env python3
"""
Campaign endpoints - bulk scouts and campaign statistics.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from ..dependencies import get_app_config, get_db
from ..services.campaign_service import CampaignService
from ..models.requests import CampaignCreate
from ..models.responses import CampaignCreateResponse, CampaignListResponse, CampaignStatsResponse

router = APIRouter(prefix="/api/campaigns", tags=["campaigns"])


@router.post("", response_model=CampaignCreateResponse, status_code=201)
def create_campaign(
    request: CampaignCreate,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """
    Send the same scout to many students.

    Recipients that were already invited for this job posting (or that miss
    the recipient filter) are reported in `skipped`; the rest are created
    under one campaign id.
    """
    return CampaignService(db, config).create_campaign(request)


@router.get("", response_model=CampaignListResponse)
def list_campaigns(
    company_id: int = Query(..., description="Company whose campaigns to list"),
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """A company's bulk campaigns with live statistics, newest first."""
    return CampaignService(db, config).list_campaigns(company_id)


@router.get("/{campaign_id}", response_model=CampaignStatsResponse)
def get_campaign_stats(
    campaign_id: str,
    company_id: Optional[int] = Query(default=None, description="Restrict to this company's invitations"),
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Statistics for one campaign, recomputed from its invitations."""
    return CampaignService(db, config).get_stats(campaign_id, company_id)
