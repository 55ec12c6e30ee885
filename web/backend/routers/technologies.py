#!/usr/bin/env python3
"""
Technology endpoints - browse the technology catalog.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from ..dependencies import get_app_config, get_db
from ..services.technology_service import TechnologyService
from ..models.responses import TechnologyDetailResponse, TechnologyListResponse

router = APIRouter(prefix="/api/technologies", tags=["technologies"])


@router.get("", response_model=TechnologyListResponse)
def list_technologies(
    category: Optional[str] = Query(default=None, description="Technology category, e.g. backend"),
    sort: str = Query(default="popular", pattern="^(popular|in_demand)$", description="popular or in_demand"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum technologies to return"),
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """List technologies, most popular (or most in demand) first."""
    return TechnologyService(db, config).list_technologies(category=category, sort=sort, limit=limit)


@router.get("/beginner-friendly", response_model=TechnologyListResponse)
def beginner_friendly(
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Technologies with learning difficulty 1-2."""
    return TechnologyService(db, config).beginner_friendly()


@router.get("/{technology_id}", response_model=TechnologyDetailResponse)
def get_technology(
    technology_id: int,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Technology details plus technologies commonly used with it."""
    return TechnologyService(db, config).get_technology(technology_id)
