#!/usr/bin/env python3
"""
Search endpoints - rank companies, job postings and students by technology.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from ..dependencies import get_app_config, get_db
from ..services.search_service import SearchService
from ..models.requests import SearchRequest
from ..models.responses import SearchResponse

router = APIRouter(prefix="/api/search", tags=["search"])


@router.post("/companies", response_model=SearchResponse)
def search_companies(
    request: SearchRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """
    Rank active companies by how well their tech stack matches the query.

    Results are sorted by match score (highest first), ties by company id.
    """
    return SearchService(db, config).search_companies(request)


@router.post("/jobs", response_model=SearchResponse)
def search_jobs(
    request: SearchRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Rank open job postings by their required and preferred technologies."""
    return SearchService(db, config).search_jobs(request)


@router.post("/students", response_model=SearchResponse)
def search_students(
    request: SearchRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """Rank students by their technology interests, for building a scout list."""
    return SearchService(db, config).search_students(request)
