#!/usr/bin/env python3
"""
Search service - runs technology searches against the database.
"""

import logging
from typing import Callable
from sqlalchemy.orm import Session

from core.catalog.service import TechnologyCatalog
from core.config_loader import AppConfig
from core.scorer import MatchResult, MatchScorer
from core.search.models import Pagination, SearchPage
from core.search.service import SearchEngine
from database.repositories import CandidateRepository, SearchLogRepository, TechnologyRepository
from ..models.requests import SearchRequest
from ..models.responses import MatchResultSummary, SearchResponse, TechAssociationSummary
from ..utils import enum_value

logger = logging.getLogger(__name__)


def to_result_summary(result: MatchResult) -> MatchResultSummary:
    return MatchResultSummary(
        candidate_id=result.candidate_id,
        match_score=result.match_score,
        matched_technologies=[
            TechAssociationSummary(
                technology_id=a.technology_id,
                usage_level=enum_value(a.usage_level),
                is_main_tech=a.is_main_tech,
                skill_level=enum_value(a.skill_level),
                interest_type=enum_value(a.interest_type),
            )
            for a in result.matched_associations
        ],
        score_components=result.score_components,
        metadata=result.metadata,
    )


class SearchService:
    """Service for company, job posting and student searches."""

    def __init__(self, db: Session, config: AppConfig):
        self.db = db
        self.config = config
        store_config = config.store
        self.catalog = TechnologyCatalog(TechnologyRepository(db, store_config))
        self.engine = SearchEngine(
            candidate_store=CandidateRepository(db, store_config),
            catalog=self.catalog,
            scorer=MatchScorer(config.scoring),
            search_log=SearchLogRepository(db, store_config),
            config=config.search,
        )

    def search_companies(self, request: SearchRequest) -> SearchResponse:
        return self._run(self.engine.search_companies, request)

    def search_jobs(self, request: SearchRequest) -> SearchResponse:
        return self._run(self.engine.search_jobs, request)

    def search_students(self, request: SearchRequest) -> SearchResponse:
        return self._run(self.engine.search_students, request)

    def _run(self, search: Callable[..., SearchPage], request: SearchRequest) -> SearchResponse:
        pagination = Pagination(
            page=request.page,
            per_page=request.per_page or self.config.search.default_per_page,
        )
        page = search(request.to_match_query(), pagination, user_id=request.user_id)

        # Persist the search log row; a failed commit must not fail the search
        try:
            self.db.commit()
        except Exception as e:
            logger.warning(f"Failed to commit search log: {e}")
            self.db.rollback()

        return SearchResponse(
            success=True,
            results=[to_result_summary(r) for r in page.results],
            page=page.page,
            per_page=page.per_page,
            total_results=page.total_results,
            total_pages=page.total_pages,
            technologies_searched=self.catalog.names(
                list(request.required_tech) + list(request.preferred_tech)
            ),
        )
