#!/usr/bin/env python3
"""
Technology service - catalog listings for the technology picker.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from core.catalog.models import Technology
from core.catalog.service import TechnologyCatalog
from core.config_loader import AppConfig
from database.repositories import TechnologyRepository
from ..models.responses import TechnologyDetailResponse, TechnologyListResponse, TechnologySummary


def to_technology_summary(tech: Technology) -> TechnologySummary:
    return TechnologySummary(
        id=tech.id,
        name=tech.name,
        category=tech.category.value,
        popularity_score=tech.popularity_score,
        market_demand_score=tech.market_demand_score,
        learning_difficulty=tech.learning_difficulty,
        description=tech.description,
    )


def _listing(techs: List[Technology]) -> TechnologyListResponse:
    return TechnologyListResponse(
        success=True,
        count=len(techs),
        technologies=[to_technology_summary(t) for t in techs],
    )


class TechnologyService:
    """Read-only technology catalog access."""

    def __init__(self, db: Session, config: AppConfig):
        self.catalog = TechnologyCatalog(TechnologyRepository(db, config.store))

    def list_technologies(
        self,
        category: Optional[str] = None,
        sort: str = "popular",
        limit: Optional[int] = None
    ) -> TechnologyListResponse:
        """
        List technologies.

        Args:
            category: Only technologies of this category.
            sort: "popular" (popularity desc) or "in_demand" (market demand desc).
            limit: Maximum number of technologies.
        """
        if category:
            techs = self.catalog.by_category(category)
            if sort == "in_demand":
                techs = sorted(techs, key=lambda t: (-t.market_demand_score, t.id))
            techs = techs[:limit] if limit else techs
        elif sort == "in_demand":
            techs = self.catalog.in_demand(limit)
        else:
            techs = self.catalog.popular(limit)
        return _listing(techs)

    def beginner_friendly(self) -> TechnologyListResponse:
        return _listing(self.catalog.beginner_friendly())

    def get_technology(self, technology_id: int) -> TechnologyDetailResponse:
        tech = self.catalog.get(technology_id)
        return TechnologyDetailResponse(
            success=True,
            technology=to_technology_summary(tech),
            related=[to_technology_summary(t) for t in self.catalog.related(technology_id)],
        )
