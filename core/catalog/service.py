#!/usr/bin/env python3
"""
Technology Catalog - Read-only view over technology reference data.
"""

from typing import Dict, Iterable, List, Optional, Union
import logging

from core.catalog.models import Technology, TechCategory
from core.exceptions import TechnologyNotFoundError, ValidationError
from core.interfaces import TechnologyStore

logger = logging.getLogger(__name__)


class TechnologyCatalog:
    """
    Lookups over a TechnologyStore.

    Listing methods never fail on unknown ids: missing technologies are
    silently left out and callers reconcile counts themselves.
    """

    def __init__(self, store: TechnologyStore):
        self.store = store

    def get(self, technology_id: int) -> Technology:
        found = self.store.get_many([technology_id])
        if not found:
            raise TechnologyNotFoundError(technology_id)
        return found[0]

    def list_by_ids(self, ids: Iterable[int]) -> List[Technology]:
        """Technologies in request order, duplicates collapsed, unknown ids omitted."""
        requested = list(dict.fromkeys(ids))
        if not requested:
            return []

        by_id = {tech.id: tech for tech in self.store.get_many(requested)}
        missing = len(requested) - len(by_id)
        if missing:
            logger.debug(f"{missing} of {len(requested)} requested technologies not in catalog")

        return [by_id[tech_id] for tech_id in requested if tech_id in by_id]

    def popularity_map(self, ids: Iterable[int]) -> Dict[int, float]:
        return {tech.id: tech.popularity_score for tech in self.list_by_ids(ids)}

    def names(self, ids: Iterable[int]) -> List[str]:
        return [tech.name for tech in self.list_by_ids(ids)]

    def by_category(self, category: Union[TechCategory, str]) -> List[Technology]:
        try:
            category = TechCategory(category)
        except ValueError:
            raise ValidationError(f"Unknown technology category: {category}")
        techs = [t for t in self.store.list_all() if t.category == category]
        return sorted(techs, key=lambda t: (-t.popularity_score, t.id))

    def popular(self, limit: Optional[int] = None) -> List[Technology]:
        techs = sorted(self.store.list_all(), key=lambda t: (-t.popularity_score, t.id))
        return techs[:limit] if limit else techs

    def in_demand(self, limit: Optional[int] = None) -> List[Technology]:
        techs = sorted(self.store.list_all(), key=lambda t: (-t.market_demand_score, t.id))
        return techs[:limit] if limit else techs

    def beginner_friendly(self) -> List[Technology]:
        techs = [t for t in self.store.list_all() if t.learning_difficulty <= 2]
        return sorted(techs, key=lambda t: (t.learning_difficulty, t.id))

    def related(self, technology_id: int) -> List[Technology]:
        """Technologies commonly combined with ``technology_id``, most popular combination first."""
        self.get(technology_id)

        combinations = sorted(
            self.store.list_combinations(technology_id),
            key=lambda c: (-c.popularity_score, c.primary_tech_id, c.secondary_tech_id)
        )
        related_ids = [
            c.secondary_tech_id if c.primary_tech_id == technology_id else c.primary_tech_id
            for c in combinations
        ]
        return self.list_by_ids(tid for tid in related_ids if tid != technology_id)
