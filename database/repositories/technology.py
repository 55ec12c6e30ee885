import logging
from typing import Iterable, List

from sqlalchemy import or_, select

from core.catalog.models import Technology as TechnologyRecord, TechCategory, TechCombination as CombinationRecord
from core.interfaces import TechnologyStore
from database.models import Technology, TechCombination
from database.repositories.base import BaseRepository, transient_retry

logger = logging.getLogger(__name__)


def to_technology(row: Technology) -> TechnologyRecord:
    return TechnologyRecord(
        id=row.id,
        name=row.name,
        category=TechCategory(row.category),
        popularity_score=float(row.popularity_score or 0),
        market_demand_score=float(row.market_demand_score or 0),
        learning_difficulty=row.learning_difficulty or 1,
        description=row.description,
    )


class TechnologyRepository(BaseRepository, TechnologyStore):
    @transient_retry
    def get_many(self, ids: Iterable[int]) -> List[TechnologyRecord]:
        ids = list(ids)
        if not ids:
            return []
        stmt = select(Technology).where(Technology.id.in_(ids))
        return [to_technology(row) for row in self.db.execute(stmt).scalars().all()]

    @transient_retry
    def list_all(self) -> List[TechnologyRecord]:
        stmt = select(Technology).order_by(Technology.id)
        return [to_technology(row) for row in self.db.execute(stmt).scalars().all()]

    @transient_retry
    def list_combinations(self, technology_id: int) -> List[CombinationRecord]:
        stmt = select(TechCombination).where(
            or_(
                TechCombination.primary_tech_id == technology_id,
                TechCombination.secondary_tech_id == technology_id
            )
        )
        return [
            CombinationRecord(
                primary_tech_id=row.primary_tech_id,
                secondary_tech_id=row.secondary_tech_id,
                popularity_score=float(row.popularity_score or 0),
                combination_type=row.combination_type,
            )
            for row in self.db.execute(stmt).scalars().all()
        ]
