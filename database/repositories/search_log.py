import logging
from typing import Optional

from core.interfaces import SearchLog
from core.scorer.models import MatchQuery
from database.models import TechSearchLog
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SearchLogRepository(BaseRepository, SearchLog):
    """Writes search analytics rows. Callers treat failures as non-fatal."""

    def record(
        self,
        query: MatchQuery,
        result_count: int,
        search_type: str,
        user_id: Optional[int] = None
    ) -> None:
        row = TechSearchLog(
            user_id=user_id,
            search_type=search_type,
            search_params=query.to_log_dict(),
            result_count=result_count,
            match_score_threshold=query.min_match_score,
        )
        # Savepoint keeps a failed log write from poisoning the caller's transaction
        with self.db.begin_nested():
            self.db.add(row)
            self.db.flush()
