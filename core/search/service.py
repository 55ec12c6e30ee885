#!/usr/bin/env python3
"""
Search Engine - Ranks companies, job postings and students for a technology query.

Pipeline per search:
1. Validate query and pagination (before any data access)
2. Fetch active candidates
3. Metadata filters (location, company size, employment type, categories)
4. Score every candidate (thread pool for large sets)
5. Sort once by (-score, id), then paginate
6. Record the search in the log; a logging failure never fails the search
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

from core.catalog.service import TechnologyCatalog
from core.config_loader import SearchConfig
from core.interfaces import CandidateStore, SearchLog
from core.scorer import Candidate, MatchQuery, MatchResult, MatchScorer
from core.search.models import Pagination, SearchPage, SearchType
from core.search.validation import validate_pagination, validate_query

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Scores candidate collections and returns deterministic, paginated rankings.

    Args:
        candidate_store: Source of active companies, jobs and students
        catalog: Technology catalog (categories and browse popularity)
        scorer: Per-candidate scorer (defaults to MatchScorer())
        search_log: Optional analytics sink
        config: Pagination limits and thread pool sizing
    """

    def __init__(
        self,
        candidate_store: CandidateStore,
        catalog: TechnologyCatalog,
        scorer: Optional[MatchScorer] = None,
        search_log: Optional[SearchLog] = None,
        config: Optional[SearchConfig] = None
    ):
        self.candidate_store = candidate_store
        self.catalog = catalog
        self.scorer = scorer or MatchScorer()
        self.search_log = search_log
        self.config = config or SearchConfig()

    def search_companies(
        self,
        query: MatchQuery,
        pagination: Optional[Pagination] = None,
        user_id: Optional[int] = None
    ) -> SearchPage:
        return self._search(
            query, pagination, self.candidate_store.list_active_companies,
            SearchType.COMPANY_SEARCH, user_id
        )

    def search_jobs(
        self,
        query: MatchQuery,
        pagination: Optional[Pagination] = None,
        user_id: Optional[int] = None
    ) -> SearchPage:
        return self._search(
            query, pagination, self.candidate_store.list_active_jobs,
            SearchType.JOB_SEARCH, user_id
        )

    def search_students(
        self,
        query: MatchQuery,
        pagination: Optional[Pagination] = None,
        user_id: Optional[int] = None
    ) -> SearchPage:
        """Students whose technology interests match, for assembling a scout list."""
        return self._search(
            query, pagination, self.candidate_store.list_active_students,
            SearchType.STUDENT_SEARCH, user_id
        )

    def _search(
        self,
        query: MatchQuery,
        pagination: Optional[Pagination],
        fetch: Callable[[], List[Candidate]],
        search_type: SearchType,
        user_id: Optional[int]
    ) -> SearchPage:
        pagination = pagination or Pagination(per_page=self.config.default_per_page)
        validate_query(query)
        validate_pagination(pagination.page, pagination.per_page, self.config.max_per_page)

        candidates = self._apply_filters(query, fetch())

        popularity: Dict[int, float] = {}
        if query.is_browse:
            tech_ids = {tid for c in candidates for tid in c.technology_ids}
            popularity = self.catalog.popularity_map(sorted(tech_ids))

        results = self._score_all(query, candidates, popularity)
        results.sort(key=lambda r: r.sort_key)

        start = pagination.offset
        page = SearchPage(
            results=results[start:start + pagination.per_page],
            page=pagination.page,
            per_page=pagination.per_page,
            total_results=len(results),
        )

        logger.info(
            f"{search_type.value}: {len(candidates)} candidates, {page.total_results} matches "
            f"(page {page.page}/{page.total_pages})"
        )
        self._record(query, page.total_results, search_type, user_id)
        return page

    def _apply_filters(self, query: MatchQuery, candidates: List[Candidate]) -> List[Candidate]:
        filtered = candidates

        if query.location:
            needle = query.location.lower()
            filtered = [
                c for c in filtered
                if needle in str(c.metadata.get('location') or '').lower()
            ]

        if query.company_size:
            filtered = [c for c in filtered if c.metadata.get('company_size') == query.company_size]

        if query.employment_type:
            filtered = [c for c in filtered if c.metadata.get('employment_type') == query.employment_type]

        if query.categories:
            category_tech = set()
            for category in sorted(query.categories):
                category_tech.update(t.id for t in self.catalog.by_category(category))
            filtered = [c for c in filtered if c.technology_ids & category_tech]

        return filtered

    def _score_all(
        self,
        query: MatchQuery,
        candidates: List[Candidate],
        popularity: Dict[int, float]
    ) -> List[MatchResult]:
        def score_one(candidate: Candidate) -> Optional[MatchResult]:
            return self.scorer.score(query, candidate, popularity)

        if len(candidates) >= self.config.parallel_threshold:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                scored = list(pool.map(score_one, candidates))
        else:
            scored = [score_one(c) for c in candidates]

        return [r for r in scored if r is not None]

    def _record(
        self,
        query: MatchQuery,
        result_count: int,
        search_type: SearchType,
        user_id: Optional[int]
    ) -> None:
        if self.search_log is None:
            return
        try:
            self.search_log.record(query, result_count, search_type.value, user_id=user_id)
        except Exception as e:
            logger.warning(f"Failed to record {search_type.value} in search log: {e}")
