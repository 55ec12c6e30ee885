#!/usr/bin/env python3
"""
Search Models - Pagination and result pages.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from core.scorer.models import MatchResult


class SearchType(str, Enum):
    """Values stored in the search log's search_type column."""
    COMPANY_SEARCH = "company_search"
    JOB_SEARCH = "job_search"
    STUDENT_SEARCH = "student_search"


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    per_page: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass
class SearchPage:
    """One page of ranked results plus totals over the whole result set."""
    results: List[MatchResult] = field(default_factory=list)
    page: int = 1
    per_page: int = 20
    total_results: int = 0

    @property
    def total_pages(self) -> int:
        if self.total_results == 0:
            return 0
        return math.ceil(self.total_results / self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
