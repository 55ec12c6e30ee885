#!/usr/bin/env python3
"""
Scoring Module - Technology match scoring.

Public API:
- MatchScorer: Pure per-candidate scorer
- MatchQuery, Candidate, MatchResult: Data structures

Split into focused modules:

- models.py: Queries, candidates, associations and results
- coverage.py: Exclusion, required gate and coverage weights
- browse.py: Popularity fallback for open-ended queries
- service.py: MatchScorer
"""

from core.scorer.models import (
    Candidate,
    InterestType,
    MatchQuery,
    MatchResult,
    SearchMode,
    SkillLevel,
    TechAssociation,
    UsageLevel,
)
from core.scorer.service import MatchScorer

__all__ = [
    'MatchScorer',
    'MatchQuery',
    'MatchResult',
    'Candidate',
    'TechAssociation',
    'SearchMode',
    'UsageLevel',
    'SkillLevel',
    'InterestType',
]
