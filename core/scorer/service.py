#!/usr/bin/env python3
"""
Match Scorer - Technology compatibility between a query and one candidate.

Score layout (weights come from ScoringConfig, default 60/40):
- Excluded technology present: dropped
- Required gate (AND: all, OR: any) not met: dropped
- base  = RequiredCoverage  * base_weight
- bonus = PreferredCoverage * bonus_weight
- Browse queries (no required, no preferred): popularity of the
  candidate's primary technologies, normalised to 0-100
- Clamped to [0, 100]; below min_match_score: dropped

The scorer holds no state besides its config, so scoring the same
(query, candidate, popularity) twice always gives the same result.
"""

from typing import Mapping, Optional
import logging

from core.config_loader import ScoringConfig
from core.scorer.models import Candidate, MatchQuery, MatchResult
from core.scorer import coverage
from core.scorer.browse import calculate_browse_score

logger = logging.getLogger(__name__)


class MatchScorer:
    """Pure scoring of one candidate against a MatchQuery."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def score(
        self,
        query: MatchQuery,
        candidate: Candidate,
        popularity: Optional[Mapping[int, float]] = None
    ) -> Optional[MatchResult]:
        """
        Score a candidate.

        Args:
            query: The search query
            candidate: Candidate with its technology associations
            popularity: technology_id -> catalog popularity_score, only read
                for browse queries

        Returns:
            MatchResult, or None when the candidate is excluded, misses the
            required gate, or falls below min_match_score
        """
        tech_ids = candidate.technology_ids

        if coverage.is_excluded(query.excluded_tech, tech_ids):
            return None

        if not coverage.satisfies_required(query.required_tech, tech_ids, query.search_mode):
            return None

        if query.is_browse and self.config.browse_fallback:
            raw_score = calculate_browse_score(candidate.associations, popularity or {})
            components = {
                'mode': 'browse',
                'browse_score': raw_score,
            }
        else:
            required_coverage = coverage.coverage(query.required_tech, tech_ids)
            preferred_coverage = coverage.coverage(query.preferred_tech, tech_ids)
            base = coverage.calculate_base_score(required_coverage, self.config)
            bonus = coverage.calculate_bonus_score(preferred_coverage, self.config)
            raw_score = base + bonus
            components = {
                'mode': query.search_mode.value,
                'required_coverage': required_coverage,
                'preferred_coverage': preferred_coverage,
                'base_score': base,
                'bonus_score': bonus,
            }

        match_score = round(max(0.0, min(100.0, raw_score)), 2)
        components['match_score'] = match_score

        if match_score < query.min_match_score:
            return None

        searched = query.searched_tech
        matched = [a for a in candidate.associations if a.technology_id in searched]
        matched.sort(key=lambda a: a.technology_id)

        logger.debug(f"Candidate {candidate.id}: score={match_score:.2f} ({components['mode']})")

        return MatchResult(
            candidate_id=candidate.id,
            match_score=match_score,
            matched_associations=matched,
            score_components=components,
            metadata=dict(candidate.metadata),
        )
