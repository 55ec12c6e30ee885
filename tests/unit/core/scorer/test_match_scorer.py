#!/usr/bin/env python3
"""
Tests for MatchScorer.

Covers:
- Required gate under AND / OR
- Exclusion precedence over bonus scoring
- Base + bonus weighting and custom weights
- Browse (popularity) fallback for open-ended queries
- Threshold filtering and determinism
"""

import unittest

from core.config_loader import ScoringConfig
from core.scorer import (
    Candidate,
    InterestType,
    MatchQuery,
    MatchScorer,
    SearchMode,
    SkillLevel,
    TechAssociation,
    UsageLevel,
)

GO, POSTGRES, KUBERNETES, REACT, PHP = 1, 2, 3, 4, 5


def company(candidate_id, *tech_ids, main=()):
    return Candidate(
        id=candidate_id,
        associations=tuple(
            TechAssociation(
                technology_id=tid,
                usage_level=UsageLevel.MAIN if tid in main else UsageLevel.SUB,
                is_main_tech=tid in main,
            )
            for tid in tech_ids
        ),
    )


def query(required=(), preferred=(), excluded=(), mode=SearchMode.AND, min_score=0.0):
    return MatchQuery(
        required_tech=frozenset(required),
        preferred_tech=frozenset(preferred),
        excluded_tech=frozenset(excluded),
        search_mode=mode,
        min_match_score=min_score,
    )


class TestMatchScorerExample(unittest.TestCase):
    """Go + PostgreSQL required, Kubernetes preferred, threshold 50."""

    def setUp(self):
        self.scorer = MatchScorer()
        self.query = query(required=[GO, POSTGRES], preferred=[KUBERNETES], min_score=50)

    def test_full_match_scores_100(self):
        result = self.scorer.score(self.query, company(10, GO, POSTGRES, KUBERNETES))

        self.assertIsNotNone(result)
        self.assertEqual(result.match_score, 100.0)
        self.assertEqual(result.score_components['base_score'], 60.0)
        self.assertEqual(result.score_components['bonus_score'], 40.0)
        self.assertEqual(
            [a.technology_id for a in result.matched_associations],
            [GO, POSTGRES, KUBERNETES]
        )

    def test_partial_required_dropped_under_and(self):
        self.assertIsNone(self.scorer.score(self.query, company(11, GO)))


class TestRequiredGate(unittest.TestCase):

    def setUp(self):
        self.scorer = MatchScorer()

    def test_and_mode_drops_any_missing_required(self):
        q = query(required=[GO, POSTGRES, REACT])
        self.assertIsNone(self.scorer.score(q, company(1, GO, POSTGRES)))

    def test_or_mode_accepts_partial_required(self):
        q = query(required=[GO, POSTGRES], mode=SearchMode.OR)
        result = self.scorer.score(q, company(1, GO))

        self.assertIsNotNone(result)
        # 1 of 2 required, no preferred requested
        self.assertEqual(result.match_score, 30.0)

    def test_or_mode_drops_when_none_match(self):
        q = query(required=[GO, POSTGRES], mode=SearchMode.OR)
        self.assertIsNone(self.scorer.score(q, company(1, REACT)))

    def test_preferred_only_query_scores_bonus(self):
        q = query(preferred=[GO, REACT])
        result = self.scorer.score(q, company(1, GO))

        self.assertEqual(result.match_score, 20.0)
        self.assertEqual(result.score_components['base_score'], 0.0)


class TestExclusion(unittest.TestCase):

    def test_excluded_tech_drops_perfect_match(self):
        scorer = MatchScorer()
        q = query(required=[GO], preferred=[KUBERNETES], excluded=[PHP])

        self.assertIsNone(scorer.score(q, company(1, GO, KUBERNETES, PHP)))
        self.assertIsNotNone(scorer.score(q, company(2, GO, KUBERNETES)))

    def test_excluded_tech_drops_browse_candidate(self):
        scorer = MatchScorer()
        q = query(excluded=[PHP])
        self.assertIsNone(scorer.score(q, company(1, PHP, main=[PHP]), {PHP: 9.0}))


class TestThresholdAndWeights(unittest.TestCase):

    def test_below_threshold_dropped(self):
        scorer = MatchScorer()
        q = query(required=[GO], preferred=[KUBERNETES, REACT], min_score=85)

        # 60 + 20 = 80 < 85
        self.assertIsNone(scorer.score(q, company(1, GO, KUBERNETES)))
        # 60 + 40 = 100
        self.assertIsNotNone(scorer.score(q, company(2, GO, KUBERNETES, REACT)))

    def test_threshold_is_inclusive(self):
        scorer = MatchScorer()
        q = query(required=[GO], min_score=60)
        self.assertEqual(scorer.score(q, company(1, GO)).match_score, 60.0)

    def test_custom_weights(self):
        scorer = MatchScorer(ScoringConfig(base_weight=80, bonus_weight=20))
        q = query(required=[GO], preferred=[KUBERNETES, REACT])

        result = scorer.score(q, company(1, GO, REACT))
        self.assertEqual(result.match_score, 90.0)

    def test_score_rounded_to_two_decimals(self):
        scorer = MatchScorer()
        q = query(required=[GO, POSTGRES, REACT], mode=SearchMode.OR)

        result = scorer.score(q, company(1, GO))
        self.assertEqual(result.match_score, 20.0)

        q = query(preferred=[GO, POSTGRES, REACT])
        result = scorer.score(q, company(1, GO))
        self.assertEqual(result.match_score, 13.33)


class TestBrowseFallback(unittest.TestCase):

    def setUp(self):
        self.scorer = MatchScorer()
        self.popularity = {GO: 8.0, POSTGRES: 6.0, REACT: 9.5, PHP: 2.0}

    def test_mean_popularity_of_main_technologies(self):
        candidate = company(1, GO, POSTGRES, REACT, main=[GO, POSTGRES])
        result = self.scorer.score(query(), candidate, self.popularity)

        # (8.0 + 6.0) / 2 * 10, REACT is not a main technology
        self.assertEqual(result.match_score, 70.0)
        self.assertEqual(result.score_components['mode'], 'browse')
        self.assertEqual(result.matched_associations, [])

    def test_student_expert_levels_are_primary(self):
        student = Candidate(id=7, associations=(
            TechAssociation(technology_id=GO, skill_level=SkillLevel.EXPERT),
            TechAssociation(technology_id=REACT, interest_type=InterestType.EXPERT_IN),
            TechAssociation(technology_id=PHP, skill_level=SkillLevel.BEGINNER,
                            interest_type=InterestType.WANT_TO_LEARN),
        ))
        result = self.scorer.score(query(), student, self.popularity)
        self.assertEqual(result.match_score, 87.5)

    def test_no_primary_technologies_scores_zero(self):
        result = self.scorer.score(query(), company(1, GO), self.popularity)
        self.assertEqual(result.match_score, 0.0)

    def test_browse_threshold_applies(self):
        q = query(min_score=75)
        self.assertIsNone(self.scorer.score(q, company(1, PHP, main=[PHP]), self.popularity))

    def test_fallback_disabled_scores_zero(self):
        scorer = MatchScorer(ScoringConfig(browse_fallback=False))
        result = scorer.score(query(), company(1, GO, main=[GO]), self.popularity)
        self.assertEqual(result.match_score, 0.0)


class TestDeterminism(unittest.TestCase):

    def test_same_inputs_same_result(self):
        scorer = MatchScorer()
        q = query(required=[GO], preferred=[KUBERNETES, REACT], mode=SearchMode.OR)
        candidate = company(1, REACT, GO, main=[GO])

        first = scorer.score(q, candidate)
        second = scorer.score(q, candidate)

        self.assertEqual(first.match_score, second.match_score)
        self.assertEqual(first.score_components, second.score_components)
        self.assertEqual(first.matched_associations, second.matched_associations)


if __name__ == '__main__':
    unittest.main()
