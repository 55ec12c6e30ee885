#!/usr/bin/env python3
"""
Tests for TechnologyCatalog lookups.
"""

import unittest

from core.catalog.models import Technology, TechCategory, TechCombination
from core.catalog.service import TechnologyCatalog
from core.exceptions import NotFoundError, TechnologyNotFoundError, ValidationError
from tests.mocks.stores import InMemoryTechnologyStore


def tech(tech_id, name, category=TechCategory.BACKEND, popularity=5.0, demand=5.0, difficulty=3):
    return Technology(
        id=tech_id,
        name=name,
        category=category,
        popularity_score=popularity,
        market_demand_score=demand,
        learning_difficulty=difficulty,
    )


class TestTechnologyCatalog(unittest.TestCase):

    def setUp(self):
        self.store = InMemoryTechnologyStore(
            technologies=[
                tech(1, "Go", popularity=7.5, demand=8.5, difficulty=3),
                tech(2, "PostgreSQL", TechCategory.DATABASE, popularity=8.0, demand=8.0, difficulty=3),
                tech(3, "Kubernetes", TechCategory.DEVOPS, popularity=7.0, demand=9.5, difficulty=5),
                tech(4, "HTML", TechCategory.FRONTEND, popularity=9.0, demand=6.0, difficulty=1),
                tech(5, "React", TechCategory.FRONTEND, popularity=9.5, demand=9.0, difficulty=2),
            ],
            combinations=[
                TechCombination(primary_tech_id=1, secondary_tech_id=2, popularity_score=8.0),
                TechCombination(primary_tech_id=3, secondary_tech_id=1, popularity_score=9.0),
                TechCombination(primary_tech_id=5, secondary_tech_id=4, popularity_score=9.5),
            ],
        )
        self.catalog = TechnologyCatalog(self.store)

    def test_get_existing(self):
        self.assertEqual(self.catalog.get(2).name, "PostgreSQL")

    def test_get_missing_raises_not_found(self):
        with self.assertRaises(TechnologyNotFoundError) as ctx:
            self.catalog.get(99)
        self.assertIsInstance(ctx.exception, NotFoundError)
        self.assertEqual(ctx.exception.kind, "NotFound")

    def test_list_by_ids_keeps_request_order_and_omits_unknown(self):
        techs = self.catalog.list_by_ids([3, 99, 1, 3])
        self.assertEqual([t.id for t in techs], [3, 1])

    def test_list_by_ids_empty(self):
        self.assertEqual(self.catalog.list_by_ids([]), [])
        self.assertEqual(self.store.get_many_calls, 0)

    def test_popularity_map_and_names(self):
        self.assertEqual(self.catalog.popularity_map([1, 2, 42]), {1: 7.5, 2: 8.0})
        self.assertEqual(self.catalog.names([5, 1]), ["React", "Go"])

    def test_by_category(self):
        frontend = self.catalog.by_category("frontend")
        self.assertEqual([t.name for t in frontend], ["React", "HTML"])

    def test_by_unknown_category_is_validation_error(self):
        with self.assertRaises(ValidationError):
            self.catalog.by_category("blockchain")

    def test_popular_and_in_demand(self):
        self.assertEqual([t.id for t in self.catalog.popular(2)], [5, 4])
        self.assertEqual([t.id for t in self.catalog.in_demand(2)], [3, 5])

    def test_beginner_friendly(self):
        self.assertEqual([t.name for t in self.catalog.beginner_friendly()], ["HTML", "React"])

    def test_related_both_directions_most_popular_first(self):
        related = self.catalog.related(1)
        self.assertEqual([t.name for t in related], ["Kubernetes", "PostgreSQL"])

    def test_related_unknown_technology(self):
        with self.assertRaises(TechnologyNotFoundError):
            self.catalog.related(42)


class TestTechnologyModel(unittest.TestCase):

    def test_popularity_range_enforced(self):
        with self.assertRaises(ValueError):
            tech(1, "Go", popularity=11.0)

    def test_difficulty_range_enforced(self):
        with self.assertRaises(ValueError):
            tech(1, "Go", difficulty=0)


if __name__ == '__main__':
    unittest.main()
