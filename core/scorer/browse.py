#!/usr/bin/env python3
"""
Browse Scoring - Popularity fallback for open-ended queries.

When a query names neither required nor preferred technologies there is no
coverage to measure, so candidates are ranked by how popular their primary
technologies are in the catalog.
"""

from typing import Iterable, Mapping

from core.scorer.models import TechAssociation

# Catalog popularity is on a 0-10 scale
POPULARITY_SCALE = 10.0


def calculate_browse_score(
    associations: Iterable[TechAssociation],
    popularity: Mapping[int, float]
) -> float:
    """
    Mean popularity of the candidate's primary technologies, normalised to 0-100.

    Technologies missing from ``popularity`` count as 0. No primary
    technologies scores 0.
    """
    primary = sorted({a.technology_id for a in associations if a.is_primary})
    if not primary:
        return 0.0

    total = sum(float(popularity.get(tech_id, 0.0)) for tech_id in primary)
    return total / len(primary) * (100.0 / POPULARITY_SCALE)
