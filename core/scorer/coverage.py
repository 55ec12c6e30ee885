#!/usr/bin/env python3
"""
Coverage Calculations - Required and preferred technology coverage.

Calculates what fraction of the queried technologies a candidate uses.
"""

from typing import AbstractSet, FrozenSet
import logging

from core.config_loader import ScoringConfig
from core.scorer.models import SearchMode

logger = logging.getLogger(__name__)


def coverage(requested: AbstractSet[int], candidate_tech: AbstractSet[int]) -> float:
    """
    Fraction of ``requested`` present in ``candidate_tech``.

    Empty requests cover nothing: |R ∩ C| / max(|R|, 1) is 0 when R is empty.
    """
    return len(requested & candidate_tech) / max(len(requested), 1)


def is_excluded(excluded: AbstractSet[int], candidate_tech: AbstractSet[int]) -> bool:
    return not excluded.isdisjoint(candidate_tech)


def satisfies_required(
    required: FrozenSet[int],
    candidate_tech: AbstractSet[int],
    mode: SearchMode
) -> bool:
    """
    Required-set gate.

    AND: every required technology present. OR: at least one present.
    An empty required set places no constraint.
    """
    if not required:
        return True
    if mode == SearchMode.AND:
        return required <= candidate_tech
    return not required.isdisjoint(candidate_tech)


def calculate_base_score(required_coverage: float, config: ScoringConfig) -> float:
    return required_coverage * config.base_weight


def calculate_bonus_score(preferred_coverage: float, config: ScoringConfig) -> float:
    return preferred_coverage * config.bonus_weight
