#!/usr/bin/env python3
"""
Scoring Models - Queries, candidates and match results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple


class SearchMode(str, Enum):
    AND = "AND"
    OR = "OR"


class UsageLevel(str, Enum):
    """How a company uses a technology."""
    MAIN = "main"
    SUB = "sub"
    EXPERIMENTAL = "experimental"


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class InterestType(str, Enum):
    WANT_TO_LEARN = "want_to_learn"
    CURRENTLY_LEARNING = "currently_learning"
    EXPERIENCED_WITH = "experienced_with"
    EXPERT_IN = "expert_in"


@dataclass(frozen=True)
class TechAssociation:
    """
    One subject-technology link.

    Company links carry usage_level/is_main_tech, student links carry
    skill_level/interest_type. Job postings are mapped onto the company
    shape (required -> main, preferred -> sub).
    """
    technology_id: int
    usage_level: Optional[UsageLevel] = None
    is_main_tech: bool = False
    skill_level: Optional[SkillLevel] = None
    interest_type: Optional[InterestType] = None

    @property
    def is_primary(self) -> bool:
        """Main/expert-level technology, used by browse scoring."""
        return (
            self.is_main_tech
            or self.usage_level == UsageLevel.MAIN
            or self.skill_level == SkillLevel.EXPERT
            or self.interest_type == InterestType.EXPERT_IN
        )


@dataclass(frozen=True)
class Candidate:
    """A company, job posting or student being scored."""
    id: int
    associations: Tuple[TechAssociation, ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    @property
    def technology_ids(self) -> FrozenSet[int]:
        return frozenset(a.technology_id for a in self.associations)


@dataclass(frozen=True)
class MatchQuery:
    """A technology search request."""
    required_tech: FrozenSet[int] = frozenset()
    preferred_tech: FrozenSet[int] = frozenset()
    excluded_tech: FrozenSet[int] = frozenset()
    search_mode: SearchMode = SearchMode.AND
    min_match_score: float = 0.0
    categories: FrozenSet[str] = frozenset()
    location: Optional[str] = None
    company_size: Optional[str] = None
    employment_type: Optional[str] = None

    @property
    def is_browse(self) -> bool:
        """Open-ended query with neither required nor preferred technologies."""
        return not self.required_tech and not self.preferred_tech

    @property
    def searched_tech(self) -> FrozenSet[int]:
        return self.required_tech | self.preferred_tech

    def to_log_dict(self) -> Dict[str, Any]:
        return {
            'required': sorted(self.required_tech),
            'preferred': sorted(self.preferred_tech),
            'excluded': sorted(self.excluded_tech),
            'search_mode': self.search_mode.value,
            'min_match_score': self.min_match_score,
            'categories': sorted(self.categories),
            'location': self.location,
            'company_size': self.company_size,
            'employment_type': self.employment_type,
        }


@dataclass
class MatchResult:
    """Score of one candidate against a query."""
    candidate_id: int
    match_score: float
    matched_associations: List[TechAssociation] = field(default_factory=list)
    score_components: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def sort_key(self):
        # Highest score first, ties by ascending candidate id
        return (-self.match_score, self.candidate_id)
