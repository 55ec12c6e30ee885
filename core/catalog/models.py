#!/usr/bin/env python3
"""
Catalog Models - Technology reference data.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TechCategory(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    DEVOPS = "devops"
    MOBILE = "mobile"
    AI_ML = "ai_ml"
    DATA_SCIENCE = "data_science"
    TESTING = "testing"
    DESIGN = "design"
    OTHER = "other"


@dataclass(frozen=True)
class Technology:
    """A catalog technology. Scores are on a 0.0-10.0 scale."""
    id: int
    name: str
    category: TechCategory
    popularity_score: float = 0.0
    market_demand_score: float = 0.0
    learning_difficulty: int = 1
    description: Optional[str] = None

    def __post_init__(self):
        if not 0.0 <= self.popularity_score <= 10.0:
            raise ValueError(f"popularity_score out of range: {self.popularity_score}")
        if not 0.0 <= self.market_demand_score <= 10.0:
            raise ValueError(f"market_demand_score out of range: {self.market_demand_score}")
        if not 1 <= self.learning_difficulty <= 5:
            raise ValueError(f"learning_difficulty out of range: {self.learning_difficulty}")


@dataclass(frozen=True)
class TechCombination:
    """Two technologies commonly used together."""
    primary_tech_id: int
    secondary_tech_id: int
    popularity_score: float = 0.0
    combination_type: str = "common"
