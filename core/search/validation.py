"""Query and pagination validation, run before any data access."""

from typing import Iterable, Optional

from core.catalog.models import TechCategory
from core.exceptions import ValidationError
from core.scorer.models import MatchQuery


def _validate_tech_ids(name: str, ids: Iterable) -> None:
    for tech_id in ids:
        if tech_id is None or tech_id == "":
            raise ValidationError(f"{name} contains an empty technology id")
        if isinstance(tech_id, bool) or not isinstance(tech_id, int) or tech_id <= 0:
            raise ValidationError(f"{name} contains an invalid technology id: {tech_id!r}")


def validate_query(query: MatchQuery) -> None:
    """
    Reject malformed queries.

    Raises:
        ValidationError: empty/invalid technology ids, threshold outside
            [0, 100], unknown category
    """
    _validate_tech_ids("required_tech", query.required_tech)
    _validate_tech_ids("preferred_tech", query.preferred_tech)
    _validate_tech_ids("excluded_tech", query.excluded_tech)

    if not 0.0 <= query.min_match_score <= 100.0:
        raise ValidationError(
            f"min_match_score must be within [0, 100], got {query.min_match_score}"
        )

    for category in query.categories:
        try:
            TechCategory(category)
        except ValueError:
            raise ValidationError(f"Unknown technology category: {category}")


def validate_pagination(page: int, per_page: int, max_per_page: Optional[int] = None) -> None:
    if page < 1:
        raise ValidationError(f"page must be >= 1, got {page}")
    if per_page < 1:
        raise ValidationError(f"per_page must be >= 1, got {per_page}")
    if max_per_page is not None and per_page > max_per_page:
        raise ValidationError(f"per_page must be <= {max_per_page}, got {per_page}")
