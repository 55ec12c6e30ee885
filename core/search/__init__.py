"""
Technology search over companies, job postings and students.

- models.py: Pagination, SearchPage, SearchType
- validation.py: Query/pagination validation
- service.py: SearchEngine
"""

from core.search.models import Pagination, SearchPage, SearchType
from core.search.validation import validate_pagination, validate_query

__all__ = [
    'Pagination',
    'SearchPage',
    'SearchType',
    'validate_query',
    'validate_pagination',
]
