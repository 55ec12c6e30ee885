"""
Technology catalog: reference data and read-only lookups.

The service lives in core.catalog.service (it depends on core.interfaces,
which imports these models).
"""

from core.catalog.models import Technology, TechCategory, TechCombination

__all__ = ['Technology', 'TechCategory', 'TechCombination']
