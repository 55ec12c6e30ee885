from .base import Base
from .technology import Technology, TechCombination, CompanyTechStack, StudentTechInterest
from .company import Company, JobPosting, Student
from .invitation import ScoutInvitation, ScoutTemplate
from .search_log import TechSearchLog

__all__ = [
    'Base',
    'Technology',
    'TechCombination',
    'CompanyTechStack',
    'StudentTechInterest',
    'Company',
    'JobPosting',
    'Student',
    'ScoutInvitation',
    'ScoutTemplate',
    'TechSearchLog',
]
