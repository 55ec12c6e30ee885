from database.repositories.base import BaseRepository
from database.repositories.technology import TechnologyRepository
from database.repositories.candidate import CandidateRepository
from database.repositories.invitation import InvitationRepository
from database.repositories.search_log import SearchLogRepository

__all__ = [
    'BaseRepository',
    'TechnologyRepository',
    'CandidateRepository',
    'InvitationRepository',
    'SearchLogRepository',
]
