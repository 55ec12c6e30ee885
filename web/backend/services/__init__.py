"""Business logic services."""

from .search_service import SearchService
from .technology_service import TechnologyService
from .campaign_service import CampaignService
