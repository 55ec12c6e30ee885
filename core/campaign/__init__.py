"""
Scout campaigns: invitation lifecycle and campaign statistics.

- models.py: Invitation, CampaignStats and friends
- manager.py: CampaignManager (create, respond, cancel, expire)
- aggregator.py: CampaignAggregator (statistics recomputed per read)
"""

from core.campaign.models import (
    BulkScoutResult,
    CampaignStats,
    Decision,
    Invitation,
    InvitationStatus,
    ScoutTemplate,
    SkippedRecipient,
    SkipReason,
)

__all__ = [
    'Invitation',
    'InvitationStatus',
    'Decision',
    'ScoutTemplate',
    'SkippedRecipient',
    'SkipReason',
    'BulkScoutResult',
    'CampaignStats',
]
