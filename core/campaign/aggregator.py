#!/usr/bin/env python3
"""
Campaign Aggregator - statistics derived from invitation rows.

Stats are recomputed on every read so they always reflect the latest
responses and expiries.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional

from core.exceptions import CampaignNotFoundError
from core.interfaces import InvitationStore
from core.campaign.models import CampaignStats, Invitation, InvitationStatus

logger = logging.getLogger(__name__)


def acceptance_rate(accepted: int, rejected: int) -> float:
    """Percentage of decided invitations that were accepted; 0 when none are decided."""
    decided = accepted + rejected
    if decided == 0:
        return 0.0
    return round(100.0 * accepted / decided, 2)


def summarize(campaign_id: str, invitations: Iterable[Invitation]) -> CampaignStats:
    rows = list(invitations)
    counts = Counter(inv.status.value for inv in rows)

    stats = CampaignStats(campaign_id=campaign_id, total_sent=len(rows))
    for status in InvitationStatus:
        stats.counts[status.value] = counts.get(status.value, 0)
    stats.acceptance_rate = acceptance_rate(stats.accepted, stats.rejected)

    if rows:
        stats.company_id = rows[0].company_id
        stats.job_posting_id = rows[0].job_posting_id
        sent_times = [inv.sent_at for inv in rows if inv.sent_at is not None]
        stats.sent_at = min(sent_times) if sent_times else None
    return stats


class CampaignAggregator:
    """Read-only statistics over the invitation store."""

    def __init__(self, store: InvitationStore):
        self.store = store

    def stats(self, campaign_id: str, company_id: Optional[int] = None) -> CampaignStats:
        """
        Aggregate the invitations sharing ``campaign_id``.

        Args:
            campaign_id: Campaign key returned by a bulk send
            company_id: When given, only that company's invitations count

        Raises:
            CampaignNotFoundError: no matching invitations
        """
        rows = self.store.find_by_campaign(campaign_id)
        if company_id is not None:
            rows = [inv for inv in rows if inv.company_id == company_id]
        if not rows:
            raise CampaignNotFoundError(campaign_id)

        stats = summarize(campaign_id, rows)
        logger.debug(
            f"Campaign {campaign_id}: {stats.total_sent} sent, {stats.accepted} accepted, "
            f"{stats.rejected} rejected, {stats.pending} pending"
        )
        return stats

    def list_campaigns(self, company_id: int) -> List[CampaignStats]:
        """All bulk campaigns of a company, newest first."""
        grouped: Dict[str, List[Invitation]] = {}
        for invitation in self.store.find_by_company(company_id, bulk_only=True):
            if invitation.campaign_id is None:
                continue
            grouped.setdefault(invitation.campaign_id, []).append(invitation)

        campaigns = [summarize(cid, rows) for cid, rows in grouped.items()]
        campaigns.sort(key=lambda s: (s.sent_at is not None, s.sent_at), reverse=True)
        return campaigns
