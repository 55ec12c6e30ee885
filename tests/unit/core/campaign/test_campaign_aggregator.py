#!/usr/bin/env python3
"""
Tests for CampaignAggregator statistics.
"""

import unittest

from core.campaign.aggregator import CampaignAggregator, acceptance_rate
from core.campaign.models import Invitation, InvitationStatus
from core.exceptions import CampaignNotFoundError
from tests import utc
from tests.mocks.stores import InMemoryInvitationStore

COMPANY, OTHER_COMPANY, JOB = 100, 200, 1000


def seed(store, campaign_id, statuses, company_id=COMPANY, day=1, first_student=1):
    for offset, status in enumerate(statuses):
        invitation = store.insert(Invitation(
            company_id=company_id,
            student_id=first_student + offset,
            job_posting_id=JOB,
            message="Hi",
            campaign_id=campaign_id,
            is_bulk_sent=campaign_id is not None,
            sent_at=utc(2026, 3, day, 9),
        ))
        store.rows[invitation.id].status = status


class TestAcceptanceRate(unittest.TestCase):

    def test_percentage_of_decided(self):
        self.assertEqual(acceptance_rate(6, 2), 75.0)

    def test_no_decisions_is_zero(self):
        self.assertEqual(acceptance_rate(0, 0), 0.0)

    def test_rounded(self):
        self.assertEqual(acceptance_rate(1, 2), 33.33)


class TestCampaignStats(unittest.TestCase):

    def setUp(self):
        self.store = InMemoryInvitationStore()
        self.aggregator = CampaignAggregator(self.store)

    def test_six_accepted_two_rejected_two_pending(self):
        seed(self.store, "campaign_a",
             [InvitationStatus.ACCEPTED] * 6 + [InvitationStatus.REJECTED] * 2 + [InvitationStatus.SENT] * 2)

        stats = self.aggregator.stats("campaign_a")

        self.assertEqual(stats.total_sent, 10)
        self.assertEqual(stats.accepted, 6)
        self.assertEqual(stats.rejected, 2)
        self.assertEqual(stats.pending, 2)
        self.assertEqual(stats.expired, 0)
        self.assertEqual(stats.acceptance_rate, 75.0)
        self.assertEqual(stats.company_id, COMPANY)
        self.assertEqual(stats.job_posting_id, JOB)
        self.assertEqual(stats.sent_at, utc(2026, 3, 1, 9))

    def test_expired_not_counted_as_decided(self):
        seed(self.store, "campaign_a", [InvitationStatus.ACCEPTED, InvitationStatus.EXPIRED])
        stats = self.aggregator.stats("campaign_a")

        self.assertEqual(stats.expired, 1)
        self.assertEqual(stats.acceptance_rate, 100.0)

    def test_all_pending_rate_zero(self):
        seed(self.store, "campaign_a", [InvitationStatus.SENT] * 3)
        self.assertEqual(self.aggregator.stats("campaign_a").acceptance_rate, 0.0)

    def test_recomputed_on_every_read(self):
        seed(self.store, "campaign_a", [InvitationStatus.SENT, InvitationStatus.SENT])
        self.assertEqual(self.aggregator.stats("campaign_a").pending, 2)

        invitation = self.store.find_by_campaign("campaign_a")[0]
        self.store.update_status_if_sent(invitation.id, InvitationStatus.ACCEPTED, utc(2026, 3, 2))

        stats = self.aggregator.stats("campaign_a")
        self.assertEqual(stats.pending, 1)
        self.assertEqual(stats.accepted, 1)
        self.assertEqual(stats.acceptance_rate, 100.0)

    def test_unknown_campaign(self):
        with self.assertRaises(CampaignNotFoundError):
            self.aggregator.stats("campaign_missing")

    def test_other_company_cannot_see_campaign(self):
        seed(self.store, "campaign_a", [InvitationStatus.SENT])
        with self.assertRaises(CampaignNotFoundError):
            self.aggregator.stats("campaign_a", company_id=OTHER_COMPANY)
        self.assertEqual(self.aggregator.stats("campaign_a", company_id=COMPANY).total_sent, 1)


class TestListCampaigns(unittest.TestCase):

    def test_newest_first_bulk_only(self):
        store = InMemoryInvitationStore()
        seed(store, "campaign_old", [InvitationStatus.ACCEPTED, InvitationStatus.REJECTED], day=1, first_student=1)
        seed(store, "campaign_new", [InvitationStatus.SENT], day=5, first_student=10)
        seed(store, None, [InvitationStatus.SENT], day=9, first_student=20)
        seed(store, "campaign_theirs", [InvitationStatus.SENT], company_id=OTHER_COMPANY, day=7, first_student=30)

        campaigns = CampaignAggregator(store).list_campaigns(COMPANY)

        self.assertEqual([c.campaign_id for c in campaigns], ["campaign_new", "campaign_old"])
        self.assertEqual(campaigns[1].acceptance_rate, 50.0)


if __name__ == '__main__':
    unittest.main()
