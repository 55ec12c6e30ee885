#!/usr/bin/env python3
"""
Campaign Manager - Scout invitation lifecycle.

State machine (every target state is terminal):

    sent -> accepted | rejected   (student responds)
    sent -> expired               (time-based sweep)
    sent -> deleted               (company cancels)

Uniqueness of (company, student, job posting) is enforced by the store;
the manager never pre-checks in memory, it turns the store's conflict into
DuplicateInvitationError (individual) or a skipped recipient (bulk).
Transitions go through the store's conditional update/delete so a
concurrent cancel and response cannot both succeed.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterable, List, Optional, Tuple

from core.config_loader import CampaignConfig
from core.exceptions import (
    AlreadyRespondedError,
    CannotCancelRespondedInvitationError,
    DuplicateInvitationError,
    InvitationNotFoundError,
    NotAuthorizedError,
    NotFoundError,
    TransientStoreError,
    ValidationError,
)
from core.interfaces import CandidateStore, DuplicateKeyError, InvitationStore, MissingReferenceError
from core.scorer import Candidate, MatchQuery, MatchScorer
from core.search.validation import validate_query
from core.campaign.models import (
    BulkScoutResult,
    Decision,
    Invitation,
    InvitationStatus,
    ScoutTemplate,
    SkippedRecipient,
    SkipReason,
)

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_campaign_id() -> str:
    return f"campaign_{uuid.uuid4().hex}"


class CampaignManager:
    """
    Creates invitations (one at a time or in bulk) and applies status transitions.

    Args:
        store: Invitation persistence
        candidate_store: Used for job-posting ownership checks and recipient
            technology filters; both are skipped when not provided
        scorer: Scorer for recipient filters (defaults to MatchScorer())
        config: Expiry and batch-size limits
        clock: Returns the current time (injectable for tests)
        campaign_id_factory: Generates one campaign id per bulk send
    """

    def __init__(
        self,
        store: InvitationStore,
        candidate_store: Optional[CandidateStore] = None,
        scorer: Optional[MatchScorer] = None,
        config: Optional[CampaignConfig] = None,
        clock: Callable[[], datetime] = utcnow,
        campaign_id_factory: Callable[[], str] = new_campaign_id
    ):
        self.store = store
        self.candidate_store = candidate_store
        self.scorer = scorer or MatchScorer()
        self.config = config or CampaignConfig()
        self.clock = clock
        self.campaign_id_factory = campaign_id_factory

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_individual(
        self,
        sender: int,
        recipient: int,
        job_posting: int,
        message: str
    ) -> Invitation:
        """
        Send one scout outside of any campaign.

        Raises:
            ValidationError: empty message
            NotAuthorizedError: job posting belongs to another company
            DuplicateInvitationError: triple already invited
            NotFoundError: the student does not exist
        """
        message = self._require_message(message)
        self._check_job_posting_owner(sender, job_posting)

        invitation = Invitation(
            company_id=sender,
            student_id=recipient,
            job_posting_id=job_posting,
            message=message,
            sent_at=self.clock(),
        )
        try:
            created = self.store.insert(invitation)
        except DuplicateKeyError:
            raise DuplicateInvitationError(sender, recipient, job_posting)
        except MissingReferenceError:
            raise NotFoundError(f"Student {recipient} not found", student_id=recipient)

        logger.info(f"Company {sender} invited student {recipient} to job posting {job_posting}")
        return created

    def create_bulk(
        self,
        sender: int,
        recipients: Iterable[int],
        job_posting: int,
        message: Optional[str] = None,
        template_id: Optional[int] = None,
        recipient_filter: Optional[MatchQuery] = None
    ) -> BulkScoutResult:
        """
        Send the same scout to many students under one fresh campaign id.

        Each recipient is inserted on its own: a duplicate is recorded in
        ``skipped`` and the batch continues. A TransientStoreError aborts the
        remaining recipients and propagates.

        Args:
            sender: Company user id
            recipients: Student ids; repeats are collapsed, first occurrence wins
            job_posting: Job posting the scouts refer to
            message: Scout body; falls back to the template's message
            template_id: Optional ScoutTemplate owned by the sender
            recipient_filter: Optional technology query each recipient's
                interests must satisfy; misses are skipped as TechFilterMismatch
        """
        recipient_ids = list(dict.fromkeys(recipients))
        if not recipient_ids:
            raise ValidationError("At least one recipient is required")
        if len(recipient_ids) > self.config.max_recipients:
            raise ValidationError(
                f"Too many recipients: {len(recipient_ids)} (max {self.config.max_recipients})"
            )

        message, template = self._resolve_message(sender, message, template_id)
        self._check_job_posting_owner(sender, job_posting)

        interests = {}
        if recipient_filter is not None:
            validate_query(recipient_filter)
            if self.candidate_store is None:
                raise ValidationError("Recipient filters need a candidate store")
            interests = self.candidate_store.get_student_associations(recipient_ids)

        campaign_id = self.campaign_id_factory()
        sent_at = self.clock()
        result = BulkScoutResult(campaign_id=campaign_id)

        for student_id in recipient_ids:
            if recipient_filter is not None:
                student = Candidate(id=student_id, associations=tuple(interests.get(student_id, ())))
                if self.scorer.score(recipient_filter, student) is None:
                    result.skipped.append(SkippedRecipient(
                        student_id=student_id,
                        reason=SkipReason.TECH_FILTER_MISMATCH,
                        message=f"Student {student_id} does not match the technology filter",
                    ))
                    continue

            invitation = Invitation(
                company_id=sender,
                student_id=student_id,
                job_posting_id=job_posting,
                message=message,
                campaign_id=campaign_id,
                is_bulk_sent=True,
                scout_template_id=template.id if template else None,
                sent_at=sent_at,
            )
            try:
                result.created.append(self.store.insert(invitation))
            except DuplicateKeyError:
                duplicate = DuplicateInvitationError(sender, student_id, job_posting)
                result.skipped.append(SkippedRecipient(
                    student_id=student_id,
                    reason=SkipReason.DUPLICATE_INVITATION,
                    message=duplicate.message,
                ))
            except MissingReferenceError:
                result.skipped.append(SkippedRecipient(
                    student_id=student_id,
                    reason=SkipReason.NOT_FOUND,
                    message=f"Student {student_id} not found",
                ))
            except TransientStoreError:
                logger.error(
                    f"Campaign {campaign_id} aborted at student {student_id}: "
                    f"{result.created_count} created before the store failed"
                )
                raise

        logger.info(
            f"Campaign {campaign_id}: company {sender} sent {result.created_count} scouts "
            f"for job posting {job_posting}, skipped {len(result.skipped)}"
        )
        return result

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def respond(self, invitation_id: Any, responder: int, decision) -> Invitation:
        """
        Accept or reject an invitation as its student.

        Raises:
            ValidationError: unknown decision
            InvitationNotFoundError: no such invitation
            NotAuthorizedError: responder is not the invited student
            AlreadyRespondedError: status is not ``sent`` (responded_at untouched)
        """
        try:
            decision = Decision(decision)
        except ValueError:
            raise ValidationError(f"Unknown decision: {decision!r} (expected 'accept' or 'reject')")

        invitation = self._get(invitation_id)
        if invitation.student_id != responder:
            raise NotAuthorizedError(f"User {responder} is not the recipient of invitation {invitation_id}")

        return self._transition(invitation, decision.status)

    def expire(self, invitation_id: Any) -> Invitation:
        """Apply the time-based expiry through the same sent-only guard as respond()."""
        return self._transition(self._get(invitation_id), InvitationStatus.EXPIRED)

    def expire_stale(self, now: Optional[datetime] = None) -> int:
        """
        Expire every pending invitation older than ``config.expiry_days``.

        Invitations that change state during the sweep are left alone.

        Returns:
            Number of invitations expired
        """
        now = now or self.clock()
        cutoff = now - timedelta(days=self.config.expiry_days)

        expired = 0
        for invitation in self.store.find_sent_before(cutoff):
            if self.store.update_status_if_sent(invitation.id, InvitationStatus.EXPIRED, now):
                expired += 1

        if expired:
            logger.info(f"Expired {expired} invitations sent before {cutoff.isoformat()}")
        return expired

    def cancel(self, invitation_id: Any, sender: int) -> None:
        """
        Delete a pending invitation as its company.

        Raises:
            InvitationNotFoundError: no such invitation
            NotAuthorizedError: sender is not the inviting company
            CannotCancelRespondedInvitationError: status is not ``sent``
        """
        invitation = self._get(invitation_id)
        if invitation.company_id != sender:
            raise NotAuthorizedError(f"User {sender} did not send invitation {invitation_id}")
        if invitation.status != InvitationStatus.SENT:
            raise CannotCancelRespondedInvitationError(invitation_id, invitation.status.value)

        if not self.store.delete_if_sent(invitation_id):
            # Lost a race with a response, an expiry or another cancel
            current = self.store.find_by_id(invitation_id)
            if current is None:
                raise InvitationNotFoundError(invitation_id)
            raise CannotCancelRespondedInvitationError(invitation_id, current.status.value)

        logger.info(f"Company {sender} cancelled invitation {invitation_id}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_invitations(
        self,
        student_id: Optional[int] = None,
        company_id: Optional[int] = None,
        status=None
    ) -> List[Invitation]:
        """
        A student's received or a company's sent invitations, most recent first.

        Exactly one of ``student_id`` / ``company_id`` must be given; ``status``
        optionally narrows the list (sent, accepted, rejected, expired).
        """
        if (student_id is None) == (company_id is None):
            raise ValidationError("Pass exactly one of student_id or company_id")
        if status is not None:
            try:
                status = InvitationStatus(status)
            except ValueError:
                raise ValidationError(f"Unknown invitation status: {status!r}")

        if student_id is not None:
            return self.store.find_by_student(student_id, status)
        return self.store.find_by_company(company_id, status=status)

    def get_invitation(self, invitation_id: Any, viewer: Optional[int] = None) -> Invitation:
        """One invitation; when ``viewer`` is given it must be the student or the company."""
        invitation = self._get(invitation_id)
        if viewer is not None and viewer not in (invitation.student_id, invitation.company_id):
            raise NotAuthorizedError(f"User {viewer} is not a party to invitation {invitation_id}")
        return invitation

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get(self, invitation_id: Any) -> Invitation:
        invitation = self.store.find_by_id(invitation_id)
        if invitation is None:
            raise InvitationNotFoundError(invitation_id)
        return invitation

    def _transition(self, invitation: Invitation, new_status: InvitationStatus) -> Invitation:
        if invitation.status != InvitationStatus.SENT:
            raise AlreadyRespondedError(invitation.id, invitation.status.value)

        if not self.store.update_status_if_sent(invitation.id, new_status, self.clock()):
            # Lost a race with another response, an expiry or a cancel
            current = self.store.find_by_id(invitation.id)
            if current is None:
                raise InvitationNotFoundError(invitation.id)
            raise AlreadyRespondedError(invitation.id, current.status.value)

        logger.info(f"Invitation {invitation.id}: sent -> {new_status.value}")
        return self._get(invitation.id)

    @staticmethod
    def _require_message(message: Optional[str]) -> str:
        if message is None or not message.strip():
            raise ValidationError("Scout message must not be empty")
        return message

    def _resolve_message(
        self,
        sender: int,
        message: Optional[str],
        template_id: Optional[int]
    ) -> Tuple[str, Optional[ScoutTemplate]]:
        template = None
        if template_id is not None:
            template = self.store.get_template(template_id)
            if template is None or template.company_id != sender or not template.is_active:
                raise NotFoundError(f"Scout template {template_id} not found", template_id=template_id)
            if not message or not message.strip():
                message = template.message
        return self._require_message(message), template

    def _check_job_posting_owner(self, sender: int, job_posting: int) -> None:
        if self.candidate_store is None:
            return
        owner = self.candidate_store.job_posting_owner(job_posting)
        if owner is None:
            raise NotFoundError(f"Job posting {job_posting} not found", job_posting_id=job_posting)
        if owner != sender:
            raise NotAuthorizedError(f"Job posting {job_posting} does not belong to company {sender}")
