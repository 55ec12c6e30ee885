import logging
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from core.campaign.models import Invitation, InvitationStatus, ScoutTemplate as TemplateRecord
from core.interfaces import DuplicateKeyError, InvitationStore, MissingReferenceError
from database.models import ScoutInvitation, ScoutTemplate
from database.repositories.base import BaseRepository, as_utc, transient_retry

logger = logging.getLogger(__name__)

TRIPLE_CONSTRAINT = "uq_scout_invitation_triple"

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _is_duplicate_triple(e: IntegrityError) -> bool:
    """True only for a conflict on the (company, student, job posting) key."""
    pgcode = getattr(e.orig, "pgcode", None)
    if pgcode is not None:
        constraint = getattr(getattr(e.orig, "diag", None), "constraint_name", None)
        return pgcode == UNIQUE_VIOLATION and constraint == TRIPLE_CONSTRAINT
    # SQLite names the columns instead: "UNIQUE constraint failed: scout_invitations.company_id, ..."
    message = str(e.orig)
    return "UNIQUE constraint failed" in message and "scout_invitations.student_id" in message


def _is_missing_reference(e: IntegrityError) -> bool:
    pgcode = getattr(e.orig, "pgcode", None)
    if pgcode is not None:
        return pgcode == FOREIGN_KEY_VIOLATION
    return "FOREIGN KEY constraint failed" in str(e.orig)


def to_invitation(row: ScoutInvitation) -> Invitation:
    return Invitation(
        id=row.id,
        company_id=row.company_id,
        student_id=row.student_id,
        job_posting_id=row.job_posting_id,
        message=row.message,
        status=InvitationStatus(row.status),
        campaign_id=row.campaign_id,
        is_bulk_sent=bool(row.is_bulk_sent),
        scout_template_id=row.scout_template_id,
        sent_at=as_utc(row.sent_at),
        responded_at=as_utc(row.responded_at),
    )


class InvitationRepository(BaseRepository, InvitationStore):
    """
    Scout invitation persistence.

    Each insert runs in its own SAVEPOINT so a unique-key conflict only
    discards that one row. Status transitions are single conditional
    UPDATE/DELETE statements guarded by status = 'sent'.
    """

    @transient_retry
    def insert(self, invitation: Invitation) -> Invitation:
        row = ScoutInvitation(
            company_id=invitation.company_id,
            student_id=invitation.student_id,
            job_posting_id=invitation.job_posting_id,
            scout_template_id=invitation.scout_template_id,
            campaign_id=invitation.campaign_id,
            is_bulk_sent=invitation.is_bulk_sent,
            message=invitation.message,
            status=invitation.status.value,
            sent_at=invitation.sent_at,
        )
        try:
            with self.db.begin_nested():
                self.db.add(row)
                self.db.flush()
        except IntegrityError as e:
            key = (
                f"company={invitation.company_id} "
                f"student={invitation.student_id} job={invitation.job_posting_id}"
            )
            if _is_duplicate_triple(e):
                logger.debug(f"Duplicate invitation {key}")
                raise DuplicateKeyError(str(e.orig)) from e
            if _is_missing_reference(e):
                logger.debug(f"Invitation references a missing row: {key}")
                raise MissingReferenceError(str(e.orig)) from e
            raise

        return to_invitation(row)

    @transient_retry
    def find_by_id(self, invitation_id: Any) -> Optional[Invitation]:
        stmt = (
            select(ScoutInvitation)
            .where(ScoutInvitation.id == invitation_id)
            .execution_options(populate_existing=True)
        )
        row = self.db.execute(stmt).scalar_one_or_none()
        return to_invitation(row) if row is not None else None

    @transient_retry
    def find_by_campaign(self, campaign_id: str) -> List[Invitation]:
        stmt = (
            select(ScoutInvitation)
            .where(ScoutInvitation.campaign_id == campaign_id)
            .order_by(ScoutInvitation.sent_at, ScoutInvitation.student_id)
        )
        return [to_invitation(row) for row in self.db.execute(stmt).scalars().all()]

    @transient_retry
    def find_by_company(
        self,
        company_id: int,
        bulk_only: bool = False,
        status: Optional[InvitationStatus] = None
    ) -> List[Invitation]:
        stmt = select(ScoutInvitation).where(ScoutInvitation.company_id == company_id)
        if bulk_only:
            stmt = stmt.where(ScoutInvitation.is_bulk_sent.is_(True))
        if status is not None:
            stmt = stmt.where(ScoutInvitation.status == status.value)
        stmt = stmt.order_by(ScoutInvitation.sent_at.desc(), ScoutInvitation.student_id)
        return [to_invitation(row) for row in self.db.execute(stmt).scalars().all()]

    @transient_retry
    def find_by_student(self, student_id: int, status: Optional[InvitationStatus] = None) -> List[Invitation]:
        stmt = select(ScoutInvitation).where(ScoutInvitation.student_id == student_id)
        if status is not None:
            stmt = stmt.where(ScoutInvitation.status == status.value)
        stmt = stmt.order_by(ScoutInvitation.sent_at.desc(), ScoutInvitation.company_id)
        return [to_invitation(row) for row in self.db.execute(stmt).scalars().all()]

    @transient_retry
    def find_sent_before(self, cutoff: datetime) -> List[Invitation]:
        stmt = (
            select(ScoutInvitation)
            .where(
                ScoutInvitation.status == InvitationStatus.SENT.value,
                ScoutInvitation.sent_at < cutoff
            )
            .order_by(ScoutInvitation.sent_at)
        )
        return [to_invitation(row) for row in self.db.execute(stmt).scalars().all()]

    @transient_retry
    def update_status_if_sent(
        self,
        invitation_id: Any,
        new_status: InvitationStatus,
        responded_at: datetime
    ) -> bool:
        stmt = (
            update(ScoutInvitation)
            .where(
                ScoutInvitation.id == invitation_id,
                ScoutInvitation.status == InvitationStatus.SENT.value
            )
            .values(status=new_status.value, responded_at=responded_at)
        )
        with self.db.begin_nested():
            result = self.db.execute(stmt)
        return result.rowcount == 1

    @transient_retry
    def delete_if_sent(self, invitation_id: Any) -> bool:
        stmt = (
            delete(ScoutInvitation)
            .where(
                ScoutInvitation.id == invitation_id,
                ScoutInvitation.status == InvitationStatus.SENT.value
            )
        )
        with self.db.begin_nested():
            result = self.db.execute(stmt)
        return result.rowcount == 1

    @transient_retry
    def get_template(self, template_id: int) -> Optional[TemplateRecord]:
        row = self.db.get(ScoutTemplate, template_id)
        if row is None:
            return None
        return TemplateRecord(
            id=row.id,
            company_id=row.company_id,
            name=row.name,
            subject=row.subject,
            message=row.message,
            is_active=bool(row.is_active),
        )
