import uuid

from sqlalchemy import Column, Integer, String, Text, Boolean, TIMESTAMP, Uuid, ForeignKey, UniqueConstraint, Index

from .base import Base, utcnow


class ScoutTemplate(Base):
    """Reusable scout message owned by a company."""
    __tablename__ = 'scout_templates'

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False)
    name = Column(String(255), nullable=False)
    subject = Column(String(255))
    message = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_scout_templates_company', 'company_id'),
    )


class ScoutInvitation(Base):
    """
    One scout from a company to a student for a job posting.

    Tracks:
    - Campaign membership (campaign_id shared by one bulk send)
    - Response state: sent -> accepted | rejected | expired
    - responded_at, set once on the first transition away from sent

    The unique triple is the source of truth for duplicate detection.
    """
    __tablename__ = 'scout_invitations'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    company_id = Column(Integer, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False)
    student_id = Column(Integer, ForeignKey('students.id', ondelete='CASCADE'), nullable=False)
    job_posting_id = Column(Integer, ForeignKey('job_postings.id', ondelete='CASCADE'), nullable=False)
    scout_template_id = Column(Integer, ForeignKey('scout_templates.id', ondelete='SET NULL'), nullable=True)

    campaign_id = Column(String(64), nullable=True)
    is_bulk_sent = Column(Boolean, nullable=False, default=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default='sent')

    sent_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    responded_at = Column(TIMESTAMP(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint('company_id', 'student_id', 'job_posting_id', name='uq_scout_invitation_triple'),
        Index('idx_scout_invitations_campaign', 'campaign_id'),
        Index('idx_scout_invitations_student', 'student_id'),
        Index('idx_scout_invitations_status_sent', 'status', 'sent_at'),
    )
