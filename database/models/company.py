from sqlalchemy import Column, Integer, String, Text, Boolean, Date, TIMESTAMP, JSON, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class Company(Base):
    """
    Company profile as seen by the matching engine.

    Accounts and profile editing live elsewhere; only the fields used for
    filtering and display are mapped here.
    """
    __tablename__ = 'companies'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    industry = Column(String(100))
    location = Column(String(255))
    company_size = Column(String(30))
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    tech_stacks = relationship("CompanyTechStack", back_populates="company", cascade="all, delete-orphan")
    job_postings = relationship("JobPosting", back_populates="company", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_companies_active', 'is_active'),
    )


class JobPosting(Base):
    """
    Job posting with its technology requirements.

    Required/preferred technologies are stored as JSON id lists. A posting
    is open while its deadline is unset or in the future.
    """
    __tablename__ = 'job_postings'

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    location = Column(String(255))
    employment_type = Column(String(30))
    required_tech_ids = Column(JSON, nullable=False, default=list)
    preferred_tech_ids = Column(JSON, nullable=False, default=list)
    deadline = Column(Date)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    company = relationship("Company", back_populates="job_postings")

    __table_args__ = (
        Index('idx_job_postings_company', 'company_id'),
        Index('idx_job_postings_deadline', 'deadline'),
    )


class Student(Base):
    __tablename__ = 'students'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    university = Column(String(255))
    location = Column(String(255))
    graduation_year = Column(Integer)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    tech_interests = relationship("StudentTechInterest", back_populates="student", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_students_active', 'is_active'),
    )
