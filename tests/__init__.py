#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the SQLite-backed repository/API tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database tests run against an in-memory SQLite database (one connection
shared through StaticPool), so no external service is needed.
"""

from datetime import date, datetime, timezone
from typing import Iterable, Optional, Tuple

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database.database import make_engine
from database.models import (
    Base,
    Company,
    CompanyTechStack,
    JobPosting,
    Student,
    StudentTechInterest,
    Technology,
)


def create_test_engine() -> Engine:
    """In-memory SQLite engine with all tables created."""
    engine = make_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


def create_test_session() -> Tuple[Engine, Session]:
    engine = create_test_engine()
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine, factory()


def add_technology(session: Session, tech_id: int, name: str, category: str = "backend",
                   popularity: float = 5.0, demand: float = 5.0, difficulty: int = 3) -> Technology:
    tech = Technology(
        id=tech_id,
        name=name,
        category=category,
        popularity_score=popularity,
        market_demand_score=demand,
        learning_difficulty=difficulty,
    )
    session.add(tech)
    return tech


def add_company(session: Session, company_id: int, name: str, tech: Iterable[Tuple[int, str]] = (),
                location: Optional[str] = None, company_size: Optional[str] = None,
                is_active: bool = True) -> Company:
    """Add a company with (technology_id, usage_level) pairs."""
    company = Company(id=company_id, name=name, location=location,
                      company_size=company_size, is_active=is_active)
    for tech_id, usage_level in tech:
        company.tech_stacks.append(CompanyTechStack(
            technology_id=tech_id,
            usage_level=usage_level,
            is_main_tech=usage_level == "main",
        ))
    session.add(company)
    return company


def add_job_posting(session: Session, job_id: int, company_id: int, title: str,
                    required: Iterable[int] = (), preferred: Iterable[int] = (),
                    deadline: Optional[date] = None, employment_type: Optional[str] = None) -> JobPosting:
    job = JobPosting(
        id=job_id,
        company_id=company_id,
        title=title,
        required_tech_ids=list(required),
        preferred_tech_ids=list(preferred),
        deadline=deadline,
        employment_type=employment_type,
    )
    session.add(job)
    return job


def add_student(session: Session, student_id: int, name: str,
                tech: Iterable[Tuple[int, str, str]] = (), is_active: bool = True) -> Student:
    """Add a student with (technology_id, skill_level, interest_type) triples."""
    student = Student(id=student_id, name=name, is_active=is_active)
    for tech_id, skill_level, interest_type in tech:
        student.tech_interests.append(StudentTechInterest(
            technology_id=tech_id,
            skill_level=skill_level,
            interest_type=interest_type,
        ))
    session.add(student)
    return student


def utc(year: int, month: int, day: int, hour: int = 0) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)
