import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import selectinload

from core.interfaces import CandidateStore
from core.scorer.models import Candidate, InterestType, SkillLevel, TechAssociation, UsageLevel
from database.models import Company, JobPosting, Student, StudentTechInterest
from database.repositories.base import BaseRepository, transient_retry

logger = logging.getLogger(__name__)


def _student_association(row: StudentTechInterest) -> TechAssociation:
    return TechAssociation(
        technology_id=row.technology_id,
        skill_level=SkillLevel(row.skill_level),
        interest_type=InterestType(row.interest_type),
    )


def job_associations(required_ids: Iterable[int], preferred_ids: Iterable[int]) -> List[TechAssociation]:
    """Required technologies map to main usage, preferred ones to sub."""
    required = list(dict.fromkeys(required_ids or []))
    associations = [
        TechAssociation(technology_id=tid, usage_level=UsageLevel.MAIN, is_main_tech=True)
        for tid in required
    ]
    seen = set(required)
    for tid in preferred_ids or []:
        if tid in seen:
            continue
        seen.add(tid)
        associations.append(TechAssociation(technology_id=tid, usage_level=UsageLevel.SUB))
    return associations


class CandidateRepository(BaseRepository, CandidateStore):
    """Loads companies, open job postings and students as scoring candidates."""

    @transient_retry
    def list_active_companies(self) -> List[Candidate]:
        stmt = (
            select(Company)
            .where(Company.is_active.is_(True))
            .options(selectinload(Company.tech_stacks))
            .order_by(Company.id)
        )
        candidates = []
        for company in self.db.execute(stmt).scalars().all():
            associations = tuple(
                TechAssociation(
                    technology_id=stack.technology_id,
                    usage_level=UsageLevel(stack.usage_level),
                    is_main_tech=bool(stack.is_main_tech),
                )
                for stack in sorted(company.tech_stacks, key=lambda s: s.technology_id)
            )
            candidates.append(Candidate(
                id=company.id,
                associations=associations,
                metadata={
                    'name': company.name,
                    'industry': company.industry,
                    'location': company.location,
                    'company_size': company.company_size,
                },
            ))
        return candidates

    @transient_retry
    def list_active_jobs(self, today: Optional[date] = None) -> List[Candidate]:
        today = today or date.today()
        stmt = (
            select(JobPosting)
            .join(Company, JobPosting.company_id == Company.id)
            .where(
                Company.is_active.is_(True),
                or_(JobPosting.deadline.is_(None), JobPosting.deadline > today)
            )
            .options(selectinload(JobPosting.company))
            .order_by(JobPosting.id)
        )
        candidates = []
        for job in self.db.execute(stmt).scalars().all():
            candidates.append(Candidate(
                id=job.id,
                associations=tuple(job_associations(job.required_tech_ids, job.preferred_tech_ids)),
                metadata={
                    'title': job.title,
                    'company_id': job.company_id,
                    'company_name': job.company.name,
                    'location': job.location or job.company.location,
                    'company_size': job.company.company_size,
                    'employment_type': job.employment_type,
                    'deadline': job.deadline.isoformat() if job.deadline else None,
                },
            ))
        return candidates

    @transient_retry
    def list_active_students(self) -> List[Candidate]:
        stmt = (
            select(Student)
            .where(Student.is_active.is_(True))
            .options(selectinload(Student.tech_interests))
            .order_by(Student.id)
        )
        candidates = []
        for student in self.db.execute(stmt).scalars().all():
            associations = tuple(
                _student_association(interest)
                for interest in sorted(student.tech_interests, key=lambda i: i.technology_id)
            )
            candidates.append(Candidate(
                id=student.id,
                associations=associations,
                metadata={
                    'name': student.name,
                    'university': student.university,
                    'location': student.location,
                    'graduation_year': student.graduation_year,
                },
            ))
        return candidates

    @transient_retry
    def get_student_associations(self, student_ids: Iterable[int]) -> Dict[int, List[TechAssociation]]:
        ids = list(student_ids)
        result: Dict[int, List[TechAssociation]] = {sid: [] for sid in ids}
        if not ids:
            return result

        stmt = (
            select(StudentTechInterest)
            .where(StudentTechInterest.student_id.in_(ids))
            .order_by(StudentTechInterest.student_id, StudentTechInterest.technology_id)
        )
        for row in self.db.execute(stmt).scalars().all():
            result[row.student_id].append(_student_association(row))
        return result

    @transient_retry
    def job_posting_owner(self, job_posting_id: int) -> Optional[int]:
        stmt = select(JobPosting.company_id).where(JobPosting.id == job_posting_id)
        return self.db.execute(stmt).scalar_one_or_none()
