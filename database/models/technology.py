from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, ForeignKey, UniqueConstraint, Index, CheckConstraint
from sqlalchemy.orm import relationship

from .base import Base


class Technology(Base):
    """
    Technology reference data (languages, frameworks, databases, tools).

    Scores are on a 0-10 scale; learning_difficulty is 1 (easiest) to 5.
    """
    __tablename__ = 'technologies'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    category = Column(String(30), nullable=False)
    description = Column(Text)
    popularity_score = Column(Numeric(4, 2), nullable=False, default=0)
    market_demand_score = Column(Numeric(4, 2), nullable=False, default=0)
    learning_difficulty = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint('popularity_score >= 0 AND popularity_score <= 10', name='ck_technologies_popularity'),
        CheckConstraint('market_demand_score >= 0 AND market_demand_score <= 10', name='ck_technologies_demand'),
        CheckConstraint('learning_difficulty >= 1 AND learning_difficulty <= 5', name='ck_technologies_difficulty'),
        Index('idx_technologies_category', 'category'),
        Index('idx_technologies_popularity', 'popularity_score'),
    )


class TechCombination(Base):
    """Pair of technologies commonly used together."""
    __tablename__ = 'tech_combinations'

    id = Column(Integer, primary_key=True, autoincrement=True)
    primary_tech_id = Column(Integer, ForeignKey('technologies.id', ondelete='CASCADE'), nullable=False)
    secondary_tech_id = Column(Integer, ForeignKey('technologies.id', ondelete='CASCADE'), nullable=False)
    popularity_score = Column(Numeric(4, 2), nullable=False, default=0)
    combination_type = Column(String(30), nullable=False, default='common')

    __table_args__ = (
        UniqueConstraint('primary_tech_id', 'secondary_tech_id', name='uq_tech_combination_pair'),
        Index('idx_tech_combination_secondary', 'secondary_tech_id'),
    )


class CompanyTechStack(Base):
    """Technology used by a company, with how central it is to their stack."""
    __tablename__ = 'company_tech_stacks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False)
    technology_id = Column(Integer, ForeignKey('technologies.id', ondelete='CASCADE'), nullable=False)
    usage_level = Column(String(20), nullable=False, default='main')
    is_main_tech = Column(Boolean, nullable=False, default=False)

    company = relationship("Company", back_populates="tech_stacks")

    __table_args__ = (
        UniqueConstraint('company_id', 'technology_id', name='uq_company_tech_stack'),
        Index('idx_company_tech_stack_tech', 'technology_id'),
    )


class StudentTechInterest(Base):
    """Technology a student knows or wants to learn."""
    __tablename__ = 'student_tech_interests'

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey('students.id', ondelete='CASCADE'), nullable=False)
    technology_id = Column(Integer, ForeignKey('technologies.id', ondelete='CASCADE'), nullable=False)
    skill_level = Column(String(20), nullable=False, default='beginner')
    interest_type = Column(String(30), nullable=False, default='want_to_learn')

    student = relationship("Student", back_populates="tech_interests")

    __table_args__ = (
        UniqueConstraint('student_id', 'technology_id', name='uq_student_tech_interest'),
        Index('idx_student_tech_interest_tech', 'technology_id'),
    )
