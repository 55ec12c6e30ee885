from sqlalchemy import Column, Integer, String, Numeric, TIMESTAMP, JSON, Index

from .base import Base, utcnow


class TechSearchLog(Base):
    """Analytics record of one technology search."""
    __tablename__ = 'tech_search_logs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=True)
    search_type = Column(String(30), nullable=False)
    search_params = Column(JSON, nullable=False, default=dict)
    result_count = Column(Integer, nullable=False, default=0)
    match_score_threshold = Column(Numeric(5, 2))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_tech_search_logs_type_created', 'search_type', 'created_at'),
    )
