#!/usr/bin/env python3
"""
Request models for API endpoints.

No authentication layer is modelled: the acting company/student id is part
of each request.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from core.scorer.models import MatchQuery, SearchMode


class TechQuery(BaseModel):
    """Technology query shared by searches and campaign recipient filters."""
    required_tech: List[int] = Field(default_factory=list, description="Technology ids that must be used")
    preferred_tech: List[int] = Field(default_factory=list, description="Technology ids that add a bonus")
    excluded_tech: List[int] = Field(default_factory=list, description="Technology ids that disqualify")
    search_mode: SearchMode = Field(default=SearchMode.AND, description="AND: all required, OR: any required")
    min_match_score: float = Field(default=0.0, description="Minimum match score (0-100)")
    categories: List[str] = Field(default_factory=list, description="Technology categories to filter by")

    def to_match_query(self, **filters) -> MatchQuery:
        return MatchQuery(
            required_tech=frozenset(self.required_tech),
            preferred_tech=frozenset(self.preferred_tech),
            excluded_tech=frozenset(self.excluded_tech),
            search_mode=self.search_mode,
            min_match_score=self.min_match_score,
            categories=frozenset(self.categories),
            **filters
        )


class SearchRequest(TechQuery):
    """Search for companies, job postings or students."""
    location: Optional[str] = Field(None, description="Case-insensitive substring of the location")
    company_size: Optional[str] = None
    employment_type: Optional[str] = Field(None, description="Job postings only")
    page: int = Field(default=1, description="1-based page number")
    per_page: Optional[int] = Field(None, description="Results per page (server default when omitted)")
    user_id: Optional[int] = Field(None, description="Searching user, recorded in the search log")

    def to_match_query(self) -> MatchQuery:
        return super().to_match_query(
            location=self.location,
            company_size=self.company_size,
            employment_type=self.employment_type,
        )


class InvitationCreate(BaseModel):
    """Individual scout from a company to one student."""
    company_id: int
    student_id: int
    job_posting_id: int
    message: str


class CampaignCreate(BaseModel):
    """Bulk scout to many students under one campaign."""
    company_id: int
    student_ids: List[int] = Field(..., description="Recipients; repeats are collapsed")
    job_posting_id: int
    message: Optional[str] = Field(None, description="Falls back to the template message")
    template_id: Optional[int] = None
    recipient_filter: Optional[TechQuery] = Field(
        None,
        description="Only recipients whose technology interests match are invited"
    )


class InvitationResponseRequest(BaseModel):
    """A student's answer to an invitation."""
    student_id: int
    decision: str = Field(..., description="accept or reject")
