#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class TechAssociationSummary(BaseModel):
    technology_id: int
    usage_level: Optional[str] = None
    is_main_tech: bool = False
    skill_level: Optional[str] = None
    interest_type: Optional[str] = None


class MatchResultSummary(BaseModel):
    """One ranked candidate."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "candidate_id": 42,
                "match_score": 76.0,
                "matched_technologies": [
                    {"technology_id": 3, "usage_level": "main", "is_main_tech": True}
                ],
                "score_components": {
                    "mode": "AND",
                    "required_coverage": 1.0,
                    "preferred_coverage": 0.4,
                    "base_score": 60.0,
                    "bonus_score": 16.0,
                    "match_score": 76.0
                },
                "metadata": {"name": "TechCorp", "location": "Tokyo"}
            }
        }
    )

    candidate_id: int
    match_score: float = Field(ge=0, le=100)
    matched_technologies: List[TechAssociationSummary] = Field(default_factory=list)
    score_components: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class SearchResponse(BaseModel):
    success: bool = True
    results: List[MatchResultSummary]
    page: int
    per_page: int
    total_results: int
    total_pages: int
    technologies_searched: List[str] = Field(default_factory=list)


class TechnologySummary(BaseModel):
    id: int
    name: str
    category: str
    popularity_score: float
    market_demand_score: float
    learning_difficulty: int
    description: Optional[str] = None


class TechnologyListResponse(BaseModel):
    success: bool = True
    count: int
    technologies: List[TechnologySummary]


class TechnologyDetailResponse(BaseModel):
    success: bool = True
    technology: TechnologySummary
    related: List[TechnologySummary] = Field(default_factory=list)


class InvitationSummary(BaseModel):
    id: str
    company_id: int
    student_id: int
    job_posting_id: int
    campaign_id: Optional[str] = None
    is_bulk_sent: bool = False
    scout_template_id: Optional[int] = None
    message: str
    status: str
    sent_at: Optional[str] = None
    responded_at: Optional[str] = None


class InvitationResponse(BaseModel):
    success: bool = True
    invitation: InvitationSummary


class InvitationListResponse(BaseModel):
    success: bool = True
    count: int
    invitations: List[InvitationSummary]


class SkippedRecipientSummary(BaseModel):
    student_id: int
    reason: str
    message: str = ""


class CampaignCreateResponse(BaseModel):
    success: bool = True
    campaign_id: str
    created_count: int
    created: List[InvitationSummary]
    skipped: List[SkippedRecipientSummary]


class CampaignStatsSummary(BaseModel):
    """Aggregate response state of one campaign."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "campaign_id": "campaign_4f1c2d9e8b7a4c3d9e0f1a2b3c4d5e6f",
                "company_id": 7,
                "job_posting_id": 12,
                "total_sent": 10,
                "accepted": 6,
                "rejected": 2,
                "expired": 0,
                "pending": 2,
                "acceptance_rate": 75.0,
                "sent_at": "2026-02-01T12:00:00+00:00"
            }
        }
    )

    campaign_id: str
    company_id: Optional[int] = None
    job_posting_id: Optional[int] = None
    total_sent: int
    accepted: int
    rejected: int
    expired: int
    pending: int
    acceptance_rate: float = Field(ge=0, le=100)
    sent_at: Optional[str] = None


class CampaignStatsResponse(BaseModel):
    success: bool = True
    stats: CampaignStatsSummary


class CampaignListResponse(BaseModel):
    success: bool = True
    count: int
    campaigns: List[CampaignStatsSummary]


class ExpireResponse(BaseModel):
    success: bool = True
    expired_count: int


class MessageResponse(BaseModel):
    success: bool = True
    message: str
