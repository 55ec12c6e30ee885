"""
Collaborator Interfaces - Abstract stores consumed by the matching and campaign core.

The core never talks to a database directly. Repositories in ``database/``
implement these; tests use in-memory fakes.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from core.catalog.models import Technology, TechCombination
from core.scorer.models import Candidate, MatchQuery, TechAssociation
from core.campaign.models import Invitation, InvitationStatus, ScoutTemplate


class DuplicateKeyError(Exception):
    """Raised by InvitationStore.insert when the unique triple already exists."""
    pass


class MissingReferenceError(Exception):
    """Raised by InvitationStore.insert when the student, company, job posting or template does not exist."""
    pass


class TechnologyStore(ABC):

    @abstractmethod
    def get_many(self, ids: Iterable[int]) -> List[Technology]:
        """Return the technologies that exist among ``ids``, in any order."""
        pass

    @abstractmethod
    def list_all(self) -> List[Technology]:
        pass

    @abstractmethod
    def list_combinations(self, technology_id: int) -> List[TechCombination]:
        """Combinations where the technology is either the primary or the secondary."""
        pass


class CandidateStore(ABC):

    @abstractmethod
    def list_active_companies(self) -> List[Candidate]:
        pass

    @abstractmethod
    def list_active_jobs(self) -> List[Candidate]:
        pass

    @abstractmethod
    def list_active_students(self) -> List[Candidate]:
        pass

    @abstractmethod
    def get_student_associations(self, student_ids: Iterable[int]) -> Dict[int, List[TechAssociation]]:
        """Technology interests per student. Students without interests map to an empty list."""
        pass

    @abstractmethod
    def job_posting_owner(self, job_posting_id: int) -> Optional[int]:
        """Company user id owning the job posting, or None if it does not exist."""
        pass


class InvitationStore(ABC):

    @abstractmethod
    def insert(self, invitation: Invitation) -> Invitation:
        """
        Persist one invitation atomically.

        Raises:
            DuplicateKeyError: the (company, student, job posting) triple exists
            MissingReferenceError: a referenced row does not exist
            TransientStoreError: the store is temporarily unavailable
        """
        pass

    @abstractmethod
    def find_by_id(self, invitation_id: Any) -> Optional[Invitation]:
        pass

    @abstractmethod
    def find_by_campaign(self, campaign_id: str) -> List[Invitation]:
        pass

    @abstractmethod
    def find_by_company(
        self,
        company_id: int,
        bulk_only: bool = False,
        status: Optional[InvitationStatus] = None
    ) -> List[Invitation]:
        """Invitations sent by the company, most recent first."""
        pass

    @abstractmethod
    def find_by_student(self, student_id: int, status: Optional[InvitationStatus] = None) -> List[Invitation]:
        """Invitations received by the student, most recent first."""
        pass

    @abstractmethod
    def find_sent_before(self, cutoff: datetime) -> List[Invitation]:
        pass

    @abstractmethod
    def update_status_if_sent(
        self,
        invitation_id: Any,
        new_status: InvitationStatus,
        responded_at: datetime
    ) -> bool:
        """Atomically transition away from ``sent``. False if the row is not in ``sent``."""
        pass

    @abstractmethod
    def delete_if_sent(self, invitation_id: Any) -> bool:
        pass

    @abstractmethod
    def get_template(self, template_id: int) -> Optional[ScoutTemplate]:
        pass


class SearchLog(ABC):
    """Fire-and-forget sink for search analytics."""

    @abstractmethod
    def record(
        self,
        query: MatchQuery,
        result_count: int,
        search_type: str,
        user_id: Optional[int] = None
    ) -> None:
        pass
