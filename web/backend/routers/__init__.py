"""API route handlers."""

from .search import router as search_router
from .technologies import router as technologies_router
from .invitations import router as invitations_router
from .campaigns import router as campaigns_router
