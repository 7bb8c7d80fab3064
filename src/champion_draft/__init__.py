"""
Champion Draft - Pick/Ban Draft Engine

Flow generation, draft state with undo, and role swaps for Ranked and
Competitive League of Legends drafts, arranged in hexagonal layers.
"""

from .application.draft_service import DraftApplicationService
from .infrastructure.container import DraftContainer, get_container, initialize_container

__all__ = [
    "DraftApplicationService",
    "DraftContainer",
    "get_container",
    "initialize_container",
]
