"""
Application Layer - Use Cases and Orchestration

Coordinates domain services and infrastructure adapters.
"""

from .draft_service import DraftApplicationService
from .dto import DraftDTO, PickSlotDTO, RoleSwapDTO, SelectionResult, TeamDTO, TurnDTO

__all__ = [
    "DraftApplicationService",
    "DraftDTO",
    "PickSlotDTO",
    "RoleSwapDTO",
    "SelectionResult",
    "TeamDTO",
    "TurnDTO",
]
