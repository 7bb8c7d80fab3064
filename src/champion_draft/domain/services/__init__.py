"""
Domain Services

Services that contain draft rules spanning multiple entities.
"""

from .draft_engine import DraftEngine
from .flow_generator import FlowGenerator, generate_flow
from .role_swap_service import RoleSwapService
from .validation_service import ValidationService

__all__ = [
    "DraftEngine",
    "FlowGenerator",
    "RoleSwapService",
    "ValidationService",
    "generate_flow",
]
