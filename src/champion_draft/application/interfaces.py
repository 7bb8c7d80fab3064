"""
Application Layer Interfaces (Ports)

Defines contracts between the application layer and infrastructure adapters.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..domain.entities.draft import DraftSession
from ..domain.entities.draft_format import DraftFormat, StartingSide
from ..domain.entities.role import Role


# Repository Interfaces
class IDraftRepository(ABC):
    """Repository for draft sessions"""

    @abstractmethod
    async def save_draft(self, draft_id: str, session: DraftSession) -> None:
        """Save a draft"""
        pass

    @abstractmethod
    async def get_draft(self, draft_id: str) -> Optional[DraftSession]:
        """Get draft by ID"""
        pass

    @abstractmethod
    async def delete_draft(self, draft_id: str) -> None:
        """Delete a draft"""
        pass

    @abstractmethod
    async def list_draft_ids(self) -> List[str]:
        """Get IDs of all stored drafts"""
        pass


# External Service Interfaces
class IChampionCatalog(ABC):
    """Champion catalogue used for id checks and role inference"""

    @abstractmethod
    def is_known(self, champion_id: str) -> bool:
        """Check if a champion id exists in the catalogue"""
        pass

    @abstractmethod
    def get_roles(self, champion_id: str) -> List[Role]:
        """Get the roles a champion is usually played in, best first"""
        pass

    @abstractmethod
    def get_display_name(self, champion_id: str) -> Optional[str]:
        """Get the champion's display name"""
        pass


class IDraftConfiguration(ABC):
    """Interface for draft configuration"""

    @abstractmethod
    def get_max_history(self) -> Optional[int]:
        """Get undo history cap, None for unbounded"""
        pass

    @abstractmethod
    def get_default_format(self) -> DraftFormat:
        """Get format used when none is requested"""
        pass

    @abstractmethod
    def get_default_starting_side(self) -> StartingSide:
        """Get starting side used when none is requested"""
        pass

    @abstractmethod
    def get_data_dir(self) -> str:
        """Get directory for persisted drafts"""
        pass


class ISnapshotCodec(ABC):
    """Converts sessions to and from externally-serializable snapshots"""

    @abstractmethod
    def encode(self, session: DraftSession) -> Dict[str, Any]:
        """Encode a session's current state as a plain dict"""
        pass

    @abstractmethod
    def decode(self, data: Dict[str, Any], max_history: Optional[int] = None) -> DraftSession:
        """Rebuild a session from a snapshot dict"""
        pass
