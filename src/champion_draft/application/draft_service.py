"""
Draft Application Service

Facade for all draft use cases. Loads sessions from the repository, applies
domain operations, saves the result and returns DTOs.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional, Union

from ..domain.entities.draft import DraftSession
from ..domain.entities.draft_format import DraftFormat, StartingSide
from ..domain.entities.outcome import ActionResult, DraftRejection
from ..domain.entities.role import Role
from ..domain.entities.team import Side, SlotKind
from ..domain.exceptions import DraftNotFoundError
from ..domain.services.draft_engine import DraftEngine
from ..domain.services.role_swap_service import RoleSwapService
from .dto import DraftDTO, SelectionResult, TurnDTO
from .interfaces import IChampionCatalog, IDraftConfiguration, IDraftRepository, ISnapshotCodec

logger = logging.getLogger(__name__)


class DraftApplicationService:
    """
    Main application service for draft operations.

    Rule rejections are returned as unsuccessful SelectionResults; only an
    unknown draft id raises.
    """

    def __init__(
        self,
        draft_repository: IDraftRepository,
        configuration: IDraftConfiguration,
        snapshot_codec: ISnapshotCodec,
        champion_catalog: Optional[IChampionCatalog] = None
    ):
        self._draft_repository = draft_repository
        self._configuration = configuration
        self._snapshot_codec = snapshot_codec
        self._champion_catalog = champion_catalog

        # Domain services
        self._engine = DraftEngine()
        self._role_swap_service = RoleSwapService()

    # ====================
    # Draft Lifecycle
    # ====================

    async def create_draft(
        self,
        draft_format: Optional[DraftFormat] = None,
        starting_side: Optional[StartingSide] = None,
        draft_id: Optional[str] = None
    ) -> DraftDTO:
        """Create a new draft session"""
        draft_id = draft_id or str(uuid.uuid4())
        session = self._engine.create_draft(
            draft_format or self._configuration.get_default_format(),
            starting_side or self._configuration.get_default_starting_side(),
            max_history=self._configuration.get_max_history(),
        )
        await self._draft_repository.save_draft(draft_id, session)
        logger.info(f"Draft {draft_id} created ({session.format.value}, {session.starting_side.value})")
        return DraftDTO.from_domain(draft_id, session)

    async def get_draft(self, draft_id: str) -> DraftDTO:
        """Get the current view of a draft"""
        session = await self._load(draft_id)
        return DraftDTO.from_domain(draft_id, session)

    async def get_current_turn(self, draft_id: str) -> Optional[TurnDTO]:
        """Get the turn to play, None once the draft is complete"""
        session = await self._load(draft_id)
        if session.state.is_complete:
            return None
        return TurnDTO.from_domain(session.state.current_turn, session)

    async def reset_draft(
        self,
        draft_id: str,
        draft_format: Optional[DraftFormat] = None,
        starting_side: Optional[StartingSide] = None
    ) -> SelectionResult:
        """Start the draft over, optionally with a new format or side"""
        session = await self._load(draft_id)
        result = self._engine.reset(session, draft_format, starting_side)
        return await self._finish(draft_id, session, result, "Draft reset.")

    async def abandon_draft(self, draft_id: str) -> None:
        """Remove a draft"""
        await self._load(draft_id)
        await self._draft_repository.delete_draft(draft_id)
        logger.info(f"Draft {draft_id} abandoned")

    async def list_drafts(self) -> List[str]:
        return await self._draft_repository.list_draft_ids()

    # ====================
    # Picks and Bans
    # ====================

    async def commit_selection(
        self,
        draft_id: str,
        champion_id: str,
        role: Optional[Role] = None
    ) -> SelectionResult:
        """Play the current turn with a champion"""
        session = await self._load(draft_id)

        rejection = self._check_catalog(champion_id)
        if rejection is not None:
            return self._reject(draft_id, session, rejection)

        if role is None:
            role = self._infer_role(session, champion_id)

        turn = session.state.current_turn
        result = self._engine.commit_selection(session, champion_id, role)
        message = ""
        if result.accepted:
            verb = "banned" if turn.is_ban else "picked"
            message = f"{self._display_name(champion_id)} {verb}."
        return await self._finish(draft_id, session, result, message)

    async def clear_slot(
        self,
        draft_id: str,
        side: Side,
        slot_kind: SlotKind,
        identifier: Union[Role, int]
    ) -> SelectionResult:
        """Empty a pick or ban slot"""
        session = await self._load(draft_id)
        result = self._engine.clear_slot(session, side, slot_kind, identifier)
        return await self._finish(draft_id, session, result, "Slot cleared.")

    async def place_champion(
        self,
        draft_id: str,
        side: Side,
        role: Role,
        champion_id: str
    ) -> SelectionResult:
        """Sandbox placement into a pick slot"""
        session = await self._load(draft_id)

        rejection = self._check_catalog(champion_id)
        if rejection is not None:
            return self._reject(draft_id, session, rejection)

        result = self._engine.place_champion(session, side, role, champion_id)
        return await self._finish(
            draft_id, session, result, f"{self._display_name(champion_id)} placed at {role.value}."
        )

    async def undo(self, draft_id: str) -> SelectionResult:
        """Revert the last change"""
        session = await self._load(draft_id)
        result = self._engine.undo(session)
        return await self._finish(draft_id, session, result, "Undone.")

    # ====================
    # Role Swaps
    # ====================

    async def initiate_swap(
        self,
        draft_id: str,
        side: Side,
        role: Role,
        champion_id: str
    ) -> SelectionResult:
        session = await self._load(draft_id)
        result = self._role_swap_service.initiate_swap(session, side, role, champion_id)
        return await self._finish(draft_id, session, result)

    async def complete_swap(
        self,
        draft_id: str,
        side: Side,
        target_role: Role,
        target_champion_id: str
    ) -> SelectionResult:
        session = await self._load(draft_id)
        result = self._role_swap_service.complete_swap(session, side, target_role, target_champion_id)
        return await self._finish(draft_id, session, result, "Roles swapped.")

    async def cancel_swap(self, draft_id: str) -> SelectionResult:
        session = await self._load(draft_id)
        result = self._role_swap_service.cancel_swap(session)
        return await self._finish(draft_id, session, result)

    # ====================
    # Snapshots
    # ====================

    async def export_snapshot(self, draft_id: str) -> Dict[str, Any]:
        """Get a serializable snapshot of the draft's current state"""
        session = await self._load(draft_id)
        return self._snapshot_codec.encode(session)

    async def import_snapshot(self, data: Dict[str, Any], draft_id: Optional[str] = None) -> DraftDTO:
        """
        Create a draft from a snapshot.

        Raises:
            SnapshotError: If the snapshot is malformed or inconsistent
        """
        draft_id = draft_id or str(uuid.uuid4())
        session = self._snapshot_codec.decode(data, max_history=self._configuration.get_max_history())
        await self._draft_repository.save_draft(draft_id, session)
        logger.info(f"Draft {draft_id} imported at cursor {session.state.cursor}")
        return DraftDTO.from_domain(draft_id, session)

    # ====================
    # Helpers
    # ====================

    async def _load(self, draft_id: str) -> DraftSession:
        session = await self._draft_repository.get_draft(draft_id)
        if session is None:
            raise DraftNotFoundError(f"No draft with id {draft_id}")
        return session

    async def _finish(
        self,
        draft_id: str,
        session: DraftSession,
        result: ActionResult,
        success_message: str = ""
    ) -> SelectionResult:
        """Persist the session and wrap the result"""
        await self._draft_repository.save_draft(draft_id, session)
        if not result.accepted:
            logger.debug(f"Draft {draft_id}: {result.rejection.value}")
        return SelectionResult.from_result(
            result, DraftDTO.from_domain(draft_id, session), success_message
        )

    def _reject(self, draft_id: str, session: DraftSession, rejection: DraftRejection) -> SelectionResult:
        result = ActionResult.rejected(session.state, rejection)
        return SelectionResult.from_result(result, DraftDTO.from_domain(draft_id, session))

    def _check_catalog(self, champion_id: str) -> Optional[DraftRejection]:
        if self._champion_catalog is None or not champion_id:
            return None
        if not self._champion_catalog.is_known(champion_id):
            return DraftRejection.UNKNOWN_CHAMPION
        return None

    def _infer_role(self, session: DraftSession, champion_id: str) -> Optional[Role]:
        """Choose the first empty role slot the catalogue lists for the champion"""
        state = session.state
        if self._champion_catalog is None or state.is_complete or not state.current_turn.is_pick:
            return None
        board = state.team(state.current_turn.team)
        for role in self._champion_catalog.get_roles(champion_id):
            if board.pick_slot(role).is_empty:
                return role
        return None

    def _display_name(self, champion_id: str) -> str:
        if self._champion_catalog is not None:
            name = self._champion_catalog.get_display_name(champion_id)
            if name:
                return name
        return champion_id
