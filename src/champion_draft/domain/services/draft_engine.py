"""
Draft Engine Domain Service

Owns every transition of a draft session: committing picks and bans along the
flow, clearing slots, sandbox placement, undo and reset.
"""

import logging
from typing import Iterable, Optional, Tuple, Union

from ..entities.draft import DraftSession, DraftState
from ..entities.draft_format import DraftFormat, StartingSide
from ..entities.draft_phase import DraftPhase
from ..entities.outcome import ActionResult, DraftRejection
from ..entities.role import Role
from ..entities.team import Side, SlotKind
from ..entities.turn import Turn
from ..exceptions import SnapshotError
from .flow_generator import FlowGenerator
from .validation_service import ValidationService

logger = logging.getLogger(__name__)


class DraftEngine:
    """
    Core domain service for the pick/ban state machine.

    Every operation either applies one transition, pushing the previous state
    onto the session history, or returns a rejection and leaves the session
    untouched.
    """

    def __init__(self):
        self._flow_generator = FlowGenerator()
        self._validation_service = ValidationService()

    # ====================
    # Lifecycle
    # ====================

    def create_state(self, draft_format: DraftFormat, starting_side: StartingSide) -> DraftState:
        """Create an empty draft state with its flow bound"""
        return DraftState(
            format=draft_format,
            starting_side=starting_side,
            flow=self._flow_generator.generate(draft_format, starting_side),
        )

    def create_draft(
        self,
        draft_format: DraftFormat,
        starting_side: StartingSide = StartingSide.A_BLUE,
        max_history: Optional[int] = None
    ) -> DraftSession:
        """Create a new draft session"""
        session = DraftSession(
            state=self.create_state(draft_format, starting_side),
            max_history=max_history,
        )
        logger.debug(f"Created {draft_format.value} draft ({starting_side.value})")
        return session

    def reset(
        self,
        session: DraftSession,
        draft_format: Optional[DraftFormat] = None,
        starting_side: Optional[StartingSide] = None
    ) -> ActionResult:
        """Discard the draft and history, re-initializing the session in place"""
        session.state = self.create_state(
            draft_format or session.format,
            starting_side or session.starting_side,
        )
        session.history.clear()
        session.role_swap = None
        return ActionResult.ok(session.state)

    def replay(
        self,
        draft_format: DraftFormat,
        starting_side: StartingSide,
        selections: Iterable[Tuple[str, Optional[Role]]],
        max_history: Optional[int] = None
    ) -> DraftSession:
        """
        Rebuild a session by committing recorded selections in order.

        Args:
            selections: (champion_id, role) pairs; role is ignored for bans

        Raises:
            SnapshotError: If any recorded selection is rejected
        """
        session = self.create_draft(draft_format, starting_side, max_history)
        for position, (champion_id, role) in enumerate(selections):
            result = self.commit_selection(session, champion_id, role)
            if not result.accepted:
                raise SnapshotError(
                    f"Selection {position} ({champion_id}) rejected: {result.rejection.value}"
                )
        return session

    # ====================
    # Turn progression
    # ====================

    def current_turn(self, session: DraftSession) -> Union[Turn, DraftPhase]:
        """Get the turn to play, or DraftPhase.COMPLETE"""
        return session.state.current_turn

    def commit_selection(
        self,
        session: DraftSession,
        champion_id: str,
        role: Optional[Role] = None
    ) -> ActionResult:
        """
        Apply the current turn with a champion.

        Bans fill the acting team's first empty ban slot. Picks fill the given
        role slot, or the first empty role slot when no role is given.
        """
        state = session.state
        errors = self._validation_service.validate_selection(state, champion_id, role)
        if errors:
            logger.debug(f"Selection of {champion_id!r} rejected: {errors[0].value}")
            return ActionResult.rejected(state, errors[0])

        turn = state.current_turn
        board = state.team(turn.team)
        if turn.is_ban:
            board = board.with_ban(board.first_empty_ban_index, champion_id)
        else:
            board = board.with_pick(role or board.first_empty_role, champion_id)

        new_state = state.with_team(turn.team, board).advanced()
        session.commit(new_state)
        logger.debug(
            f"{turn.phase_label}: side {turn.team.value} {turn.action.value} {champion_id}"
        )
        return ActionResult.ok(new_state)

    # ====================
    # Corrections
    # ====================

    def clear_slot(
        self,
        session: DraftSession,
        side: Side,
        slot_kind: SlotKind,
        identifier: Union[Role, int]
    ) -> ActionResult:
        """Empty a pick role or ban index without moving the cursor"""
        state = session.state
        errors = self._validation_service.validate_clear(state, side, slot_kind, identifier)
        if errors:
            return ActionResult.rejected(state, errors[0])

        board = state.team(side)
        if slot_kind is SlotKind.PICK:
            board = board.with_pick(identifier, None)
        else:
            board = board.with_ban(identifier, None)

        new_state = state.with_team(side, board)
        session.commit(new_state)
        logger.debug(f"Cleared {slot_kind.value} slot {identifier} of side {side.value}")
        return ActionResult.ok(new_state)

    def place_champion(
        self,
        session: DraftSession,
        side: Side,
        role: Role,
        champion_id: str
    ) -> ActionResult:
        """
        Sandbox placement of a champion into a pick slot, ignoring the flow.

        A champion already picked elsewhere is moved; the slot's previous
        occupant is released.
        """
        state = session.state
        errors = self._validation_service.validate_placement(state, side, role, champion_id)
        if errors:
            return ActionResult.rejected(state, errors[0])

        new_state = state
        for holder in Side:
            previous_role = new_state.team(holder).role_of(champion_id)
            if previous_role is not None:
                new_state = new_state.with_team(
                    holder, new_state.team(holder).with_pick(previous_role, None)
                )
        new_state = new_state.with_team(side, new_state.team(side).with_pick(role, champion_id))

        session.commit(new_state)
        logger.debug(f"Placed {champion_id} at {role.value} for side {side.value}")
        return ActionResult.ok(new_state)

    def undo(self, session: DraftSession) -> ActionResult:
        """Revert to the previous state"""
        restored = session.pop_history()
        if restored is None:
            return ActionResult.rejected(session.state, DraftRejection.EMPTY_HISTORY)
        logger.debug(f"Undo to cursor {restored.cursor}")
        return ActionResult.ok(restored)
