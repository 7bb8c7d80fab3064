"""
Validation Service - Domain Service

Evaluates draft rules before a transition is applied.
Each check returns the list of violated rules; an empty list means the
operation may proceed.
"""

from typing import List, Optional, Union

from ..entities.draft import DraftState
from ..entities.outcome import DraftRejection
from ..entities.role import Role
from ..entities.role_swap import RoleSwapState
from ..entities.team import Side, SlotKind


class ValidationService:
    """Domain service for rule checks on draft operations"""

    def validate_selection(
        self,
        state: DraftState,
        champion_id: str,
        role: Optional[Role] = None
    ) -> List[DraftRejection]:
        """Validate committing a champion on the current turn"""
        errors = []

        if not champion_id or not champion_id.strip():
            errors.append(DraftRejection.INVALID_CHAMPION)
            return errors

        if state.is_complete:
            errors.append(DraftRejection.NO_ACTIVE_TURN)
            return errors

        if state.is_claimed(champion_id):
            errors.append(DraftRejection.DUPLICATE_SELECTION)

        turn = state.current_turn
        board = state.team(turn.team)
        if turn.is_ban:
            if board.first_empty_ban_index is None:
                errors.append(DraftRejection.SLOT_OCCUPIED)
        elif role is not None:
            if not board.pick_slot(role).is_empty:
                errors.append(DraftRejection.SLOT_OCCUPIED)
        elif board.first_empty_role is None:
            errors.append(DraftRejection.SLOT_OCCUPIED)

        return errors

    def validate_clear(
        self,
        state: DraftState,
        side: Side,
        slot_kind: SlotKind,
        identifier: Union[Role, int]
    ) -> List[DraftRejection]:
        """Validate clearing a pick role or ban index"""
        board = state.team(side)
        if slot_kind is SlotKind.PICK:
            slot = board.pick_slot(identifier)
        else:
            slot = board.ban_slot(identifier)
        return [DraftRejection.SLOT_EMPTY] if slot.is_empty else []

    def validate_placement(
        self,
        state: DraftState,
        side: Side,
        role: Role,
        champion_id: str
    ) -> List[DraftRejection]:
        """Validate a sandbox placement into a pick slot"""
        errors = []

        if not champion_id or not champion_id.strip():
            errors.append(DraftRejection.INVALID_CHAMPION)
            return errors

        banned = set(state.side_a.banned_ids) | set(state.side_b.banned_ids)
        if champion_id in banned:
            errors.append(DraftRejection.DUPLICATE_SELECTION)
        elif state.team(side).pick_slot(role).champion_id == champion_id:
            errors.append(DraftRejection.DUPLICATE_SELECTION)

        return errors

    def validate_swap_origin(
        self,
        state: DraftState,
        side: Side,
        role: Role,
        champion_id: str,
        pending: Optional[RoleSwapState] = None
    ) -> List[DraftRejection]:
        """Validate arming a role swap on a filled pick slot"""
        errors = []

        if pending is not None and pending.team is not side:
            errors.append(DraftRejection.SWAP_PENDING_FOR_OPPONENT)

        slot = state.team(side).pick_slot(role)
        if slot.is_empty or slot.champion_id != champion_id:
            errors.append(DraftRejection.SLOT_MISMATCH)

        return errors

    def validate_swap_target(
        self,
        state: DraftState,
        pending: RoleSwapState,
        target_role: Role,
        target_champion_id: str
    ) -> List[DraftRejection]:
        """Validate the second slot of a role swap; the team is checked by the caller"""
        board = state.team(pending.team)
        target = board.pick_slot(target_role)
        origin = board.pick_slot(pending.origin_role)

        if (
            target.is_empty
            or target_role is pending.origin_role
            or target.champion_id != target_champion_id
            or origin.champion_id != pending.origin_champion_id
        ):
            return [DraftRejection.SLOT_OCCUPIED_OR_MISSING]
        return []
