"""
Role Swap Service

Two-step exchange of two already-picked champions within one team:
arm an origin slot, then choose a target slot of the same team.
"""

import logging

from ..entities.draft import DraftSession
from ..entities.outcome import ActionResult, DraftRejection
from ..entities.role import Role
from ..entities.role_swap import RoleSwapState
from ..entities.team import Side
from .validation_service import ValidationService

logger = logging.getLogger(__name__)


class RoleSwapService:
    """Domain service driving the IDLE -> AWAITING_TARGET -> IDLE protocol"""

    def __init__(self):
        self._validation_service = ValidationService()

    def initiate_swap(
        self,
        session: DraftSession,
        side: Side,
        role: Role,
        champion_id: str
    ) -> ActionResult:
        """
        Arm a swap on a filled pick slot.

        Arming the pending origin again disarms it. Arming another slot of the
        same team moves the origin there.
        """
        state = session.state
        pending = session.role_swap

        if pending is not None and pending.matches(side, role, champion_id):
            session.role_swap = None
            logger.debug(f"Swap disarmed on {role.value} for side {side.value}")
            return ActionResult.ok(state)

        errors = self._validation_service.validate_swap_origin(
            state, side, role, champion_id, pending
        )
        if errors:
            return ActionResult.rejected(state, errors[0])

        session.role_swap = RoleSwapState(
            team=side,
            origin_role=role,
            origin_champion_id=champion_id,
        )
        logger.debug(f"Swap armed on {role.value} ({champion_id}) for side {side.value}")
        return ActionResult.ok(state)

    def complete_swap(
        self,
        session: DraftSession,
        side: Side,
        target_role: Role,
        target_champion_id: str
    ) -> ActionResult:
        """Exchange the armed origin with a target slot of the same team"""
        state = session.state
        pending = session.role_swap

        if pending is None:
            return ActionResult.rejected(state, DraftRejection.NO_PENDING_SWAP)

        if pending.team is not side:
            session.role_swap = None
            logger.debug("Cross-team swap target; swap cancelled")
            return ActionResult.rejected(state, DraftRejection.CROSS_TEAM_SWAP)

        errors = self._validation_service.validate_swap_target(
            state, pending, target_role, target_champion_id
        )
        if errors:
            return ActionResult.rejected(state, errors[0])

        board = state.team(side).with_swapped_picks(pending.origin_role, target_role)
        new_state = state.with_team(side, board)
        session.commit(new_state)
        logger.debug(
            f"Swapped {pending.origin_role.value} and {target_role.value} for side {side.value}"
        )
        return ActionResult.ok(new_state)

    def cancel_swap(self, session: DraftSession) -> ActionResult:
        """Return to idle without touching the draft"""
        session.role_swap = None
        return ActionResult.ok(session.state)
