"""
Draft Entities

DraftState is the immutable value of a draft at one point in time.
DraftSession is the aggregate root owned by the calling context: the current
state, its undo history and the pending role swap.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional, Tuple, Union

from .draft_format import DraftFormat, StartingSide
from .draft_phase import DraftPhase
from .role_swap import RoleSwapState, SwapStatus
from .team import Color, Side, TeamBoard
from .turn import Turn


@dataclass(frozen=True)
class DraftState:
    """
    Snapshot of a draft.

    ``claimed`` always equals the set of champion ids present in any pick or
    ban slot of either team. ``cursor`` indexes the next unconsumed turn of
    ``flow`` and equals ``len(flow)`` once the draft is complete.
    """

    format: DraftFormat
    starting_side: StartingSide
    flow: Tuple[Turn, ...] = field(repr=False)
    side_a: TeamBoard = field(default_factory=TeamBoard)
    side_b: TeamBoard = field(default_factory=TeamBoard)
    cursor: int = 0
    claimed: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if not 0 <= self.cursor <= len(self.flow):
            raise ValueError(f"Cursor {self.cursor} outside flow of length {len(self.flow)}")

    # ===================
    # Turn tracking
    # ===================

    @property
    def is_complete(self) -> bool:
        return self.cursor >= len(self.flow)

    @property
    def current_turn(self) -> Union[Turn, DraftPhase]:
        """The turn at the cursor, or DraftPhase.COMPLETE"""
        if self.is_complete:
            return DraftPhase.COMPLETE
        return self.flow[self.cursor]

    @property
    def current_phase(self) -> DraftPhase:
        turn = self.current_turn
        return turn if isinstance(turn, DraftPhase) else turn.phase

    @property
    def remaining_turns(self) -> int:
        return len(self.flow) - self.cursor

    # ===================
    # Teams
    # ===================

    def team(self, side: Side) -> TeamBoard:
        """Get the board of a side"""
        return self.side_a if side is Side.SIDE_A else self.side_b

    def side_for(self, color: Color) -> Side:
        return self.starting_side.side_for(color)

    @property
    def blue_team(self) -> TeamBoard:
        return self.team(self.side_for(Color.BLUE))

    @property
    def red_team(self) -> TeamBoard:
        return self.team(self.side_for(Color.RED))

    def is_claimed(self, champion_id: str) -> bool:
        return champion_id in self.claimed

    # ===================
    # Transitions
    # ===================

    def with_team(self, side: Side, board: TeamBoard) -> "DraftState":
        """Return a state with one side's board replaced and claimed recomputed"""
        side_a = board if side is Side.SIDE_A else self.side_a
        side_b = board if side is Side.SIDE_B else self.side_b
        claimed = frozenset(side_a.champion_ids()) | frozenset(side_b.champion_ids())
        return replace(self, side_a=side_a, side_b=side_b, claimed=claimed)

    def advanced(self) -> "DraftState":
        """Return a state with the cursor moved past the current turn"""
        return replace(self, cursor=self.cursor + 1)


@dataclass
class DraftSession:
    """
    Draft aggregate root.

    Holds the current DraftState, the stack of prior states for undo, and the
    transient role swap. Mutated only through the domain services.
    """

    state: DraftState
    history: List[DraftState] = field(default_factory=list)
    role_swap: Optional[RoleSwapState] = None
    max_history: Optional[int] = None

    def __post_init__(self):
        if self.max_history is not None and self.max_history < 1:
            raise ValueError("max_history must be positive or None")

    @property
    def format(self) -> DraftFormat:
        return self.state.format

    @property
    def starting_side(self) -> StartingSide:
        return self.state.starting_side

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    @property
    def swap_status(self) -> SwapStatus:
        return SwapStatus.IDLE if self.role_swap is None else SwapStatus.AWAITING_TARGET

    def commit(self, new_state: DraftState) -> None:
        """Make new_state current, remembering the previous one"""
        self.history.append(self.state)
        if self.max_history is not None and len(self.history) > self.max_history:
            del self.history[: len(self.history) - self.max_history]
        self.state = new_state
        self.role_swap = None

    def pop_history(self) -> Optional[DraftState]:
        """Restore the most recent prior state"""
        if not self.history:
            return None
        self.state = self.history.pop()
        self.role_swap = None
        return self.state
