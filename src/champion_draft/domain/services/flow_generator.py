"""
Flow Generator

Builds the ordered list of turns for a draft format.

Formats are tabulated as phase blocks. Each block names its action, the seat
colour that acts first, and the sizes of consecutive same-colour groups;
colours alternate from one group to the next:

- Ranked:       10 bans B/R alternating, picks 1-2-2-2-2-1 from Blue
- Competitive:  6 bans from Blue, picks 1-2-2-1 from Blue,
                4 bans from Red, picks 1-2-1 from Red
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Tuple

from ..entities.draft_format import DraftFormat, StartingSide
from ..entities.draft_phase import DraftPhase
from ..entities.team import Color, Side
from ..entities.turn import DraftAction, Turn


@dataclass(frozen=True)
class PhaseBlock:
    """A run of turns sharing one action and phase label"""
    phase: DraftPhase
    action: DraftAction
    first: Color
    groups: Tuple[int, ...]

    def colors(self) -> List[Color]:
        """Seat colour of every turn in the block"""
        colors = []
        color = self.first
        for size in self.groups:
            colors.extend([color] * size)
            color = color.opponent
        return colors


FLOW_PATTERNS: Dict[DraftFormat, Tuple[PhaseBlock, ...]] = {
    DraftFormat.RANKED: (
        PhaseBlock(DraftPhase.BAN_PHASE, DraftAction.BAN, Color.BLUE, (1,) * 10),
        PhaseBlock(DraftPhase.PICK_PHASE, DraftAction.PICK, Color.BLUE, (1, 2, 2, 2, 2, 1)),
    ),
    DraftFormat.COMPETITIVE: (
        PhaseBlock(DraftPhase.BAN_PHASE_1, DraftAction.BAN, Color.BLUE, (1,) * 6),
        PhaseBlock(DraftPhase.PICK_PHASE_1, DraftAction.PICK, Color.BLUE, (1, 2, 2, 1)),
        # Red opens the second ban round whichever side holds the Red seat
        PhaseBlock(DraftPhase.BAN_PHASE_2, DraftAction.BAN, Color.RED, (1,) * 4),
        PhaseBlock(DraftPhase.PICK_PHASE_2, DraftAction.PICK, Color.RED, (1, 2, 1)),
    ),
}


@lru_cache(maxsize=None)
def generate_flow(draft_format: DraftFormat, starting_side: StartingSide) -> Tuple[Turn, ...]:
    """
    Generate the full turn sequence of a draft.

    Args:
        draft_format: Ranked or Competitive
        starting_side: Which side occupies the Blue seat

    Returns:
        Tuple of turns; identical across starting sides except for each turn's team
    """
    turns = []
    for block in FLOW_PATTERNS[draft_format]:
        for color in block.colors():
            turns.append(Turn(
                action=block.action,
                team=starting_side.side_for(color),
                phase=block.phase,
            ))
    return tuple(turns)


class FlowGenerator:
    """Domain service wrapper around the flow tables"""

    def generate(self, draft_format: DraftFormat, starting_side: StartingSide) -> Tuple[Turn, ...]:
        return generate_flow(draft_format, starting_side)

    def count_actions(self, flow: Tuple[Turn, ...]) -> Dict[Tuple[DraftAction, Side], int]:
        """Count turns per (action, team)"""
        counts: Dict[Tuple[DraftAction, Side], int] = {}
        for turn in flow:
            key = (turn.action, turn.team)
            counts[key] = counts.get(key, 0) + 1
        return counts
