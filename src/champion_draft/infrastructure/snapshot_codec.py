"""
Snapshot Codec

Converts draft sessions to plain dicts and JSON text. A snapshot holds the
format, starting side, cursor, and each side's picks as (role, champion) pairs
and bans as an ordered list. Undo history is not part of a snapshot.
"""

import json
from typing import Any, Dict, List, Optional, Set

from ..application.interfaces import ISnapshotCodec
from ..domain.entities.draft import DraftSession, DraftState
from ..domain.entities.draft_format import DraftFormat, StartingSide
from ..domain.entities.role import Role
from ..domain.entities.team import BANS_PER_TEAM, Side, TeamBoard
from ..domain.exceptions import SnapshotError
from ..domain.services.flow_generator import generate_flow

SNAPSHOT_VERSION = 1


class DraftSnapshotCodec(ISnapshotCodec):
    """Encodes and decodes sessions by direct field assignment"""

    def encode(self, session: DraftSession) -> Dict[str, Any]:
        state = session.state
        return {
            "version": SNAPSHOT_VERSION,
            "format": state.format.value,
            "starting_side": state.starting_side.value,
            "cursor": state.cursor,
            "teams": {side.value: self._encode_board(state.team(side)) for side in Side},
        }

    def decode(self, data: Dict[str, Any], max_history: Optional[int] = None) -> DraftSession:
        """
        Rebuild a session from a snapshot.

        Raises:
            SnapshotError: On missing fields, unknown values, duplicate
                champions or a cursor outside the flow
        """
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a mapping")

        version = data.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            raise SnapshotError(f"Unsupported snapshot version {version}")

        try:
            draft_format = DraftFormat.parse(data["format"])
            starting_side = StartingSide.parse(data["starting_side"])
            cursor = int(data.get("cursor", 0))
            teams = data["teams"]
            boards = {side: self._decode_board(teams.get(side.value, {})) for side in Side}
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise SnapshotError(f"Malformed snapshot: {e}") from e

        flow = generate_flow(draft_format, starting_side)
        if not 0 <= cursor <= len(flow):
            raise SnapshotError(f"Cursor {cursor} outside flow of length {len(flow)}")

        champion_ids: List[str] = []
        for board in boards.values():
            champion_ids.extend(board.champion_ids())
        if len(champion_ids) != len(set(champion_ids)):
            raise SnapshotError("Snapshot uses a champion more than once")

        state = DraftState(format=draft_format, starting_side=starting_side, flow=flow, cursor=cursor)
        for side, board in boards.items():
            state = state.with_team(side, board)
        return DraftSession(state=state, max_history=max_history)

    def dumps(self, session: DraftSession) -> str:
        return json.dumps(self.encode(session), ensure_ascii=False, indent=2)

    def loads(self, text: str, max_history: Optional[int] = None) -> DraftSession:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Snapshot is not valid JSON: {e}") from e
        return self.decode(data, max_history)

    def _encode_board(self, board: TeamBoard) -> Dict[str, Any]:
        return {
            "picks": [
                {"role": slot.role.value, "champion_id": slot.champion_id}
                for slot in board.picks
            ],
            "bans": [slot.champion_id for slot in board.bans],
        }

    def _decode_board(self, data: Dict[str, Any]) -> TeamBoard:
        board = TeamBoard()
        seen_roles: Set[Role] = set()
        for pick in data.get("picks", []):
            role = Role.parse(pick["role"])
            if role in seen_roles:
                raise ValueError(f"Role {role.value} listed more than once")
            seen_roles.add(role)
            champion_id = pick.get("champion_id")
            if champion_id:
                board = board.with_pick(role, champion_id)

        bans = list(data.get("bans", []))
        if len(bans) > BANS_PER_TEAM:
            raise ValueError(f"At most {BANS_PER_TEAM} bans per team")
        for index, champion_id in enumerate(bans):
            if champion_id:
                board = board.with_ban(index, champion_id)
        return board
