"""
Storage Adapters

Implementations of the draft repository interface: in-memory, and JSON files
holding one snapshot per draft.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from ..application.interfaces import IDraftRepository
from ..domain.entities.draft import DraftSession
from ..domain.exceptions import SnapshotError
from .snapshot_codec import DraftSnapshotCodec

logger = logging.getLogger(__name__)


class MemoryDraftRepository(IDraftRepository):
    """In-memory implementation of draft repository"""

    def __init__(self):
        self._drafts: Dict[str, DraftSession] = {}  # draft_id -> session

    async def save_draft(self, draft_id: str, session: DraftSession) -> None:
        """Save a draft to memory storage"""
        self._drafts[draft_id] = session

    async def get_draft(self, draft_id: str) -> Optional[DraftSession]:
        """Get draft by ID"""
        return self._drafts.get(draft_id)

    async def delete_draft(self, draft_id: str) -> None:
        """Delete a draft from storage"""
        self._drafts.pop(draft_id, None)

    async def list_draft_ids(self) -> List[str]:
        return list(self._drafts)

    def get_draft_count(self) -> int:
        """Get number of stored drafts"""
        return len(self._drafts)

    def clear_all_drafts(self) -> None:
        """Clear all drafts (for testing/cleanup)"""
        self._drafts.clear()


class JsonDraftRepository(IDraftRepository):
    """
    File-backed repository writing one JSON snapshot per draft.

    Sessions read back from disk start with an empty undo history. Loaded
    sessions are cached so history survives within one process.
    """

    def __init__(
        self,
        base_dir: str,
        codec: Optional[DraftSnapshotCodec] = None,
        max_history: Optional[int] = None
    ) -> None:
        self.base_dir = base_dir
        self.drafts_dir = Path(self.base_dir) / "drafts"
        self.drafts_dir.mkdir(parents=True, exist_ok=True)
        self._codec = codec or DraftSnapshotCodec()
        self._max_history = max_history
        self._cache: Dict[str, DraftSession] = {}

    def _path_for(self, draft_id: str) -> Path:
        if not draft_id or "/" in draft_id or "\\" in draft_id or draft_id.startswith("."):
            raise ValueError(f"Invalid draft id: {draft_id!r}")
        return self.drafts_dir / f"{draft_id}.json"

    async def save_draft(self, draft_id: str, session: DraftSession) -> None:
        path = self._path_for(draft_id)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(self._codec.dumps(session))
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Failed to save draft {draft_id}: {e}", exc_info=True)
            raise
        self._cache[draft_id] = session

    async def get_draft(self, draft_id: str) -> Optional[DraftSession]:
        if draft_id in self._cache:
            return self._cache[draft_id]

        path = self._path_for(draft_id)
        if not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                session = self._codec.loads(f.read(), self._max_history)
        except (OSError, SnapshotError) as e:
            logger.error(f"Failed to load draft {draft_id}: {e}", exc_info=True)
            raise

        self._cache[draft_id] = session
        return session

    async def delete_draft(self, draft_id: str) -> None:
        self._cache.pop(draft_id, None)
        path = self._path_for(draft_id)
        if path.exists():
            path.unlink()

    async def list_draft_ids(self) -> List[str]:
        return sorted(path.stem for path in self.drafts_dir.glob("*.json"))
