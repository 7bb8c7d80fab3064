"""
Champion Catalogue Adapter

Static champion catalogue loaded from a dict or a JSON file. Entries carry an
optional explicit role list and the champion's class tags; when no role is
listed, one is inferred from the tags.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..application.interfaces import IChampionCatalog
from ..domain.entities.role import Role

logger = logging.getLogger(__name__)

# Checked in order; first matching tag wins
TAG_ROLE_FALLBACK = [
    ("Fighter", Role.TOP),
    ("Tank", Role.TOP),
    ("Assassin", Role.MIDDLE),
    ("Marksman", Role.BOTTOM),
    ("Support", Role.SUPPORT),
]


@dataclass
class ChampionEntry:
    """Catalogue data for one champion"""
    champion_id: str
    display_name: str
    roles: List[Role] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    @property
    def effective_roles(self) -> List[Role]:
        """Explicit roles, or a single role inferred from class tags"""
        if self.roles:
            return list(self.roles)
        for tag, role in TAG_ROLE_FALLBACK:
            if tag in self.tags:
                return [role]
        return []


class StaticChampionCatalog(IChampionCatalog):
    """In-memory champion catalogue"""

    def __init__(self, entries: Iterable[ChampionEntry] = ()):
        self._entries: Dict[str, ChampionEntry] = {e.champion_id: e for e in entries}

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "StaticChampionCatalog":
        """
        Build from records like {"id": "Ahri", "name": "Ahri", "roles": ["Mid"], "tags": ["Mage"]}

        Unparseable roles are skipped.
        """
        entries = []
        for record in records:
            roles = []
            for raw_role in record.get("roles", []):
                try:
                    roles.append(Role.parse(raw_role))
                except ValueError:
                    logger.warning(f"Skipping unknown role {raw_role!r} for {record.get('id')}")
            entries.append(ChampionEntry(
                champion_id=record["id"],
                display_name=record.get("name") or record["id"],
                roles=roles,
                tags=list(record.get("tags", [])),
            ))
        return cls(entries)

    @classmethod
    def from_json_file(cls, path: str) -> "StaticChampionCatalog":
        """Load a JSON list of champion records"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception as e:
            raise ValueError(f"Failed to read champion catalogue: {e}") from e
        if isinstance(data, dict):
            data = [{"id": key, **value} for key, value in data.items()]
        return cls.from_records(data)

    def __len__(self) -> int:
        return len(self._entries)

    def is_known(self, champion_id: str) -> bool:
        return champion_id in self._entries

    def get_roles(self, champion_id: str) -> List[Role]:
        entry = self._entries.get(champion_id)
        return entry.effective_roles if entry else []

    def get_display_name(self, champion_id: str) -> Optional[str]:
        entry = self._entries.get(champion_id)
        return entry.display_name if entry else None
