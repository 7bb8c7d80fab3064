import pytest
from typing import List, Optional

from src.champion_draft.application.draft_service import DraftApplicationService
from src.champion_draft.domain.entities.draft import DraftSession
from src.champion_draft.domain.entities.draft_format import DraftFormat, StartingSide
from src.champion_draft.domain.entities.role import Role
from src.champion_draft.domain.services.draft_engine import DraftEngine
from src.champion_draft.domain.services.role_swap_service import RoleSwapService
from src.champion_draft.infrastructure.champion_catalog_adapter import StaticChampionCatalog
from src.champion_draft.infrastructure.draft_config_adapter import DraftConfigurationAdapter
from src.champion_draft.infrastructure.snapshot_codec import DraftSnapshotCodec
from src.champion_draft.infrastructure.storage_adapter import MemoryDraftRepository

CHAMPIONS = [f"Champ{i:02d}" for i in range(1, 31)]


def assert_claimed_matches_slots(session: DraftSession) -> None:
    """claimed must equal the champions present in any slot"""
    state = session.state
    in_slots: List[str] = list(state.side_a.champion_ids()) + list(state.side_b.champion_ids())
    assert len(in_slots) == len(set(in_slots))
    assert state.claimed == frozenset(in_slots)


def play_to_end(engine: DraftEngine, session: DraftSession, champions: Optional[List[str]] = None) -> None:
    """Commit distinct champions until the flow is exhausted"""
    champions = list(champions or CHAMPIONS)
    while not session.state.is_complete:
        result = engine.commit_selection(session, champions.pop(0))
        assert result.accepted


@pytest.fixture
def engine() -> DraftEngine:
    return DraftEngine()


@pytest.fixture
def swap_service() -> RoleSwapService:
    return RoleSwapService()


@pytest.fixture
def ranked_session(engine) -> DraftSession:
    return engine.create_draft(DraftFormat.RANKED, StartingSide.A_BLUE)


@pytest.fixture
def competitive_session(engine) -> DraftSession:
    return engine.create_draft(DraftFormat.COMPETITIVE, StartingSide.A_BLUE)


@pytest.fixture
def picked_session(engine, competitive_session) -> DraftSession:
    """Competitive draft with Ban Phase 1 done and Side-A holding TOP, JUNGLE and MIDDLE"""
    session = competitive_session
    for champion_id in ["Ban1", "Ban2", "Ban3", "Ban4", "Ban5", "Ban6"]:
        assert engine.commit_selection(session, champion_id).accepted
    picks = [
        ("Aatrox", Role.TOP),      # A
        ("Gnar", Role.TOP),        # B
        ("Vi", Role.JUNGLE),       # B
        ("Sejuani", Role.JUNGLE),  # A
        ("Ahri", Role.MIDDLE),     # A
    ]
    for champion_id, role in picks:
        assert engine.commit_selection(session, champion_id, role).accepted
    return session


@pytest.fixture
def test_config() -> DraftConfigurationAdapter:
    return DraftConfigurationAdapter(environ={
        "CHAMPION_DRAFT_DEFAULT_FORMAT": "ranked",
        "CHAMPION_DRAFT_DEFAULT_SIDE": "a_blue",
    })


@pytest.fixture
def catalog() -> StaticChampionCatalog:
    return StaticChampionCatalog.from_records([
        {"id": "Ahri", "name": "Ahri", "roles": ["Mid"]},
        {"id": "Jinx", "name": "Jinx", "tags": ["Marksman"]},
        {"id": "Thresh", "name": "Thresh", "roles": ["Support"]},
        {"id": "Garen", "name": "Garen", "tags": ["Fighter", "Tank"]},
        {"id": "Zed", "name": "Zed", "tags": ["Assassin"]},
        {"id": "LeeSin", "name": "Lee Sin", "roles": ["Jungle", "Top"]},
        {"id": "Lux", "name": "Lux", "roles": ["Support", "Mid"]},
    ] + [{"id": c, "name": c} for c in CHAMPIONS])


@pytest.fixture
def draft_service(test_config) -> DraftApplicationService:
    return DraftApplicationService(
        draft_repository=MemoryDraftRepository(),
        configuration=test_config,
        snapshot_codec=DraftSnapshotCodec(),
    )


@pytest.fixture
def catalog_service(test_config, catalog) -> DraftApplicationService:
    return DraftApplicationService(
        draft_repository=MemoryDraftRepository(),
        configuration=test_config,
        snapshot_codec=DraftSnapshotCodec(),
        champion_catalog=catalog,
    )
