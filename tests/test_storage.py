import pytest

from src.champion_draft.domain.entities.role import Role
from src.champion_draft.domain.entities.team import Side
from src.champion_draft.domain.exceptions import SnapshotError
from src.champion_draft.infrastructure.storage_adapter import JsonDraftRepository, MemoryDraftRepository


@pytest.mark.asyncio
async def test_memory_repository_roundtrip(ranked_session):
    repo = MemoryDraftRepository()

    await repo.save_draft("d1", ranked_session)
    assert await repo.get_draft("d1") is ranked_session
    assert await repo.list_draft_ids() == ["d1"]
    assert repo.get_draft_count() == 1

    await repo.delete_draft("d1")
    assert await repo.get_draft("d1") is None
    await repo.delete_draft("d1")


@pytest.mark.asyncio
async def test_json_repository_persists_snapshot(tmp_path, picked_session):
    repo = JsonDraftRepository(base_dir=str(tmp_path))
    await repo.save_draft("scrim-1", picked_session)

    assert (tmp_path / "drafts" / "scrim-1.json").exists()
    assert await repo.list_draft_ids() == ["scrim-1"]

    fresh = JsonDraftRepository(base_dir=str(tmp_path), max_history=10)
    loaded = await fresh.get_draft("scrim-1")

    assert loaded.state == picked_session.state
    assert loaded.history == []
    assert loaded.max_history == 10
    assert loaded.state.team(Side.SIDE_A).pick_slot(Role.TOP).champion_id == "Aatrox"


@pytest.mark.asyncio
async def test_json_repository_caches_sessions(tmp_path, engine, ranked_session):
    repo = JsonDraftRepository(base_dir=str(tmp_path))
    engine.commit_selection(ranked_session, "Zed")
    await repo.save_draft("d1", ranked_session)

    loaded = await repo.get_draft("d1")
    assert loaded is ranked_session
    assert loaded.can_undo


@pytest.mark.asyncio
async def test_json_repository_missing_and_delete(tmp_path, ranked_session):
    repo = JsonDraftRepository(base_dir=str(tmp_path))
    assert await repo.get_draft("nope") is None

    await repo.save_draft("d1", ranked_session)
    await repo.delete_draft("d1")
    assert await repo.list_draft_ids() == []
    assert await JsonDraftRepository(base_dir=str(tmp_path)).get_draft("d1") is None


@pytest.mark.asyncio
async def test_json_repository_rejects_path_like_ids(tmp_path, ranked_session):
    repo = JsonDraftRepository(base_dir=str(tmp_path))
    with pytest.raises(ValueError):
        await repo.save_draft("../escape", ranked_session)


@pytest.mark.asyncio
async def test_json_repository_corrupt_file(tmp_path):
    repo = JsonDraftRepository(base_dir=str(tmp_path))
    (tmp_path / "drafts" / "broken.json").write_text("{oops", encoding="utf-8")

    with pytest.raises(SnapshotError):
        await repo.get_draft("broken")
