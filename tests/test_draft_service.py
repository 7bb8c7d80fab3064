import pytest

from src.champion_draft.domain.entities.draft_format import DraftFormat, StartingSide
from src.champion_draft.domain.entities.role import Role
from src.champion_draft.domain.entities.team import Side, SlotKind
from src.champion_draft.domain.exceptions import DraftNotFoundError, SnapshotError
from src.champion_draft.infrastructure.container import (
    DraftContainer,
    cleanup_container,
    get_container,
    initialize_container,
)
from src.champion_draft.infrastructure.draft_config_adapter import DraftConfigurationAdapter
from src.champion_draft.infrastructure.storage_adapter import JsonDraftRepository
from tests.conftest import CHAMPIONS


@pytest.mark.asyncio
async def test_create_draft_uses_configured_defaults(draft_service):
    draft = await draft_service.create_draft(draft_id="d1")

    assert draft.draft_id == "d1"
    assert draft.format == "ranked"
    assert draft.starting_side == "a_blue"
    assert draft.cursor == 0
    assert draft.total_turns == 20
    assert draft.remaining_turns == 20
    assert draft.current_turn.action == "ban"
    assert draft.current_turn.color == "BLUE"
    assert draft.current_turn.phase_label == "Ban Phase"
    assert draft.blue_team.side == "A"
    assert await draft_service.list_drafts() == ["d1"]


@pytest.mark.asyncio
async def test_commit_and_reject_duplicate(draft_service):
    await draft_service.create_draft(DraftFormat.COMPETITIVE, StartingSide.A_RED, draft_id="d1")

    first = await draft_service.commit_selection("d1", "Zed")
    second = await draft_service.commit_selection("d1", "Zed")

    assert first.success
    assert first.message == "Zed banned."
    assert first.draft.blue_team.bans[0] == "Zed"
    assert first.draft.blue_team.side == "B"
    assert not second.success
    assert second.rejection == "duplicate_selection"
    assert second.draft.cursor == 1
    assert second.draft.claimed == ["Zed"]


@pytest.mark.asyncio
async def test_full_draft_reports_completion(draft_service):
    await draft_service.create_draft(DraftFormat.RANKED, draft_id="d1")
    for champion_id in CHAMPIONS[:20]:
        result = await draft_service.commit_selection("d1", champion_id)
        assert result.success

    draft = await draft_service.get_draft("d1")
    assert draft.is_complete
    assert draft.remaining_turns == 0
    assert draft.current_turn is None
    assert draft.phase == "Complete"
    assert await draft_service.get_current_turn("d1") is None
    assert draft.blue_team.pick_count == 5 and draft.red_team.ban_count == 5

    extra = await draft_service.commit_selection("d1", "Extra")
    assert extra.rejection == "no_active_turn"


@pytest.mark.asyncio
async def test_undo_and_reset(draft_service):
    await draft_service.create_draft(DraftFormat.RANKED, draft_id="d1")
    await draft_service.commit_selection("d1", "Zed")

    undone = await draft_service.undo("d1")
    again = await draft_service.undo("d1")

    assert undone.success and undone.draft.cursor == 0
    assert again.rejection == "empty_history"

    await draft_service.commit_selection("d1", "Zed")
    reset = await draft_service.reset_draft("d1", DraftFormat.COMPETITIVE)
    assert reset.draft.format == "competitive"
    assert reset.draft.claimed == []
    assert not reset.draft.can_undo


@pytest.mark.asyncio
async def test_swap_through_service(draft_service):
    await draft_service.create_draft(DraftFormat.RANKED, draft_id="d1")
    for champion_id in CHAMPIONS[:10]:
        await draft_service.commit_selection("d1", champion_id)
    await draft_service.commit_selection("d1", "Ahri", Role.TOP)     # A
    await draft_service.commit_selection("d1", "Gnar")               # B
    await draft_service.commit_selection("d1", "Vi")                 # B
    await draft_service.commit_selection("d1", "Thresh", Role.MIDDLE)  # A

    armed = await draft_service.initiate_swap("d1", Side.SIDE_A, Role.TOP, "Ahri")
    assert armed.draft.role_swap.origin_role == "TOP"

    done = await draft_service.complete_swap("d1", Side.SIDE_A, Role.MIDDLE, "Thresh")
    picks = {slot.role: slot.champion_id for slot in done.draft.blue_team.picks}

    assert done.success
    assert picks["TOP"] == "Thresh" and picks["MIDDLE"] == "Ahri"
    assert done.draft.role_swap is None


@pytest.mark.asyncio
async def test_cross_team_swap_through_service(draft_service):
    await draft_service.create_draft(DraftFormat.RANKED, draft_id="d1")
    for champion_id in CHAMPIONS[:13]:
        await draft_service.commit_selection("d1", champion_id)

    await draft_service.initiate_swap("d1", Side.SIDE_A, Role.TOP, CHAMPIONS[10])
    result = await draft_service.complete_swap("d1", Side.SIDE_B, Role.TOP, CHAMPIONS[11])

    assert result.rejection == "cross_team_swap"
    assert result.draft.role_swap is None

    cancelled = await draft_service.cancel_swap("d1")
    assert cancelled.success


@pytest.mark.asyncio
async def test_clear_and_place(draft_service):
    await draft_service.create_draft(DraftFormat.RANKED, draft_id="lab")

    placed = await draft_service.place_champion("lab", Side.SIDE_B, Role.BOTTOM, "Jinx")
    assert placed.success
    assert placed.draft.red_team.picks[3].champion_id == "Jinx"

    cleared = await draft_service.clear_slot("lab", Side.SIDE_B, SlotKind.PICK, Role.BOTTOM)
    assert cleared.success
    assert cleared.draft.claimed == []
    assert cleared.draft.cursor == 0


@pytest.mark.asyncio
async def test_unknown_draft_raises(draft_service):
    with pytest.raises(DraftNotFoundError):
        await draft_service.commit_selection("missing", "Zed")


@pytest.mark.asyncio
async def test_abandon_draft(draft_service):
    await draft_service.create_draft(draft_id="d1")
    await draft_service.abandon_draft("d1")

    with pytest.raises(DraftNotFoundError):
        await draft_service.get_draft("d1")


@pytest.mark.asyncio
async def test_snapshot_export_import(draft_service):
    await draft_service.create_draft(DraftFormat.COMPETITIVE, draft_id="d1")
    for champion_id in CHAMPIONS[:7]:
        await draft_service.commit_selection("d1", champion_id)

    snapshot = await draft_service.export_snapshot("d1")
    imported = await draft_service.import_snapshot(snapshot, draft_id="d2")

    assert imported.cursor == 7
    assert imported.claimed == sorted(CHAMPIONS[:7])
    assert imported.current_turn.team == "B"

    with pytest.raises(SnapshotError):
        await draft_service.import_snapshot({"format": "ranked"})


@pytest.mark.asyncio
async def test_catalog_rejects_unknown_champion(catalog_service):
    await catalog_service.create_draft(draft_id="d1")

    result = await catalog_service.commit_selection("d1", "Teemo")

    assert result.rejection == "unknown_champion"
    assert result.draft.cursor == 0


@pytest.mark.asyncio
async def test_catalog_infers_pick_role(catalog_service):
    await catalog_service.create_draft(DraftFormat.RANKED, draft_id="d1")
    for champion_id in CHAMPIONS[:10]:
        await catalog_service.commit_selection("d1", champion_id)

    result = await catalog_service.commit_selection("d1", "Jinx")          # A
    picks = {slot.role: slot.champion_id for slot in result.draft.blue_team.picks}
    assert picks["BOTTOM"] == "Jinx"

    await catalog_service.commit_selection("d1", "LeeSin")                  # B
    named = await catalog_service.commit_selection("d1", "Lux")             # B
    red = {slot.role: slot.champion_id for slot in named.draft.red_team.picks}
    assert red["JUNGLE"] == "LeeSin"
    assert red["SUPPORT"] == "Lux"
    assert named.message == "Lux picked."


def test_container_wiring(tmp_path, test_config):
    container = DraftContainer(configuration=test_config)
    service = container.get_draft_service()
    assert container.get_draft_service() is service

    persistent = DraftContainer(
        persistent=True,
        configuration=DraftConfigurationAdapter(environ={"CHAMPION_DRAFT_DATA_DIR": str(tmp_path)}),
    )
    assert isinstance(persistent.get_draft_repository(), JsonDraftRepository)

    container.cleanup()


def test_global_container_lifecycle(test_config):
    initialized = initialize_container(configuration=test_config)
    assert get_container() is initialized
    cleanup_container()
    assert get_container() is not initialized
    cleanup_container()


@pytest.mark.asyncio
async def test_undo_reaches_empty_draft_after_full_draft_and_correction(draft_service):
    await draft_service.create_draft(DraftFormat.RANKED, draft_id="d1")
    for champion_id in CHAMPIONS[:20]:
        await draft_service.commit_selection("d1", champion_id)
    await draft_service.clear_slot("d1", Side.SIDE_A, SlotKind.BAN, 0)

    for _ in range(21):
        result = await draft_service.undo("d1")
        assert result.success

    assert result.draft.cursor == 0
    assert result.draft.claimed == []
    assert not result.draft.can_undo


def test_persistent_container_uses_configured_data_dir(tmp_path):
    configuration = DraftConfigurationAdapter(environ={"CHAMPION_DRAFT_DATA_DIR": str(tmp_path)})
    container = DraftContainer(persistent=True, configuration=configuration)

    repository = container.get_draft_repository()

    assert repository.base_dir == str(tmp_path)
    assert (tmp_path / "drafts").is_dir()


@pytest.mark.asyncio
async def test_set_champion_catalog_rebuilds_service(test_config, catalog):
    container = DraftContainer(configuration=test_config)
    plain = container.get_draft_service()
    await plain.create_draft(draft_id="d1")
    assert (await plain.commit_selection("d1", "Teemo")).success

    container.set_champion_catalog(catalog)
    checked = container.get_draft_service()

    assert checked is not plain
    result = await checked.commit_selection("d1", "Teemo")
    assert result.rejection == "unknown_champion"
