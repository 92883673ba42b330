import math

import pytest

from planetside.cable import MAX_CABLE_LENGTH
from planetside.planet import TILE_SIZE, Planet, Transform
from planetside.slot import SlotBoard, SlotColor, breathe_scale


@pytest.fixture
def board():
    planet = Planet(tiles={1: [], 2: [], 3: []})
    b = SlotBoard(planet)
    b.add_slot(1, Transform(translation=(0.0, 0.0, 0.0)))
    b.add_slot(2, Transform(translation=(50.0, 0.0, 0.0)))
    b.add_slot(3, Transform(translation=(1000.0, 0.0, 0.0)))
    return b


def test_slot_sits_half_a_tile_above():
    b = SlotBoard(Planet())
    slot = b.add_slot(7, Transform(translation=(10.0, 20.0, 1.0)))
    assert slot.position[0] == pytest.approx(10.0)
    assert slot.position[1] == pytest.approx(20.0 + TILE_SIZE / 2.0)
    assert slot.position[2] == pytest.approx(1.1)
    assert slot.color is SlotColor.INACTIVE
    assert slot.outline_color is SlotColor.NONE


def test_slot_colors_from_source(board):
    board.on_pointer_over(2)
    assert board.slots[2].color.value == "#00000066"
    board.on_click(1)
    assert board.slots[3].color.value == "#00000044"


def test_first_click_starts_placement(board):
    assert board.on_click(1) is None
    assert board.placement.active() == (1, board.slots[1].entity)
    assert board.preview == board.slots[1].entity
    assert board.stats_events == [(True, 1)]
    assert all(s.color is SlotColor.HIGHLIGHT for s in board.slots.values())
    assert board.slots[1].outline_color is SlotColor.ACTIVE
    assert board.slots[2].outline_color is SlotColor.NONE


def test_second_click_places_cable(board):
    board.on_click(1)
    cable = board.on_click(2)
    assert cable is not None
    assert (cable.start_tile_id, cable.end_tile_id) == (1, 2)
    assert cable.start_entity == board.slots[2].entity
    assert cable.end_entity == board.slots[1].entity
    assert board.cables == [cable]
    assert board.planet.powergrid_tiles_are_connected(1, 2)
    assert board.planet.powergrid_tiles_are_connected(2, 1)
    assert board.placement.active() is None
    assert board.preview is None
    assert board.stats_events[-1] == (False, None)
    assert all(s.color is SlotColor.INACTIVE for s in board.slots.values())
    assert all(s.outline_color is SlotColor.NONE for s in board.slots.values())


def test_click_same_slot_places_nothing(board):
    board.on_click(1)
    assert board.on_click(1) is None
    assert board.cables == []
    assert board.placement.active() is None


def test_too_long_cable_is_rejected(board):
    far = math.hypot(
        board.slots[3].position[0] - board.slots[1].position[0],
        board.slots[3].position[1] - board.slots[1].position[1],
    )
    assert far > MAX_CABLE_LENGTH
    board.on_click(1)
    assert board.on_click(3) is None
    assert board.cables == []
    assert not board.planet.powergrid_tiles_are_connected(1, 3)


def test_already_connected_is_rejected(board):
    board.on_click(1)
    board.on_click(2)
    board.on_click(2)
    assert board.on_click(1) is None
    assert len(board.cables) == 1
    assert board.planet.tiles[1] == [2]


def test_hover_changes_inner_color(board):
    board.on_pointer_over(2)
    assert board.slots[2].color is SlotColor.ACTIVE
    board.on_pointer_out(2)
    assert board.slots[2].color is SlotColor.INACTIVE
    board.on_click(1)
    board.on_pointer_over(2)
    board.on_pointer_out(2)
    assert board.slots[2].color is SlotColor.HIGHLIGHT


def test_cancel_resets_placement(board):
    board.on_click(1)
    board.cancel()
    assert board.placement.active() is None
    assert board.preview is None
    assert board.stats_events[-1] == (False, None)
    assert all(s.outline_color is SlotColor.NONE for s in board.slots.values())


def test_remove_all_highlights(board):
    board.on_click(1)
    board.remove_all_highlights()
    assert board.placement.active() is None
    assert board.preview is None
    assert all(s.color is SlotColor.INACTIVE for s in board.slots.values())
    assert all(s.outline_color is SlotColor.INACTIVE for s in board.slots.values())


def test_remove_slot_with_and_without_cables(board):
    board.on_click(1)
    board.on_click(2)
    board.remove_slot(2, False)
    assert 2 not in board.slots
    assert len(board.cables) == 1
    board.remove_slot(1, True)
    assert 1 not in board.slots
    assert board.cables == []


def test_click_unknown_tile_clears_highlights(board):
    board.on_pointer_over(1)
    assert board.on_click(99) is None
    assert board.slots[1].color is SlotColor.INACTIVE
    assert board.placement.active() is None


@pytest.mark.parametrize("tile_id", [0, 1, 5, 42])
@pytest.mark.parametrize("elapsed", [0.0, 0.3, 2.5, 100.0])
def test_breathe_scale_bounds(tile_id, elapsed):
    scale = breathe_scale(tile_id, elapsed)
    assert 0.9 - 1e-9 <= scale <= 1.1 + 1e-9


def test_breathe_scale_at_rest():
    assert breathe_scale(0, 0.0) == pytest.approx(1.0)
    assert breathe_scale(3, 1.0) == pytest.approx(breathe_scale(3, 1.0 + math.pi))