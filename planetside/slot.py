"""Cable slots on tiles: hover and selection highlighting, and cable creation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from itertools import count

from .cable import MAX_CABLE_LENGTH, Cable, SlotCablePlacement
from .planet import TILE_SIZE, Planet, Transform, forward

OUTLINE_SIZE = 6.0

Vec3 = tuple[float, float, float]


class SlotColor(Enum):
    """Colours a slot or its selection outline can take."""

    ACTIVE = "#00000066"
    INACTIVE = "#00000000"
    HIGHLIGHT = "#00000044"
    NONE = "none"


@dataclass
class CableSlot:
    """A square on a tile where cables can be connected."""

    tile_id: int
    entity: int
    position: Vec3
    color: SlotColor = SlotColor.INACTIVE
    outline_color: SlotColor = SlotColor.NONE


def breathe_scale(tile_id: int, elapsed: float) -> float:
    """Idle pulsing scale of a slot after ``elapsed`` seconds."""
    return 1.0 + math.sin(elapsed * 2.0 + tile_id * 12.124511) * 0.1


@dataclass
class SlotBoard:
    """All cable slots of a planet and the cables placed between them.

    ``stats_events`` records requests to open or close the stats panel as
    ``(open, tile_id)`` pairs, in the order they were made.
    """

    planet: Planet
    placement: SlotCablePlacement = field(default_factory=SlotCablePlacement)
    slots: dict[int, CableSlot] = field(default_factory=dict)
    cables: list[Cable] = field(default_factory=list)
    preview: int | None = None
    stats_events: list[tuple[bool, int | None]] = field(default_factory=list)
    _entities: count = field(default_factory=lambda: count(1), repr=False)

    def add_slot(self, tile_id: int, position: Transform) -> CableSlot:
        """Place a slot half a tile above the tile at ``position``."""
        x, y, z = position.translation
        fx, fy, fz = forward(position)
        half = TILE_SIZE / 2.0
        slot = CableSlot(
            tile_id=tile_id,
            entity=next(self._entities),
            position=(x + fx * half, y + fy * half, z + 0.1 + fz * half),
        )
        self.slots[tile_id] = slot
        return slot

    def remove_slot(self, tile_id: int, remove_cables: bool) -> None:
        """Remove the slot on ``tile_id`` and, if asked, the cables touching it."""
        self.slots.pop(tile_id, None)
        if remove_cables:
            self.cables = [
                cable
                for cable in self.cables
                if cable.start_tile_id != tile_id and cable.end_tile_id != tile_id
            ]

    def _highlight(
        self,
        slot: CableSlot,
        change_highlight: bool | None,
        change_selection: bool | None,
        highlight_all: bool,
    ) -> None:
        if change_highlight is not None:
            if change_highlight:
                slot.color = SlotColor.ACTIVE
            elif highlight_all:
                slot.color = SlotColor.HIGHLIGHT
            else:
                slot.color = SlotColor.INACTIVE
        if change_selection is not None:
            slot.outline_color = SlotColor.ACTIVE if change_selection else SlotColor.NONE

    def _highlight_all(self, highlight: bool) -> None:
        color = SlotColor.HIGHLIGHT if highlight else SlotColor.INACTIVE
        for slot in self.slots.values():
            slot.color = color

    def on_pointer_over(self, tile_id: int) -> None:
        slot = self.slots.get(tile_id)
        if slot is not None:
            self._highlight(slot, True, None, self.placement.active() is not None)

    def on_pointer_out(self, tile_id: int) -> None:
        slot = self.slots.get(tile_id)
        if slot is not None:
            self._highlight(slot, False, None, self.placement.active() is not None)

    def on_click(self, tile_id: int) -> Cable | None:
        """Start a cable at a slot, or finish one; return a newly placed cable."""
        slot = self.slots.get(tile_id)
        highlight_all = False
        needs_highlight_reset = False
        placed = None

        if slot is not None:
            active = self.placement.active()
            if active is not None:
                start_tile, start_entity = active
                self.stats_events.append((False, None))
                self.preview = None
                needs_highlight_reset = True
                occupied = self.planet.powergrid_tiles_are_connected(start_tile, slot.tile_id)
                sx, sy = self.placement.start_entity_pos
                distance = math.hypot(slot.position[0] - sx, slot.position[1] - sy)
                if not (
                    occupied or start_tile == slot.tile_id or distance > MAX_CABLE_LENGTH
                ):
                    placed = Cable(
                        start_entity=slot.entity,
                        end_entity=start_entity,
                        start_tile_id=start_tile,
                        end_tile_id=slot.tile_id,
                    )
                    self.cables.append(placed)
                    self.planet.powergrid_register_connection(start_tile, slot.tile_id)
                self.placement.reset()
            else:
                self.placement.set_active(slot.tile_id, slot.entity, slot.position)
                self.preview = slot.entity
                self._highlight(slot, True, True, True)
                self.stats_events.append((True, slot.tile_id))
                highlight_all = True

        if needs_highlight_reset:
            self.clear_all_highlight()
        self._highlight_all(highlight_all)
        return placed

    def clear_all_highlight(self) -> None:
        """Deselect every slot and drop its hover highlight."""
        highlight_all = self.placement.active() is not None
        for slot in self.slots.values():
            self._highlight(slot, False, False, highlight_all)

    def cancel(self) -> None:
        """Abort a cable being placed."""
        self.preview = None
        self.clear_all_highlight()
        self.placement.reset()
        self.stats_events.append((False, None))

    def remove_all_highlights(self) -> None:
        """Reset placement, drop the preview and make every slot transparent."""
        self.placement.reset()
        self.preview = None
        for slot in self.slots.values():
            slot.color = SlotColor.INACTIVE
            slot.outline_color = SlotColor.INACTIVE