"""State of the editor hotbar: its slots, their contents and the selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, List


class HotbarSlotData:
    """Base of the contents a hotbar slot can hold."""


@dataclass(frozen=True)
class EmptySlot(HotbarSlotData):
    """A slot with nothing in it."""


@dataclass(frozen=True)
class ToolSlot(HotbarSlotData):
    """A slot holding a tool."""

    tool: Hashable


@dataclass(frozen=True)
class BlockSlot(HotbarSlotData):
    """A slot holding a block."""

    block: Hashable


@dataclass
class _SlotMeta:
    slot_id: Hashable
    data: HotbarSlotData = field(default_factory=EmptySlot)
    is_dirty: bool = True


class Hotbar:
    """The hotbar's slots, which one is selected, and which need redrawing."""

    def __init__(self) -> None:
        self._active = False
        self._selection = 0
        self._slots: List[_SlotMeta] = []

    def activate(self) -> None:
        """Mark the hotbar as active."""
        self._active = True

    def deactivate(self) -> None:
        """Deactivate the hotbar and drop all slots and the selection."""
        self._active = False
        self._selection = 0
        self._slots.clear()

    @property
    def active(self) -> bool:
        """Whether the hotbar is active."""
        return self._active

    @property
    def selected_index(self) -> int:
        """The index of the selected slot."""
        return self._selection

    @property
    def selected(self) -> HotbarSlotData:
        """The contents of the selected slot."""
        return self.slot(self._selection)

    def __len__(self) -> int:
        return len(self._slots)

    def _meta(self, index: int) -> _SlotMeta:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"hotbar slot index out of range: {index}")
        return self._slots[index]

    def insert_slot(self, slot: Hashable) -> None:
        """Add a new empty slot drawn by the entity ``slot``."""
        self._slots.append(_SlotMeta(slot_id=slot))

    def select_slot(self, index: int) -> None:
        """Select a slot; indices past the end select the last slot."""
        if not self._slots:
            raise IndexError("cannot select a slot in an empty hotbar")
        if index < 0:
            raise ValueError(f"slot index must not be negative: {index}")
        self._selection = min(index, len(self._slots) - 1)

    def set_slot(self, index: int, data: HotbarSlotData) -> None:
        """Replace the contents of a slot and mark it dirty."""
        meta = self._meta(index)
        meta.data = data
        meta.is_dirty = True

    def slot(self, index: int) -> HotbarSlotData:
        """The contents of the slot at ``index``."""
        return self._meta(index).data

    def slot_entity(self, index: int) -> Hashable:
        """The entity that draws the slot at ``index``."""
        return self._meta(index).slot_id

    def is_dirty(self, index: int) -> bool:
        """Whether the slot needs redrawing; False for indices out of range."""
        if not 0 <= index < len(self._slots):
            return False
        return self._slots[index].is_dirty

    def mark_clean(self) -> None:
        """Mark every slot as drawn."""
        for meta in self._slots:
            meta.is_dirty = False