"""The floating panel: its items, selection, ordering and crash-safe storage."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Iterable, Mapping

from floatverse.geometry import Point, Rect

log = logging.getLogger(__name__)


class PanelItemType(IntEnum):
    """Kinds of items that live on the panel."""

    DEFAULT = 0
    ICON_TEXT = 1
    LOCAL_FILE = 2
    WEB_URL = 3
    LONG_TEXT = 4
    IMAGE_VIEW = 5
    CARD_VIEW = 6
    TODO_LIST = 7


_GEOMETRY_KEYS = ("x", "y", "width", "height")


class PanelStoreError(Exception):
    """Raised when saved panel data does not read back as written."""


@dataclass(eq=False)
class PanelItem:
    """One item on the panel; its other stored fields are kept in ``data``."""

    type: PanelItemType = PanelItemType.ICON_TEXT
    rect: Rect = field(default_factory=Rect)
    selected: bool = False
    ignore_select: bool = False
    auto_raise: bool = True
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PanelItem":
        """Build an item from its stored JSON object."""
        rect = Rect(*(int(data.get(key, 0)) for key in _GEOMETRY_KEYS))
        extra = {
            key: value
            for key, value in data.items()
            if key not in _GEOMETRY_KEYS and key not in ("type", "selected")
        }
        return cls(
            type=PanelItemType(int(data.get("type", 0))),
            rect=rect,
            selected=bool(data.get("selected", False)),
            data=extra,
        )

    def to_json(self) -> dict[str, Any]:
        """Return the stored JSON object of this item."""
        result = dict(self.data)
        result["type"] = int(self.type)
        result["x"] = self.rect.x
        result["y"] = self.rect.y
        result["width"] = self.rect.width
        result["height"] = self.rect.height
        result["selected"] = self.selected
        return result

    def move_by(self, delta: Point) -> None:
        """Shift the item by ``delta``."""
        self.rect = self.rect.translated(delta)


def _parse_object(text: str) -> dict[str, Any]:
    try:
        value = json.loads(text)
    except ValueError:
        return {}
    return value if isinstance(value, dict) else {}


@dataclass
class PanelStore:
    """Panel data file with a ``.bak`` copy that survives an interrupted save."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + ".bak")

    def _read(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        return _parse_object(path.read_text(encoding="utf-8"))

    def save(self, items: Iterable[PanelItem]) -> None:
        """Write the items, keeping the previous file as the backup."""
        items = list(items)
        document = {"items": [item.to_json() for item in items]}
        backup = self.backup_path
        if backup.exists():
            backup.unlink()
        if self.path.exists():
            self.path.rename(backup)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")

        saved = self._read(self.path).get("items", [])
        if len(saved) != len(items):
            raise PanelStoreError(
                f"saved data is wrong: current {len(items)}, saved {len(saved)}"
            )

    def load(self) -> dict[str, Any]:
        """Read the stored panel object, falling back to the backup when empty."""
        document = self._read(self.path)
        if not document and self.backup_path.exists():
            log.warning("reading backup panel data: %s", self.path)
            document = self._read(self.backup_path)
            if not document:
                log.error("cannot read backup panel data")
        return document


@dataclass
class UniversePanel:
    """Items in stacking order (last is on top) and the set of selected items."""

    items: list[PanelItem] = field(default_factory=list)
    selected: set[PanelItem] = field(default_factory=set)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "UniversePanel":
        """Build a panel from its stored object, skipping items without a type."""
        panel = cls()
        for entry in data.get("items", []):
            item = PanelItem.from_json(entry)
            if item.type is PanelItemType.DEFAULT:
                log.warning("item without a type")
                continue
            was_selected = item.selected
            item.selected = False
            panel.items.append(item)
            if was_selected:
                panel.select_item(item)
        return panel

    def to_json(self) -> dict[str, Any]:
        """Return the stored object of the panel."""
        return {"items": [item.to_json() for item in self.items]}

    def add_item(self, item: PanelItem) -> PanelItem:
        """Put a new item on top and select it."""
        self.items.append(item)
        self.select_item(item)
        return item

    def delete_item(self, item: PanelItem) -> None:
        """Remove an item from the panel."""
        self.items.remove(item)
        self.selected.discard(item)

    def select_all(self, contain_ignored: bool = True) -> None:
        """Select every item, or every item that takes part in selection."""
        if contain_ignored:
            for item in self.items:
                item.selected = True
            self.selected = set(self.items)
            return
        self.selected = set()
        for item in self.items:
            if item.ignore_select:
                continue
            item.selected = True
            self.selected.add(item)

    def toggle_select_all(self) -> None:
        """Select all ordinary items; if that changes nothing, include ignored ones."""
        previous = set(self.selected)
        self.unselect_all()
        self.select_all(False)
        if previous == self.selected:
            self.select_all(True)

    def unselect_all(self) -> None:
        """Drop the selection."""
        for item in self.selected:
            item.selected = False
        self.selected = set()

    def select_item(self, item: PanelItem) -> None:
        """Add an item to the selection."""
        item.selected = True
        self.selected.add(item)

    def unselect_item(self, item: PanelItem) -> None:
        """Remove an item from the selection."""
        item.selected = False
        self.selected.discard(item)

    def raise_item(self, item: PanelItem) -> None:
        """Bring an item to the top of the stack."""
        self.items.remove(item)
        self.items.append(item)

    def lower_item(self, item: PanelItem) -> None:
        """Send an item to the bottom of the stack."""
        self.items.remove(item)
        self.items.insert(0, item)

    def item_at(self, point: Point) -> PanelItem | None:
        """Topmost item under ``point``."""
        return next((item for item in reversed(self.items) if item.rect.contains(point)), None)

    def select_in_range(self, start: Point, end: Point) -> list[PanelItem]:
        """Select items whose centre lies in the dragged rectangle; return them."""
        area = Rect.from_points(start, end)
        chosen = [
            item
            for item in self.items
            if not item.ignore_select and area.contains(item.rect.center)
        ]
        for item in chosen:
            self.select_item(item)
        return chosen

    def move_scene(self, delta: Point, ratio: float = 1.0) -> Point:
        """Pan all items by ``delta`` scaled by ``ratio``; return the applied shift."""
        shift = delta * ratio
        for item in self.items:
            item.move_by(shift)
        return shift

    def move_selected(self, delta: Point) -> None:
        """Move the selected items by ``delta``."""
        for item in self.selected:
            item.move_by(delta)