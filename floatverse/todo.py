"""Checklist model: lines, selection, keyboard handling and persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import Any, Iterable, Mapping


class Key(Enum):
    """Keys the checklist reacts to."""

    ESCAPE = auto()
    ENTER = auto()
    RETURN = auto()
    DELETE = auto()
    BACKSPACE = auto()
    UP = auto()
    DOWN = auto()
    A = auto()
    OTHER = auto()


class Modifier(IntFlag):
    """Keyboard modifiers held while a key is pressed or a line is focused."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    META = 8


class EditAction(Enum):
    """What a key press on a line asks the checklist to do."""

    NONE = auto()  # ordinary text editing
    ESCAPE = auto()  # leave editing and drop the selection
    INSERT_AFTER = auto()  # new line below the current one
    INSERT_BEFORE = auto()  # new line at the current row
    DELETE_NEXT = auto()  # remove this line, continue with the following one
    DELETE_PREVIOUS = auto()  # remove this line, continue with the preceding one
    CLEAR = auto()  # empty the text of this line
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    DELETE_SELECTED = auto()


_ENTER_KEYS = (Key.ENTER, Key.RETURN)


def edit_key_action(key: Key, modifiers: Modifier, text: str) -> EditAction:
    """Action for a key pressed in a line's text field holding ``text``."""
    modifiers = Modifier(modifiers)
    if key is Key.ESCAPE:
        return EditAction.ESCAPE
    if key in _ENTER_KEYS:
        return EditAction.INSERT_BEFORE if modifiers else EditAction.INSERT_AFTER
    if modifiers & Modifier.ALT:
        if key is Key.DELETE:
            return EditAction.DELETE_NEXT
        if key is Key.BACKSPACE:
            return EditAction.CLEAR
        return EditAction.NONE
    if modifiers == Modifier.NONE and key in (Key.DELETE, Key.BACKSPACE) and not text:
        return EditAction.DELETE_NEXT if key is Key.DELETE else EditAction.DELETE_PREVIOUS
    return EditAction.NONE


def line_key_action(key: Key, modifiers: Modifier) -> EditAction:
    """Action for a key pressed on a line outside its text field."""
    modifiers = Modifier(modifiers)
    if key is Key.DELETE:
        return EditAction.DELETE_SELECTED
    if modifiers == Modifier.NONE:
        if key is Key.UP:
            return EditAction.MOVE_UP
        if key is Key.DOWN:
            return EditAction.MOVE_DOWN
    return EditAction.NONE


@dataclass
class TodoLine:
    """One checklist entry."""

    checked: bool = False
    text: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the stored JSON object of this line."""
        return {"checked": self.checked, "text": self.text}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "TodoLine":
        """Build a line from its stored JSON object."""
        return cls(bool(data.get("checked", False)), str(data.get("text", "")))


@dataclass
class TodoList:
    """An ordered checklist with a current row, a row selection and an edited row."""

    lines: list[TodoLine] = field(default_factory=list)
    selected: set[int] = field(default_factory=set)
    current_row: int = -1
    editing: int | None = None
    scroll_pos: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "TodoList":
        """Build a checklist from its stored JSON object."""
        todo = cls(scroll_pos=int(data.get("scrollPos", 0)))
        for item in data.get("todos", []):
            line = TodoLine.from_json(item)
            todo.add_item(line.checked, line.text)
        return todo

    def to_json(self) -> dict[str, Any]:
        """Return the stored JSON object of this checklist."""
        return {
            "todos": [line.to_json() for line in self.lines],
            "scrollPos": self.scroll_pos,
        }

    def __len__(self) -> int:
        return len(self.lines)

    def add_item(self, checked: bool, text: str) -> TodoLine:
        """Append a line at the bottom."""
        return self.insert_item(-1, checked, text)

    def insert_item(self, index: int, checked: bool, text: str) -> TodoLine:
        """Insert a line at ``index``; a negative or too large index appends."""
        position = len(self.lines) if index < 0 or index > len(self.lines) else index
        line = TodoLine(checked, text)
        self.lines.insert(position, line)
        self.selected = {row + 1 if row >= position else row for row in self.selected}
        if self.current_row >= position:
            self.current_row += 1
        if self.editing is not None and self.editing >= position:
            self.editing += 1
        return line

    def delete_item(self, index: int) -> TodoLine:
        """Remove and return the line at ``index``."""
        if not 0 <= index < len(self.lines):
            raise IndexError(f"no line at row {index}")
        line = self.lines.pop(index)
        self.selected = {
            row - 1 if row > index else row for row in self.selected if row != index
        }
        if self.current_row > index:
            self.current_row -= 1
        elif self.current_row == index:
            self.current_row = min(index, len(self.lines) - 1)
        if self.editing is not None:
            if self.editing == index:
                self.editing = None
            elif self.editing > index:
                self.editing -= 1
        return line

    def insert_and_focus(self, index: int = 0) -> TodoLine:
        """Insert an empty line at ``index`` and start editing it."""
        line = self.insert_item(index, False, "")
        self.clear_selection()
        self.editing = self._row_of(line)
        return line

    def select_all(self) -> None:
        """Select every line."""
        self.selected = set(range(len(self.lines)))

    def clear_selection(self) -> None:
        """Drop the selection."""
        self.selected.clear()

    def select_row(self, index: int, modifiers: Modifier = Modifier.NONE) -> None:
        """Update the selection when the line at ``index`` gains focus."""
        if not 0 <= index < len(self.lines):
            raise IndexError(f"no line at row {index}")
        modifiers = Modifier(modifiers)
        self.editing = index
        if index in self.selected:
            return
        if modifiers == Modifier.NONE:
            self.selected = {index}
            self.current_row = index
        elif modifiers & Modifier.SHIFT:
            self.selected.update(self._span(index))
            self.current_row = index
        elif modifiers & Modifier.CONTROL:
            self.selected.add(index)
            self.current_row = index
        elif modifiers & Modifier.ALT:
            self.selected.symmetric_difference_update(self._span(index))
            self.current_row = index

    def _span(self, index: int) -> range:
        start = max(self.current_row, 0)
        low, high = min(start, index), max(start, index)
        return range(low, high + 1)

    def _row_of(self, line: TodoLine) -> int:
        return next(row for row, candidate in enumerate(self.lines) if candidate is line)

    def _selected_lines(self) -> Iterable[TodoLine]:
        return (self.lines[row] for row in sorted(self.selected))

    def check_selected(self) -> None:
        """Tick every selected line."""
        for line in self._selected_lines():
            line.checked = True

    def toggle_selected(self) -> None:
        """Invert the tick of every selected line."""
        for line in self._selected_lines():
            line.checked = not line.checked

    def copy_selected(self) -> str:
        """Text of the selected lines, one per line, top to bottom."""
        return "\n".join(line.text for line in self._selected_lines())

    def paste_text(self, text: str) -> int:
        """Insert each non-empty line of ``text`` at the current row and select them."""
        pieces = [piece for piece in text.split("\n") if piece]
        index = self.current_row if self.current_row != -1 else 0
        self.clear_selection()
        for piece in pieces:
            line = self.insert_item(index, False, piece.strip())
            row = self._row_of(line)
            self.selected.add(row)
            self.current_row = row
            index = row + 1
        return len(pieces)

    def delete_selected(self) -> None:
        """Remove the selected lines and keep a sensible current row."""
        select_row = self.current_row
        for row in sorted(self.selected, reverse=True):
            if row < select_row:
                select_row -= 1
            self.delete_item(row)
        if select_row >= len(self.lines):
            select_row = len(self.lines) - 1
        if 0 <= select_row < len(self.lines):
            self.current_row = select_row
            self.selected = {select_row}

    def delete_line(self, index: int, forward: bool) -> int | None:
        """Remove the line at ``index`` and edit its neighbour; return that row."""
        self.delete_item(index)
        row = index if forward else index - 1
        if row >= len(self.lines):
            row = len(self.lines) - 1
        elif row < 0:
            row = 0
        if not 0 <= row < len(self.lines):
            return None
        self.current_row = row
        self.selected = {row}
        self.editing = row
        return row

    def move_next(self, reverse: bool) -> int | None:
        """Edit the line above (``reverse``) or below the current row."""
        if self.current_row == -1:
            return None
        row = self.current_row + (-1 if reverse else 1)
        if not 0 <= row < len(self.lines):
            return None
        self.editing = row
        return row

    def insert_next(self, reverse: bool) -> TodoLine | None:
        """Insert an empty line at (``reverse``) or below the current row and edit it."""
        if self.current_row == -1:
            return None
        return self.insert_and_focus(self.current_row + (0 if reverse else 1))