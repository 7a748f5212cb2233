# floatverse

`floatverse` holds the logic behind a floating desktop panel. The panel slides down from the top edge of the screen and holds links, notes, images, cards and todo lists. This package models that panel without any GUI toolkit, so a front end can draw it however it likes. It has no dependencies outside the standard library.

## Installation

From a checkout of the package:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `floatverse.panel`

- `UniversePanel` keeps the panel's `PanelItem`s in stacking order, with the last item on top. It also tracks which items are selected.
  - `from_json` and `to_json` read and write the stored panel object. Items with type `PanelItemType.DEFAULT` are skipped when reading.
  - Selection:
    - `select_item`, `unselect_item` and `unselect_all` change the selection one item at a time or all at once.
    - `select_all(contain_ignored)` selects everything. With `contain_ignored` false it leaves out items marked `ignore_select`.
    - `toggle_select_all` first selects the ordinary items. If that leaves the selection unchanged, it selects the ignored items as well.
    - `select_in_range(start, end)` selects every item whose centre lies in the rectangle dragged from `start` to `end`.
  - Ordering and position:
    - `raise_item` and `lower_item` change the stacking order.
    - `item_at(point)` returns the topmost item under a point.
    - `move_scene(delta, ratio)` pans every item.
    - `move_selected(delta)` moves only the selected items.
- `PanelItem` holds:
  - the item type,
  - its rectangle,
  - its selection flags,
  - a `data` dict for any other stored fields.
- `PanelStore(path)` saves items to a JSON file.
  - Before it writes, it moves the previous file to `<path>.bak`.
  - After writing, it reads the file back. If the item count does not match, it raises `PanelStoreError`.
  - `load` falls back to the backup when the main file is missing or empty.

### `floatverse.todo`

- `TodoList` and `TodoLine` model a checklist.
  - Editing: insert, append and delete lines.
  - Selection: select rows with Shift, Control and Alt modifiers, and track the current row and the line being edited.
  - Selected lines: `check_selected`, `toggle_selected`, `copy_selected` and `delete_selected`.
  - Keyboard moves: `delete_line`, `move_next` and `insert_next`.
  - Pasting: `paste_text` inserts one line for each non-empty line of the text.
  - Storage: `from_json` and `to_json`.
- `edit_key_action(key, modifiers, text)` and `line_key_action(key, modifiers)` map a `Key` and a set of `Modifier`s to an `EditAction`.

### `floatverse.clock`

- `ClockBean` is an alarm entry.
  - It is set either for a fixed date or for a set of weekdays. `weeks` is a bit mask in which bit 1 is Monday and bit 7 is Sunday.
  - `next_alarm(now)` returns the next time the alarm fires.
  - A repeating alarm steps forward by day, week, month or year.
  - A single-shot alarm whose time has passed is marked `overdue`.
  - `on_timeout` updates the entry after the alarm has fired.
- `from_json` and `to_json` persist an entry.
- `AlarmType` and `TimeUnit` are the enums the entry uses.

### `floatverse.geometry`

- `Point` and `Rect` are integer geometry types. A `Rect`'s right and bottom edges are inclusive.
- `align(rects, alignment)` lines up rectangles: top, middle, bottom, left, center or right.
- `distribute(rects, axis)` spaces rectangles evenly along an `Axis`.

### `floatverse.web`

These helpers work on strings only.

- `page_title_name(url, source)` picks a bookmark name from a page's HTML `<title>`.
- `favicon_url(url)` builds the site icon address.
- `default_bookmark_name(url)` guesses a name from a URL.
- `sanitize_file_name` removes characters that cannot appear in a file name.
- `split_suffix` splits a name into stem and suffix.
- `classify_text_paste(text, exists)` returns a `PasteKind`: web address, local file or plain text.

### `floatverse.qss`

- `highlight(text)` colours one line of style sheet text and returns a list of `Span`s.
  - It colours selectors, keys, values, comments, units and strings.
  - Colour literals such as `#fff` or `rgb(...)` are drawn in their own colour.
- `continuation_indent(text, position)` returns the leading whitespace to insert after pressing Enter.

### `floatverse.animation`

These classes compute what an animated label shows at a progress value from 0 to 100.

- `CircleAnimation` gives the blended `Color` and the circle diameter.
- `NumberAnimation` gives the number shown while counting up or down.

## Example

```python
from floatverse.todo import TodoList

todos = TodoList()
todos.add_item(False, "write report")
todos.add_item(True, "send mail")
todos.select_all()
print(todos.copy_selected())
```

## What this package does not do

- **No screen or command.** There is no window, no drawing, no tray icon and no command to run. A front end has to supply those.
- **No running animations or timers.** The animation classes and `ClockBean` only compute values for a given progress or time. They do not drive a clock or schedule anything.
- **No network access.** `floatverse.web` does not fetch pages or icons. It works on a URL and on page source that the caller provides.
- **No per-type item behaviour.** Icon, text, image and card items are stored only as a `PanelItem` with its `data` dict. Opening files or links, rendering text and showing images are left to the caller.