import pytest

from floatverse.todo import (
    EditAction,
    Key,
    Modifier,
    TodoLine,
    TodoList,
    edit_key_action,
    line_key_action,
)


def make(*texts):
    todo = TodoList()
    for text in texts:
        todo.add_item(False, text)
    return todo


def texts(todo):
    return [line.text for line in todo.lines]


def test_line_json_round_trip():
    line = TodoLine(True, "milk")
    assert line.to_json() == {"checked": True, "text": "milk"}
    assert TodoLine.from_json(line.to_json()) == line


def test_line_from_json_defaults():
    assert TodoLine.from_json({}) == TodoLine(False, "")


def test_list_json_round_trip():
    data = {
        "todos": [{"checked": True, "text": "a"}, {"checked": False, "text": "b"}],
        "scrollPos": 7,
    }
    todo = TodoList.from_json(data)
    assert texts(todo) == ["a", "b"]
    assert todo.to_json() == data


def test_escape_key():
    assert edit_key_action(Key.ESCAPE, Modifier.NONE, "x") is EditAction.ESCAPE


@pytest.mark.parametrize("key", [Key.ENTER, Key.RETURN])
def test_enter_inserts(key):
    assert edit_key_action(key, Modifier.NONE, "x") is EditAction.INSERT_AFTER
    assert edit_key_action(key, Modifier.SHIFT, "x") is EditAction.INSERT_BEFORE


def test_alt_keys():
    assert edit_key_action(Key.DELETE, Modifier.ALT, "x") is EditAction.DELETE_NEXT
    assert edit_key_action(Key.BACKSPACE, Modifier.ALT, "x") is EditAction.CLEAR
    assert edit_key_action(Key.A, Modifier.ALT, "x") is EditAction.NONE


def test_delete_on_empty_line():
    assert edit_key_action(Key.DELETE, Modifier.NONE, "") is EditAction.DELETE_NEXT
    assert edit_key_action(Key.BACKSPACE, Modifier.NONE, "") is EditAction.DELETE_PREVIOUS
    assert edit_key_action(Key.BACKSPACE, Modifier.NONE, "x") is EditAction.NONE
    assert edit_key_action(Key.DELETE, Modifier.CONTROL, "") is EditAction.NONE


def test_line_keys():
    assert line_key_action(Key.DELETE, Modifier.SHIFT) is EditAction.DELETE_SELECTED
    assert line_key_action(Key.UP, Modifier.NONE) is EditAction.MOVE_UP
    assert line_key_action(Key.DOWN, Modifier.NONE) is EditAction.MOVE_DOWN
    assert line_key_action(Key.UP, Modifier.SHIFT) is EditAction.NONE


def test_insert_item_positions():
    todo = make("a", "c")
    todo.insert_item(1, False, "b")
    todo.insert_item(-1, True, "d")
    todo.insert_item(100, False, "e")
    assert texts(todo) == ["a", "b", "c", "d", "e"]
    assert todo.lines[3].checked is True


def test_insert_shifts_selection_and_current():
    todo = make("a", "b")
    todo.select_row(1)
    todo.insert_item(0, False, "new")
    assert todo.current_row == 2
    assert todo.selected == {2}
    assert todo.lines[todo.current_row].text == "b"


def test_delete_item_out_of_range():
    with pytest.raises(IndexError):
        make("a").delete_item(1)


def test_insert_and_focus():
    todo = make("a", "b")
    todo.select_all()
    line = todo.insert_and_focus(1)
    assert todo.lines[1] is line
    assert todo.editing == 1
    assert todo.selected == set()


def test_select_row_plain_replaces_selection():
    todo = make("a", "b", "c")
    todo.select_row(0)
    todo.select_row(2)
    assert todo.selected == {2}
    assert todo.current_row == 2


def test_select_row_shift_selects_range():
    todo = make("a", "b", "c", "d")
    todo.select_row(3)
    todo.select_row(1, Modifier.SHIFT)
    assert todo.selected == set(range(1, 4))
    assert todo.current_row == 1


def test_select_row_control_adds():
    todo = make("a", "b", "c")
    todo.select_row(0)
    todo.select_row(2, Modifier.CONTROL)
    assert todo.selected == {0, 2}


def test_select_row_alt_toggles_range():
    todo = make("a", "b", "c")
    todo.select_row(0)
    todo.select_row(1, Modifier.CONTROL)
    todo.select_row(2, Modifier.ALT)
    # from current row 1 to 2: row 1 turns off, row 2 turns on
    assert todo.selected == {0, 2}


def test_check_toggle_and_copy():
    todo = make("a", "b", "c")
    todo.select_row(0)
    todo.select_row(2, Modifier.CONTROL)
    todo.check_selected()
    assert [line.checked for line in todo.lines] == [True, False, True]
    todo.toggle_selected()
    assert not any(line.checked for line in todo.lines)
    assert todo.copy_selected() == "a\nc"


def test_paste_text_inserts_at_current_row():
    todo = make("x", "y")
    todo.select_row(1)
    count = todo.paste_text(" p \n\nq\n")
    assert count == 2
    assert texts(todo) == ["x", "p", "q", "y"]
    assert todo.selected == {1, 2}
    assert todo.copy_selected() == "p\nq"


def test_paste_into_empty_list():
    todo = TodoList()
    assert todo.paste_text("one") == 1
    assert texts(todo) == ["one"]


def test_delete_selected_keeps_current_row():
    todo = make("a", "b", "c", "d")
    todo.select_row(0)
    todo.select_row(2, Modifier.CONTROL)
    todo.delete_selected()
    assert texts(todo) == ["b", "d"]
    assert todo.lines[todo.current_row].text == "d"


def test_delete_selected_everything():
    todo = make("a", "b")
    todo.select_all()
    todo.delete_selected()
    assert len(todo) == 0
    assert todo.selected == set()


def test_delete_line_forward_and_backward():
    todo = make("a", "b", "c")
    row = todo.delete_line(1, True)
    assert texts(todo) == ["a", "c"]
    assert todo.lines[row].text == "c"
    row = todo.delete_line(1, False)
    assert todo.lines[row].text == "a"
    assert todo.editing == row


def test_delete_last_line_returns_none():
    todo = make("a")
    assert todo.delete_line(0, False) is None
    assert len(todo) == 0


def test_move_next():
    todo = make("a", "b")
    assert todo.move_next(False) is None
    todo.select_row(0)
    assert todo.move_next(True) is None
    assert todo.move_next(False) == 1
    assert todo.editing == 1


def test_insert_next():
    todo = make("a", "b")
    assert todo.insert_next(False) is None
    todo.select_row(0)
    after = todo.insert_next(False)
    assert todo.lines[1] is after
    before = todo.insert_next(True)
    assert todo.lines[0] is before
    assert texts(todo) == ["", "a", "", "b"]