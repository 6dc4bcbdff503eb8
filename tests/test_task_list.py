import uuid

import pytest

from kanbantui.task_list import TaskList, TaskListId


@pytest.fixture
def ids():
    return [uuid.uuid4() for _ in range(3)]


def test_task_list_id_variants():
    column_id = uuid.uuid4()
    assert TaskListId.ALL.is_all
    assert TaskListId.column(column_id) == TaskListId.column(column_id)
    assert TaskListId.column(column_id) != TaskListId.ALL
    assert TaskListId.column(column_id).column_id == column_id


def test_with_cards_has_no_selection(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    assert len(tl) == len(ids)
    assert tl.selected_index is None
    assert tl.selected_card_id() is None


def test_update_keeps_selected_card(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    tl.select_card(ids[1])
    tl.update_cards(list(reversed(ids)))
    assert tl.selected_card_id() == ids[1]
    assert tl.selected_index == list(reversed(ids)).index(ids[1])


def test_update_selected_card_removed_selects_first(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    tl.select_card(ids[2])
    tl.update_cards(ids[:2])
    assert tl.selected_index == 0


def test_update_selected_card_removed_empty_clears(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    tl.select_card(ids[0])
    tl.update_cards([])
    assert tl.selected_index is None


def test_update_clamps_dangling_index(ids):
    tl = TaskList(TaskListId.ALL)
    tl.selection.index = 7
    tl.update_cards(ids)
    assert tl.selected_index == len(ids) - 1


def test_select_card_missing(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    assert not tl.select_card(uuid.uuid4())
    assert tl.selected_index is None


def test_navigate_up(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    tl.set_selected_index(1)
    assert tl.navigate_up() is False
    assert tl.selected_index == 0
    assert tl.navigate_up() is True
    assert tl.selected_index == 0


def test_navigate_up_empty():
    tl = TaskList(TaskListId.ALL)
    assert tl.navigate_up() is False


def test_navigate_down(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    assert tl.navigate_down() is False
    assert tl.selected_index == 0
    tl.set_selected_index(len(ids) - 1)
    assert tl.navigate_down() is True
    assert tl.selected_index == len(ids) - 1


def test_navigate_down_empty():
    tl = TaskList(TaskListId.ALL)
    assert tl.navigate_down() is False
    assert tl.selected_index is None


def test_set_selected_index_out_of_range_clears(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    tl.set_selected_index(1)
    tl.set_selected_index(len(ids))
    assert tl.selected_index is None
    tl.set_selected_index(1)
    tl.set_selected_index(None)
    assert tl.selected_index is None


def test_clear_and_is_empty(ids):
    tl = TaskList.with_cards(TaskListId.ALL, ids)
    tl.set_selected_index(0)
    tl.clear()
    assert tl.selected_index is None
    assert not tl.is_empty()
    assert TaskList(TaskListId.ALL).is_empty()