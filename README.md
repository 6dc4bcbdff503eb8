# kanbantui

The screen model of a terminal kanban board. It covers projects (boards), columns, tasks (cards) and sprints. From an application state it works out what each screen shows: panels, lines of styled text, the key help line and any popup. Nothing depends on packages outside the standard library.

## Modules

- `kanbantui.models`: the domain types `Board`, `Column`, `Card` and `Sprint`, and the enums `CardPriority`, `CardStatus`, `SprintStatus`, `TaskListView`, `SortField` and `SortOrder`.
  - `Card.create(board, column_id, title, position)` numbers a new card from the board's counter and advances that counter.
  - `Sprint.formatted_name(board, prefix)` returns a name such as `sprint-3`, or `sprint-3/Apollo` when the sprint has a name from the board's list.
- `kanbantui.input`: `InputState` is a one-line text buffer with a cursor. It supports insert, backspace, delete, left, right, home, end, clear and set.
- `kanbantui.selection`: `SelectionState` is an optional index in a list. `next`, `prev` and `auto_select_first_if_empty` move it.
- `kanbantui.task_list`: `TaskList` and `TaskListId`. A task list is an ordered list of card ids. When its cards are replaced, it keeps the selected card selected if that card is still present. `TaskListId.ALL` means the whole board. `TaskListId.column(id)` means one column.
- `kanbantui.filter`: `BoardFilter` matches the cards whose column belongs to a board.
- `kanbantui.sort`: `get_sorter_for_field(field)` returns an ascending sort key. `OrderedSorter(key, order).sort(cards)` returns a new list. The sort is stable, so cards that compare equal keep their order. Cards with points sort before cards without.
- `kanbantui.view_strategy`: three ways to arrange a board's cards into task lists.
  - `FlatViewStrategy` puts every card in one list.
  - `GroupedViewStrategy` and `KanbanViewStrategy` make one list per column, in column position order.
  - `refresh_task_lists(board, all_cards, all_columns, active_sprint_filter, hide_assigned_cards)` rebuilds the lists and keeps each list's selection.
  - `navigate_left` and `navigate_right` move between column lists.
- `kanbantui.theme`: `Color`, `Modifier`, an immutable `Style`, the colour constants, and named styles such as `focused_border()`, `label_text()`, `priority_style(priority)`, `points_style(points)` and `sprint_status_style(status)`.
- `kanbantui.widgets`: `Span`, `Line`, `Panel` and `Popup`. Each `text()` method returns the plain characters without styling.
- `kanbantui.state`: `AppState` holds everything the screen is drawn from, together with the `AppMode`, `Focus`, `CardFocus` and `BoardFocus` enums.
- `kanbantui.panels`: the project list and the task panels, in flat, grouped and kanban layouts.
- `kanbantui.detail`: the card, board and sprint detail views.
- `kanbantui.popups`: the input, priority, ordering, import, sprint assignment, column deletion and view selection popups. `render_popup(state)` picks the popup for the current mode.
- `kanbantui.footer`: `help_text(state)` returns the key bindings for the current mode and focus.
- `kanbantui.ui`: `render(state)` returns a `Screen` with the main panels, the footer and the popup, if there is one. `Screen.text()` joins them as plain text.

## Example

```python
from kanbantui.models import Board, Card, CardPriority, Column, SortField, SortOrder
from kanbantui.sort import OrderedSorter, get_sorter_for_field
from kanbantui.state import AppState, Focus
from kanbantui.ui import render

board = Board("Website")
todo = Column(board.id, "Todo", 0)
a = Card.create(board, todo.id, "Write copy", 0)
b = Card.create(board, todo.id, "Fix login", 1)
b.update_priority(CardPriority.HIGH)

sorter = OrderedSorter(get_sorter_for_field(SortField.PRIORITY), SortOrder.DESCENDING)
print([c.title for c in sorter.sort([a, b])])  # ['Fix login', 'Write copy']

state = AppState(boards=[board], columns=[todo], cards=[a, b], focus=Focus.CARDS)
state.active_board_index = 0
state.view_strategy.refresh_task_lists(board, state.cards, state.columns)
print(render(state).text())
```

## What it does not do

- It does not draw on a terminal. `render` returns plain objects that a drawing layer can show.
- It does not read keys or run an event loop. Changing modes, focus and selections is left to the caller.
- It does not save, load, import or export boards. The import popup only lists the names already in `AppState.import_files`.
- It does not copy to the clipboard.
- It provides no command to run.

## Tests

```
pip install -e .[test]
pytest
```