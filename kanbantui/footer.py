"""The key help shown at the bottom of the screen."""

from __future__ import annotations

from kanbantui.state import AppMode, AppState, BoardFocus, CardFocus, Focus

_CONFIRM = "ESC: cancel | ENTER: confirm"
_ASSIGN = "ESC: cancel | j/k: navigate | ENTER/Space: assign"

_NORMAL_KANBAN = (
    "q: quit | n: new | c: toggle complete | H/L: move card | h/l: switch column | "
    "1-9: jump to column | t: toggle sprint filter | v: select card | V: view mode | "
    "a: assign selected | j/k: navigate | Enter/Space: activate"
)
_NORMAL = (
    "q: quit | n: new | r: rename | e: edit project | x: export | X: export all | "
    "i: import | c: toggle complete | H/L: move card | t: toggle sprint filter | "
    "v: select card | V: view mode | a: assign selected | 1/2: switch panel | "
    "j/k: navigate | Enter/Space: activate"
)

_CARD_DETAIL_BASE = "q: quit | ESC: back | 1/2/3: select panel | y: copy branch | Y: copy git cmd | "
_CARD_DETAIL = {
    CardFocus.TITLE: _CARD_DETAIL_BASE + "e: edit title | s: assign sprint",
    CardFocus.DESCRIPTION: _CARD_DETAIL_BASE + "e: edit description | s: assign sprint",
    CardFocus.METADATA: _CARD_DETAIL_BASE + "e: edit points | s: assign sprint",
}

_BOARD_DETAIL_BASE = "q: quit | ESC: back | 1/2/3/4/5: select panel | "
_BOARD_DETAIL = {
    BoardFocus.NAME: _BOARD_DETAIL_BASE + "e: edit name",
    BoardFocus.DESCRIPTION: _BOARD_DETAIL_BASE + "e: edit description",
    BoardFocus.SETTINGS: _BOARD_DETAIL_BASE + "e: edit settings JSON | p: set branch prefix",
    BoardFocus.SPRINTS: _BOARD_DETAIL_BASE
    + "n: new sprint | j/k: navigate | Enter/Space: open sprint",
    BoardFocus.COLUMNS: _BOARD_DETAIL_BASE
    + "n: new | r: rename | d: delete | J/K: reorder | j/k: navigate",
}

_STATIC = {
    AppMode.CREATE_BOARD: _CONFIRM,
    AppMode.CREATE_CARD: _CONFIRM,
    AppMode.CREATE_SPRINT: _CONFIRM,
    AppMode.RENAME_BOARD: _CONFIRM,
    AppMode.EXPORT_BOARD: "ESC: cancel | ENTER: export",
    AppMode.EXPORT_ALL: "ESC: cancel | ENTER: export all",
    AppMode.IMPORT_BOARD: "ESC: cancel | j/k: navigate | ENTER/Space: import selected",
    AppMode.SET_CARD_POINTS: _CONFIRM,
    AppMode.SET_CARD_PRIORITY: "ESC: cancel | j/k: navigate | ENTER: confirm",
    AppMode.SET_BRANCH_PREFIX: "ESC: cancel | ENTER: confirm (empty to clear)",
    AppMode.ORDER_CARDS: "ESC: cancel | j/k: navigate | ENTER/Space/a: ascending | d: descending",
    AppMode.SPRINT_DETAIL: "q: quit | ESC: back | a: activate sprint | c: complete sprint",
    AppMode.ASSIGN_CARD_TO_SPRINT: _ASSIGN,
    AppMode.ASSIGN_MULTIPLE_CARDS_TO_SPRINT: _ASSIGN,
    AppMode.CREATE_COLUMN: _CONFIRM,
    AppMode.RENAME_COLUMN: _CONFIRM,
    AppMode.DELETE_COLUMN_CONFIRM: "ESC: cancel | ENTER/y: delete | n: cancel",
    AppMode.SELECT_TASK_LIST_VIEW: "ESC: cancel | j/k: navigate | ENTER/Space: select",
}


def help_text(state: AppState) -> str:
    """The key bindings available in the current mode and focus."""
    if state.mode is AppMode.NORMAL:
        if state.is_kanban_view() and state.focus is Focus.CARDS:
            return _NORMAL_KANBAN
        return _NORMAL
    if state.mode is AppMode.CARD_DETAIL:
        return _CARD_DETAIL[state.card_focus]
    if state.mode is AppMode.BOARD_DETAIL:
        return _BOARD_DETAIL[state.board_focus]
    return _STATIC[state.mode]