"""Drawing the whole screen from the application state."""

from __future__ import annotations

from dataclasses import dataclass, field

from kanbantui.detail import (
    render_board_detail_view,
    render_card_detail_view,
    render_sprint_detail_view,
)
from kanbantui.footer import help_text
from kanbantui.panels import render_main
from kanbantui.popups import render_popup
from kanbantui.state import AppMode, AppState
from kanbantui.widgets import Panel, Popup

_CARD_DETAIL_MODES = {
    AppMode.CARD_DETAIL,
    AppMode.ASSIGN_CARD_TO_SPRINT,
    AppMode.ASSIGN_MULTIPLE_CARDS_TO_SPRINT,
}


@dataclass
class Screen:
    """The panels of the main area, the key help below them and an optional popup."""

    panels: list[Panel] = field(default_factory=list)
    footer: str = ""
    popup: Popup | None = None

    def text(self) -> str:
        """Every panel, then the footer, then the popup, as plain text."""
        rows = [panel.text() for panel in self.panels]
        rows.append(self.footer)
        if self.popup is not None:
            rows.append(self.popup.text())
        return "\n".join(rows)


def render(state: AppState) -> Screen:
    """Lay out the screen for the current mode."""
    if state.mode in _CARD_DETAIL_MODES:
        panels = render_card_detail_view(state)
    elif state.mode is AppMode.BOARD_DETAIL:
        panels = render_board_detail_view(state)
    elif state.mode is AppMode.SPRINT_DETAIL:
        panels = render_sprint_detail_view(state)
    else:
        panels = render_main(state)
    return Screen(panels, help_text(state), render_popup(state))