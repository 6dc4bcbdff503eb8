"""Colours and text styles of the interface."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from kanbantui.models import CardPriority, SprintStatus


class Color(enum.Enum):
    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


class Modifier(enum.Flag):
    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    REVERSED = enum.auto()
    CROSSED_OUT = enum.auto()


@dataclass(frozen=True)
class Style:
    """Foreground, background and modifiers; each builder returns a new style."""

    foreground: Color | None = None
    background: Color | None = None
    modifiers: Modifier = Modifier.NONE

    def fg(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def bg(self, color: Color) -> Style:
        return replace(self, background=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        return replace(self, modifiers=self.modifiers | modifier)


FOCUSED_BORDER = Color.CYAN
UNFOCUSED_BORDER = Color.WHITE
SELECTED_BG = Color.BLUE

ACTIVE_ITEM = Color.GREEN
DONE_TEXT = Color.DARK_GRAY
NORMAL_TEXT = Color.WHITE
LABEL_TEXT = Color.DARK_GRAY
HIGHLIGHT_TEXT = Color.YELLOW

PRIORITY_CRITICAL = Color.RED
PRIORITY_HIGH = Color.LIGHT_RED
PRIORITY_MEDIUM = Color.YELLOW
PRIORITY_LOW = Color.WHITE

POINTS_1 = Color.CYAN
POINTS_2 = Color.GREEN
POINTS_3 = Color.YELLOW
POINTS_4 = Color.LIGHT_MAGENTA
POINTS_5 = Color.RED

STATUS_ACTIVE = Color.GREEN
STATUS_PLANNING = Color.YELLOW
STATUS_COMPLETED = Color.GRAY
STATUS_CANCELLED = Color.RED

POPUP_BG = Color.BLACK
ERROR_COLOR = Color.RED

_PRIORITY_COLORS = {
    CardPriority.CRITICAL: PRIORITY_CRITICAL,
    CardPriority.HIGH: PRIORITY_HIGH,
    CardPriority.MEDIUM: PRIORITY_MEDIUM,
    CardPriority.LOW: PRIORITY_LOW,
}

_POINTS_COLORS = {1: POINTS_1, 2: POINTS_2, 3: POINTS_3, 4: POINTS_4, 5: POINTS_5}

_SPRINT_STATUS_COLORS = {
    SprintStatus.ACTIVE: STATUS_ACTIVE,
    SprintStatus.PLANNING: STATUS_PLANNING,
    SprintStatus.COMPLETED: STATUS_COMPLETED,
    SprintStatus.CANCELLED: STATUS_CANCELLED,
}


def focused_border() -> Style:
    return Style().fg(FOCUSED_BORDER)


def unfocused_border() -> Style:
    return Style().fg(UNFOCUSED_BORDER)


def selected_item(focused: bool) -> Style:
    return Style().bg(SELECTED_BG) if focused else Style()


def active_item() -> Style:
    return Style().fg(ACTIVE_ITEM).add_modifier(Modifier.BOLD)


def done_text() -> Style:
    return Style().fg(DONE_TEXT).add_modifier(Modifier.CROSSED_OUT)


def normal_text() -> Style:
    return Style().fg(NORMAL_TEXT)


def label_text() -> Style:
    return Style().fg(LABEL_TEXT)


def highlight_text() -> Style:
    return Style().fg(HIGHLIGHT_TEXT)


def bold_highlight() -> Style:
    return Style().fg(HIGHLIGHT_TEXT).add_modifier(Modifier.BOLD)


def priority_style(priority: CardPriority) -> Style:
    return Style().fg(_PRIORITY_COLORS[priority])


def points_style(points: int) -> Style:
    return Style().fg(_POINTS_COLORS.get(points, NORMAL_TEXT)).add_modifier(Modifier.BOLD)


def sprint_status_style(status: SprintStatus) -> Style:
    return Style().fg(_SPRINT_STATUS_COLORS[status])


def popup_bg() -> Style:
    return Style().bg(POPUP_BG)