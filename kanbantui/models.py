"""Domain objects shown and ordered by the interface: boards, columns, cards and sprints."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CardPriority(enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class CardStatus(enum.Enum):
    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    BLOCKED = "Blocked"
    DONE = "Done"


class SprintStatus(enum.Enum):
    PLANNING = "Planning"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class TaskListView(enum.Enum):
    FLAT = "Flat"
    GROUPED_BY_COLUMN = "GroupedByColumn"
    COLUMN_VIEW = "ColumnView"


class SortField(enum.Enum):
    POINTS = "Points"
    PRIORITY = "Priority"
    CREATED_AT = "CreatedAt"
    UPDATED_AT = "UpdatedAt"
    STATUS = "Status"
    DEFAULT = "Default"


class SortOrder(enum.Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"


@dataclass
class Board:
    """A project holding columns, cards and sprints."""

    name: str
    description: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    branch_prefix: str | None = None
    sprint_prefix: str | None = None
    sprint_duration_days: int | None = None
    sprint_names: list[str] = field(default_factory=list)
    sprint_name_used_count: int = 0
    active_sprint_id: uuid.UUID | None = None
    task_sort_field: SortField = SortField.DEFAULT
    task_sort_order: SortOrder = SortOrder.ASCENDING
    task_list_view: TaskListView = TaskListView.FLAT
    next_card_number: int = 1
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class Column:
    """A column of a board."""

    board_id: uuid.UUID
    name: str
    position: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    wip_limit: int | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class Card:
    """A task living in a column."""

    column_id: uuid.UUID
    title: str
    position: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    description: str | None = None
    priority: CardPriority = CardPriority.MEDIUM
    status: CardStatus = CardStatus.TODO
    due_date: datetime | None = None
    points: int | None = None
    card_number: int = 0
    sprint_id: uuid.UUID | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def create(cls, board: Board, column_id: uuid.UUID, title: str, position: int) -> Card:
        """Create a card numbered from the board's counter, advancing the counter."""
        number = board.next_card_number
        board.next_card_number += 1
        board.updated_at = _now()
        return cls(column_id=column_id, title=title, position=position, card_number=number)

    def update_priority(self, priority: CardPriority) -> None:
        self.priority = priority
        self.updated_at = _now()


@dataclass
class Sprint:
    """A time box of work on a board."""

    board_id: uuid.UUID
    sprint_number: int
    name_index: int | None = None
    status: SprintStatus = SprintStatus.PLANNING
    start_date: datetime | None = None
    end_date: datetime | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def get_name(self, board: Board) -> str | None:
        """The sprint's name taken from the board's name list, if it has one."""
        if self.name_index is None or not 0 <= self.name_index < len(board.sprint_names):
            return None
        return board.sprint_names[self.name_index]

    def formatted_name(self, board: Board, prefix: str) -> str:
        base = f"{prefix}-{self.sprint_number}"
        name = self.get_name(board)
        return f"{base}/{name}" if name else base

    def is_ended(self) -> bool:
        return self.end_date is not None and _now() > self.end_date