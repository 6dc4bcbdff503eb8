"""Card orderings used by the task lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from kanbantui.models import Card, CardPriority, CardStatus, SortField, SortOrder

SortKey = Callable[[Card], Any]

_PRIORITY_VALUES = {
    CardPriority.CRITICAL: 3,
    CardPriority.HIGH: 2,
    CardPriority.MEDIUM: 1,
    CardPriority.LOW: 0,
}

_STATUS_VALUES = {
    CardStatus.DONE: 3,
    CardStatus.IN_PROGRESS: 2,
    CardStatus.BLOCKED: 1,
    CardStatus.TODO: 0,
}


def priority_value(priority: CardPriority) -> int:
    return _PRIORITY_VALUES[priority]


def status_value(status: CardStatus) -> int:
    return _STATUS_VALUES[status]


def _points_key(card: Card) -> tuple[bool, int]:
    # Cards with points come before cards without.
    return (card.points is None, card.points or 0)


_SORT_KEYS: dict[SortField, SortKey] = {
    SortField.POINTS: _points_key,
    SortField.PRIORITY: lambda card: priority_value(card.priority),
    SortField.CREATED_AT: lambda card: card.created_at,
    SortField.UPDATED_AT: lambda card: card.updated_at,
    SortField.STATUS: lambda card: status_value(card.status),
    SortField.DEFAULT: lambda card: card.card_number,
}


def get_sorter_for_field(field: SortField) -> SortKey:
    """The ascending sort key for a sort field."""
    return _SORT_KEYS[field]


@dataclass(frozen=True)
class OrderedSorter:
    """A sort key applied in a given direction; equal cards keep their order."""

    key: SortKey
    order: SortOrder = SortOrder.ASCENDING

    def sort(self, cards: Iterable[Card]) -> list[Card]:
        return sorted(cards, key=self.key, reverse=self.order is SortOrder.DESCENDING)