"""Predicates that decide which cards a view shows."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from typing import Protocol

from kanbantui.models import Card, Column


class CardFilter(Protocol):
    def matches(self, card: Card) -> bool: ...


class BoardFilter:
    """Matches cards whose column belongs to the given board."""

    def __init__(self, board_id: uuid.UUID, columns: Sequence[Column]) -> None:
        self.board_id = board_id
        self._column_ids = {col.id for col in columns if col.board_id == board_id}

    def matches(self, card: Card) -> bool:
        return card.column_id in self._column_ids