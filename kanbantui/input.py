"""Single-line text editing state with a cursor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InputState:
    """Text being typed and the cursor position within it."""

    buffer: str = ""
    cursor: int = 0

    def __str__(self) -> str:
        return self.buffer

    def insert_char(self, c: str) -> None:
        self.buffer = self.buffer[: self.cursor] + c + self.buffer[self.cursor :]
        self.cursor += 1

    def backspace(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
            self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]

    def delete(self) -> None:
        if self.cursor < len(self.buffer):
            self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]

    def move_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < len(self.buffer):
            self.cursor += 1

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.buffer)

    def clear(self) -> None:
        self.buffer = ""
        self.cursor = 0

    def set(self, text: str) -> None:
        """Replace the text and put the cursor at its end."""
        self.buffer = text
        self.cursor = len(text)

    def is_empty(self) -> bool:
        return not self.buffer