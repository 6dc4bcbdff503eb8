"""Plain renderable pieces of the interface: styled spans, lines, bordered panels and popups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from kanbantui.theme import Style, focused_border, popup_bg, unfocused_border


@dataclass(frozen=True)
class Span:
    """A run of text drawn in one style."""

    content: str
    style: Style = field(default_factory=Style)

    def __len__(self) -> int:
        return len(self.content)


@dataclass
class Line:
    """A row of styled spans."""

    spans: list[Span] = field(default_factory=list)

    @classmethod
    def plain(cls, content: str = "", style: Style | None = None) -> Line:
        """A line made of a single span; an empty line when no text is given."""
        if not content:
            return cls()
        return cls([Span(content, style if style is not None else Style())])

    @classmethod
    def of(cls, spans: Iterable[Span]) -> Line:
        return cls(list(spans))

    def __len__(self) -> int:
        return sum(len(span) for span in self.spans)

    def text(self) -> str:
        """The line's characters without styling."""
        return "".join(span.content for span in self.spans)


def _lines_text(lines: Iterable[Line]) -> list[str]:
    return [line.text() for line in lines]


@dataclass
class Panel:
    """A bordered box with a title; focused panels show their focus title and border."""

    title: str
    lines: list[Line] = field(default_factory=list)
    focused: bool = False
    focus_title: str | None = None
    style: Style = field(default_factory=Style)

    @property
    def display_title(self) -> str:
        if self.focused and self.focus_title is not None:
            return self.focus_title
        return self.title

    @property
    def border_style(self) -> Style:
        return focused_border() if self.focused else unfocused_border()

    def text(self) -> str:
        """The title followed by the content lines, one per row."""
        return "\n".join([self.display_title, *_lines_text(self.lines)])


@dataclass
class Popup:
    """A box drawn centred over the screen, sized as percentages of it."""

    title: str
    lines: list[Line] = field(default_factory=list)
    width_percent: int = 60
    height_percent: int = 50
    label: Line | None = None
    style: Style = field(default_factory=popup_bg)

    def text(self) -> str:
        """The title, the label if any, then the content lines, one per row."""
        rows = [self.title]
        if self.label is not None:
            rows.append(self.label.text())
        rows.extend(_lines_text(self.lines))
        return "\n".join(rows)