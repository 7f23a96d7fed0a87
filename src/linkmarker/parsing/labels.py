"""Reference label handling.

markdown-it resolves reference links whose label is defined and leaves the
others as plain text. :class:`UnresolvedReferenceScanner` walks that plain
text again to find the bracket constructs CommonMark would have treated as
reference links if a matching definition existed.

The scanner sees a flattened inline token stream as a sequence of
:class:`Cell` values. Only characters that came from ``text`` tokens are
*literal*; escapes, entities, code spans and raw HTML are opaque, so their
brackets never open or close a label. Resolved links and images are
*barriers* that reset the bracket stack.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MAX_LABEL_LENGTH = 999
_TASK_MARKERS = frozenset({" ", "x", "X"})


def normalize_label(label: str) -> str:
    """CommonMark label equivalence: trim, collapse whitespace, case-fold."""
    return " ".join(label.split()).casefold()


@dataclass(frozen=True)
class Cell:
    value: str
    literal: bool = False
    barrier: bool = False
    line: int = 1

    def is_bracket(self, bracket: str) -> bool:
        return self.literal and self.value == bracket


@dataclass(frozen=True)
class UnresolvedReference:
    position: int
    text: str
    label: str
    source: str
    image: bool
    line: int


def _is_valid_label(label: str) -> bool:
    return bool(label.strip()) and len(label) <= MAX_LABEL_LENGTH and not label.startswith("^")


def _join(cells: Sequence[Cell]) -> str:
    return "".join(cell.value for cell in cells)


class UnresolvedReferenceScanner:
    """Bracket state machine over one inline block's cells.

    Args:
        task_item: The cells open a list item, so a leading ``[ ]``/``[x]``
            is a task-list marker rather than a reference.
    """

    def __init__(self, *, task_item: bool = False) -> None:
        self._task_item = task_item

    def scan(self, cells: Sequence[Cell]) -> list[UnresolvedReference]:
        found: list[UnresolvedReference] = []
        openers: list[int] = []
        index = 0
        while index < len(cells):
            cell = cells[index]
            if cell.barrier:
                openers.clear()
            elif cell.is_bracket("["):
                openers.append(index)
            elif cell.is_bracket("]") and openers:
                start = openers.pop()
                reference = self._match(cells, start, index)
                if reference is not None:
                    found.append(reference)
                    if not reference.image:
                        # Links cannot contain links, so outer brackets are spent.
                        openers.clear()
                    index = self._end_of(cells, index)
            index += 1
        return found

    def _match(self, cells: Sequence[Cell], start: int, close: int) -> UnresolvedReference | None:
        inner = cells[start + 1 : close]
        if any(cell.is_bracket("[") or cell.is_bracket("]") for cell in inner):
            return None
        text = _join(inner)
        if self._is_task_marker(cells, start, close, text):
            return None

        image = start > 0 and cells[start - 1].is_bracket("!")
        prefix = "!" if image else ""
        label = text
        source = f"{prefix}[{text}]"

        second = self._second_label(cells, close)
        if second is not None:
            if second.strip():
                label = second
                source = f"{prefix}[{text}][{second}]"
            else:
                source = f"{prefix}[{text}][]"

        if not _is_valid_label(label):
            return None
        return UnresolvedReference(
            position=start - 1 if image else start,
            text=text,
            label=label,
            source=source,
            image=image,
            line=cells[start].line,
        )

    def _is_task_marker(self, cells: Sequence[Cell], start: int, close: int, text: str) -> bool:
        if not self._task_item or start != 0 or text not in _TASK_MARKERS:
            return False
        return close + 1 >= len(cells) or not cells[close + 1].value.strip()

    @staticmethod
    def _second_label(cells: Sequence[Cell], close: int) -> str | None:
        """Return the ``[label]`` text directly after *close*, if there is one."""
        end = UnresolvedReferenceScanner._second_label_end(cells, close)
        if end is None:
            return None
        return _join(cells[close + 2 : end])

    @staticmethod
    def _second_label_end(cells: Sequence[Cell], close: int) -> int | None:
        opener = close + 1
        if opener >= len(cells) or not cells[opener].is_bracket("["):
            return None
        for index in range(opener + 1, len(cells)):
            cell = cells[index]
            if cell.barrier or cell.is_bracket("["):
                return None
            if cell.is_bracket("]"):
                return index
        return None

    def _end_of(self, cells: Sequence[Cell], close: int) -> int:
        end = self._second_label_end(cells, close)
        return close if end is None else end
