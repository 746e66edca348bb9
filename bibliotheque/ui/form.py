"""Transient text-field buffers for the form screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

from bibliotheque.ui import keys
from bibliotheque.ui.keys import KeyEvent


class TextInput:
    """A labelled, single-line editable value backed by a prompt_toolkit Buffer."""

    def __init__(self, label: str, value: str = "") -> None:
        self.label = label
        self.buffer = Buffer(document=Document(value), multiline=False)

    @property
    def value(self) -> str:
        return self.buffer.text

    @property
    def cursor(self) -> int:
        return self.buffer.cursor_position

    def __repr__(self) -> str:
        return f"TextInput(label={self.label!r}, value={self.value!r}, cursor={self.cursor})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextInput):
            return NotImplemented
        return (self.label, self.value, self.cursor) == (other.label, other.value, other.cursor)

    def handle_key(self, key: KeyEvent) -> bool:
        """Apply an editing key. Returns False when the key is not an editing key."""
        buffer = self.buffer
        if key.is_char and not key.ctrl:
            buffer.insert_text(key.code)
        elif key.code == keys.BACKSPACE:
            buffer.delete_before_cursor()
        elif key.code == keys.DELETE:
            buffer.delete()
        elif key.code == keys.LEFT:
            buffer.cursor_left()
        elif key.code == keys.RIGHT:
            buffer.cursor_right()
        elif key.code == keys.HOME:
            buffer.cursor_position += buffer.document.get_start_of_line_position()
        elif key.code == keys.END:
            buffer.cursor_position += buffer.document.get_end_of_line_position()
        else:
            return False
        return True


@dataclass
class FormState:
    fields: List[TextInput] = field(default_factory=list)
    focused: int = 0

    @classmethod
    def with_labels(cls, labels: Sequence[str]) -> "FormState":
        return cls(fields=[TextInput(label) for label in labels])

    def values(self) -> List[str]:
        return [f.value for f in self.fields]

    def is_complete(self) -> bool:
        """True when no field is blank after trimming."""
        return not any(not v.strip() for v in self.values())

    def focus_next(self) -> None:
        if self.fields:
            self.focused = (self.focused + 1) % len(self.fields)

    def focus_prev(self) -> None:
        if self.fields:
            self.focused = (self.focused - 1) % len(self.fields)

    def handle_key(self, key: KeyEvent) -> bool:
        """Cycle focus or edit the focused field. Returns True when focus moved."""
        if key.code in (keys.TAB, keys.DOWN):
            self.focus_next()
            return True
        if key.code in (keys.BACKTAB, keys.UP):
            self.focus_prev()
            return True
        if self.fields:
            self.fields[self.focused].handle_key(key)
        return False
