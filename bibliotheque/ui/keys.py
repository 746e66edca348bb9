"""Terminal-independent key events and their translation from prompt_toolkit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

CTRL = "ctrl"
SHIFT = "shift"

ENTER = "enter"
ESC = "esc"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
HOME = "home"
END = "end"
PAGE_UP = "pageup"
PAGE_DOWN = "pagedown"
TAB = "tab"
BACKTAB = "backtab"
BACKSPACE = "backspace"
DELETE = "delete"


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a named key (``enter``, ``up`` ...) or a single character."""

    code: str
    modifiers: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_char(self) -> bool:
        return len(self.code) == 1

    @property
    def ctrl(self) -> bool:
        return CTRL in self.modifiers

    @property
    def shift(self) -> bool:
        return SHIFT in self.modifiers

    @classmethod
    def char(cls, c: str) -> "KeyEvent":
        return cls(c)

    @classmethod
    def with_ctrl(cls, code: str) -> "KeyEvent":
        return cls(code, frozenset({CTRL}))


_NAMED_KEYS = {
    Keys.Escape: ESC,
    Keys.ControlM: ENTER,
    Keys.ControlJ: ENTER,
    Keys.ControlI: TAB,
    Keys.BackTab: BACKTAB,
    Keys.Up: UP,
    Keys.Down: DOWN,
    Keys.Left: LEFT,
    Keys.Right: RIGHT,
    Keys.Home: HOME,
    Keys.End: END,
    Keys.PageUp: PAGE_UP,
    Keys.PageDown: PAGE_DOWN,
    Keys.ControlH: BACKSPACE,
    Keys.Delete: DELETE,
}

# keys bound explicitly so they win over prompt_toolkit's default bindings
BOUND_KEYS = tuple(_NAMED_KEYS) + (Keys.ControlC,)


def from_key_press(key_press: KeyPress) -> Optional[KeyEvent]:
    """Translate a prompt_toolkit KeyPress, or return None for keys the UI ignores."""
    key = key_press.key
    if isinstance(key, Keys):
        if key in _NAMED_KEYS:
            return KeyEvent(_NAMED_KEYS[key])
        if key == Keys.ControlC:
            return KeyEvent.with_ctrl("c")
        return None
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return KeyEvent.char(key)
    return None
