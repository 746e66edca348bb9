"""Selection cursor and scroll window for the list screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bibliotheque.config import settings
from bibliotheque.ui import keys
from bibliotheque.ui.keys import KeyEvent


@dataclass
class ListState:
    selected: int = 0
    scroll_offset: int = 0

    def move_down(self, count: int) -> None:
        if count:
            self.selected = (self.selected + 1) % count

    def move_up(self, count: int) -> None:
        if count:
            self.selected = (self.selected - 1) % count

    def page_down(self, count: int, page_size: int) -> None:
        if count:
            self.selected = min(self.selected + page_size, count - 1)

    def page_up(self, page_size: int) -> None:
        self.selected = max(self.selected - page_size, 0)

    def keep_visible(self, visible_lines: int) -> None:
        if self.selected >= self.scroll_offset + visible_lines:
            self.scroll_offset = max(self.selected - (visible_lines - 1), 0)
        elif self.selected < self.scroll_offset:
            self.scroll_offset = self.selected

    def handle_key(self, key: KeyEvent, count: int, page_size: Optional[int] = None, visible_lines: Optional[int] = None) -> bool:
        """Move the selection over ``count`` rows. Returns True if the key was a navigation key."""
        if count == 0:
            return False
        page_size = page_size or settings.page_size
        visible_lines = visible_lines or settings.visible_lines

        if key.code in (keys.DOWN, "j"):
            self.move_down(count)
        elif key.code in (keys.UP, "k"):
            self.move_up(count)
        elif key.code == keys.PAGE_DOWN:
            self.page_down(count, page_size)
        elif key.code == keys.PAGE_UP:
            self.page_up(page_size)
        else:
            return False

        self.keep_visible(visible_lines)
        return True
