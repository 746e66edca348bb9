"""Turns one key event into a local screen change or an action for the App."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Type, Union

from bibliotheque.config import settings
from bibliotheque.library import SharedLibrary
from bibliotheque.ui import keys
from bibliotheque.ui import screens as s
from bibliotheque.ui.keys import KeyEvent
from bibliotheque.ui.navigator import Navigator
from bibliotheque.ui.views import row_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Load:
    pass


@dataclass(frozen=True)
class Navigate:
    target: Type


@dataclass
class Submit:
    values: List[str]


Action = Union[Quit, Save, Load, Navigate, Submit]

MENU_ACTIONS = {
    "add_author": Navigate(s.AddAuthor),
    "add_book": Navigate(s.AddBook),
    "list_books": Navigate(s.ListBooks),
    "borrow_book": Navigate(s.BorrowBook),
    "return_book": Navigate(s.ReturnBook),
    "list_authors": Navigate(s.ListAuthors),
    "save": Save(),
    "load": Load(),
    "quit": Quit(),
}


def is_quit_chord(key: KeyEvent) -> bool:
    return key.ctrl and key.code == "c"


class Dispatcher:
    def __init__(self, page_size: Optional[int] = None, visible_lines: Optional[int] = None) -> None:
        self.page_size = page_size or settings.page_size
        self.visible_lines = visible_lines or settings.visible_lines

    def dispatch(self, key: KeyEvent, navigator: Navigator, shared: SharedLibrary) -> Optional[Action]:
        # Global keys first: quit chord, Esc, Enter on a message.
        if is_quit_chord(key):
            return Quit()

        current = navigator.current()
        if key.code == keys.ESC:
            if isinstance(current, s.Message) or len(navigator) > 1:
                navigator.pop()
                return None
            return Quit()

        if key.code == keys.ENTER and isinstance(current, s.Message):
            navigator.pop()
            return None

        if isinstance(current, s.MainMenu):
            return self._main_menu(current, key)
        if isinstance(current, (s.AddBook, s.AddAuthor, s.BorrowBook, s.ReturnBook)):
            return self._form(current, key)
        if isinstance(current, (s.ListBooks, s.ListAuthors)):
            with shared.access() as library:
                count = row_count(current, library)
            current.state.handle_key(key, count, self.page_size, self.visible_lines)
            return None
        if isinstance(current, s.Message):
            return None
        s.unknown_screen(current)

    def _main_menu(self, screen: s.MainMenu, key: KeyEvent) -> Optional[Action]:
        state = screen.state
        if key.code in (keys.DOWN, "j"):
            state.move_down(len(s.MENU_ITEMS))
        elif key.code in (keys.UP, "k"):
            state.move_up(len(s.MENU_ITEMS))
        elif key.code == keys.ENTER:
            name = s.MENU_ITEMS[state.selected][0]
            logger.debug(f"menu item selected: {name}")
            return MENU_ACTIONS[name]
        return None

    def _form(self, screen: s.FormScreen, key: KeyEvent) -> Optional[Action]:
        form = screen.form
        if key.code == keys.ENTER and not key.shift and form.is_complete():
            return Submit(form.values())
        form.handle_key(key)
        return None
