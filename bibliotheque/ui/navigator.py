"""Navigation history: a stack of screens that is never empty."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from bibliotheque.ui.screens import MainMenu, Screen

logger = logging.getLogger(__name__)


class Navigator:
    """Stack of screens; the top one is the visible, interactive screen.

    The stack starts as ``[MainMenu]`` and ``pop`` refuses to remove the last
    screen, so ``current`` always has something to return.
    """

    def __init__(self, root: Optional[Screen] = None) -> None:
        self._stack: List[Screen] = [root if root is not None else MainMenu()]

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def screens(self) -> Tuple[Screen, ...]:
        return tuple(self._stack)

    def current(self) -> Screen:
        if not self._stack:
            raise AssertionError("Screen stack should never be empty")
        return self._stack[-1]

    def push(self, screen: Screen) -> None:
        self._stack.append(screen)
        logger.debug(f"push {type(screen).__name__} (depth={len(self._stack)})")

    def pop(self) -> None:
        if len(self._stack) > 1:
            screen = self._stack.pop()
            logger.debug(f"pop {type(screen).__name__} (depth={len(self._stack)})")

    def replace(self, screen: Screen) -> None:
        """Swap the top screen for ``screen``."""
        if self._stack:
            self._stack.pop()
        self._stack.append(screen)
        logger.debug(f"replace top with {type(screen).__name__} (depth={len(self._stack)})")
