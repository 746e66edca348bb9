"""Coordinator: owns the navigator and the shared library, turns actions into store calls."""

from __future__ import annotations

import logging
from typing import List, Optional

from bibliotheque.author import Author
from bibliotheque.book import Book
from bibliotheque.config import settings
from bibliotheque.errors import LibraryError, NotFoundError, ValidationEmptyError
from bibliotheque.library import Library, SharedLibrary
from bibliotheque.ui import screens as s
from bibliotheque.ui.dispatcher import Action, Dispatcher, Load, Navigate, Quit, Save, Submit
from bibliotheque.ui.keys import KeyEvent
from bibliotheque.ui.navigator import Navigator
from bibliotheque.ui.views import View, build_view
from bibliotheque.utils.validators import IdValidator, TextValidator

logger = logging.getLogger(__name__)


class App:
    """Holds the only long-lived handle on the library.

    Screens and the dispatcher never report errors themselves: every store
    failure comes back here and is shown as a Message screen.
    """

    def __init__(self, shared: Optional[SharedLibrary] = None, data_file: Optional[str] = None,
                 dispatcher: Optional[Dispatcher] = None) -> None:
        self.shared = shared if shared is not None else SharedLibrary()
        self.data_file = data_file or settings.data_file
        self.dispatcher = dispatcher or Dispatcher()
        self.navigator = Navigator()
        self.should_quit = False

    # ------------------------- Event handling ------------------------- #
    def handle_key(self, key: KeyEvent) -> None:
        screen = self.navigator.current()
        action = self.dispatcher.dispatch(key, self.navigator, self.shared)
        if action is not None:
            self.perform(action, screen)

    def perform(self, action: Action, screen: s.Screen) -> None:
        if isinstance(action, Quit):
            logger.info("Quit requested")
            self.should_quit = True
        elif isinstance(action, Navigate):
            self.navigator.push(action.target())
        elif isinstance(action, Save):
            self.save()
        elif isinstance(action, Load):
            self.load()
        elif isinstance(action, Submit):
            self.submit(screen, action.values)
        else:
            raise AssertionError(f"Unhandled action: {action!r}")

    def submit(self, screen: s.Screen, values: List[str]) -> None:
        if isinstance(screen, s.AddBook):
            self.add_book(values)
        elif isinstance(screen, s.AddAuthor):
            self.add_author(values)
        elif isinstance(screen, s.BorrowBook):
            self.borrow_book(values[0])
        elif isinstance(screen, s.ReturnBook):
            self.return_book(values[0])
        else:
            raise AssertionError(f"Submit from a screen without a form: {type(screen).__name__}")

    def view(self) -> View:
        with self.shared.access() as library:
            return build_view(self.navigator.current(), library, self.dispatcher.visible_lines)

    # ------------------------- Domain actions ------------------------- #
    def add_book(self, values: List[str]) -> None:
        book_id = IdValidator.parse_or_default(values[0])
        title = values[1]
        author_id = IdValidator.parse_or_default(values[2])
        year = IdValidator.parse_or_default(values[3])

        if TextValidator.is_blank(title):
            self._show_error(ValidationEmptyError(["Titre"], "Le titre ne peut pas être vide!"))
            return

        association_error: Optional[NotFoundError] = None
        with self.shared.access() as library:
            library.add_book(Book(book_id, title, author_id, year))
            try:
                library.associate(book_id, author_id)
            except NotFoundError as e:
                association_error = e

        if association_error is None:
            self.navigator.replace(s.success("Livre ajouté et associé avec succès!"))
        else:
            logger.warning(f"Book {book_id} added without author: {association_error}")
            self.navigator.replace(s.warning(f"Livre ajouté mais: {association_error}"))

    def add_author(self, values: List[str]) -> None:
        author_id = IdValidator.parse_or_default(values[0])
        first_name, last_name = values[1], values[2]

        if TextValidator.is_blank(first_name) or TextValidator.is_blank(last_name):
            self._show_error(ValidationEmptyError(
                TextValidator.blank_labels(s.ADD_AUTHOR_LABELS[1:], [first_name, last_name]),
                "Le prénom et le nom ne peuvent pas être vides!",
            ))
            return

        with self.shared.access() as library:
            library.add_author(Author(author_id, first_name, last_name))
        self.navigator.replace(s.success("Auteur ajouté avec succès!"))

    def borrow_book(self, raw_id: str) -> None:
        self._book_transition(raw_id, Library.borrow, "Livre emprunté avec succès!")

    def return_book(self, raw_id: str) -> None:
        self._book_transition(raw_id, Library.return_book, "Livre retourné avec succès!")

    def _book_transition(self, raw_id: str, operation, success_text: str) -> None:
        # On failure the form stays under the message so the id can be corrected.
        try:
            book_id = IdValidator.parse(raw_id)
        except ValueError:
            logger.warning(f"Invalid book id entered: {raw_id!r}")
            self.navigator.push(s.error("ID invalide"))
            return

        try:
            with self.shared.access() as library:
                operation(library, book_id)
        except LibraryError as e:
            self._show_error(e, prefix="Erreur: ")
            return
        self.navigator.replace(s.success(success_text))

    # ------------------------- Persistence ------------------------- #
    def save(self) -> None:
        try:
            with self.shared.access() as library:
                library.save(self.data_file)
        except LibraryError as e:
            self._show_error(e, prefix="Erreur lors de la sauvegarde: ")
            return
        self.navigator.push(s.success(f"Bibliothèque sauvegardée dans {self.data_file}"))

    def load(self) -> None:
        try:
            library = Library.load(self.data_file)
        except LibraryError as e:
            self._show_error(e, prefix="Erreur lors du chargement: ")
            return
        self.shared.replace(library)
        self.navigator.push(s.success(f"Bibliothèque chargée depuis {self.data_file}"))

    def _show_error(self, error: LibraryError, prefix: str = "") -> None:
        logger.error(f"{type(error).__name__}: {error}")
        self.navigator.push(s.error(f"{prefix}{error}"))
