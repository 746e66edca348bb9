"""Screen variants shown by the application.

``Screen`` is a closed union: every place that handles screens checks each
variant in turn and ends with :func:`unknown_screen`, so a new variant has to
be added everywhere screens are matched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NoReturn, Tuple, Union

from bibliotheque.ui.form import FormState
from bibliotheque.ui.lists import ListState

ADD_BOOK_LABELS = ("ID", "Titre", "Auteur ID", "Année")
ADD_AUTHOR_LABELS = ("ID", "Prénom", "Nom")
BORROW_LABELS = ("ID du livre à emprunter",)
RETURN_LABELS = ("ID du livre à retourner",)

# (action key, label) in display order
MENU_ITEMS: Tuple[Tuple[str, str], ...] = (
    ("add_author", "✍️  Ajouter un auteur"),
    ("add_book", "📚 Ajouter un livre"),
    ("list_books", "📖 Lister les livres"),
    ("borrow_book", "✋ Emprunter un livre"),
    ("return_book", "📥 Retourner un livre"),
    ("list_authors", "👥 Lister les auteurs"),
    ("save", "💾 Sauvegarder"),
    ("load", "📂 Charger"),
    ("quit", "X - Quitter"),
)


@dataclass
class MainMenu:
    state: ListState = field(default_factory=ListState)


@dataclass
class AddBook:
    form: FormState = field(default_factory=lambda: FormState.with_labels(ADD_BOOK_LABELS))


@dataclass
class ListBooks:
    state: ListState = field(default_factory=ListState)


@dataclass
class BorrowBook:
    form: FormState = field(default_factory=lambda: FormState.with_labels(BORROW_LABELS))


@dataclass
class ReturnBook:
    form: FormState = field(default_factory=lambda: FormState.with_labels(RETURN_LABELS))


@dataclass
class AddAuthor:
    form: FormState = field(default_factory=lambda: FormState.with_labels(ADD_AUTHOR_LABELS))


@dataclass
class ListAuthors:
    state: ListState = field(default_factory=ListState)


@dataclass
class Message:
    title: str
    body: str
    is_error: bool = False


Screen = Union[MainMenu, AddBook, ListBooks, BorrowBook, ReturnBook, AddAuthor, ListAuthors, Message]

FormScreen = Union[AddBook, BorrowBook, ReturnBook, AddAuthor]
ListScreen = Union[ListBooks, ListAuthors]


def success(body: str) -> Message:
    return Message("Succès", body, is_error=False)


def warning(body: str) -> Message:
    return Message("Attention", body, is_error=False)


def error(body: str) -> Message:
    return Message("Erreur", body, is_error=True)


def unknown_screen(screen: object) -> NoReturn:
    raise AssertionError(f"Unhandled screen variant: {type(screen).__name__}")
