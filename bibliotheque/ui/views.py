"""Declarative description of what the current screen shows.

The renderer receives a :class:`View` and draws it; nothing in the core reads
back from the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bibliotheque.config import settings
from bibliotheque.library import Library
from bibliotheque.ui import screens as s

MENU = "menu"
FORM = "form"
LIST = "list"
MESSAGE = "message"

# row tags
TAG_AVAILABLE = "available"
TAG_BORROWED = "borrowed"
TAG_AUTHOR = "author"
TAG_AUTHOR_BOOK = "author_book"
TAG_MISSING = "missing"
TAG_BLANK = "blank"
TAG_EMPTY = "empty"
TAG_MENU = "menu"


@dataclass
class Row:
    text: str
    tag: str = ""
    selected: bool = False


@dataclass
class FieldView:
    label: str
    value: str
    cursor: int
    focused: bool


@dataclass
class View:
    kind: str
    title: str
    rows: List[Row] = field(default_factory=list)
    fields: List[FieldView] = field(default_factory=list)
    body: str = ""
    is_error: bool = False
    help: List[Tuple[str, str]] = field(default_factory=list)


LIST_HELP = [("↑/↓", "Naviguer"), ("PgUp/PgDn", "Défiler"), ("Esc", "Retour")]


def book_rows(library: Library) -> List[Row]:
    rows = []
    for book in library.list_books():
        status = "● Emprunté" if book.borrowed else "○ Disponible"
        title = book.title or "(titre inconnu)"
        rows.append(Row(
            f"#{book.id} - {title} ({book.year}) - Auteur ID: {book.author_id} {status}",
            TAG_BORROWED if book.borrowed else TAG_AVAILABLE,
        ))
    return rows


def author_rows(library: Library) -> List[Row]:
    """One header per author, one row per referenced book, then a blank separator."""
    rows = []
    for author in library.list_authors():
        rows.append(Row(
            f"#{author.id} - {author.full_name} ({len(author.book_ids)} livre(s))",
            TAG_AUTHOR,
        ))
        for book_id in author.book_ids:
            book = library.find_book(book_id)
            if book is None:
                rows.append(Row(f" └─ Livre ID {book_id} (non trouvé)", TAG_MISSING))
            else:
                rows.append(Row(f" └─ {book.title or '(titre inconnu)'} ({book.year})", TAG_AUTHOR_BOOK))
        rows.append(Row("", TAG_BLANK))
    return rows


def row_count(screen: s.ListScreen, library: Library) -> int:
    if isinstance(screen, s.ListBooks):
        return len(library.list_books())
    if isinstance(screen, s.ListAuthors):
        return len(author_rows(library))
    s.unknown_screen(screen)


def _visible(rows: List[Row], selected: int, offset: int, visible_lines: int) -> List[Row]:
    for index, row in enumerate(rows):
        row.selected = index == selected
    return rows[offset:offset + visible_lines]


def _form_view(title: str, form, submit_label: str) -> View:
    fields = [
        FieldView(f.label, f.value, f.cursor, index == form.focused)
        for index, f in enumerate(form.fields)
    ]
    help_items = [("Enter", submit_label), ("Esc", "Annuler")]
    if len(fields) > 1:
        help_items.insert(0, ("Tab", "Champ suivant"))
    return View(FORM, title, fields=fields, help=help_items)


def build_view(screen: s.Screen, library: Library, visible_lines: Optional[int] = None) -> View:
    visible_lines = visible_lines or settings.visible_lines

    if isinstance(screen, s.MainMenu):
        rows = [Row(label, TAG_MENU, index == screen.state.selected) for index, (_, label) in enumerate(s.MENU_ITEMS)]
        return View(MENU, settings.app_name, rows=rows,
                    help=[("↑/↓", "Naviguer"), ("Enter", "Choisir"), ("Esc", "Quitter")])
    if isinstance(screen, s.AddBook):
        return _form_view("📚 Ajouter un livre", screen.form, "Ajouter")
    if isinstance(screen, s.AddAuthor):
        return _form_view("✍️  Ajouter un auteur", screen.form, "Ajouter")
    if isinstance(screen, s.BorrowBook):
        return _form_view("✋ Emprunter un livre", screen.form, "Emprunter")
    if isinstance(screen, s.ReturnBook):
        return _form_view("📥 Retourner un livre", screen.form, "Retourner")
    if isinstance(screen, s.ListBooks):
        rows = book_rows(library)
        if not rows:
            return View(LIST, "📖 Liste des livres", rows=[Row("Aucun livre dans la bibliothèque", TAG_EMPTY)],
                        help=LIST_HELP)
        state = screen.state
        return View(LIST, "📖 Liste des livres",
                    rows=_visible(rows, state.selected, state.scroll_offset, visible_lines), help=LIST_HELP)
    if isinstance(screen, s.ListAuthors):
        rows = author_rows(library)
        if not rows:
            return View(LIST, "👥 Liste des auteurs", rows=[Row("Aucun auteur dans la bibliothèque", TAG_EMPTY)],
                        help=LIST_HELP)
        state = screen.state
        return View(LIST, "👥 Liste des auteurs",
                    rows=_visible(rows, state.selected, state.scroll_offset, visible_lines), help=LIST_HELP)
    if isinstance(screen, s.Message):
        return View(MESSAGE, screen.title, body=screen.body, is_error=screen.is_error,
                    help=[("Enter", "Fermer"), ("Esc", "Fermer")])
    s.unknown_screen(screen)
