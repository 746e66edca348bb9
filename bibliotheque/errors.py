"""Failures raised by the library store and surfaced by the application as messages."""

from __future__ import annotations

from typing import Optional, Sequence


class LibraryError(Exception):
    """Base class for every user-recoverable library failure."""


class NotFoundError(LibraryError, LookupError):
    def __init__(self, kind: str, item_id: int) -> None:
        self.kind = kind
        self.item_id = item_id
        noun = "Livre" if kind == "livre" else "Auteur"
        super().__init__(f"{noun} non trouvé (ID {item_id})")


class AlreadyBorrowedError(LibraryError):
    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__("Ce livre est déjà emprunté")


class NotBorrowedError(LibraryError):
    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__("Ce livre n'est pas emprunté")


class ValidationEmptyError(LibraryError, ValueError):
    def __init__(self, labels: Sequence[str], message: Optional[str] = None) -> None:
        self.labels = list(labels)
        if message is None:
            message = ", ".join(f"Le champ '{label}' ne peut pas être vide" for label in self.labels)
        super().__init__(message)


class PersistenceError(LibraryError, OSError):
    """Save or load failed; the message embeds the underlying error."""
