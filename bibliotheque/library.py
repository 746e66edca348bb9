import json
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Any, Iterator, List, Optional, Tuple

from bibliotheque.author import Author
from bibliotheque.book import Book
from bibliotheque.errors import (
    AlreadyBorrowedError,
    NotBorrowedError,
    NotFoundError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


class Library:
    """Owns the book and author collections and their JSON persistence."""

    def __init__(self, books: Optional[List[Book]] = None, authors: Optional[List[Author]] = None) -> None:
        self._books: List[Book] = list(books or [])
        self._authors: List[Author] = list(authors or [])

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Append a book. Ids are not checked for duplicates."""
        self._books.append(book)
        logger.info(f"Book added: id={book.id}, title={book.title!r}")

    def add_author(self, author: Author) -> None:
        self._authors.append(author)
        logger.info(f"Author added: id={author.id}, name={author.full_name!r}")

    def borrow(self, book_id: int) -> None:
        book = self._require_book(book_id)
        if book.borrowed:
            raise AlreadyBorrowedError(book_id)
        book.borrowed = True
        logger.info(f"Book {book_id} borrowed")

    def return_book(self, book_id: int) -> None:
        book = self._require_book(book_id)
        if not book.borrowed:
            raise NotBorrowedError(book_id)
        book.borrowed = False
        logger.info(f"Book {book_id} returned")

    def associate(self, book_id: int, author_id: int) -> None:
        """Record ``book_id`` on the author. Linking the same book twice appends twice."""
        self._require_book(book_id)
        author = self.find_author(author_id)
        if author is None:
            raise NotFoundError("auteur", author_id)
        author.add_book_id(book_id)
        logger.info(f"Book {book_id} associated with author {author_id}")

    def list_books(self) -> Tuple[Book, ...]:
        return tuple(self._books)

    def list_authors(self) -> Tuple[Author, ...]:
        return tuple(self._authors)

    def find_book(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def find_author(self, author_id: int) -> Optional[Author]:
        for author in self._authors:
            if author.id == author_id:
                return author
        return None

    def get_statistics(self) -> Dict[str, Any]:
        borrowed = sum(1 for book in self._books if book.borrowed)
        return {
            "total_books": len(self._books),
            "borrowed_books": borrowed,
            "available_books": len(self._books) - borrowed,
            "total_authors": len(self._authors),
        }

    def _require_book(self, book_id: int) -> Book:
        book = self.find_book(book_id)
        if book is None:
            raise NotFoundError("livre", book_id)
        return book

    # ------------------------- Persistence ------------------------- #
    def save(self, path: str) -> None:
        """Write the author collection to ``path``.

        Books are not written as a collection of their own; they are only
        reachable through each author's ``livres`` ids.
        """
        payload = [author.to_dict() for author in self._authors]
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save library to {path}: {e}")
            raise PersistenceError(str(e)) from e
        logger.info(f"Library saved to {path} ({len(payload)} authors)")

    @classmethod
    def load(cls, path: str) -> "Library":
        """Build a new Library from the document at ``path``.

        The book collection is rebuilt from the ids listed by the authors, so
        a book no author references does not survive a save/load round trip.
        Ids carry no title or year: such books come back as placeholders.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read library from {path}: {e}")
            raise PersistenceError(str(e)) from e

        if not isinstance(data, list):
            raise PersistenceError(f"{path}: un tableau d'auteurs est attendu")

        authors: List[Author] = []
        books: List[Book] = []
        seen: set = set()
        try:
            for entry in data:
                authors.append(Author.from_dict(entry))
                for item in entry.get("livres", []) or []:
                    if isinstance(item, dict):
                        book = Book.from_dict(item)
                    else:
                        book = Book(id=int(item), title="", author_id=int(entry["id"]), year=0)
                    # one book per id, even when an author lists it more than once
                    if book.id in seen:
                        continue
                    seen.add(book.id)
                    books.append(book)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed library document {path}: {e!r}")
            raise PersistenceError(f"{path}: document invalide ({e})") from e

        logger.info(f"Library loaded from {path} ({len(authors)} authors, {len(books)} books)")
        return cls(books=books, authors=authors)


class SharedLibrary:
    """The single long-lived handle on the Library.

    Every access is a short exclusive section taken through :meth:`access`;
    screens never keep a reference to the Library itself.
    """

    def __init__(self, library: Optional[Library] = None) -> None:
        self._library = library if library is not None else Library()
        self._lock = threading.Lock()

    @contextmanager
    def access(self) -> Iterator[Library]:
        with self._lock:
            yield self._library

    def replace(self, library: Library) -> None:
        """Swap in a whole new Library (used after a successful load)."""
        with self._lock:
            self._library = library
