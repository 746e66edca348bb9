from __future__ import annotations

from typing import List, Optional


class Author:
    """An author and the ids of the books associated with them.

    ``book_ids`` is a back-reference: it only ever stores ids, the books
    themselves stay owned by the library's book collection.
    """

    def __init__(self, id: int, first_name: str, last_name: str, book_ids: Optional[List[int]] = None) -> None:
        self.id = id
        self.first_name = first_name.strip()
        self.last_name = last_name.strip()
        self.book_ids: List[int] = list(book_ids or [])

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_book_id(self, book_id: int) -> None:
        self.book_ids.append(book_id)

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"Auteur #{self.id} - {self.full_name}"

    def __repr__(self) -> str:
        return (f"Author(id={self.id!r}, first_name={self.first_name!r}, "
                f"last_name={self.last_name!r}, book_ids={self.book_ids!r})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        # Persisted layout: {id, prenom, nom, livres}
        return {
            "id": self.id,
            "prenom": self.first_name,
            "nom": self.last_name,
            "livres": list(self.book_ids),
        }

    @staticmethod
    def from_dict(data: dict) -> "Author":
        livres = data.get("livres", []) or []
        book_ids = [int(item["id"]) if isinstance(item, dict) else int(item) for item in livres]
        return Author(
            id=int(data["id"]),
            first_name=data["prenom"],
            last_name=data["nom"],
            book_ids=book_ids,
        )
