from __future__ import annotations


class Book:
    """A single book held by the library."""

    def __init__(self, id: int, title: str, author_id: int, year: int, borrowed: bool = False) -> None:
        self.id = id
        self.title = title.strip()
        self.author_id = author_id
        self.year = year
        self.borrowed = borrowed

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        status = "Emprunté" if self.borrowed else "Disponible"
        return f"#{self.id} - {self.title} par {self.author_id} ({self.year}) - {status}"

    def __repr__(self) -> str:
        return (f"Book(id={self.id!r}, title={self.title!r}, author_id={self.author_id!r}, "
                f"year={self.year!r}, borrowed={self.borrowed!r})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author_id": self.author_id,
            "year": self.year,
            "borrowed": self.borrowed,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        # Accept both the English keys and the embedded format written by
        # older versions of the application (titre/auteur_id/annee/emprunte).
        return Book(
            id=int(data["id"]),
            title=data.get("title", data.get("titre", "")),
            author_id=int(data.get("author_id", data.get("auteur_id", 0))),
            year=int(data.get("year", data.get("annee", 0))),
            borrowed=bool(data.get("borrowed", data.get("emprunte", False))),
        )
