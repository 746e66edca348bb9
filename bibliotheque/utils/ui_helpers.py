import os
import json
from typing import Any, Dict, Sequence
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from bibliotheque.author import Author
from bibliotheque.book import Book

# Environment variable controlling CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def print_books_result(books: Sequence[Book]) -> None:
    """Print books in the current output mode.
    - plain: '#id - title (year) - Auteur ID: n [status]' lines, or 'Aucun livre dans la bibliothèque'
    - json: array of book objects
    - rich: a Rich table
    """
    mode = get_output_mode()

    if not books:
        print("Aucun livre dans la bibliothèque")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📖 Livres", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Titre", style="white")
        table.add_column("Année", style="white")
        table.add_column("Auteur ID", style="white")
        table.add_column("Statut")
        for b in books:
            status = "[red]Emprunté[/]" if b.borrowed else "[green]Disponible[/]"
            table.add_row(str(b.id), b.title or "(titre inconnu)", str(b.year), str(b.author_id), status)
        _console.print(table)
    else:
        for b in books:
            status = "Emprunté" if b.borrowed else "Disponible"
            print(f"#{b.id} - {b.title or '(titre inconnu)'} ({b.year}) - Auteur ID: {b.author_id} [{status}]")

def print_authors_result(authors: Sequence[Author]) -> None:
    mode = get_output_mode()

    if not authors:
        print("Aucun auteur dans la bibliothèque")
        return

    if mode == "json":
        print(json.dumps([a.to_dict() for a in authors], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Auteurs", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Prénom", style="white")
        table.add_column("Nom", style="white")
        table.add_column("Livres", style="white")
        for a in authors:
            table.add_row(str(a.id), a.first_name, a.last_name, ", ".join(str(i) for i in a.book_ids))
        _console.print(table)
    else:
        for a in authors:
            print(f"#{a.id} - {a.full_name} ({len(a.book_ids)} livre(s))")

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print library statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("Aucune statistique disponible.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Livres:[/] {stats['total_books']}\n"
            f"[bold]Empruntés:[/] {stats['borrowed_books']}\n"
            f"[bold]Disponibles:[/] {stats['available_books']}\n"
            f"[bold]Auteurs:[/] {stats['total_authors']}"
        )
        _console.print(Panel.fit(content, title="📊 Statistiques", border_style="blue"))
    else:
        print(f"Livres: {stats['total_books']}")
        print(f"Empruntés: {stats['borrowed_books']}")
        print(f"Disponibles: {stats['available_books']}")
        print(f"Auteurs: {stats['total_authors']}")
