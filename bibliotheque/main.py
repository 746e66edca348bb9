import logging
import os
from typing import Optional

import typer
from prompt_toolkit import Application
from prompt_toolkit.application.current import get_app
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.layout import Layout

from bibliotheque.app import App
from bibliotheque.config import settings
from bibliotheque.errors import PersistenceError
from bibliotheque.library import Library
from bibliotheque.ui.keys import BOUND_KEYS, from_key_press
from bibliotheque.ui.render import to_ansi
from bibliotheque.utils.ui_helpers import (
    set_output_mode,
    print_books_result,
    print_authors_result,
    print_stats_result,
)

logger = logging.getLogger(__name__)

ESCAPE_FLUSH_DELAY = 0.05


def configure_logging() -> None:
    logging.basicConfig(
        filename=settings.log_file,
        level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# --- Interactive terminal UI ---
def build_application(app_state: App, **kwargs) -> Application:
    """Full-screen prompt_toolkit Application drawing the App's current view."""
    kb = KeyBindings()

    def handle(event) -> None:
        if app_state.should_quit:
            return
        key = from_key_press(event.key_sequence[0])
        if key is None:
            return
        app_state.handle_key(key)
        if app_state.should_quit:
            event.app.exit()

    for bound in BOUND_KEYS:
        kb.add(bound, eager=bound == Keys.Escape)(handle)
    kb.add(Keys.Any)(handle)

    def get_text():
        size = get_app().output.get_size()
        return ANSI(to_ansi(app_state.view(), size.columns, size.rows))

    application = Application(
        layout=Layout(Window(FormattedTextControl(get_text, focusable=True), wrap_lines=False)),
        key_bindings=kb,
        full_screen=True,
        mouse_support=False,
        **kwargs,
    )
    # a lone Escape is delivered once no further byte arrives within this delay
    application.ttimeoutlen = ESCAPE_FLUSH_DELAY
    return application


def run_tui() -> None:
    configure_logging()
    logger.info(f"Starting {settings.app_name} (data file: {settings.data_file})")
    app_state = App(data_file=settings.data_file)
    build_application(app_state).run()
    logger.info("Bye")


# --- Typer CLI ---
app = typer.Typer(help="Bibliothèque: gestion de livres et d'auteurs dans le terminal")

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Format de sortie: plain | json | rich (par défaut: plain)",
    ),
    data_file: Optional[str] = typer.Option(
        None,
        "--data-file",
        "-d",
        help="Fichier JSON de la bibliothèque (par défaut: bibliotheque.json)",
    ),
):
    """Sans commande, lance l'interface interactive."""
    if output:
        set_output_mode(output)
    if data_file:
        settings.data_file = data_file
    if ctx.invoked_subcommand is None:
        run_tui()

def _load_library() -> Library:
    path = settings.data_file
    if not os.path.exists(path):
        print(f"Aucun fichier de bibliothèque: {path}")
        raise typer.Exit(code=1)
    try:
        return Library.load(path)
    except PersistenceError as e:
        print(f"Erreur lors du chargement: {e}")
        raise typer.Exit(code=1)

@app.command("tui")
def cli_tui():
    """Lancer l'interface interactive."""
    run_tui()

@app.command("list-books")
def cli_list_books():
    """Lister les livres du fichier de bibliothèque."""
    library = _load_library()
    print_books_result(library.list_books())

@app.command("list-authors")
def cli_list_authors():
    """Lister les auteurs du fichier de bibliothèque."""
    library = _load_library()
    print_authors_result(library.list_authors())

@app.command("stats")
def cli_stats():
    """Afficher les statistiques de la bibliothèque."""
    library = _load_library()
    print_stats_result(library.get_statistics())


if __name__ == "__main__":
    app()
