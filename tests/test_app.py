import json

from unittest.mock import MagicMock

from bibliotheque.app import App
from bibliotheque.author import Author
from bibliotheque.book import Book
from bibliotheque.library import SharedLibrary
from bibliotheque.ui import keys
from bibliotheque.ui import screens as s
from bibliotheque.ui.dispatcher import Dispatcher, Submit
from bibliotheque.ui.keys import KeyEvent

ENTER = KeyEvent(keys.ENTER)
ESC = KeyEvent(keys.ESC)
DOWN = KeyEvent(keys.DOWN)


def press(app, *codes):
    for code in codes:
        app.handle_key(code if isinstance(code, KeyEvent) else KeyEvent(code))

def type_text(app, text):
    for c in text:
        app.handle_key(KeyEvent.char(c))

def open_menu_item(app, index):
    app.navigator.current().state.selected = index
    press(app, ENTER)

def library_of(app):
    with app.shared.access() as library:
        return library

# ------------------------- Navigation ------------------------- #

def test_menu_opens_screens(app):
    open_menu_item(app, 1)
    assert isinstance(app.navigator.current(), s.AddBook)
    press(app, ESC)
    assert isinstance(app.navigator.current(), s.MainMenu)

def test_quit_from_menu_item(app):
    open_menu_item(app, 8)
    assert app.should_quit

def test_esc_on_root_quits(app):
    press(app, ESC)
    assert app.should_quit

def test_ctrl_c_quits(app):
    open_menu_item(app, 2)
    press(app, KeyEvent.with_ctrl("c"))
    assert app.should_quit

# ------------------------- Authors and books ------------------------- #

def test_add_author_through_the_form(app):
    open_menu_item(app, 0)
    type_text(app, "9")
    press(app, keys.TAB)
    type_text(app, "Jules")
    press(app, keys.TAB)
    type_text(app, "Verne")
    press(app, ENTER)

    current = app.navigator.current()
    assert isinstance(current, s.Message)
    assert not current.is_error
    assert current.body == "Auteur ajouté avec succès!"
    # the form was replaced, closing the message goes back to the menu
    assert len(app.navigator) == 2
    press(app, ENTER)
    assert isinstance(app.navigator.current(), s.MainMenu)
    assert library_of(app).find_author(9).full_name == "Jules Verne"

def test_add_book_associates_with_existing_author(app):
    library_of(app).add_author(Author(9, "Jules", "Verne"))
    app.navigator.push(s.AddBook())
    app.submit(app.navigator.current(), ["1", "A", "9", "2000"])

    assert app.navigator.current() == s.success("Livre ajouté et associé avec succès!")
    assert len(app.navigator) == 2
    assert library_of(app).find_author(9).book_ids == [1]
    assert library_of(app).find_book(1) == Book(1, "A", 9, 2000)

def test_add_book_with_unknown_author_keeps_the_book(app):
    app.navigator.push(s.AddBook())
    app.submit(app.navigator.current(), ["1", "A", "9", "2000"])

    message = app.navigator.current()
    assert isinstance(message, s.Message)
    assert message.title == "Attention"
    assert not message.is_error
    assert message.body.startswith("Livre ajouté mais: Auteur non trouvé")
    assert len(app.navigator) == 2
    assert [b.id for b in library_of(app).list_books()] == [1]

def test_add_book_non_numeric_fields_default_to_zero(app):
    app.navigator.push(s.AddBook())
    app.submit(app.navigator.current(), ["abc", "Titre", "x", "?"])
    assert library_of(app).find_book(0) == Book(0, "Titre", 0, 0)

def test_add_book_out_of_range_id_defaults_to_zero(app):
    app.navigator.push(s.AddBook())
    app.submit(app.navigator.current(), ["99999999999", "Titre", "1", "2000"])
    assert [b.id for b in library_of(app).list_books()] == [0]

def test_add_book_blank_title_shows_error_over_the_form(app):
    form = s.AddBook()
    app.navigator.push(form)
    app.submit(form, ["1", "   ", "9", "2000"])

    assert app.navigator.current() == s.error("Le titre ne peut pas être vide!")
    assert app.navigator.screens[-2] is form
    assert library_of(app).list_books() == ()

def test_add_author_blank_names_shows_error(app):
    form = s.AddAuthor()
    app.navigator.push(form)
    app.submit(form, ["1", "Jules", ""])
    assert app.navigator.current().is_error
    assert app.navigator.screens[-2] is form
    assert library_of(app).list_authors() == ()

# ------------------------- Borrow / return ------------------------- #

def test_borrow_success_replaces_form(app):
    library_of(app).add_book(Book(3, "Nana", 1, 1880))
    open_menu_item(app, 3)
    type_text(app, "3")
    press(app, ENTER)

    assert app.navigator.current() == s.success("Livre emprunté avec succès!")
    assert len(app.navigator) == 2
    assert library_of(app).find_book(3).borrowed

def test_borrow_failure_keeps_form_for_retry(app):
    library_of(app).add_book(Book(3, "Nana", 1, 1880))
    open_menu_item(app, 3)
    form = app.navigator.current()
    type_text(app, "4")
    press(app, ENTER)

    message = app.navigator.current()
    assert message.is_error
    assert message.body == "Erreur: Livre non trouvé (ID 4)"
    # close the message, fix the id, resubmit
    press(app, ENTER)
    assert app.navigator.current() is form
    assert form.form.values() == ["4"]
    press(app, keys.BACKSPACE)
    type_text(app, "3")
    press(app, ENTER)
    assert app.navigator.current() == s.success("Livre emprunté avec succès!")

def test_borrow_already_borrowed(app):
    library_of(app).add_book(Book(3, "Nana", 1, 1880, borrowed=True))
    app.navigator.push(s.BorrowBook())
    app.borrow_book("3")
    assert app.navigator.current() == s.error("Erreur: Ce livre est déjà emprunté")
    assert isinstance(app.navigator.screens[-2], s.BorrowBook)

def test_borrow_invalid_id(app):
    app.navigator.push(s.BorrowBook())
    app.borrow_book("douze")
    assert app.navigator.current() == s.error("ID invalide")
    assert len(app.navigator) == 3

def test_borrow_padded_id_is_invalid(app):
    library_of(app).add_book(Book(3, "Nana", 1, 1880))
    app.navigator.push(s.BorrowBook())
    app.borrow_book(" 3 ")
    assert app.navigator.current() == s.error("ID invalide")
    assert not library_of(app).find_book(3).borrowed

def test_return_not_borrowed_and_then_borrowed(app):
    library_of(app).add_book(Book(3, "Nana", 1, 1880))
    app.navigator.push(s.ReturnBook())
    app.return_book("3")
    assert app.navigator.current() == s.error("Erreur: Ce livre n'est pas emprunté")

    press(app, ESC)
    library_of(app).borrow(3)
    app.return_book("3")
    assert app.navigator.current() == s.success("Livre retourné avec succès!")
    assert not library_of(app).find_book(3).borrowed

# ------------------------- Persistence ------------------------- #

def test_save_and_load_from_menu(app, data_file):
    library = library_of(app)
    library.add_book(Book(1, "A", 9, 2000))
    library.add_book(Book(2, "Orphan", 5, 2001))
    library.add_author(Author(9, "Jules", "Verne"))
    library.associate(1, 9)

    open_menu_item(app, 6)
    assert app.navigator.current() == s.success(f"Bibliothèque sauvegardée dans {data_file}")
    with open(data_file, encoding="utf-8") as f:
        assert json.load(f) == [{"id": 9, "prenom": "Jules", "nom": "Verne", "livres": [1]}]

    press(app, ENTER)
    open_menu_item(app, 7)
    assert app.navigator.current() == s.success(f"Bibliothèque chargée depuis {data_file}")
    reloaded = library_of(app)
    assert reloaded is not library
    assert [b.id for b in reloaded.list_books()] == [1]

def test_load_failure_leaves_library_unchanged(app):
    library = library_of(app)
    library.add_book(Book(1, "A", 9, 2000))

    open_menu_item(app, 7)
    message = app.navigator.current()
    assert message.is_error
    assert message.body.startswith("Erreur lors du chargement: ")
    assert library_of(app) is library
    assert len(library.list_books()) == 1

def test_save_failure_shows_error(tmp_path):
    app = App(shared=SharedLibrary(), data_file=str(tmp_path / "nope" / "x.json"))
    app.save()
    message = app.navigator.current()
    assert message.is_error
    assert message.body.startswith("Erreur lors de la sauvegarde: ")

# ------------------------- Coordinator wiring ------------------------- #

def test_submit_routes_on_the_screen_that_received_the_key(app):
    dispatcher = MagicMock(spec=Dispatcher)
    dispatcher.visible_lines = 15
    dispatcher.dispatch.return_value = Submit(["1", "Victor", "Hugo"])
    app.dispatcher = dispatcher
    app.navigator.push(s.AddAuthor())

    app.handle_key(ENTER)

    dispatcher.dispatch.assert_called_once_with(ENTER, app.navigator, app.shared)
    assert library_of(app).find_author(1).full_name == "Victor Hugo"

def test_view_describes_the_top_screen(app):
    open_menu_item(app, 2)
    view = app.view()
    assert view.title == "📖 Liste des livres"
    assert view.rows[0].text == "Aucun livre dans la bibliothèque"
