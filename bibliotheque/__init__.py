"""Bibliothèque - terminal library manager

This package contains:
- Data models (book.py, author.py)
- Library store and JSON persistence (library.py)
- Error types (errors.py)
- Screen navigation, forms, lists and input dispatch (ui/)
- Coordinator (app.py)
- CLI entry point (main.py)
"""
