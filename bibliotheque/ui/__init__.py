"""Bibliothèque - terminal UI package

- Key events (keys.py)
- Form and list state (form.py, lists.py)
- Screen variants and navigation stack (screens.py, navigator.py)
- Input dispatch (dispatcher.py)
- View description and rich renderer (views.py, render.py)
"""
