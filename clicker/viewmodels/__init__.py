"""ViewModel package for UI state.

Call context:
    ``clicker/app/controller.py`` owns a ``ClickCounterVM`` and binds its
    label callback to the main window view.

Responsibilities:
    - Hold the mutable click count.
    - Derive the label text shown by the view.
"""
