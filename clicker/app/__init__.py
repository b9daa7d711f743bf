"""Application composition layer for the Tkinter GUI.

The controller in this package wires the main window view to the click
counter view model without placing state in the view.
"""
