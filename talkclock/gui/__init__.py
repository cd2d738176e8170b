"""Tkinter views of the talkclock feature."""
