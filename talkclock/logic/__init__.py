"""Logic of the talkclock feature (no tkinter dependencies)."""
