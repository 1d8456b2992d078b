"""Single-user task list with a text menu and flat-file persistence."""

__version__ = "0.1.0"
