"""checklicenses - license header compliance gate for git repositories."""

__version__ = "0.1.0"
