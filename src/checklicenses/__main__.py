"""Allow ``python -m checklicenses``."""

from checklicenses.cli import app

if __name__ == "__main__":
    app()
