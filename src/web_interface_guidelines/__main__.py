"""Allow ``python -m web_interface_guidelines``."""

from .cli.main import app

if __name__ == "__main__":
    app()
