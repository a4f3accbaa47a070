"""Allow running as ``python -m veg24``."""

from veg24.cli import app

if __name__ == "__main__":
    app()
