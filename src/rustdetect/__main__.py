"""Allow running as ``python -m rustdetect``."""

from rustdetect.cli import app

if __name__ == "__main__":
    app()
