"""termiphone CLI bootstrap."""

from termiphone.cli import app

if __name__ == "__main__":
    app()
