"""Landing page builder and post-build smoke test for a directory of slide decks."""

__version__ = "0.1.0"
