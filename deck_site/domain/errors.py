class DeckSiteError(Exception):
    """Base class for fatal build errors."""


class SourceDirectoryError(DeckSiteError):
    """Source directory missing, not a directory, or unreadable."""


class OutputDirectoryError(DeckSiteError):
    """Output directory or one of its files cannot be written."""
