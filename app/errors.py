class DataFetchError(Exception):
    """Raised when the CMS cannot be reached or answers with an error."""


class FormatError(ValueError):
    """Raised when a timestamp coming from the CMS cannot be parsed."""


class PreviewTokenError(Exception):
    """Raised when a preview token cannot be resolved to a document."""


class NoMorePagesError(Exception):
    """Raised when more posts are requested but the list is exhausted."""


class InvalidCursorError(ValueError):
    """Raised when a pagination cursor does not point at the CMS search API."""
