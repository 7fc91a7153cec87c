"""Custom exceptions for docbookmarks."""


class DocBookmarksError(Exception):
    """Base exception for docbookmarks operations."""


class FetchError(DocBookmarksError):
    """Error while retrieving a document from the content source."""


class IndexNotAvailableError(FetchError):
    """The table of contents document could not be retrieved."""


class ParseError(DocBookmarksError):
    """Error during document parsing."""


class MalformedDocumentError(ParseError):
    """Document does not have the expected structure."""
