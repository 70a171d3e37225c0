"""
Errors raised by the catalog request handlers.

The API layer turns each into a JSON response with the error's status code.
"""


class CatalogError(Exception):
    """Base class for client-facing catalog errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(CatalogError):
    """Client-supplied data failed a validation rule."""

    status_code = 400


class NotFoundError(CatalogError):
    """The referenced record does not exist."""

    status_code = 404
