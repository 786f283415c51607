"""Domain failures raised by the services.

Each error carries the HTTP status the API layer answers with, so routes
never need to translate them one by one.
"""


class LibraryError(Exception):
    """Base class for every failure the services raise."""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(LibraryError):
    """A referenced book or user does not exist."""
    status_code = 404


class ConflictError(LibraryError):
    """The requested transition is not allowed from the book's current state."""
    status_code = 400


class DuplicateRecordError(ConflictError):
    """A record with the requested id already exists."""
    status_code = 409


class InvalidInputError(LibraryError):
    """Required input is missing or empty."""
    status_code = 400
