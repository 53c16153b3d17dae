"""
Error types raised by the quiz API.

Each error carries the HTTP status code it maps to and a message that is
safe to show to the client. The app factory registers a handler that turns
them into ``{"success": false, "error": message}`` responses.
"""


class QuizBuilderError(Exception):
    """Base class for errors with a client-facing message."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(QuizBuilderError):
    """Missing required fields or wrongly shaped request data."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(QuizBuilderError):
    """A quiz or result id that does not resolve."""

    status_code = 404
    default_message = "Not found"


class StorageError(QuizBuilderError):
    """
    The database rejected or failed an operation.

    The underlying exception is kept on ``cause`` for logging; the client
    only ever sees the generic message.
    """

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, cause: Exception = None):
        super().__init__()
        self.cause = cause
