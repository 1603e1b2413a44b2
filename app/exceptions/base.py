class AppException(Exception):
    """
    Root of the application's exceptions.

    Anything a service raises on purpose derives from this class, so the error
    handlers can render it in the JSON envelope with its own message. Without a
    more specific mapping it becomes a 500.
    """


class InternalError(AppException):
    """A failure the caller cannot fix, such as a donation saved without its campaign update."""

    def __init__(self, message: str = "An internal error occurred"):
        super().__init__(message)
