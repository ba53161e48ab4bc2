"""src/urikit/exceptions.py

urikit Exceptions hierarchy.
"""


class UriError(Exception):
    """Base exception for all urikit errors."""


class InvalidScheme(UriError):
    """
    Scheme is not one of the supported values.
    Raised by the constructor and ``Uri.with_scheme``.
    """

    def __init__(self, message: str = 'Uri scheme must be one of: "", "https", "http"'):
        super().__init__(message)


class InvalidPort(UriError):
    """
    Port is neither None nor an integer in the TCP range.
    Raised by the constructor and ``Uri.with_port``.
    """

    def __init__(
        self,
        message: str = "Uri port must be None or an integer between 1 and 65535 (inclusive)",
    ):
        super().__init__(message)


class InvalidUri(UriError):
    """Text could not be parsed as an absolute URI."""
