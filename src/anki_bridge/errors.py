"""Exception hierarchy for action dispatch failures."""


class AnkiBridgeError(Exception):
    """Base error raised when an action cannot produce a typed result."""

    def __init__(self, code: str, message: str) -> None:
        """Initialize with a machine-readable code and a human-readable message.

        Args:
            code: Machine-readable error code (e.g. "transport", "invalid_json").
            message: Human-readable error description.

        """
        super().__init__(message)
        self.code = code
        self.message = message


class TransportError(AnkiBridgeError):
    """The HTTP round trip itself failed (connection, timeout, I/O, HTTP status)."""

    def __init__(self, message: str) -> None:
        """Initialize a transport failure; chain the underlying exception with ``raise ... from``."""
        super().__init__("transport", message)


class DecodeError(AnkiBridgeError):
    """The response could not be decoded into the envelope or the declared result shape.

    Codes:
        ``invalid_json``: response body is not JSON.
        ``invalid_envelope``: JSON, but not a ``{"result", "error"}`` object.
        ``invalid_result``: ``result`` does not match the action's result shape.
        ``no_default``: no result and no error, and the result shape has no default.
    """


class AnkiError(AnkiBridgeError):
    """AnkiConnect answered with a non-null ``error``; the message is kept verbatim."""

    def __init__(self, message: str) -> None:
        """Initialize with the error string returned by AnkiConnect."""
        super().__init__("anki", message)
