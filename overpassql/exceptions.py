"""Exceptions raised by overpassql."""

from typing import Optional


class OverpassError(Exception):
    """Base class for all overpassql errors."""


class ShortcutError(OverpassError, ValueError):
    """A shortcut in a query could not be resolved."""


class MissingShortcutValueError(ShortcutError):
    """A shortcut needs a value that was not passed by the caller.

    Attributes:
        shortcut: Name of the shortcut, e.g. ``"bbox"`` or ``"center"``
    """

    def __init__(self, shortcut: str, message: Optional[str] = None) -> None:
        self.shortcut = shortcut
        super().__init__(
            message or f"{{{{{shortcut}}}}} found in query, but no value specified."
        )


class UnsupportedShortcutError(ShortcutError):
    """A shortcut is unknown or its argument could not be parsed.

    Attributes:
        fragment: The offending token or argument text
        query: The full query the fragment was found in
    """

    def __init__(self, fragment: str, query: str, message: str) -> None:
        self.fragment = fragment
        self.query = query
        super().__init__(message)


class QueryError(OverpassError):
    """The Overpass API rejected a query.

    Attributes:
        query: The query as it was sent
        messages: Error messages reported by the server, one per line
    """

    def __init__(self, query: str, messages: str) -> None:
        self.query = query
        self.messages = messages
        super().__init__(messages or "The Overpass API rejected the query")


class StatusParseError(OverpassError):
    """The status response of an Overpass API endpoint could not be parsed."""

    def __init__(self, body: str) -> None:
        self.body = body
        super().__init__(f"Unexpected status response: {body!r}")
