"""Helpers for reading queries and server messages."""

import html
import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

QUERY_FILE_SUFFIXES = (".ql", ".overpassql")


def get_query(query_or_file: Union[str, "os.PathLike[str]"]) -> str:
    """Decide if a query is passed directly or read from a file.

    Paths ending in ``.ql`` or ``.overpassql`` (in any case) are read as
    UTF-8 text; anything else is returned as is.

    Raises:
        OSError: The query file could not be read.
    """
    text = os.fspath(query_or_file)
    if text.lower().endswith(QUERY_FILE_SUFFIXES):
        logger.debug("Input is file: %s", text)
        return Path(text).read_text(encoding="utf-8")

    logger.debug("Input is query")
    return text


def unescape_html(text: str) -> str:
    """Return ``text`` with HTML character references unescaped."""
    return html.unescape(text)
