"""Overpass Turbo shortcut replacement.

Queries written for Overpass Turbo may contain shortcuts such as
``{{bbox}}``, ``{{center}}`` or ``{{date:7 days}}`` which the Overpass API
itself does not understand. This module replaces them before a query is sent.

Passes run in a fixed order: bbox, center, date, style removal and finally a
check that no shortcut is left over. See
https://wiki.openstreetmap.org/wiki/Overpass_turbo/Extended_Overpass_Turbo_Queries#Available_Shortcuts
"""

import datetime as dt
import logging
import re
from typing import Callable, Optional

from dateutil.relativedelta import relativedelta

from .exceptions import MissingShortcutValueError, UnsupportedShortcutError
from .types import BboxLike, BoundingBox, CenterLike, Point

logger = logging.getLogger(__name__)

Clock = Callable[[], dt.datetime]

_BBOX = re.compile(r"\{\{\s*bbox\s*\}\}", re.IGNORECASE)
_CENTER = re.compile(r"\{\{\s*center\s*\}\}", re.IGNORECASE)
_DATE = re.compile(
    r"\{\{\s*date"
    r"(?:\s*:\s*(?P<value>[-+]?[0-9]+)\s*"
    r"(?P<unit>year|month|day|week|hour|minute|second)s?)?"
    r"\s*\}\}",
    re.IGNORECASE,
)
_STYLE = re.compile(r"\{\{\s*style\s*:.*?\}\}", re.IGNORECASE | re.DOTALL)

# Leftover tokens are found first and classified afterwards, which keeps the
# scan free of nested quantifiers.
_REMAINING = re.compile(r"\{\{(?P<body>.*?)\}\}", re.DOTALL)
_DATE_REMNANT = re.compile(
    r"date\s*[:+]{1,2}\s*(?P<value>[^:{}\s].*)", re.IGNORECASE | re.DOTALL
)


def utc_now() -> dt.datetime:
    """Return the current time in UTC."""
    return dt.datetime.now(dt.timezone.utc)


def resolve_shortcuts(
    query: str,
    bbox: Optional[BboxLike] = None,
    center: Optional[CenterLike] = None,
    *,
    clock: Optional[Clock] = None,
) -> str:
    """Replace all supported shortcuts in ``query``.

    Parameters:
        query: Overpass QL query, possibly containing shortcuts.
        bbox: Value for ``{{bbox}}`` as ``(min_lat, min_lon, max_lat, max_lon)``.
        center: Value for ``{{center}}`` as ``(lat, lon)``.
        clock: Callable returning the current time, used for ``{{date}}``.
            Defaults to the UTC wall clock.

    Returns:
        The query with every shortcut replaced.

    Raises:
        MissingShortcutValueError: ``{{bbox}}`` or ``{{center}}`` is used
            without passing a value for it.
        UnsupportedShortcutError: A shortcut is unknown or malformed.
    """
    query = replace_bbox_shortcuts(query, bbox)
    query = replace_center_shortcuts(query, center)
    query = replace_date_shortcuts(query, clock=clock)
    query = remove_style_shortcuts(query)
    check_remaining_shortcuts(query)

    return query


def replace_bbox_shortcuts(query: str, bbox: Optional[BboxLike]) -> str:
    """Replace every ``{{bbox}}`` with ``bbox``; no-op if ``bbox`` is None."""
    if bbox is None or not _BBOX.search(query):
        return query

    replacement = BoundingBox.from_value(bbox).to_overpass()
    query = _BBOX.sub(lambda _: replacement, query)
    logger.debug("query after bbox replacement: %s", query)
    return query


def replace_center_shortcuts(query: str, center: Optional[CenterLike]) -> str:
    """Replace every ``{{center}}`` with ``center``; no-op if ``center`` is None."""
    if center is None or not _CENTER.search(query):
        return query

    replacement = Point.from_value(center).to_overpass()
    query = _CENTER.sub(lambda _: replacement, query)
    logger.debug("query after center replacement: %s", query)
    return query


def replace_date_shortcuts(query: str, clock: Optional[Clock] = None) -> str:
    """Replace ``{{date}}`` shortcuts with the current or a relative date.

    ``{{date}}`` becomes the current UTC time. ``{{date:N unit}}`` becomes the
    current time minus N units, where unit is one of year, month, day, week,
    hour, minute or second, optionally plural. Subtraction is calendar aware,
    so one month before the 1st of a month is the 1st of the previous month.

    A negative N yields a date in the future. All shortcuts in one call share
    the same current time. Shortcuts that cannot be parsed are left in place.

    Returns:
        The query with date shortcuts replaced by ``YYYY-MM-DDTHH:MM:SSZ``.
    """
    if not _DATE.search(query):
        return query

    now = _as_utc((clock or utc_now)()).replace(microsecond=0)

    def replace(match: "re.Match[str]") -> str:
        value, unit = match.group("value", "unit")
        if value is None:
            date = now
        else:
            try:
                date = now - relativedelta(**{unit.lower() + "s": int(value)})
            except (OverflowError, ValueError) as exc:
                logger.debug("date offset %r out of range: %s", match.group(0), exc)
                return match.group(0)
        return _format_date(date)

    query = _DATE.sub(replace, query)
    logger.debug("query after date replacement: %s", query)
    return query


def remove_style_shortcuts(query: str) -> str:
    """Remove ``{{style:...}}`` shortcuts, which only affect rendering."""
    return _STYLE.sub("", query)


def check_remaining_shortcuts(query: str) -> None:
    """Raise if ``query`` still contains a shortcut.

    Raises:
        MissingShortcutValueError: For ``{{bbox}}`` and ``{{center}}``.
        UnsupportedShortcutError: For malformed ``{{date:...}}`` shortcuts and
            any other shortcut.
    """
    match = _REMAINING.search(query)
    if match is None:
        return

    name = match.group("body").strip()
    if name.lower() == "bbox":
        raise MissingShortcutValueError(
            "bbox",
            "{{bbox}} found in query, but no value specified.\n"
            'Use keyword argument "bbox": '
            "overpassql.query(..., bbox=(48.22, 16.36, 48.22, 16.36)).",
        )
    if name.lower() == "center":
        raise MissingShortcutValueError(
            "center",
            "{{center}} found in query, but no value specified.\n"
            'Use keyword argument "center": '
            "overpassql.query(..., center=(48.22, 16.36)).",
        )

    date_match = _DATE_REMNANT.fullmatch(name)
    if date_match:
        fragment = date_match.group("value")
        raise UnsupportedShortcutError(
            fragment,
            query,
            f'Did not recognize time unit for date shortcut: "{fragment}".\n'
            "Please consult the documentation for supported time units.\n"
            f"Query: {query}",
        )

    token = match.group(0)
    raise UnsupportedShortcutError(
        token,
        query,
        f'Unsupported shortcut in query: "{token}".\n'
        "Please consult the documentation for supported shortcuts.\n"
        f"Query: {query}",
    )


def _as_utc(value: dt.datetime) -> dt.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


def _format_date(value: dt.datetime) -> str:
    return value.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
