"""Public API: send queries, read the endpoint status and build Overpass Turbo URLs."""

import logging
import os
import re
from typing import Optional, Union
from urllib.parse import quote

import requests

from ._core import DEFAULT_TIMEOUT, RequestConfig, request
from .exceptions import QueryError
from .preferences import get_endpoint
from .query_input import get_query, unescape_html
from .shortcuts import resolve_shortcuts
from .status import Status
from .types import BboxLike, CenterLike

logger = logging.getLogger(__name__)

OVERPASS_TURBO_URL = "https://overpass-turbo.eu/"

_ERROR_MESSAGE = re.compile(
    r'<p><strong style="color:#FF0000">Error</strong>:(?P<msg>.+)</p>',
    re.IGNORECASE,
)


def query(
    query_or_file: Union[str, "os.PathLike[str]"],
    bbox: Optional[BboxLike] = None,
    center: Optional[CenterLike] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Get the response to a query from the Overpass API.

    The query can be passed directly or as a path to a ``.ql`` or
    ``.overpassql`` file. Overpass Turbo shortcuts (``{{bbox}}``,
    ``{{center}}``, ``{{date}}``, ``{{style:...}}``) are replaced before the
    query is sent.

    Parameters:
        query_or_file: An Overpass QL query or a path to a query file.
        bbox: Replacement for ``{{bbox}}`` as
            ``(min_lat, min_lon, max_lat, max_lon)``.
        center: Replacement for ``{{center}}`` as ``(lat, lon)``.
        timeout: Seconds to wait for the server.

    Returns:
        The raw response body.

    Raises:
        MissingShortcutValueError: A shortcut needs a value that was not passed.
        UnsupportedShortcutError: The query contains an unsupported shortcut.
        QueryError: The Overpass API rejected the query.
        requests.RequestException: Any other HTTP or connection error.

    Examples:
        ```python
        data = overpassql.query(
            "[out:json];node[amenity=drinking_water]({{bbox}});out;",
            bbox=(48.2244, 16.3605, 48.2270, 16.3647),
        )
        ```

    See also `set_endpoint` to change the Overpass API endpoint.
    """
    url = get_endpoint() + "interpreter"

    text = get_query(query_or_file)
    text = resolve_shortcuts(text, bbox, center)

    try:
        resp = request(
            RequestConfig(method="POST", url=url, data=text, timeout=timeout)
        )
    except requests.HTTPError as exc:
        response = exc.response
        if response is not None and response.status_code == 400:
            messages = "\n".join(
                unescape_html(m["msg"]) for m in _ERROR_MESSAGE.finditer(response.text)
            )
            logger.error(f"Query rejected by {url}: {messages}")
            raise QueryError(text, messages) from exc
        raise

    return resp.text


def status(timeout: float = DEFAULT_TIMEOUT) -> Status:
    """Get the current status of the Overpass API endpoint.

    Returns:
        A Status with the fields ``connection_id``, ``server_time``,
        ``endpoint``, ``rate_limit`` and ``available_slots``.

    Raises:
        StatusParseError: The response could not be parsed.
        requests.RequestException: The request failed.

    See also `set_endpoint` to change the Overpass API endpoint.
    """
    url = get_endpoint() + "status"

    resp = request(RequestConfig(method="GET", url=url, timeout=timeout))
    logger.debug("Status response: %s", resp.text)

    return Status.from_text(resp.text)


def turbo_url(query_or_file: Union[str, "os.PathLike[str]"]) -> str:
    """Transform a query into an Overpass Turbo URL.

    The query can be passed directly or as a path to a ``.ql`` or
    ``.overpassql`` file. Shortcuts are kept, since Overpass Turbo
    understands them. Helpful to debug queries.
    """
    text = get_query(query_or_file)

    return OVERPASS_TURBO_URL + "?Q=" + quote(text, safe="")
