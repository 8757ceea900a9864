"""overpassql: A Python client for the Overpass API.

overpassql sends Overpass QL queries to an Overpass API endpoint and
replaces the shortcuts known from Overpass Turbo before doing so.

Quick Start:
    ```python
    import overpassql

    data = overpassql.query(
        "[out:json];node[amenity=drinking_water]({{bbox}});out;",
        bbox=(48.2244, 16.3605, 48.2270, 16.3647),
    )

    # Queries can also be read from .ql / .overpassql files
    data = overpassql.query("cycle_network.overpassql", bbox=(48.22, 16.36, 48.23, 16.37))

    # Open the query in Overpass Turbo
    print(overpassql.turbo_url("cycle_network.overpassql"))
    ```

Main Functions:
    - `query()`: Send a query and return the raw response
    - `status()`: Status of the current endpoint
    - `turbo_url()`: Overpass Turbo URL for a query
    - `set_endpoint()`: Change the endpoint for all functions
    - `resolve_shortcuts()`: Replace shortcuts without sending the query
"""

import logging
from importlib.metadata import version

from .api import query, status, turbo_url
from .exceptions import (
    MissingShortcutValueError,
    OverpassError,
    QueryError,
    ShortcutError,
    StatusParseError,
    UnsupportedShortcutError,
)
from .preferences import DEFAULT_ENDPOINT, get_endpoint, set_endpoint
from .shortcuts import resolve_shortcuts
from .status import Status
from .types import BoundingBox, Point

logger = logging.getLogger(__name__)

__all__ = [
    # api.py
    "query",
    "status",
    "turbo_url",
    # preferences.py
    "DEFAULT_ENDPOINT",
    "get_endpoint",
    "set_endpoint",
    # shortcuts.py
    "resolve_shortcuts",
    # status.py
    "Status",
    # types.py
    "BoundingBox",
    "Point",
    # exceptions.py
    "OverpassError",
    "ShortcutError",
    "MissingShortcutValueError",
    "UnsupportedShortcutError",
    "QueryError",
    "StatusParseError",
]

__version__ = version("overpassql")
