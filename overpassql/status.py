"""Status of an Overpass API endpoint."""

import datetime as dt
import re
from dataclasses import dataclass
from typing import Optional

from .exceptions import StatusParseError

_STATUS = re.compile(
    r"Connected\sas:\s(?P<connection_id>\d+)\r?\n"
    r"Current\stime:\s(?P<server_time>[^\r\n]+)\r?\n"
    r"(?:Announced\sendpoint:\s(?P<endpoint>[^\r\n]+)\r?\n)?"
    r"Rate\slimit:\s(?P<rate_limit>\d+)\r?\n"
    r"(?:(?P<available_slots>\d+)\sslots?\savailable\snow\.)?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Status:
    """Current status of an Overpass API endpoint.

    Attributes:
        connection_id: Identifier the server assigned to this client
        server_time: Current time of the server, in UTC
        endpoint: Endpoint the server announces, if any
        rate_limit: Number of slots per client, 0 for unlimited
        available_slots: Slots currently free, if reported
    """

    connection_id: str
    server_time: dt.datetime
    endpoint: Optional[str]
    rate_limit: int
    available_slots: Optional[int]

    @classmethod
    def from_text(cls, body: str) -> "Status":
        """Parse the plain text returned by the ``status`` endpoint.

        Raises:
            StatusParseError: The text does not look like a status response.
        """
        match = _STATUS.search(body)
        if match is None:
            raise StatusParseError(body)

        try:
            server_time = dt.datetime.strptime(
                match["server_time"].strip(), "%Y-%m-%dT%H:%M:%SZ"
            ).replace(tzinfo=dt.timezone.utc)
        except ValueError:
            raise StatusParseError(body) from None

        slots = match["available_slots"]
        return cls(
            connection_id=match["connection_id"],
            server_time=server_time,
            endpoint=match["endpoint"],
            rate_limit=int(match["rate_limit"]),
            available_slots=int(slots) if slots is not None else None,
        )
