"""Core HTTP request wrapper used throughout overpassql."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, Optional

import requests

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 180


@dataclass
class RequestConfig:
    """Configuration for a single request."""

    method: str = "GET"
    url: str = ""
    data: Optional[str] = None
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: MutableMapping[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT


def request(config: RequestConfig) -> requests.Response:
    """Perform an HTTP request and raise on error status codes.

    Args:
        config: Fully populated ``RequestConfig`` instance.

    Returns:
        The ``requests.Response`` object.

    Raises:
        requests.HTTPError: The server answered with a 4xx or 5xx status.
        requests.RequestException: The request could not be sent.
    """
    headers = dict(config.headers)  # copy to avoid mutating caller data
    body = config.data.encode("utf-8") if config.data is not None else None

    log.debug("Start request: %s %s", config.method, config.url)
    resp = requests.request(
        method=config.method,
        url=config.url,
        data=body,
        params=config.params,
        headers=headers,
        timeout=config.timeout,
    )
    resp.raise_for_status()
    log.debug("Data received: %s bytes", len(resp.content))
    return resp
