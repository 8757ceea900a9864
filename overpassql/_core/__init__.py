"""Internal building blocks shared across the package."""

from ._request import DEFAULT_TIMEOUT, RequestConfig, request

__all__ = ["DEFAULT_TIMEOUT", "RequestConfig", "request"]
