"""Type definitions for shortcut values.

Overpass QL orders coordinates latitude first, so both types here keep
that order. Coordinates are kept as given and rendered with ``str`` so that
``(1, 2, 3, 4)`` becomes ``1,2,3,4`` in a query. Only their type is checked;
ranges are left to the Overpass API.
"""

import numbers
from dataclasses import astuple, dataclass, fields
from typing import Sequence, Tuple, Union

from typing_extensions import SupportsFloat, TypeAlias

# Basic type aliases
FloatLike: TypeAlias = SupportsFloat

BboxLike: TypeAlias = Union["BoundingBox", Tuple[FloatLike, FloatLike, FloatLike, FloatLike]]
"""A bounding box as (min_lat, min_lon, max_lat, max_lon) or a BoundingBox."""

CenterLike: TypeAlias = Union["Point", Tuple[FloatLike, FloatLike]]
"""A center point as (lat, lon) or a Point."""


def _check_numeric(value: object) -> None:
    for field in fields(value):
        coord = getattr(value, field.name)
        if isinstance(coord, bool) or not isinstance(coord, numbers.Real):
            raise ValueError(f"{field.name} must be a number, got {coord!r}")


@dataclass(frozen=True)
class BoundingBox:
    """A geographic bounding box in Overpass order.

    Attributes:
        south: Southern latitude (min lat)
        west: Western longitude (min lon)
        north: Northern latitude (max lat)
        east: Eastern longitude (max lon)
    """

    south: FloatLike
    west: FloatLike
    north: FloatLike
    east: FloatLike

    def __post_init__(self) -> None:
        """Validate the bounding box coordinates."""
        _check_numeric(self)

    def to_overpass(self) -> str:
        """Convert to Overpass bounding box format.

        Returns:
            Comma-separated string: south,west,north,east
        """
        return ",".join(str(c) for c in astuple(self))

    @classmethod
    def from_value(cls, value: BboxLike) -> "BoundingBox":
        """Create a BoundingBox from a BoundingBox or a 4-sequence.

        Raises:
            ValueError: If the sequence does not hold exactly four values
        """
        if isinstance(value, cls):
            return value
        coords = _as_sequence(value, 4, "bbox")
        return cls(*coords)


@dataclass(frozen=True)
class Point:
    """A geographic point in Overpass order.

    Attributes:
        lat: Latitude
        lon: Longitude
    """

    lat: FloatLike
    lon: FloatLike

    def __post_init__(self) -> None:
        """Validate the point coordinates."""
        _check_numeric(self)

    def to_overpass(self) -> str:
        """Convert to Overpass coordinate format.

        Returns:
            Comma-separated string: lat,lon
        """
        return f"{self.lat},{self.lon}"

    @classmethod
    def from_value(cls, value: CenterLike) -> "Point":
        """Create a Point from a Point or a 2-sequence."""
        if isinstance(value, cls):
            return value
        lat, lon = _as_sequence(value, 2, "center")
        return cls(lat, lon)


def _as_sequence(value: Sequence[FloatLike], size: int, name: str) -> Tuple:
    if isinstance(value, (str, bytes)):
        raise ValueError(f"Invalid {name}: {value!r}")
    try:
        coords = tuple(value)
    except TypeError:
        raise ValueError(f"Invalid {name}: {value!r}") from None
    if len(coords) != size:
        raise ValueError(f"{name} must have {size} coordinates, got {len(coords)}")
    return coords
