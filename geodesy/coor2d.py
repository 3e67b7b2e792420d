"""Generic two-dimensional coordinate tuple."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from geodesy.coor4d import Coor4D

_DIMENSION = 2


class Coor2D:
    """A 2D coordinate tuple with no fixed interpretation of the elements.

    By convention, geographical coordinates are stored as
    longitude, latitude in radians.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] = (0.0, 0.0)) -> None:
        items = [float(v) for v in values]
        if len(items) != _DIMENSION:
            raise ValueError(
                f"Coor2D needs exactly {_DIMENSION} elements, got {len(items)}"
            )
        self._values = items

    # ----- Sequence protocol -------------------------------------------------

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[index] = float(value)

    def __len__(self) -> int:
        return _DIMENSION

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coor2D):
            return NotImplemented
        return all(a == b for a, b in zip(self._values, other._values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Coor2D({self._values!r})"

    # ----- Constructors ------------------------------------------------------

    @classmethod
    def geo(cls, latitude: float, longitude: float) -> Coor2D:
        """From latitude/longitude in degrees."""
        return cls((math.radians(longitude), math.radians(latitude)))

    @classmethod
    def arcsec(cls, longitude: float, latitude: float) -> Coor2D:
        """From longitude/latitude in seconds of arc."""
        return cls((math.radians(longitude) / 3600.0, math.radians(latitude) / 3600.0))

    @classmethod
    def gis(cls, longitude: float, latitude: float) -> Coor2D:
        """From longitude/latitude in degrees."""
        return cls((math.radians(longitude), math.radians(latitude)))

    @classmethod
    def raw(cls, first: float, second: float) -> Coor2D:
        """From two raw numbers, taken as they are."""
        return cls((first, second))

    @classmethod
    def nan(cls) -> Coor2D:
        """Two NaNs."""
        return cls((math.nan, math.nan))

    @classmethod
    def origin(cls) -> Coor2D:
        """Two zeros."""
        return cls((0.0, 0.0))

    @classmethod
    def ones(cls) -> Coor2D:
        """Two ones."""
        return cls((1.0, 1.0))

    # ----- Arithmetic helpers -------------------------------------------------

    def scale(self, factor: float) -> Coor2D:
        """Multiply both elements by a scalar."""
        return Coor2D((self[0] * factor, self[1] * factor))

    def dot(self, other: Coor2D) -> float:
        """Scalar product."""
        return self[0] * other[0] + self[1] * other[1]

    # ----- Distances -----------------------------------------------------------

    def hypot2(self, other: Coor2D) -> float:
        """Euclidean distance between two points in the plane."""
        return math.hypot(self[0] - other[0], self[1] - other[1])

    # ----- Angular units ---------------------------------------------------------

    def to_radians(self) -> Coor2D:
        """Convert both elements from degrees to radians."""
        return Coor2D((math.radians(self[0]), math.radians(self[1])))

    def to_degrees(self) -> Coor2D:
        """Convert both elements from radians to degrees."""
        return Coor2D((math.degrees(self[0]), math.degrees(self[1])))

    def to_arcsec(self) -> Coor2D:
        """Convert both elements from radians to seconds of arc."""
        return Coor2D((math.degrees(self[0]) * 3600.0, math.degrees(self[1]) * 3600.0))

    def to_geo(self) -> Coor2D:
        """Turn lon/lat in radians into lat/lon in degrees."""
        return Coor2D((math.degrees(self[1]), math.degrees(self[0])))

    # ----- Conversions -----------------------------------------------------------

    @classmethod
    def from_coor4d(cls, coord: Coor4D) -> Coor2D:
        """Take the first two elements of a Coor4D."""
        return cls((coord[0], coord[1]))

    def to_coor4d(self) -> Coor4D:
        """Extend to a Coor4D with zero height and zero time."""
        return Coor4D((self[0], self[1], 0.0, 0.0))