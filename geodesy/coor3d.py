"""Generic three-dimensional coordinate tuple."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

_DIMENSION = 3


def _ieee_div(a: float, b: float) -> float:
    """Divide like IEEE-754 doubles: zero divisors give infinities or NaN."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class Coor3D:
    """A 3D coordinate tuple with no fixed interpretation of the elements.

    By convention, geographical coordinates are stored as
    longitude, latitude (in radians) and height.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] = (0.0, 0.0, 0.0)) -> None:
        items = [float(v) for v in values]
        if len(items) != _DIMENSION:
            raise ValueError(
                f"Coor3D needs exactly {_DIMENSION} elements, got {len(items)}"
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
        if not isinstance(other, Coor3D):
            return NotImplemented
        return all(a == b for a, b in zip(self._values, other._values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Coor3D({self._values!r})"

    # ----- Element-wise arithmetic ------------------------------------------

    def __add__(self, other: Coor3D) -> Coor3D:
        if not isinstance(other, Coor3D):
            return NotImplemented
        return Coor3D(a + b for a, b in zip(self, other))

    def __sub__(self, other: Coor3D) -> Coor3D:
        if not isinstance(other, Coor3D):
            return NotImplemented
        return Coor3D(a - b for a, b in zip(self, other))

    def __mul__(self, other: Coor3D) -> Coor3D:
        if not isinstance(other, Coor3D):
            return NotImplemented
        return Coor3D(a * b for a, b in zip(self, other))

    def __truediv__(self, other: Coor3D) -> Coor3D:
        if not isinstance(other, Coor3D):
            return NotImplemented
        return Coor3D(_ieee_div(a, b) for a, b in zip(self, other))

    # ----- Constructors ------------------------------------------------------

    @classmethod
    def geo(cls, latitude: float, longitude: float, height: float) -> Coor3D:
        """From latitude/longitude in degrees, plus height."""
        return cls((math.radians(longitude), math.radians(latitude), height))

    @classmethod
    def arcsec(cls, longitude: float, latitude: float, height: float) -> Coor3D:
        """From longitude/latitude in seconds of arc, plus height."""
        return cls(
            (
                math.radians(longitude) / 3600.0,
                math.radians(latitude) / 3600.0,
                height,
            )
        )

    @classmethod
    def gis(cls, longitude: float, latitude: float, height: float) -> Coor3D:
        """From longitude/latitude in degrees, plus height."""
        return cls((math.radians(longitude), math.radians(latitude), height))

    @classmethod
    def raw(cls, first: float, second: float, third: float) -> Coor3D:
        """From three raw numbers, taken as they are."""
        return cls((first, second, third))

    @classmethod
    def nan(cls) -> Coor3D:
        """Three NaNs."""
        return cls((math.nan,) * _DIMENSION)

    @classmethod
    def origin(cls) -> Coor3D:
        """Three zeros."""
        return cls((0.0,) * _DIMENSION)

    @classmethod
    def ones(cls) -> Coor3D:
        """Three ones."""
        return cls((1.0,) * _DIMENSION)

    # ----- Arithmetic helpers -------------------------------------------------

    def scale(self, factor: float) -> Coor3D:
        """Multiply every element by a scalar."""
        return Coor3D(v * factor for v in self)

    def dot(self, other: Coor3D) -> float:
        """Scalar product."""
        result = 0.0
        for a, b in zip(self, other):
            result += a * b
        return result

    # ----- Distances -----------------------------------------------------------

    def hypot2(self, other: Coor3D) -> float:
        """Euclidean distance in the plane of the first two elements."""
        return math.hypot(self[0] - other[0], self[1] - other[1])

    def hypot3(self, other: Coor3D) -> float:
        """Euclidean distance in the space of all three elements."""
        return math.hypot(
            math.hypot(self[0] - other[0], self[1] - other[1]), self[2] - other[2]
        )

    # ----- Angular units ---------------------------------------------------------

    def to_radians(self) -> Coor3D:
        """Convert the first two elements from degrees to radians."""
        return Coor3D((math.radians(self[0]), math.radians(self[1]), self[2]))

    def to_degrees(self) -> Coor3D:
        """Convert the first two elements from radians to degrees."""
        return Coor3D((math.degrees(self[0]), math.degrees(self[1]), self[2]))

    def to_arcsec(self) -> Coor3D:
        """Convert the first two elements from radians to seconds of arc."""
        return Coor3D(
            (
                math.degrees(self[0]) * 3600.0,
                math.degrees(self[1]) * 3600.0,
                self[2],
            )
        )

    def to_geo(self) -> Coor3D:
        """Turn lon/lat/h in radians into lat/lon/h in degrees."""
        return Coor3D((math.degrees(self[1]), math.degrees(self[0]), self[2]))