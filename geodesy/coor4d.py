"""Generic four-dimensional coordinate tuple."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

_DIMENSION = 4


def _ieee_div(a: float, b: float) -> float:
    """Divide like IEEE-754 doubles: zero divisors give infinities or NaN."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class Coor4D:
    """A 4D coordinate tuple with no fixed interpretation of the elements.

    By convention, geographical coordinates are stored as
    longitude, latitude (in radians), height and time.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] = (0.0, 0.0, 0.0, 0.0)) -> None:
        items = [float(v) for v in values]
        if len(items) != _DIMENSION:
            raise ValueError(
                f"Coor4D needs exactly {_DIMENSION} elements, got {len(items)}"
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
        if not isinstance(other, Coor4D):
            return NotImplemented
        return all(a == b for a, b in zip(self._values, other._values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Coor4D({self._values!r})"

    # ----- Element-wise arithmetic ------------------------------------------

    def __add__(self, other: Coor4D) -> Coor4D:
        if not isinstance(other, Coor4D):
            return NotImplemented
        return Coor4D(a + b for a, b in zip(self, other))

    def __sub__(self, other: Coor4D) -> Coor4D:
        if not isinstance(other, Coor4D):
            return NotImplemented
        return Coor4D(a - b for a, b in zip(self, other))

    def __mul__(self, other: Coor4D) -> Coor4D:
        if not isinstance(other, Coor4D):
            return NotImplemented
        return Coor4D(a * b for a, b in zip(self, other))

    def __truediv__(self, other: Coor4D) -> Coor4D:
        if not isinstance(other, Coor4D):
            return NotImplemented
        return Coor4D(_ieee_div(a, b) for a, b in zip(self, other))

    # ----- Constructors ------------------------------------------------------

    @classmethod
    def geo(cls, latitude: float, longitude: float, height: float, time: float) -> Coor4D:
        """From latitude/longitude in degrees, plus height and time."""
        return cls((math.radians(longitude), math.radians(latitude), height, time))

    @classmethod
    def arcsec(cls, longitude: float, latitude: float, height: float, time: float) -> Coor4D:
        """From longitude/latitude in seconds of arc, plus height and time."""
        return cls(
            (
                math.radians(longitude) / 3600.0,
                math.radians(latitude) / 3600.0,
                height,
                time,
            )
        )

    @classmethod
    def gis(cls, longitude: float, latitude: float, height: float, time: float) -> Coor4D:
        """From longitude/latitude in degrees, plus height and time."""
        return cls((math.radians(longitude), math.radians(latitude), height, time))

    @classmethod
    def raw(cls, first: float, second: float, third: float, fourth: float) -> Coor4D:
        """From four raw numbers, taken as they are."""
        return cls((first, second, third, fourth))

    @classmethod
    def nan(cls) -> Coor4D:
        """Four NaNs."""
        return cls((math.nan,) * _DIMENSION)

    @classmethod
    def origin(cls) -> Coor4D:
        """Four zeros."""
        return cls((0.0,) * _DIMENSION)

    @classmethod
    def ones(cls) -> Coor4D:
        """Four ones."""
        return cls((1.0,) * _DIMENSION)

    # ----- Arithmetic helpers -------------------------------------------------

    def scale(self, factor: float) -> Coor4D:
        """Multiply every element by a scalar."""
        return Coor4D(v * factor for v in self)

    def dot(self, other: Coor4D) -> float:
        """Scalar product."""
        result = 0.0
        for a, b in zip(self, other):
            result += a * b
        return result

    # ----- Distances -----------------------------------------------------------

    def hypot2(self, other: Coor4D) -> float:
        """Euclidean distance in the plane of the first two elements."""
        return math.hypot(self[0] - other[0], self[1] - other[1])

    def hypot3(self, other: Coor4D) -> float:
        """Euclidean distance in the space of the first three elements."""
        return math.hypot(
            math.hypot(self[0] - other[0], self[1] - other[1]), self[2] - other[2]
        )

    # ----- Angular units ---------------------------------------------------------

    def to_radians(self) -> Coor4D:
        """Convert the first two elements from degrees to radians."""
        return Coor4D((math.radians(self[0]), math.radians(self[1]), self[2], self[3]))

    def to_degrees(self) -> Coor4D:
        """Convert the first two elements from radians to degrees."""
        return Coor4D((math.degrees(self[0]), math.degrees(self[1]), self[2], self[3]))

    def to_arcsec(self) -> Coor4D:
        """Convert the first two elements from radians to seconds of arc."""
        return Coor4D(
            (
                math.degrees(self[0]) * 3600.0,
                math.degrees(self[1]) * 3600.0,
                self[2],
                self[3],
            )
        )

    def to_geo(self) -> Coor4D:
        """Turn lon/lat/h/t in radians into lat/lon/h/t in degrees."""
        return Coor4D((math.degrees(self[1]), math.degrees(self[0]), self[2], self[3]))