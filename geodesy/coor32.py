"""Tiny 2D coordinate tuple with single precision elements."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable, Iterator

from geodesy.coor4d import Coor4D

_DIMENSION = 2


def _f32(value: float) -> float:
    """Round a float to the nearest single precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


_RAD_PER_DEG = _f32(_f32(math.pi) / 180.0)
_DEG_PER_RAD = _f32(57.2957795130823208767981548141051703)


class Coor32:
    """A 2D coordinate tuple stored in single precision.

    Only a fourth of the weight of a Coor4D; mostly useful for small
    scale world maps.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] = (0.0, 0.0)) -> None:
        items = [_f32(float(v)) for v in values]
        if len(items) != _DIMENSION:
            raise ValueError(
                f"Coor32 needs exactly {_DIMENSION} elements, got {len(items)}"
            )
        self._values = items

    # ----- Sequence protocol -------------------------------------------------

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[index] = _f32(float(value))

    def __len__(self) -> int:
        return _DIMENSION

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coor32):
            return NotImplemented
        return all(a == b for a, b in zip(self._values, other._values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Coor32({self._values!r})"

    # ----- Constructors ------------------------------------------------------

    @classmethod
    def geo(cls, latitude: float, longitude: float) -> Coor32:
        """From latitude/longitude in degrees."""
        return cls((math.radians(longitude), math.radians(latitude)))

    @classmethod
    def arcsec(cls, longitude: float, latitude: float) -> Coor32:
        """From longitude/latitude in seconds of arc."""
        return cls((math.radians(longitude) / 3600.0, math.radians(latitude) / 3600.0))

    @classmethod
    def gis(cls, longitude: float, latitude: float) -> Coor32:
        """From longitude/latitude in degrees."""
        return cls((math.radians(longitude), math.radians(latitude)))

    @classmethod
    def raw(cls, first: float, second: float) -> Coor32:
        """From two raw numbers, rounded to single precision."""
        return cls((first, second))

    @classmethod
    def nan(cls) -> Coor32:
        """Two NaNs."""
        return cls((math.nan, math.nan))

    @classmethod
    def origin(cls) -> Coor32:
        """Two zeros."""
        return cls((0.0, 0.0))

    @classmethod
    def ones(cls) -> Coor32:
        """Two ones."""
        return cls((1.0, 1.0))

    # ----- Arithmetic helpers -------------------------------------------------

    def scale(self, factor: float) -> Coor32:
        """Multiply both elements by a scalar, in single precision."""
        f = _f32(factor)
        return Coor32((self[0] * f, self[1] * f))

    def dot(self, other: Coor32) -> float:
        """Scalar product, computed in double precision."""
        return self[0] * other[0] + self[1] * other[1]

    # ----- Distances -----------------------------------------------------------

    def hypot2(self, other: Coor32) -> float:
        """Euclidean distance between two points in the plane."""
        return math.hypot(self[0] - other[0], self[1] - other[1])

    # ----- Angular units ---------------------------------------------------------

    def to_radians(self) -> Coor32:
        """Convert both elements from degrees to radians."""
        return Coor32((self[0] * _RAD_PER_DEG, self[1] * _RAD_PER_DEG))

    def to_degrees(self) -> Coor32:
        """Convert both elements from radians to degrees."""
        return Coor32((self[0] * _DEG_PER_RAD, self[1] * _DEG_PER_RAD))

    def to_arcsec(self) -> Coor32:
        """Convert both elements from radians to seconds of arc."""
        return Coor32(
            (
                _f32(self[0] * _DEG_PER_RAD) * 3600.0,
                _f32(self[1] * _DEG_PER_RAD) * 3600.0,
            )
        )

    def to_geo(self) -> Coor32:
        """Turn lon/lat in radians into lat/lon in degrees."""
        return Coor32((self[1] * _DEG_PER_RAD, self[0] * _DEG_PER_RAD))

    # ----- Conversions -----------------------------------------------------------

    @classmethod
    def from_coor4d(cls, coord: Coor4D) -> Coor32:
        """Take the first two elements of a Coor4D."""
        return cls.raw(coord[0], coord[1])

    def to_coor4d(self) -> Coor4D:
        """Extend to a Coor4D with zero height and NaN time."""
        return Coor4D((self[0], self[1], 0.0, math.nan))