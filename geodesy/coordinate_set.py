"""Uniform access to collections of coordinate tuples, plus coordinate metadata."""

from __future__ import annotations

import math
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

from geodesy.coor2d import Coor2D
from geodesy.coor32 import Coor32
from geodesy.coor3d import Coor3D
from geodesy.coor4d import Coor4D

Coordinate = Union[Coor2D, Coor3D, Coor4D, Coor32]


# ----- Coordinate metadata -----------------------------------------------------


@dataclass(frozen=True, order=True)
class DataEpoch:
    """The epoch of a coordinate, as a decimal year. NaN when not known."""

    value: float = math.nan


@dataclass(frozen=True, order=True)
class MdIdentifier:
    """Identifier of a CRS, represented by a random UUID placeholder."""

    value: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Crs:
    """A CRS given as a register item, or unknown when both parts are missing."""

    register: str | None = None
    item: str | None = None

    @property
    def is_unknown(self) -> bool:
        """True when the CRS is not identified by a register item."""
        return self.register is None and self.item is None


# ----- The coordinate set interface ------------------------------------------


class CoordinateSet(ABC):
    """Access any collection of coordinates element by element, as Coor4D.

    Besides element access, every set carries coordinate metadata, with
    defaults meaning "unknown CRS, no epoch".
    """

    @abstractmethod
    def __len__(self) -> int:
        """Number of coordinates in the set."""

    @abstractmethod
    def get_coord(self, index: int) -> Coor4D:
        """The coordinate at ``index``, as a Coor4D."""

    @abstractmethod
    def set_coord(self, index: int, value: Coor4D) -> None:
        """Store ``value`` at ``index``, in the native form of the set."""

    def is_empty(self) -> bool:
        """True when the set holds no coordinates."""
        return len(self) == 0

    # ----- Metadata ---------------------------------------------------------

    def crs_id(self) -> MdIdentifier | None:
        """Identifier of the CRS, if any."""
        return None

    def crs(self) -> Crs | None:
        """The CRS of the coordinates; unknown by default."""
        return Crs()

    def coordinate_epoch(self) -> DataEpoch | None:
        """The epoch of the coordinates, if any."""
        return None

    def is_valid(self) -> bool:
        """The metadata must give the CRS in at least one of its two forms."""
        return not (self.crs_id() is None and self.crs() is None)

    # ----- Angular units, applied in place ------------------------------------

    def _map_in_place(self, convert: Callable[[Coor4D], Coor4D]) -> CoordinateSet:
        for index in range(len(self)):
            self.set_coord(index, convert(self.get_coord(index)))
        return self

    def to_radians(self) -> CoordinateSet:
        """Convert the first two elements of every coordinate from degrees to radians."""
        return self._map_in_place(Coor4D.to_radians)

    def to_degrees(self) -> CoordinateSet:
        """Convert the first two elements of every coordinate from radians to degrees."""
        return self._map_in_place(Coor4D.to_degrees)

    def to_arcsec(self) -> CoordinateSet:
        """Convert the first two elements of every coordinate from radians to arcseconds."""
        return self._map_in_place(Coor4D.to_arcsec)

    def to_geo(self) -> CoordinateSet:
        """Turn every lon/lat/h/t in radians into lat/lon/h/t in degrees."""
        return self._map_in_place(Coor4D.to_geo)


# ----- Conversions between native tuples and Coor4D --------------------------

_TO_4D: dict[type, Callable[[Coordinate], Coor4D]] = {
    Coor4D: lambda c: Coor4D(c),
    Coor3D: lambda c: Coor4D((c[0], c[1], c[2], math.nan)),
    Coor2D: lambda c: Coor4D((c[0], c[1], 0.0, math.nan)),
    Coor32: lambda c: Coor4D((c[0], c[1], 0.0, math.nan)),
}

_FROM_4D: dict[type, Callable[[Coor4D], Coordinate]] = {
    Coor4D: lambda v: Coor4D(v),
    Coor3D: lambda v: Coor3D((v[0], v[1], v[2])),
    Coor2D: Coor2D.from_coor4d,
    Coor32: Coor32.from_coor4d,
}


class CoordinateList(CoordinateSet):
    """A coordinate set backed by a list of Coor2D, Coor3D, Coor4D or Coor32.

    When given a list, that very list is updated in place by ``set_coord``.
    2D tuples read as height 0 and time NaN; 3D tuples read as time NaN.
    """

    def __init__(self, items: Iterable[Coordinate]) -> None:
        self._items = items if isinstance(items, list) else list(items)
        for item in self._items:
            if type(item) not in _TO_4D:
                raise TypeError(
                    f"unsupported coordinate type: {type(item).__name__}"
                )

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Coordinate:
        return self._items[index]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._items)

    def get_coord(self, index: int) -> Coor4D:
        item = self._items[index]
        return _TO_4D[type(item)](item)

    def set_coord(self, index: int, value: Coor4D) -> None:
        kind = type(self._items[index])
        self._items[index] = _FROM_4D[kind](value)


class WithHeightAndTime(CoordinateSet):
    """A coordinate set read with a fixed height and time for every element."""

    def __init__(self, inner: CoordinateSet, height: float, time: float) -> None:
        self.inner = inner
        self.height = float(height)
        self.time = float(time)

    def __len__(self) -> int:
        return len(self.inner)

    def get_coord(self, index: int) -> Coor4D:
        c = self.inner.get_coord(index)
        return Coor4D((c[0], c[1], self.height, self.time))

    def set_coord(self, index: int, value: Coor4D) -> None:
        self.inner.set_coord(index, value)


class WithTime(CoordinateSet):
    """A coordinate set read with a fixed time for every element."""

    def __init__(self, inner: CoordinateSet, time: float) -> None:
        self.inner = inner
        self.time = float(time)

    def __len__(self) -> int:
        return len(self.inner)

    def get_coord(self, index: int) -> Coor4D:
        c = self.inner.get_coord(index)
        return Coor4D((c[0], c[1], c[2], self.time))

    def set_coord(self, index: int, value: Coor4D) -> None:
        self.inner.set_coord(index, value)