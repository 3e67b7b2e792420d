import math

import pytest

from geodesy.coor2d import Coor2D
from geodesy.coor32 import Coor32
from geodesy.coor3d import Coor3D
from geodesy.coor4d import Coor4D
from geodesy.coordinate_set import (
    CoordinateList,
    CoordinateSet,
    Crs,
    DataEpoch,
    MdIdentifier,
    WithHeightAndTime,
    WithTime,
)


def some_basic_coor4dinates():
    return [Coor4D.raw(55.0, 12.0, 0.0, 0.0), Coor4D.raw(59.0, 18.0, 0.0, 0.0)]


def some_basic_coor2dinates():
    return [Coor2D.raw(55.0, 12.0), Coor2D.raw(59.0, 18.0)]


def test_array():
    operands = CoordinateList(some_basic_coor4dinates())
    assert len(operands) == 2
    assert not operands.is_empty()

    cph = operands.get_coord(0)
    assert cph[0] == 55.0
    assert cph[1] == 12.0

    sth = operands.get_coord(1)
    assert sth[0] == 59.0
    assert sth[1] == 18.0

    operands.set_coord(0, sth)
    cph = operands.get_coord(0)
    assert cph[0] == 59.0
    assert cph[1] == 18.0


def test_vector_is_updated_in_place():
    data = some_basic_coor4dinates()
    operands = CoordinateList(data)
    sth = operands.get_coord(1)
    operands.set_coord(0, sth)
    assert data[0] == Coor4D.raw(59.0, 18.0, 0.0, 0.0)


def test_angular():
    operands = CoordinateList(some_basic_coor2dinates())
    cph = operands.get_coord(0)

    operands.to_radians()
    cph = cph.to_radians()
    assert cph[0] == operands.get_coord(0)[0]
    assert cph[1] == operands.get_coord(0)[1]

    operands.to_arcsec()
    assert math.degrees(cph[0]) * 3600.0 == operands.get_coord(0)[0]
    assert math.degrees(cph[1]) * 3600.0 == operands.get_coord(0)[1]


def test_to_geo_swaps_and_keeps_type():
    data = [Coor2D.gis(12.0, 55.0)]
    CoordinateList(data).to_geo()
    assert isinstance(data[0], Coor2D)
    assert data[0][0] == pytest.approx(55.0)
    assert data[0][1] == pytest.approx(12.0)


def test_to_degrees_returns_same_set():
    operands = CoordinateList([Coor4D.gis(12.0, 55.0, 7.0, 2020.0)])
    result = operands.to_degrees()
    assert result is operands
    c = operands.get_coord(0)
    assert c[0] == pytest.approx(12.0)
    assert c[1] == pytest.approx(55.0)
    assert c[2] == 7.0
    assert c[3] == 2020.0


def test_coor2d_reads_zero_height_nan_time():
    c = CoordinateList([Coor2D.raw(1.0, 2.0)]).get_coord(0)
    assert (c[0], c[1], c[2]) == (1.0, 2.0, 0.0)
    assert math.isnan(c[3])


def test_coor3d_reads_nan_time_and_writes_three():
    data = [Coor3D.raw(1.0, 2.0, 3.0)]
    operands = CoordinateList(data)
    c = operands.get_coord(0)
    assert (c[0], c[1], c[2]) == (1.0, 2.0, 3.0)
    assert math.isnan(c[3])
    operands.set_coord(0, Coor4D.raw(4.0, 5.0, 6.0, 7.0))
    assert data[0] == Coor3D.raw(4.0, 5.0, 6.0)


def test_coor32_round_trip():
    data = [Coor32.raw(7.0, 8.0)]
    operands = CoordinateList(data)
    c = operands.get_coord(0)
    assert (c[0], c[1], c[2]) == (7.0, 8.0, 0.0)
    assert math.isnan(c[3])
    operands.set_coord(0, Coor4D.raw(1.5, 2.5, 9.0, 9.0))
    assert data[0] == Coor32.raw(1.5, 2.5)


def test_list_indexing_and_iteration():
    data = some_basic_coor2dinates()
    operands = CoordinateList(data)
    assert operands[1] == Coor2D.raw(59.0, 18.0)
    assert list(operands) == data


def test_unsupported_item_type():
    with pytest.raises(TypeError):
        CoordinateList([(1.0, 2.0)])


def test_index_out_of_range():
    operands = CoordinateList(some_basic_coor2dinates())
    with pytest.raises(IndexError):
        operands.get_coord(5)


def test_empty_set():
    operands = CoordinateList([])
    assert operands.is_empty()
    assert len(operands) == 0


def test_with_height_and_time():
    inner = CoordinateList(some_basic_coor2dinates())
    operands = WithHeightAndTime(inner, 100.0, 2020.0)
    assert len(operands) == 2
    assert operands.get_coord(1) == Coor4D.raw(59.0, 18.0, 100.0, 2020.0)
    operands.set_coord(0, Coor4D.raw(1.0, 2.0, 3.0, 4.0))
    assert inner[0] == Coor2D.raw(1.0, 2.0)


def test_with_time():
    inner = CoordinateList([Coor3D.raw(1.0, 2.0, 3.0)])
    operands = WithTime(inner, 2000.5)
    assert operands.get_coord(0) == Coor4D.raw(1.0, 2.0, 3.0, 2000.5)
    operands.set_coord(0, Coor4D.raw(4.0, 5.0, 6.0, 7.0))
    assert inner[0] == Coor3D.raw(4.0, 5.0, 6.0)


def test_metadata_defaults():
    operands = CoordinateList(some_basic_coor4dinates())
    assert operands.crs_id() is None
    assert operands.crs() == Crs()
    assert operands.crs().is_unknown
    assert operands.coordinate_epoch() is None
    assert operands.is_valid()


class _NoCrs(CoordinateList):
    def crs(self):
        return None


class _WithId(CoordinateList):
    def crs(self):
        return None

    def crs_id(self):
        return MdIdentifier()


def test_invalid_without_any_crs():
    operands = _NoCrs(some_basic_coor4dinates())
    assert len(operands) == 2
    assert operands.get_coord(0) == Coor4D.raw(55.0, 12.0, 0.0, 0.0)
    assert CoordinateSet.is_valid(operands) is False


def test_valid_with_crs_id_only():
    operands = _WithId(some_basic_coor4dinates())
    assert len(operands) == 2
    assert operands.crs() is None
    assert CoordinateSet.is_valid(operands) is True


def test_crs_register_item():
    crs = Crs("EPSG", "4326")
    assert not crs.is_unknown
    assert crs == Crs("EPSG", "4326")


def test_data_epoch_default_is_nan():
    assert math.isnan(DataEpoch().value)
    assert DataEpoch(2000.0) < DataEpoch(2020.0)


def test_md_identifiers_are_unique():
    first = MdIdentifier()
    ids = [first, MdIdentifier(), MdIdentifier(), MdIdentifier()]
    assert [item == first for item in ids] == [True, False, False, False]


def test_coordinate_set_is_abstract():
    with pytest.raises(TypeError):
        CoordinateSet()