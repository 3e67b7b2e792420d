# geodesy

Building blocks for geodetic computations: coordinate tuples in two,
three and four dimensions, coordinate sets with coordinate metadata, and
context providers that keep a registry of user defined operator
constructors and resources (macros).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Coordinate tuples

The modules `geodesy.coor2d`, `geodesy.coor3d`, `geodesy.coor4d` and
`geodesy.coor32` hold the classes `Coor2D`, `Coor3D`, `Coor4D` and
`Coor32`. By convention, angles are stored in radians and in GIS order
(longitude first). The constructors take care of the conversion:

```python
from geodesy.coor2d import Coor2D
from geodesy.coor4d import Coor4D

cph = Coor2D.gis(12.0, 55.0)     # longitude, latitude in degrees
sth = Coor2D.geo(59.0, 18.0)     # latitude, longitude in degrees
raw = Coor2D.raw(0.2, 0.9)       # taken as given

assert cph == Coor2D.raw(12.0, 55.0).to_radians()
print(sth.to_geo())              # latitude, longitude in degrees

a = Coor4D([1.0, 2.0, 3.0, 4.0])
b = Coor4D([4.0, 3.0, 2.0, 1.0])
print(a + b, a.dot(b), a.hypot3(b))
```

All four classes have the constructors `geo`, `gis`, `arcsec`, `raw`,
`nan`, `origin` and `ones`, the methods `scale`, `dot` and `hypot2`, and
the angular conversions `to_radians`, `to_degrees`, `to_arcsec` and
`to_geo`, which act on the first two elements only and return a new
tuple. They support indexing, iteration, `len` and `==`.

- `Coor3D` and `Coor4D` also support element-wise `+`, `-`, `*` and `/`
  (division by zero gives infinity or NaN, as with IEEE doubles) and
  `hypot3`, the distance over the first three elements.
- `Coor32` rounds its elements to single precision.
- `Coor2D.to_coor4d` gives a `Coor4D` with height 0 and time 0;
  `Coor32.to_coor4d` gives height 0 and time NaN. Both classes have
  `from_coor4d`, which keeps the first two elements.

## Coordinate sets

`geodesy.coordinate_set.CoordinateSet` is an abstract interface: anything
that reports its length and can get and set a coordinate as a `Coor4D`.
Its `to_radians`, `to_degrees`, `to_arcsec` and `to_geo` methods convert
every element in place. It also carries metadata through `crs_id`,
`crs`, `coordinate_epoch` and `is_valid`, with the classes `Crs`,
`DataEpoch` and `MdIdentifier`; by default the CRS is unknown and there
is no epoch.

```python
from geodesy.coor2d import Coor2D
from geodesy.coordinate_set import CoordinateList, WithHeightAndTime

data = CoordinateList([Coor2D.raw(12.0, 55.0), Coor2D.raw(18.0, 59.0)])
data.to_radians()                # converts all elements in place
print(data.get_coord(0))         # Coor4D with height 0 and time NaN

fixed = WithHeightAndTime(data, 100.0, 2020.0)
print(fixed.get_coord(1))        # height and time supplied by the wrapper
```

`CoordinateList` accepts `Coor2D`, `Coor3D`, `Coor4D` and `Coor32`
items; given a list, it updates that very list and stores values back in
each item's own type. 3D items read with time NaN. `WithTime` supplies a
fixed time for a set of 3D coordinates.

## Contexts

`geodesy.minimal.Minimal` keeps a registry of operator constructors
(`register_op`, `get_op`) and resources (`register_resource`,
`get_resource`). Unless created with `builtin_adaptors=False`, it starts
with the adaptor resources `geo:in`, `geo:out`, `gis:in`, `gis:out`,
`neu:in`, `neu:out`, `enu:in` and `enu:out`.

```python
from geodesy.minimal import Minimal, NotFoundError

ctx = Minimal()
print(ctx.get_resource("geo:in"))        # "adapt from=neuf_deg"
ctx.register_resource("stupid:way", "addone | addone | addone inv")
print(ctx.globals())                      # {'ellps': 'GRS80'}

try:
    ctx.get_resource("no:such")
except NotFoundError as err:
    print(err)
```

`get_blob(name)` reads `./geodesy/<extension>/<name>`. Errors are
`GeodesyError` and its subclasses `NotFoundError` and `BadParamError`.

`geodesy.plain.Plain` extends `Minimal` with resources and blobs read
from a list of data directories, given as `paths` (by default
`./geodesy` and a `geodesy` directory in the user's local data
directory). A `prefix:suffix` name not registered at run time is looked
up, directory by directory, as `resources/prefix_suffix.resource`, then
as the `<suffix>` entry of `resources/prefix.register`. Other names
raise `BadParamError`; names that are nowhere to be found raise
`NotFoundError`.

```python
from geodesy.plain import Plain

ctx = Plain(paths=["./geodesy"])
print(ctx.get_resource("stupid:way"))    # if ./geodesy/resources holds it
```

## What this package does not do

The contexts only store and look up operator constructors and resource
texts. The package has no operators of its own (no projections, datum
shifts or adaptors that act on coordinates), does not parse or run
operator definitions or pipelines, and has no way to apply an operation
to a coordinate set. It has no ellipsoid or geodesic computations, reads
no grids (`get_grid` always raises `GeodesyError`), and has no
command-line program.