# fieldvision

Vision helpers for soccer-robot localization. The package works on numpy
images and plain point lists:

- **`fieldvision.localization`** scans segmented frames for field-line
  points. `scan_line_points`, `scan_all_line_points` and
  `adaptive_scan_line_points` do the scanning. `ransac` fits straight lines
  to the points it finds and returns a `RansacResult`.
- **`fieldvision.fitcircle`** fits circles to point sets, for example to
  find the centre circle. It offers the Kåsa method (`kasa_method`) and the
  Newton-Pratt method (`newton_pratt_method`). Each returns a `Circle`
  (`x`, `y`, `radius`, `cost`), where `cost` is the mean absolute algebraic
  residual in percent of the squared radius.
- **`fieldvision.common`** holds the shared `Point` type, the `ImageEncode`
  enumeration and the field, frame and camera-mount constants.
- **`fieldvision.colors`** provides the `RgbColor` enumeration of 146 named
  colours, numbered from zero in alphabetical order.
- **`fieldvision.endian`** provides byte-order reversal and conversion for
  1, 2, 4 and 8 byte integers, with a `ByteOrder` enumeration.

## Installation

```
pip install fieldvision
```

To also install the test dependencies:

```
pip install "fieldvision[test]"
```

## Fitting a circle

```python
import math
from fieldvision.common import Point
from fieldvision.fitcircle import kasa_method, newton_pratt_method

points = [
    Point(int(100 + 50 * math.cos(t / 10)), int(80 + 50 * math.sin(t / 10)))
    for t in range(63)
]

circle = kasa_method(points)
print(circle)

circle = newton_pratt_method(points, max_steps=20, epsilon=1e-12)
print(circle.is_valid, circle)
```

`newton_pratt_method` returns the sentinel `NOT_CIRCLE` (all fields `-1`)
when it is given no points or finds no solution; `Circle.is_valid` is then
false. `sample_mean` and `kasa_cost` raise `ValueError` for an empty point
set.

## Finding line points and fitting lines

`invert_green` and `segmented_white` are single-channel numpy arrays of the
same shape; non-zero pixels mean "not green" and "white". A `FieldBoundary`
holds two lists of `BoundaryColumn(x, y, z)` entries: `bound1` for column
scans and `bound2` for row scans, where `y` is the first row scanned and `z`
the row at which scanning stops.

```python
import random
from fieldvision.localization import ransac, scan_all_line_points

points = scan_all_line_points(invert_green, segmented_white, boundary)
result = ransac(points, n=3, k=40, t=2.0, d=10, rng=random.Random(0))
print(result.intercept, result.slope)   # y = intercept + slope * x
print(result.inliers)                   # largest contiguous run of inliers
print(result.remaining)                 # input points minus that run
```

`ransac` raises `ValueError` when given no points.
`adaptive_scan_line_points(invert_green, segmented_white, tilt, pan)` scans
rays fanning out from both top corners instead, with the number of rays set
by the head tilt and pan.

## Byte order

```python
from fieldvision.endian import (
    ByteOrder, conditional_reverse, endian_reverse, big_reverse_copy, from_big_bytes,
)

endian_reverse(0x01020304, 4, False)                              # 0x04030201
conditional_reverse(0x0102, ByteOrder.BIG, ByteOrder.LITTLE, 2, False)  # 0x0201
big_reverse_copy(0x0102, 2)                                       # b"\x01\x02"
from_big_bytes(b"\x01\x02")                                       # 0x0102
```

A width other than 1, 2, 4 or 8 raises `ValueError`; a value that does not
fit the width and signedness raises `OverflowError`.

## What it does not do

The package does not capture, receive or display camera frames, and it does
not segment images: callers supply the already segmented arrays. It has no
command-line tool.

## Running the tests

```
pytest
```