## point and vector primitives for curvescene
## Copyright (c) 2026 curvescene contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""point and vector primitives for **curvescene**

====================
OVERVIEW
====================

Positions and rates in **curvescene** are plain 3-tuples of floats.
``Point3D`` is a position in space, ``Vector3D`` is a direction or
rate of change, such as the (unnormalized) tangent of a parametric
curve.  Both are immutable named tuples, so they index, unpack,
compare and hash exactly like ``(x, y, z)``.

Unlike homogeneous 4-vector representations, there is no ``w``
coordinate: the distinction between a point and a vector is carried by
the type alone.

No validation is done on construction.  NaN and infinite coordinates
are accepted and propagate through any arithmetic that uses them.

"""

from __future__ import annotations

from math import sqrt
from typing import NamedTuple, Sequence

import numpy

## the library-wide comparison tolerance
epsilon = 0.000005


def _fmt(x, y, z) -> str:
    return f"({x!r}, {y!r}, {z!r})"


class Point3D(NamedTuple):
    """A position in 3D space."""

    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return _fmt(self.x, self.y, self.z)

    def to_array(self) -> numpy.ndarray:
        return numpy.array(self, dtype=float)


class Vector3D(NamedTuple):
    """A direction or rate vector in 3D space."""

    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return _fmt(self.x, self.y, self.z)

    def to_array(self) -> numpy.ndarray:
        return numpy.array(self, dtype=float)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]


def mag(a: Sequence[float]) -> float:
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag((a[0]-b[0], a[1]-b[1], a[2]-b[2]))


def vclose(a: Sequence[float], b: Sequence[float], tol: float = epsilon) -> bool:
    """Return ``True`` if every component of ``a`` and ``b`` agrees within ``tol``."""
    return all(abs(a[i]-b[i]) <= tol for i in range(3))


__all__ = [
    "epsilon",
    "Point3D",
    "Vector3D",
    "dot",
    "mag",
    "dist",
    "vclose",
]
