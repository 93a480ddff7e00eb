"""Parametric 3D curves for curvescene.

Every curve maps a scalar parameter ``t`` (radians, unbounded) to a
position and a first derivative.  Periodic curves wrap through the
periodicity of ``cos``/``sin``; the helix climbs along z without bound.

Variants are told apart by their ``kind`` rather than by class checks,
and :func:`as_circle` is the guarded way to narrow a curve to a
:class:`Circle`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Sequence, Tuple

import numpy

from curvescene.geom import Point3D, Vector3D, mag


class CurveKind(Enum):
    """Variant tags for the supported curves."""
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


class Curve(ABC):
    """
    Base class for parametric curves.

    Subclasses provide ``point`` and ``derivative``; both are pure and
    total over all finite ``t``.
    """

    kind: ClassVar[CurveKind]

    @abstractmethod
    def point(self, t: float) -> Point3D:
        """Return the position of the curve at parameter ``t``."""
        pass

    @abstractmethod
    def derivative(self, t: float) -> Vector3D:
        """Return d(position)/dt at ``t``, not normalized."""
        pass

    def sample(self, ts: Sequence[float]) -> Tuple[numpy.ndarray, numpy.ndarray]:
        """
        Evaluate the curve at each parameter value in ``ts``.

        Returns:
            ``(points, derivatives)``, each a float array of shape (n, 3)
        """
        ts = list(ts)
        points = numpy.array([self.point(t) for t in ts], dtype=float).reshape(-1, 3)
        derivs = numpy.array([self.derivative(t) for t in ts], dtype=float).reshape(-1, 3)
        return points, derivs

    def arc_length(self, t0: float, t1: float, steps: int = 256) -> float:
        """Approximate the length of the curve between ``t0`` and ``t1``.

        Integrates the derivative magnitude with the trapezoidal rule over
        ``steps`` intervals.  The result is signed: swapping the bounds
        negates it.
        """
        if steps < 1:
            raise ValueError(f'arc_length needs at least one step, got steps={steps}')
        if t0 == t1:
            return 0.0
        ts = numpy.linspace(t0, t1, steps + 1)
        speeds = numpy.array([mag(self.derivative(t)) for t in ts])
        return float(numpy.sum(0.5 * (speeds[1:] + speeds[:-1]) * numpy.diff(ts)))


@dataclass(frozen=True)
class Circle(Curve):
    """Circle of ``radius`` about the origin in the XY plane."""

    radius: float
    kind: ClassVar[CurveKind] = CurveKind.CIRCLE

    def point(self, t: float) -> Point3D:
        return Point3D(self.radius * math.cos(t), self.radius * math.sin(t), 0.0)

    def derivative(self, t: float) -> Vector3D:
        return Vector3D(-self.radius * math.sin(t), self.radius * math.cos(t), 0.0)


@dataclass(frozen=True)
class Ellipse(Curve):
    """Axis-aligned ellipse about the origin in the XY plane."""

    radius_x: float
    radius_y: float
    kind: ClassVar[CurveKind] = CurveKind.ELLIPSE

    def point(self, t: float) -> Point3D:
        return Point3D(self.radius_x * math.cos(t), self.radius_y * math.sin(t), 0.0)

    def derivative(self, t: float) -> Vector3D:
        return Vector3D(-self.radius_x * math.sin(t), self.radius_y * math.cos(t), 0.0)


@dataclass(frozen=True)
class Helix(Curve):
    """
    Helix about the z axis.

    ``step`` is the pitch: the z advance per full turn of ``2*pi``.
    """

    radius: float
    step: float
    kind: ClassVar[CurveKind] = CurveKind.HELIX

    def point(self, t: float) -> Point3D:
        return Point3D(self.radius * math.cos(t),
                       self.radius * math.sin(t),
                       self.step * t / (2 * math.pi))

    def derivative(self, t: float) -> Vector3D:
        return Vector3D(-self.radius * math.sin(t),
                        self.radius * math.cos(t),
                        self.step / (2 * math.pi))


def is_circle(curve: Curve) -> bool:
    """Return ``True`` if *curve* is of the circle kind."""

    return curve.kind is CurveKind.CIRCLE


def as_circle(curve: Curve) -> Circle:
    """Return *curve* narrowed to a :class:`Circle`."""

    if not is_circle(curve):
        raise ValueError(f'curve is not a circle: {curve.kind.value}')
    return curve


__all__ = [
    "CurveKind",
    "Curve",
    "Circle",
    "Ellipse",
    "Helix",
    "is_circle",
    "as_circle",
]
