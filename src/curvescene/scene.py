"""Random curve scenes: generation, evaluation and radius aggregation.

A scene is an ordered list of curves.  Generation draws from an
explicitly passed ``random.Random`` so scenes can be reproduced from a
seed.  The aggregation helpers only ever hand out references to curves
already held by the scene.
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Sequence, TextIO, Tuple

from curvescene.curves import Circle, Curve, Ellipse, Helix, as_circle, is_circle
from curvescene.geom import Point3D, Vector3D

logger = logging.getLogger(__name__)

SCENE_SIZE = 10
EVAL_PARAMETER = math.pi / 4.0

RADIUS_RANGE = (1.0, 11.0)
STEP_RANGE = (0.1, 0.6)
ELLIPSE_ASPECT = 0.5


def random_curve(rng: random.Random) -> Curve:
    """Draw radius, step and variant selector from *rng*, in that order,
    and build the selected curve."""

    minr, maxr = RADIUS_RANGE
    mins, maxs = STEP_RANGE
    radius = rng.random()*(maxr-minr)+minr
    step = rng.random()*(maxs-mins)+mins

    choice = rng.randrange(3)
    if choice == 0:
        return Circle(radius)
    elif choice == 1:
        return Ellipse(radius, radius*ELLIPSE_ASPECT)
    else:
        return Helix(radius, step)


def generate_scene(rng: Optional[random.Random] = None, count: int = SCENE_SIZE) -> List[Curve]:
    """
    Generate a scene of ``count`` randomly chosen curves.

    Args:
        rng: random source; an unseeded ``random.Random`` when ``None``
        count: number of curves

    Returns:
        The curves in creation order
    """
    if rng is None:
        rng = random.Random()

    curves = []
    for i in range(count):
        curve = random_curve(rng)
        logger.debug("slot %d: %r", i, curve)
        curves.append(curve)
    return curves


def evaluate_scene(curves: Sequence[Curve],
                   t: float = EVAL_PARAMETER) -> List[Tuple[Point3D, Vector3D]]:
    """Return the ``(point, derivative)`` pair of every curve at ``t``, in scene order."""

    return [(curve.point(t), curve.derivative(t)) for curve in curves]


def format_evaluation(point: Point3D, derivative: Vector3D) -> str:
    return f"Point: {point} Derivative: {derivative}"


def select_circles(curves: Sequence[Curve]) -> List[Circle]:
    """Return the circles of a scene in scene order; other kinds are skipped."""

    return [as_circle(curve) for curve in curves if is_circle(curve)]


def sort_by_radius(circles: Sequence[Circle]) -> List[Circle]:
    return sorted(circles, key=lambda c: c.radius)


def total_radius(circles: Sequence[Circle]) -> float:
    total = 0.0
    for circle in circles:
        total += circle.radius
    return total


def format_total(total: float) -> str:
    return f"Total sum of radii: {total!r}"


def report(curves: Sequence[Curve], stream: TextIO, t: float = EVAL_PARAMETER) -> float:
    """
    Write the scene report to ``stream``.

    One evaluation line per curve is followed by the total radius of the
    scene's circles, summed in ascending radius order.

    Returns:
        The total radius
    """
    for point, derivative in evaluate_scene(curves, t):
        print(format_evaluation(point, derivative), file=stream)

    circles = sort_by_radius(select_circles(curves))
    logger.info("%d of %d curves are circles", len(circles), len(curves))
    total = total_radius(circles)
    print(format_total(total), file=stream)
    return total


__all__ = [
    "SCENE_SIZE",
    "EVAL_PARAMETER",
    "random_curve",
    "generate_scene",
    "evaluate_scene",
    "format_evaluation",
    "select_circles",
    "sort_by_radius",
    "total_radius",
    "format_total",
    "report",
]
