#!/usr/bin/env python3
"""
Generate a random curve scene and report on it.

Usage:
    python -m curvescene [--seed N] [-v]

Prints one ``Point: ... Derivative: ...`` line per curve, evaluated at
t = pi/4, followed by the total radius of the scene's circles.

Examples:
    # A fresh random scene of ten curves
    python -m curvescene

    # A reproducible scene with debug logging on stderr
    python -m curvescene --seed 42 -v
"""

import argparse
import random
import sys

from .logging_config import setup_logging
from .scene import generate_scene, report


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='python -m curvescene',
        description='random parametric curve scene report',
    )
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random source (default: unseeded)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log debug output to stderr')

    args = parser.parse_args(argv)

    logger = setup_logging(args.verbose)

    rng = random.Random(args.seed)
    curves = generate_scene(rng)
    logger.debug("generated %d curves (seed=%s)", len(curves), args.seed)

    report(curves, sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
