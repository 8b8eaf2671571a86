# -*- coding: utf-8 -*-
"""
Cubic Bezier evaluation.

All functions take the curve parameter first and the four control points
after it. t is normally in [0, 1]; values outside that range extrapolate.
"""

from .vector import add, sub, scale, normalize, perpendicular


def point_at(t, p0, p1, p2, p3):

    u = 1 - t

    return add(
        add(scale(p0, u * u * u), scale(p1, 3 * u * u * t)),
        add(scale(p2, 3 * u * t * t), scale(p3, t * t * t)),
    )


def derivative_at(t, p0, p1, p2, p3):

    u = 1 - t

    return add(
        add(scale(sub(p1, p0), 3 * u * u), scale(sub(p2, p1), 6 * u * t)),
        scale(sub(p3, p2), 3 * t * t),
    )


def tangent_at(t, p0, p1, p2, p3):
    """Unit tangent; degenerate spots (zero derivative) give the zero vector."""

    return normalize(derivative_at(t, p0, p1, p2, p3))


def normal_at(t, p0, p1, p2, p3):
    return perpendicular(tangent_at(t, p0, p1, p2, p3))


def sample_params(step):
    """
    Parameter values 0, step, 2*step, ... up to 1.

    Built from an integer count so accumulated float error can't drop
    the final sample.
    """

    if step <= 0:
        raise ValueError("step must be positive")

    count = int(round(1.0 / step))
    params = [i * step for i in range(count + 1) if i * step <= 1.0 + 1e-9]
    return [min(t, 1.0) for t in params]

