# -*- coding: utf-8 -*-
"""
2D vector helpers on top of pygame.Vector2.

Every helper returns a new vector; inputs are never mutated.
"""

import pygame


Vec2 = pygame.Vector2


def add(a, b):
    return Vec2(a.x + b.x, a.y + b.y)


def sub(a, b):
    return Vec2(a.x - b.x, a.y - b.y)


def scale(v, s):
    return Vec2(v.x * s, v.y * s)


def length(v):
    return Vec2(v).length()


def normalize(v):
    """Unit vector along v. The zero vector comes back unchanged."""

    l = length(v) or 1
    return Vec2(v.x / l, v.y / l)


def perpendicular(v):
    # rotated +90 degrees in screen space
    return Vec2(-v.y, v.x)
