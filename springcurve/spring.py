# -*- coding: utf-8 -*-
"""
Damped spring point that chases a moving target.
"""

import math

from .vector import Vec2, add, sub, scale, length


class SpringPoint:

    def __init__(self, pos):

        self.home = Vec2(pos)
        self.pos = Vec2(pos)
        self.vel = Vec2(0, 0)
        self.target = Vec2(pos)

    # -------------------------
    # UPDATE PHYSICS
    # -------------------------

    def update(self, stiffness, damping):
        """
        One integration step, unit mass.

        Damping scales the velocity directly instead of acting as a drag
        force, so anything in (0, 1) bleeds speed every step. Parameters
        are taken as-is; large stiffness or damping >= 1 will diverge.
        """

        force = scale(sub(self.target, self.pos), stiffness)

        self.vel = scale(add(self.vel, force), damping)
        self.pos = add(self.pos, self.vel)

    @property
    def speed(self):
        return length(self.vel)

    def is_finite(self):
        return math.isfinite(self.pos.x) and math.isfinite(self.pos.y)

    def reset(self):

        self.pos = Vec2(self.home)
        self.vel = Vec2(0, 0)
        self.target = Vec2(self.home)
