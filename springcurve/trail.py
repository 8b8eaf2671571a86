# -*- coding: utf-8 -*-
"""
Bounded position history used for the fading dots behind each spring point.
"""

from collections import deque

from .config import MAX_TRAIL
from .vector import Vec2


class Trail:

    def __init__(self, capacity=MAX_TRAIL):

        if capacity < 1:
            raise ValueError("trail capacity must be at least 1")

        self.points = deque(maxlen=capacity)

    def append(self, pos):
        # deque drops the oldest entry once full
        self.points.append(Vec2(pos))

    def clear(self):
        self.points.clear()

    def alphas(self):
        """(position, opacity) pairs, oldest first; opacity = index / length."""

        n = len(self.points)
        return [(p, i / n) for i, p in enumerate(self.points)]

    def __len__(self):
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]
