# -*- coding: utf-8 -*-
"""
Scene state and the per-frame simulation step.

The window loop owns timing: it measures the frame delta and passes it to
Scene.step, so a step is deterministic given (dt, stiffness, damping).
"""

import logging

from .config import (
    ENDPOINT_INSET,
    P1_START_X,
    P2_START_X,
    CONTROL_OFFSET_Y,
    TARGET_OFFSET,
    MAX_TRAIL,
    PHASE_STEP,
)
from .spring import SpringPoint
from .trail import Trail
from .vector import Vec2, add, sub

logger = logging.getLogger(__name__)


# =========================
# INPUT
# =========================

def pointer_to_local(pos, origin=(0, 0)):
    """Window coordinates -> surface coordinates."""

    return sub(Vec2(pos), Vec2(origin))


# =========================
# SCENE
# =========================

class Scene:

    def __init__(self, p0, p3, p1, p2):

        self.p0 = Vec2(p0)
        self.p3 = Vec2(p3)
        self.p1 = SpringPoint(p1)
        self.p2 = SpringPoint(p2)

        self.mouse = Vec2(0, 0)

        self.trail1 = Trail(MAX_TRAIL)
        self.trail2 = Trail(MAX_TRAIL)

        self.phase = 0.0
        self.fps = 0.0
        self.speed = 0.0
        self.frames = 0

        self._diverged = False

    @classmethod
    def create(cls, width, height):

        mid = height / 2

        return cls(
            p0=(ENDPOINT_INSET, mid),
            p3=(width - ENDPOINT_INSET, mid),
            p1=(P1_START_X, mid - CONTROL_OFFSET_Y),
            p2=(P2_START_X, mid + CONTROL_OFFSET_Y),
        )

    def control_points(self):
        return self.p0, self.p1.pos, self.p2.pos, self.p3

    # -------------------------
    # INPUT LISTENER
    # -------------------------

    def set_pointer(self, local):

        self.mouse = Vec2(local)
        self.p1.target = Vec2(self.mouse)
        self.p2.target = add(self.mouse, Vec2(TARGET_OFFSET))

    # -------------------------
    # FRAME STEP
    # -------------------------

    def step(self, dt, stiffness, damping):
        """Advance the springs one frame. dt is in seconds."""

        self.fps = 1.0 / dt if dt > 0 else 0.0

        self.p1.update(stiffness, damping)
        self.p2.update(stiffness, damping)

        self.trail1.append(self.p1.pos)
        self.trail2.append(self.p2.pos)

        self.speed = self.p1.speed + self.p2.speed
        self.frames += 1

        if not self._diverged and not (self.p1.is_finite() and self.p2.is_finite()):
            self._diverged = True
            logger.warning(
                "spring positions are no longer finite (stiffness=%r, damping=%r)",
                stiffness,
                damping,
            )

    def advance_phase(self):
        self.phase += PHASE_STEP

    def reset(self):

        self.p1.reset()
        self.p2.reset()
        self.trail1.clear()
        self.trail2.clear()

        self.mouse = Vec2(0, 0)

        self.phase = 0.0
        self.speed = 0.0
        self._diverged = False

        logger.info("scene reset")
