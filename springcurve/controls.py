# -*- coding: utf-8 -*-
"""
Minimal horizontal slider widget for pygame.

The widget keeps its own knob inside [lo, hi]; whatever it reports is
handed to the simulation untouched.
"""

import pygame

from .config import (
    SLIDER_THICKNESS,
    SLIDER_TRACK_COLOR,
    SLIDER_FILL_COLOR,
    SLIDER_KNOB_COLOR,
    TEXT_COLOR,
)


class Slider:

    def __init__(self, label, lo, hi, value, rect, step=0.01):

        if hi <= lo:
            raise ValueError(f"slider {label!r}: hi ({hi}) must exceed lo ({lo})")

        self.label = label
        self.lo = float(lo)
        self.hi = float(hi)
        self.step = step
        self.rect = pygame.Rect(rect)
        self.dragging = False
        self.value = self._clamp(float(value))

    def _clamp(self, v):
        return max(self.lo, min(self.hi, v))

    # -------------------------
    # GEOMETRY
    # -------------------------

    def knob_x(self):

        radius = self.rect.height / 2
        span = self.rect.width - self.rect.height
        frac = (self.value - self.lo) / (self.hi - self.lo)

        return self.rect.x + radius + frac * span

    def value_at(self, x):
        """Slider value whose knob centre sits under screen x."""

        radius = self.rect.height / 2
        span = self.rect.width - self.rect.height
        rel = (x - self.rect.x - radius) / span

        return self._clamp(self.lo + rel * (self.hi - self.lo))

    def hit_rect(self):
        # a little vertical slack makes the thin track easier to grab
        return self.rect.inflate(0, 12)

    # -------------------------
    # INPUT
    # -------------------------

    def handle_event(self, event):
        """Returns True when the event was consumed by this slider."""

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.hit_rect().collidepoint(event.pos):
                self.dragging = True
                self.value = self.value_at(event.pos[0])
                return True

        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.value = self.value_at(event.pos[0])
            return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.dragging:
                self.dragging = False
                return True

        return False

    def nudge(self, steps):
        self.value = self._clamp(self.value + steps * self.step)

    # -------------------------
    # DRAW
    # -------------------------

    def draw(self, surf, font):

        r = self.rect
        radius = r.height // 2

        pygame.draw.rect(surf, SLIDER_TRACK_COLOR, r, 0, border_radius=radius)

        fill = pygame.Rect(r.x, r.y, int(self.knob_x() - r.x), r.height)
        pygame.draw.rect(surf, SLIDER_FILL_COLOR, fill, 0, border_radius=radius)

        pygame.draw.circle(
            surf,
            SLIDER_KNOB_COLOR,
            (int(self.knob_x()), r.centery),
            SLIDER_THICKNESS // 2 - 2
        )

        text = font.render(f"{self.label}: {self.value:.2f}", True, TEXT_COLOR)
        surf.blit(text, (r.x, r.bottom + 4))
