# -*- coding: utf-8 -*-
"""
Frame renderer.

render() is a pure function of the scene: it clears the target surface and
redraws everything from scratch. The grid never changes, so the background
is built once per window size. Translucent pieces go through small SRCALPHA
surfaces cut to their own bounds so alpha blends without paying for a
full-window layer every frame.
"""

import math
from functools import lru_cache

import pygame

from . import bezier
from .config import (
    BACKGROUND,
    TEXT_COLOR,
    SUBTEXT_COLOR,
    FPS_COLOR,
    GRID_SPACING,
    GRID_COLOR,
    CURVE_STEP,
    WAVE_AMPLITUDE,
    WAVE_FREQUENCY,
    STRESS_SPEED_SCALE,
    MIN_STROKE,
    MAX_STROKE,
    STROKE_SPEED_SCALE,
    TANGENT_STEP,
    TANGENT_LENGTH,
    TANGENT_COLOR,
    TRAIL_RADIUS,
    TRAIL1_COLOR,
    TRAIL2_COLOR,
    POINT_RADIUS,
    LABEL_OFFSET,
    P1_LABEL_OFFSET,
    P2_LABEL_OFFSET,
    MOUSE_LABEL_OFFSET,
    SUBLABEL_GAP,
    GUIDE_COLOR,
    GUIDE_DASH,
    PANEL_RECT,
    PANEL_COLOR,
)
from .vector import Vec2, add, sub, scale, length, normalize


# =========================
# PURE HELPERS
# =========================

def stress(t, speed):
    return abs(math.sin(t * math.pi + speed * STRESS_SPEED_SCALE))


def stress_color(t, speed):

    s = stress(t, speed)
    return (int(255 * s), int(255 * (1 - s)), 200)


def stroke_width(speed):
    return round(min(MAX_STROKE, MIN_STROKE + speed * STROKE_SPEED_SCALE))


def wave_offset(t, phase):
    return math.sin(t * math.pi * WAVE_FREQUENCY + phase) * WAVE_AMPLITUDE


# coordinates past this are off any real screen and overflow SDL ints
DRAW_LIMIT = 1e6


def drawable(p):
    return (
        math.isfinite(p[0]) and math.isfinite(p[1])
        and abs(p[0]) < DRAW_LIMIT and abs(p[1]) < DRAW_LIMIT
    )


def curve_points(scene, step=CURVE_STEP):
    """(t, point) samples of the curve pushed along the normal by the ripple."""

    ctrl = scene.control_points()
    points = []

    for t in bezier.sample_params(step):

        base = bezier.point_at(t, *ctrl)
        normal = bezier.normal_at(t, *ctrl)

        points.append((t, add(base, scale(normal, wave_offset(t, scene.phase)))))

    return points


def tangent_segments(scene, step=TANGENT_STEP, size=TANGENT_LENGTH):

    ctrl = scene.control_points()
    segments = []

    for t in bezier.sample_params(step):
        p = bezier.point_at(t, *ctrl)
        tan = bezier.tangent_at(t, *ctrl)
        segments.append((p, add(p, scale(tan, size))))

    return segments


def dash_segments(start, end, dash=GUIDE_DASH):
    """Split start->end into on-segments of `dash` length with equal gaps."""

    start = Vec2(start)
    delta = sub(Vec2(end), start)
    total = length(delta)

    if total == 0:
        return []

    direction = normalize(delta)
    segments = []
    d = 0.0

    while d < total:
        a = add(start, scale(direction, d))
        b = add(start, scale(direction, min(d + dash, total)))
        segments.append((a, b))
        d += dash * 2

    return segments


# =========================
# LAYERS
# =========================

def _layer(size):
    return pygame.Surface(size, pygame.SRCALPHA)


def _bounds(points, pad):
    """Integer (left, top, width, height) box around points, padded."""

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]

    left = math.floor(min(xs)) - pad
    top = math.floor(min(ys)) - pad

    return (
        left,
        top,
        math.ceil(max(xs)) - left + pad + 1,
        math.ceil(max(ys)) - top + pad + 1,
    )


def _blit_lines(surf, color, segments, width=1):
    """Translucent lines on a scratch surface just big enough to hold them."""

    segments = [(a, b) for a, b in segments if drawable(a) and drawable(b)]
    if not segments:
        return

    left, top, w, h = _bounds([p for seg in segments for p in seg], width)
    offset = Vec2(left, top)
    layer = _layer((w, h))

    for a, b in segments:
        pygame.draw.line(layer, color, sub(a, offset), sub(b, offset), width)

    surf.blit(layer, (left, top))


@lru_cache(maxsize=4)
def background(size):
    """Background fill with the grid blended in. Cached per window size."""

    w, h = size
    bg = pygame.Surface(size)
    bg.fill(BACKGROUND)

    grid = _layer(size)
    for x in range(0, w, GRID_SPACING):
        pygame.draw.line(grid, GRID_COLOR, (x, 0), (x, h))
    for y in range(0, h, GRID_SPACING):
        pygame.draw.line(grid, GRID_COLOR, (0, y), (w, y))

    bg.blit(grid, (0, 0))
    return bg


def draw_trail(surf, trail, color):

    size = TRAIL_RADIUS * 2 + 1

    for p, a in trail.alphas():

        if not drawable(p):
            continue

        dot = _layer((size, size))
        pygame.draw.circle(dot, (*color, int(255 * a)), (TRAIL_RADIUS, TRAIL_RADIUS), TRAIL_RADIUS)
        surf.blit(dot, (round(p.x) - TRAIL_RADIUS, round(p.y) - TRAIL_RADIUS))


def draw_curve(surf, scene):

    width = stroke_width(scene.speed)
    points = curve_points(scene)

    for (t, a), (_, b) in zip(points, points[1:]):
        if drawable(a) and drawable(b):
            pygame.draw.line(surf, stress_color(t, scene.speed), a, b, width)


def draw_tangents(surf, scene):

    for segment in tangent_segments(scene):
        _blit_lines(surf, TANGENT_COLOR, [segment])


def draw_point(surf, font, p, label, sub_label="", offset=LABEL_OFFSET):

    if not drawable(p):
        return

    ox, oy = offset

    pygame.draw.circle(surf, TEXT_COLOR, p, POINT_RADIUS)

    # canvas-style offsets are to the text baseline, pygame blits from the top
    top = p.y + oy - font.get_ascent()

    surf.blit(font.render(label, True, TEXT_COLOR), (p.x + ox, top))
    if sub_label:
        surf.blit(
            font.render(sub_label, True, SUBTEXT_COLOR),
            (p.x + ox, top + SUBLABEL_GAP)
        )


def draw_guide(surf, scene):

    label_anchor = add(scene.mouse, Vec2(MOUSE_LABEL_OFFSET))
    _blit_lines(surf, GUIDE_COLOR, dash_segments(scene.mouse, label_anchor))


def panel_lines(scene, stiffness, damping):

    return [
        ("Simulation Info", TEXT_COLOR),
        (f"Stiffness (k): {stiffness:.2f}", TEXT_COLOR),
        (f"Damping: {damping:.2f}", TEXT_COLOR),
        (f"Velocity: {scene.speed:.1f}", TEXT_COLOR),
        (f"FPS: {scene.fps:.1f}", FPS_COLOR),
    ]


def draw_panel(surf, font, scene, stiffness, damping):

    x, y, w, h = PANEL_RECT
    top = surf.get_height() + y

    box = _layer((w, h))
    box.fill(PANEL_COLOR)
    surf.blit(box, (x, top))

    for i, (text, color) in enumerate(panel_lines(scene, stiffness, damping)):
        surf.blit(font.render(text, True, color), (x + 10, top + 14 + i * 20))


# =========================
# FRAME
# =========================

def render(surf, scene, stiffness, damping, font, sliders=()):

    # replaces a fill, so the previous frame is fully cleared
    surf.blit(background(surf.get_size()), (0, 0))

    draw_trail(surf, scene.trail1, TRAIL1_COLOR)
    draw_trail(surf, scene.trail2, TRAIL2_COLOR)

    draw_curve(surf, scene)
    draw_tangents(surf, scene)

    draw_point(surf, font, scene.p0, "P0", "Fixed Anchor")
    draw_point(surf, font, scene.p3, "P3", "Fixed Anchor")
    draw_point(surf, font, scene.p1.pos, "P1", "Dynamic (Spring)", P1_LABEL_OFFSET)
    draw_point(surf, font, scene.p2.pos, "P2", "Dynamic (Spring)", P2_LABEL_OFFSET)
    draw_point(surf, font, scene.mouse, "Mouse", "Target", MOUSE_LABEL_OFFSET)

    draw_guide(surf, scene)
    draw_panel(surf, font, scene, stiffness, damping)

    for slider in sliders:
        slider.draw(surf, font)
