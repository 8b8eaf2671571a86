import math

import pygame
import pytest

from springcurve import render
from springcurve.config import BACKGROUND, MAX_STROKE, MIN_STROKE, WAVE_AMPLITUDE
from springcurve.simulation import Scene
from springcurve.vector import Vec2


def test_stress_color_extremes():
    # stress = |sin(t*pi)| at rest
    assert render.stress_color(0, 0) == (0, 255, 200)
    assert render.stress_color(0.5, 0) == (255, 0, 200)


def test_stress_shifts_with_speed():
    assert render.stress(0, 10) == pytest.approx(abs(math.sin(0.5)))


def test_stroke_width_grows_then_clamps():
    assert render.stroke_width(0) == MIN_STROKE
    assert render.stroke_width(19) == 4
    assert render.stroke_width(20) == 4
    assert render.stroke_width(1000) == MAX_STROKE


def test_wave_offset_is_bounded():
    for i in range(50):
        assert abs(render.wave_offset(i / 49, i * 0.05)) <= WAVE_AMPLITUDE


def test_curve_points_ripple_along_normal():
    scene = Scene.create(1000, 600)
    # flatten the curve into a straight horizontal line
    scene.p1.pos = Vec2(scene.p0)
    scene.p2.pos = Vec2(scene.p3)

    points = render.curve_points(scene)

    assert points[0][0] == 0
    assert points[-1][0] == pytest.approx(1.0)
    for t, p in points:
        # normal of a left-to-right line points along +y
        assert p.y - 300 == pytest.approx(render.wave_offset(t, scene.phase), abs=1e-9)


def test_curve_points_follow_phase():
    scene = Scene.create(1000, 600)
    before = render.curve_points(scene)[10][1]

    scene.advance_phase()
    after = render.curve_points(scene)[10][1]

    assert before != after


def test_tangent_segments_have_fixed_length():
    scene = Scene.create(1000, 600)
    segments = render.tangent_segments(scene)

    assert len(segments) == 6
    for a, b in segments:
        assert a.distance_to(b) == pytest.approx(30)


def test_dash_segments_cover_the_line():
    segments = render.dash_segments(Vec2(0, 0), Vec2(20, 0), dash=4)

    assert len(segments) == 3
    assert segments[0][0] == Vec2(0, 0)
    assert segments[0][1] == Vec2(4, 0)
    assert segments[-1][1].x <= 20


def test_dash_segments_zero_length():
    assert render.dash_segments(Vec2(1, 1), Vec2(1, 1)) == []


def test_panel_lines_report_diagnostics():
    scene = Scene.create(800, 600)
    scene.speed = 12.34
    scene.fps = 59.94

    lines = [text for text, _ in render.panel_lines(scene, 0.08, 0.85)]

    assert lines == [
        "Simulation Info",
        "Stiffness (k): 0.08",
        "Damping: 0.85",
        "Velocity: 12.3",
        "FPS: 59.9",
    ]


def test_render_draws_on_cleared_surface(font):
    surf = pygame.Surface((800, 600))
    surf.fill((255, 0, 255))

    scene = Scene.create(800, 600)
    scene.set_pointer(Vec2(300, 200))
    for _ in range(5):
        scene.step(0.016, 0.1, 0.85)

    render.render(surf, scene, 0.1, 0.85, font)

    # far corner away from every drawn element keeps the background
    assert surf.get_at((799, 5))[:3] == BACKGROUND
    # the fixed anchor marker is painted white
    assert surf.get_at((200, 300))[:3] == (255, 255, 255)


def test_render_survives_diverged_scene(font):
    surf = pygame.Surface((800, 600))
    scene = Scene.create(800, 600)
    scene.set_pointer(Vec2(300, 200))
    scene.step(0.016, float("nan"), 0.9)

    render.render(surf, scene, float("nan"), 0.9, font)


def test_background_is_built_once_per_size():
    a = render.background((640, 480))

    assert render.background((640, 480)) is a
    assert a.get_at((1, 1))[:3] == BACKGROUND


def test_frame_uses_only_small_translucent_layers(monkeypatch, font):
    surf = pygame.Surface((800, 600))
    scene = Scene.create(800, 600)
    scene.set_pointer(Vec2(300, 200))
    for _ in range(30):
        scene.step(0.016, 0.1, 0.85)

    # warm the cached background first
    render.background(surf.get_size())

    sizes = []
    original = render._layer

    def recording_layer(size):
        sizes.append(tuple(size))
        return original(size)

    monkeypatch.setattr(render, "_layer", recording_layer)
    render.render(surf, scene, 0.1, 0.85, font)

    assert sizes
    assert all(w * h < 800 * 600 // 10 for w, h in sizes)


def test_tangent_ticks_are_drawn_translucent(font):
    surf = pygame.Surface((800, 600))
    scene = Scene.create(800, 600)
    scene.mouse = Vec2(700, 50)

    render.render(surf, scene, 0.1, 0.85, font)

    # the tick from the right anchor at t=1 points up and to the right
    p, end = render.tangent_segments(scene)[-1]
    mid = (p + end) / 2
    r, g, b = surf.get_at((round(mid.x), round(mid.y)))[:3]
    assert r > g and r < 255


def test_huge_but_finite_positions_are_skipped(font):
    surf = pygame.Surface((800, 600))
    scene = Scene.create(800, 600)
    scene.p1.pos = Vec2(1e12, -1e12)
    scene.trail1.append(Vec2(1e12, 0))

    render.render(surf, scene, 0.1, 0.85, font)

    assert not render.drawable(Vec2(1e12, 0))
    assert render.drawable(Vec2(10, 10))
