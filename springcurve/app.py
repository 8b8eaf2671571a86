# -*- coding: utf-8 -*-
"""
Window, event loop and command line for the spring curve toy.
"""

import argparse
import logging
import sys
import time

import pygame

from .config import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    FPS,
    CAPTION,
    FONT_NAME,
    FONT_SIZE,
    STIFFNESS_RANGE,
    STIFFNESS_DEFAULT,
    STIFFNESS_STEP,
    DAMPING_RANGE,
    DAMPING_DEFAULT,
    DAMPING_STEP,
    SLIDER_WIDTH,
    SLIDER_THICKNESS,
    SLIDER_MARGIN,
    SLIDER_GAP,
)
from .controls import Slider
from .render import render
from .simulation import Scene, pointer_to_local

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


# =========================
# CLI
# =========================

def _positive_int(text):

    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def parse_args(argv=None):

    parser = argparse.ArgumentParser(
        prog="springcurve",
        description="Cubic Bezier curve with spring-driven control points",
    )
    parser.add_argument("--width", type=_positive_int, default=None,
                        help="Window width in pixels (default: desktop width)")
    parser.add_argument("--height", type=_positive_int, default=None,
                        help="Window height in pixels (default: desktop height)")
    parser.add_argument("--fps", type=_positive_int, default=FPS,
                        help="Frame rate cap")
    parser.add_argument("--stiffness", type=float, default=STIFFNESS_DEFAULT,
                        help="Initial stiffness slider value")
    parser.add_argument("--damping", type=float, default=DAMPING_DEFAULT,
                        help="Initial damping slider value")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")

    args = parser.parse_args(argv)

    lo, hi = STIFFNESS_RANGE
    if not lo <= args.stiffness <= hi:
        parser.error(f"--stiffness must be within [{lo}, {hi}]")
    lo, hi = DAMPING_RANGE
    if not lo <= args.damping <= hi:
        parser.error(f"--damping must be within [{lo}, {hi}]")

    return args


# =========================
# SETUP
# =========================

def window_size(args):
    """Requested size, falling back to the desktop (fixed at startup)."""

    width, height = args.width, args.height

    if width is None or height is None:
        sizes = pygame.display.get_desktop_sizes() if pygame.display.get_init() else []
        desk_w, desk_h = sizes[0] if sizes else (DEFAULT_WIDTH, DEFAULT_HEIGHT)
        width = width or desk_w
        height = height or desk_h

    return width, height


def make_sliders(width, stiffness, damping):

    x = width - SLIDER_WIDTH - SLIDER_MARGIN

    return {
        "stiffness": Slider(
            "Stiffness", *STIFFNESS_RANGE, stiffness,
            (x, SLIDER_MARGIN, SLIDER_WIDTH, SLIDER_THICKNESS),
            step=STIFFNESS_STEP,
        ),
        "damping": Slider(
            "Damping", *DAMPING_RANGE, damping,
            (x, SLIDER_MARGIN + SLIDER_GAP, SLIDER_WIDTH, SLIDER_THICKNESS),
            step=DAMPING_STEP,
        ),
    }


# =========================
# EVENTS
# =========================

def handle_event(event, scene, sliders, origin=(0, 0)):
    """Apply one pygame event. Returns False when the app should quit."""

    if event.type == pygame.QUIT:
        return False

    for slider in sliders.values():
        if slider.handle_event(event):
            return True

    if event.type == pygame.KEYDOWN:

        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_r:
            scene.reset()
        elif event.key == pygame.K_UP:
            sliders["stiffness"].nudge(1)
        elif event.key == pygame.K_DOWN:
            sliders["stiffness"].nudge(-1)
        elif event.key == pygame.K_RIGHT:
            sliders["damping"].nudge(1)
        elif event.key == pygame.K_LEFT:
            sliders["damping"].nudge(-1)

    elif event.type == pygame.MOUSEMOTION:
        scene.set_pointer(pointer_to_local(event.pos, origin))

    return True


def run_frame(screen, scene, sliders, font, dt):
    """Simulate and draw one frame; the caller flips the display."""

    stiffness = sliders["stiffness"].value
    damping = sliders["damping"].value

    scene.step(dt, stiffness, damping)
    render(screen, scene, stiffness, damping, font, sliders.values())
    scene.advance_phase()


# =========================
# TIMING
# =========================

class FrameClock:
    """
    Paces the loop with pygame's Clock but measures the frame delta with
    a high resolution timer; Clock.tick only reports whole milliseconds.
    """

    def __init__(self, fps, timer=time.perf_counter):

        self.fps = fps
        self.clock = pygame.time.Clock()
        self.timer = timer
        self.last = timer()

    def tick(self):
        """Seconds since the previous tick."""

        self.clock.tick(self.fps)

        now = self.timer()
        dt = now - self.last
        self.last = now

        return dt


# =========================
# MAIN
# =========================

def main(argv=None):

    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, datefmt="%H:%M:%S")

    pygame.init()

    try:
        width, height = window_size(args)
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(CAPTION)

        font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

        scene = Scene.create(width, height)
        sliders = make_sliders(width, args.stiffness, args.damping)

        logger.info(
            "window %dx%d, stiffness=%.2f damping=%.2f",
            width, height, args.stiffness, args.damping,
        )

        origin = screen.get_rect().topleft
        last_report = 0
        clock = FrameClock(args.fps)

        running = True
        while running:

            dt = clock.tick()

            for event in pygame.event.get():
                if not handle_event(event, scene, sliders, origin):
                    running = False

            run_frame(screen, scene, sliders, font, dt)
            pygame.display.flip()

            if scene.frames - last_report >= args.fps:
                last_report = scene.frames
                logger.debug("fps=%.1f speed=%.2f", scene.fps, scene.speed)

        logger.info("shutting down after %d frames", scene.frames)

    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
