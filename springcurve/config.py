# -*- coding: utf-8 -*-
"""
Tunable constants for the spring curve toy.
"""

# =========================
# WINDOW
# =========================

DEFAULT_WIDTH, DEFAULT_HEIGHT = 1200, 750
FPS = 60
CAPTION = "Spring Bezier"

BACKGROUND = (10, 10, 16)
TEXT_COLOR = (255, 255, 255)
SUBTEXT_COLOR = (170, 170, 170)
FPS_COLOR = (0, 255, 0)

# =========================
# GRID
# =========================

GRID_SPACING = 50
GRID_COLOR = (255, 255, 255, 10)

# =========================
# CURVE LAYOUT
# =========================

ENDPOINT_INSET = 200
P1_START_X = 400
P2_START_X = 600
CONTROL_OFFSET_Y = 120

# p2 chases the pointer this far to the right of p1
TARGET_OFFSET = (80, 0)

# =========================
# CURVE STYLE
# =========================

CURVE_STEP = 0.01
WAVE_AMPLITUDE = 4
WAVE_FREQUENCY = 6  # multiples of pi per unit t
PHASE_STEP = 0.05

STRESS_SPEED_SCALE = 0.05

MIN_STROKE = 2
MAX_STROKE = 6
STROKE_SPEED_SCALE = 0.1

TANGENT_STEP = 0.2
TANGENT_LENGTH = 30
TANGENT_COLOR = (255, 80, 80, 153)

# =========================
# TRAILS
# =========================

MAX_TRAIL = 25
TRAIL_RADIUS = 3
TRAIL1_COLOR = (255, 255, 255)
TRAIL2_COLOR = (255, 180, 180)

# =========================
# MARKERS / LABELS
# =========================

POINT_RADIUS = 6
LABEL_OFFSET = (8, -10)
P1_LABEL_OFFSET = (8, 18)
P2_LABEL_OFFSET = (12, -10)
MOUSE_LABEL_OFFSET = (8, -28)
SUBLABEL_GAP = 14

GUIDE_COLOR = (255, 255, 255, 77)
GUIDE_DASH = 4

# =========================
# DIAGNOSTICS PANEL
# =========================

PANEL_RECT = (10, -140, 260, 130)  # y is measured from the bottom edge
PANEL_COLOR = (0, 0, 0, 153)

FONT_NAME = "consolas"
FONT_SIZE = 14

# =========================
# SLIDERS
# =========================

STIFFNESS_RANGE = (0.0, 0.3)
STIFFNESS_DEFAULT = 0.08
STIFFNESS_STEP = 0.01

DAMPING_RANGE = (0.0, 1.0)
DAMPING_DEFAULT = 0.85
DAMPING_STEP = 0.01

SLIDER_WIDTH = 200
SLIDER_THICKNESS = 16
SLIDER_MARGIN = 20
SLIDER_GAP = 44
SLIDER_TRACK_COLOR = (45, 55, 75)
SLIDER_FILL_COLOR = (90, 120, 170)
SLIDER_KNOB_COLOR = (235, 235, 235)
