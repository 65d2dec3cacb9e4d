"""utils package – Geometry helpers, text drawing and background effects."""

from .geometry import clamp, distance, normalize, point_in_circle
from .helpers import draw_centered_text, draw_end_screen
from .vfx import RadialGradient, draw_ring
