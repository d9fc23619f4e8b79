"""Design system package: colors, chart styles, gradients, motion.

Qt-dependent helpers (``elevation``) are not imported here so the pure
modules remain importable headless.
"""

from .palette import Colors, GradientColor, GradientColors, normalize_hex  # noqa: F401
from .styles import ChartStyle, ColorScheme, Styles, style_for_scheme  # noqa: F401
from .gradients import GradientDef, GradientStop, area_fill_gradient, from_gradient_color  # noqa: F401
from . import reduced_motion  # noqa: F401
