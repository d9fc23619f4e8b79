"""Chart data model and the Qt-free logic behind the line card.

``snapshot`` (matplotlib) is imported on demand rather than here to keep
startup light.
"""

from .types import ChartData, ChartForm, ChartPoint, InsufficientDataError  # noqa: F401
from .locator import NO_SELECTION, PointLocator, Selection, locate  # noqa: F401
from .rate import RateDirection, RateDisplay, format_rate  # noqa: F401
from .layout import HeaderLayout, LegendRateArrangement, PlotFrame, header_layout, plot_frame  # noqa: F401
from .formatting import format_value  # noqa: F401
