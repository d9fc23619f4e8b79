"""PyQt6 widgets: the line chart card and its parts."""

from .indicator_point import IndicatorPoint  # noqa: F401
from .line_plot import LinePlot  # noqa: F401
from .line_chart_view import LineChartView  # noqa: F401
