"""Line chart card widget for PyQt6.

Qt-free pieces (data model, point lookup, layout rules, styles) live in
``linechart.charting`` and ``linechart.design``; widgets in
``linechart.components``.
"""

from .charting import ChartData, ChartForm, InsufficientDataError, Selection, locate  # noqa: F401
from .design import ChartStyle, ColorScheme, Styles  # noqa: F401

__version__ = "0.1.0"
