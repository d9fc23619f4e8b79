"""Command line entry point for ``python -m linechart``.

Subcommands:
  gallery   open a window showing every form with legend/rate combinations
  snapshot  render one card to PNG/SVG via matplotlib (no window)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from linechart.charting.types import ChartData, ChartForm
from linechart.design.styles import ColorScheme, Styles

log = logging.getLogger(__name__)

DEMO_VALUES = [("Q1 2020", 10.0), ("Q2 2020", 25.0), ("Q3 2020", 28.0), ("Q4 2020", 18.0)]
DEMO_TITLE = "Line chart"
DEMO_LEGEND = "Basic"

# (section title, legend, rate per form)
GALLERY_SECTIONS = [
    ("Legend and rate", DEMO_LEGEND, True),
    ("Legend", DEMO_LEGEND, False),
    ("Rate", None, True),
    ("Only title", None, False),
]
GALLERY_RATES = {
    ChartForm.SMALL: 1.0,
    ChartForm.DETAIL: 1.0,
    ChartForm.MEDIUM: -1.0,
    ChartForm.LARGE: 1.0,
    ChartForm.EXTRA_LARGE: -1.0,
}


def parse_values(text: str, labels: Optional[str] = None) -> ChartData:
    """Parse ``"10,25,28"`` (plus optional ``"Q1,Q2,Q3"`` labels) into ChartData."""
    try:
        values = [float(v) for v in text.split(",") if v.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"values must be comma separated numbers: {e}") from e
    if labels:
        names = [s.strip() for s in labels.split(",")]
        if len(names) != len(values):
            raise argparse.ArgumentTypeError("labels and values differ in length")
        return ChartData.from_values(list(zip(names, values)))
    return ChartData.from_values(values)


def build_gallery(color_scheme: Optional[ColorScheme] = None):
    from PyQt6.QtWidgets import QGridLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

    from linechart.components.line_chart_view import LineChartView

    data = ChartData.from_values(DEMO_VALUES)
    body = QWidget()
    col = QVBoxLayout(body)
    for heading, legend, with_rate in GALLERY_SECTIONS:
        col.addWidget(QLabel(heading))
        grid = QGridLayout()
        for i, form in enumerate(ChartForm):
            card = LineChartView(
                data,
                title=DEMO_TITLE,
                legend=legend,
                form=form,
                rate_value=GALLERY_RATES[form] if with_rate else None,
                color_scheme=color_scheme,
            )
            grid.addWidget(card, i // 3, i % 3)
        col.addLayout(grid)
    scroll = QScrollArea()
    scroll.setWidget(body)
    scroll.setWidgetResizable(True)
    scroll.setWindowTitle("Line chart gallery")
    return scroll


def _cmd_gallery(args: argparse.Namespace) -> int:  # pragma: no cover - opens a window
    from linechart.app.bootstrap import create_chart_context

    ctx = create_chart_context(config_dir=args.config_dir)
    scheme = ColorScheme(args.scheme) if args.scheme else None
    win = build_gallery(scheme)
    win.resize(1180, 900)
    win.show()
    return ctx.qt_app.exec()


def _cmd_snapshot(args: argparse.Namespace) -> int:
    from linechart.charting.snapshot import CardSnapshot, render_snapshot

    data = parse_values(args.values, args.labels)
    card = CardSnapshot(
        data=data,
        title=args.title,
        legend=args.legend,
        style=Styles.named(args.style),
        form=ChartForm.parse(args.form),
        rate_value=args.rate,
        show_infinities=args.show_infinities,
        value_specifier=args.value_specifier,
        color_scheme=ColorScheme(args.scheme or "light"),
        selected_index=args.select,
    )
    out = render_snapshot(card, args.output, format=args.format, dpi=args.dpi)
    print(out)  # noqa: T201
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linechart", description=__doc__.splitlines()[0])
    parser.add_argument("--log-level", default="WARNING", help="root logging level")
    parser.add_argument("--config-dir", default=None, help="directory holding linechart.json")
    sub = parser.add_subparsers(dest="command", required=True)

    gal = sub.add_parser("gallery", help="show all forms in a window")
    gal.add_argument("--scheme", choices=[s.value for s in ColorScheme], default=None)
    gal.set_defaults(func=_cmd_gallery)

    snap = sub.add_parser("snapshot", help="render a card image")
    snap.add_argument("output", help="destination file")
    snap.add_argument("--values", default=",".join(str(v) for _, v in DEMO_VALUES))
    snap.add_argument("--labels", default=None)
    snap.add_argument("--title", default=DEMO_TITLE)
    snap.add_argument("--legend", default=None)
    snap.add_argument("--rate", type=float, default=None)
    snap.add_argument("--show-infinities", action="store_true")
    snap.add_argument("--form", default=ChartForm.MEDIUM.value)
    snap.add_argument("--style", default="line_chart_style_one")
    snap.add_argument("--scheme", choices=[s.value for s in ColorScheme], default=None)
    snap.add_argument("--value-specifier", default="%.0f")
    snap.add_argument("--select", type=int, default=None, help="render with this index selected")
    snap.add_argument("--format", choices=["png", "svg"], default="png")
    snap.add_argument("--dpi", type=int, default=120)
    snap.set_defaults(func=_cmd_snapshot)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (ValueError, KeyError, IndexError, argparse.ArgumentTypeError) as e:
        log.error("%s", e)
        print(f"error: {e}", file=sys.stderr)  # noqa: T201
        return 2
