"""Chart runtime bootstrap.

Loads configuration, applies the reduced-motion preference and registers the
shared services (``chart_config``, ``event_bus``, ``haptics``) in the service
locator so cards created afterwards pick them up.

Qt is imported lazily: ``headless=True`` skips creating a ``QApplication``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from time import perf_counter
from typing import Any, Optional

from linechart.design import reduced_motion
from linechart.services.event_bus import EventBus
from linechart.services.haptics import HapticFeedback
from linechart.services.service_locator import ServiceLocator, services

from .config_store import ChartConfig, apply_env_overrides, load_config

__all__ = ["ChartContext", "create_chart_context"]

log = logging.getLogger(__name__)


@dataclass
class ChartContext:
    """References created during bootstrap.

    Attributes
    ----------
    qt_app: The QApplication (None when headless)
    config: Effective configuration after environment overrides
    services: Service locator holding the shared services
    duration_s: Bootstrap wall time
    """

    qt_app: Optional[Any]
    config: ChartConfig
    services: ServiceLocator
    duration_s: float
    metadata: dict[str, Any] = field(default_factory=dict)


def create_chart_context(
    *,
    config_dir: str | Path | None = None,
    headless: bool = False,
    argv: Optional[list[str]] = None,
) -> ChartContext:
    start = perf_counter()
    cfg = apply_env_overrides(load_config(config_dir))
    reduced_motion.set_reduced_motion(cfg.reduced_motion)

    bus = EventBus()
    services.register("chart_config", cfg, allow_override=True)
    services.register("event_bus", bus, allow_override=True)
    services.register(
        "haptics", HapticFeedback(enabled=cfg.haptics_enabled, event_bus=bus), allow_override=True
    )

    qt_app = None
    if not headless:
        from PyQt6.QtWidgets import QApplication

        qt_app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    duration = perf_counter() - start
    log.debug("chart context ready in %.1f ms (headless=%s)", duration * 1000, headless)
    return ChartContext(
        qt_app=qt_app,
        config=cfg,
        services=services,
        duration_s=duration,
        metadata={"headless": headless},
    )
