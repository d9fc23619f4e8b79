"""Chart configuration persistence.

Stores user-level preferences for chart cards: color scheme override,
haptics, reduced motion, default form and value specifier.

- Pure logic (no Qt import) so it can be unit-tested headless.
- Explicit schema ``version`` field; an incompatible version resets to defaults.
- Corrupt files produce defaults instead of raising (logged at WARNING).
- Environment variables override file values (``apply_env_overrides``).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from linechart.charting.formatting import DEFAULT_VALUE_SPECIFIER, validate_specifier
from linechart.charting.types import ChartForm
from linechart.services.color_scheme import parse_preference

__all__ = [
    "ChartConfig",
    "load_config",
    "save_config",
    "apply_env_overrides",
    "CONFIG_VERSION",
    "DEFAULT_FILENAME",
]

log = logging.getLogger(__name__)

CONFIG_VERSION = 1
DEFAULT_FILENAME = "linechart.json"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _coerce_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        val = value.strip().lower()
        if val in _TRUE:
            return True
        if val in _FALSE:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(slots=True)
class ChartConfig:
    """Serializable chart preferences.

    Attributes
    ----------
    version: Schema version for migration handling.
    color_scheme: "system", "light" or "dark".
    haptics_enabled: Whether selection changes trigger haptic pulses.
    reduced_motion: Disable header/line animations.
    default_form: ChartForm value used when a card does not specify one.
    value_specifier: printf-style format for the selected value label.
    """

    version: int = CONFIG_VERSION
    color_scheme: str = "system"
    haptics_enabled: bool = True
    reduced_motion: bool = False
    default_form: str = ChartForm.MEDIUM.value
    value_specifier: str = DEFAULT_VALUE_SPECIFIER

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChartConfig":
        return cls(
            version=int(data.get("version", CONFIG_VERSION)),
            color_scheme=parse_preference(data.get("color_scheme")),
            haptics_enabled=_coerce_bool(data.get("haptics_enabled", True), "haptics_enabled"),
            reduced_motion=_coerce_bool(data.get("reduced_motion", False), "reduced_motion"),
            default_form=ChartForm.parse(data.get("default_form", ChartForm.MEDIUM.value)).value,
            value_specifier=validate_specifier(
                str(data.get("value_specifier", DEFAULT_VALUE_SPECIFIER))
            ),
        )

    @property
    def form(self) -> ChartForm:
        return ChartForm.parse(self.default_form)


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path.cwd()
    return base / DEFAULT_FILENAME


def _parse_bool(raw: str, name: str) -> Optional[bool]:
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    log.warning("Ignoring %s=%r (expected a boolean)", name, raw)
    return None


def apply_env_overrides(cfg: ChartConfig, environ: Optional[Mapping[str, str]] = None) -> ChartConfig:
    env = os.environ if environ is None else environ
    out = cfg
    scheme = env.get("LINECHART_COLOR_SCHEME")
    if scheme:
        try:
            out = replace(out, color_scheme=parse_preference(scheme))
        except ValueError as e:
            log.warning("Ignoring LINECHART_COLOR_SCHEME: %s", e)
    for var, field_name in (
        ("LINECHART_HAPTICS", "haptics_enabled"),
        ("LINECHART_REDUCED_MOTION", "reduced_motion"),
    ):
        raw = env.get(var)
        if raw:
            parsed = _parse_bool(raw, var)
            if parsed is not None:
                out = replace(out, **{field_name: parsed})
    return out


def load_config(base_dir: str | Path | None = None) -> ChartConfig:
    """Load chart config from ``base_dir`` (defaults to CWD)."""
    path = _resolve_path(base_dir)
    if not path.exists():
        return ChartConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        cfg = ChartConfig.from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        log.warning("Unreadable chart config %s (%s); using defaults", path, e)
        return ChartConfig()
    if cfg.version != CONFIG_VERSION:
        log.info("Chart config version %s != %s; resetting", cfg.version, CONFIG_VERSION)
        return ChartConfig()
    return cfg


def save_config(cfg: ChartConfig, base_dir: str | Path | None = None) -> Path:
    path = _resolve_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(path)
    return path
