"""Application-level wiring: configuration and bootstrap."""

from .config_store import ChartConfig, load_config, save_config  # noqa: F401
