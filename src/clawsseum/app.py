"""Application bootstrap — wires config, offerings and the job runner together."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config.toml from project root."""
    import tomllib

    config_path = config_path or Path(__file__).parent.parent.parent / "config.toml"
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    logger.debug(f"No config at {config_path}, using built-in defaults")
    return {}


class ArenaApp:
    """Holds the configured registry and runner for one process."""

    def __init__(self, config_path: Path | None = None):
        self.config = _load_config(config_path)

        # Lazy-initialized components
        self._registry = None
        self._runner = None

    @property
    def registry(self):
        if self._registry is None:
            from clawsseum.engine.offering_registry import OfferingRegistry

            self._registry = OfferingRegistry(self.config)
            self._registry.register_defaults()
        return self._registry

    @property
    def runner(self):
        if self._runner is None:
            from clawsseum.engine.job_runner import JobRunner

            self._runner = JobRunner(self.registry)
        return self._runner
