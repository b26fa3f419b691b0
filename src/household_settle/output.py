"""Console and logging helpers shared by the CLI commands."""

import logging
from pathlib import Path

from rich.console import Console

from .config import Settings
from .exceptions import ConfigurationError

console = Console()


def setup_logging(verbose: bool = False, level: str = "INFO"):
    """Setup logging configuration."""
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def resolve_snapshot_path(path: Path | None, settings: Settings) -> Path:
    """Use the given snapshot path, falling back to the configured default."""
    if path is not None:
        return path
    if settings.snapshot_path is not None:
        return settings.snapshot_path
    raise ConfigurationError(
        "No snapshot file given. Pass a path or set HOUSEHOLD_SETTLE_SNAPSHOT_PATH."
    )
