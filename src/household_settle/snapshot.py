"""Loading household snapshots exported by the storage layer."""

import logging
from pathlib import Path

from pydantic import ValidationError

from .exceptions import SnapshotError
from .models import HouseholdSnapshot

logger = logging.getLogger(__name__)


def parse_snapshot(text: str) -> HouseholdSnapshot:
    """
    Parse a JSON household snapshot.

    Raises:
        SnapshotError: If the document is not valid JSON or misses fields
    """
    try:
        return HouseholdSnapshot.model_validate_json(text)
    except ValidationError as e:
        raise SnapshotError(f"Invalid household snapshot:\n{e}") from e


def load_snapshot(path: Path) -> HouseholdSnapshot:
    """
    Read a household snapshot from a JSON file.

    Args:
        path: Path to the exported snapshot

    Returns:
        Parsed snapshot

    Raises:
        SnapshotError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e

    snapshot = parse_snapshot(text)
    logger.debug(
        f"Loaded snapshot for household {snapshot.household_id}: "
        f"{len(snapshot.members)} members, {len(snapshot.entries)} entries"
    )
    return snapshot
