from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_seed_records(path: Path | str) -> list[dict[str, Any]]:
    """Read a JSON array of app records from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON array of objects
    """
    target = Path(path)
    data = json.loads(target.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"Seed file {target} must contain a JSON array of objects")
    logger.info("Loaded %d seed apps from %s", len(data), target)
    return data
