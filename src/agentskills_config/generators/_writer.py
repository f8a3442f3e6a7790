from __future__ import annotations

import json
import logging
from collections.abc import Collection
from pathlib import Path
from typing import Any

from ..config._io import atomic_write, dump_json, load_json
from ..errors import DirectoryCollisionError
from ..models.bundle import GeneratedConfig

logger = logging.getLogger(__name__)


def write_generated_config(generated: GeneratedConfig, *, replace: Collection[str] = ()) -> Path:
    """Write a generator's output to disk.

    Merge outputs are folded into the existing JSON file and every top-level key the
    output does not mention is kept. In the ``keep_existing`` sections an entry that
    is already present is left untouched unless its name is in ``replace``; other
    top-level mappings are upserted key by key, and scalars are only set when absent
    or null. All other outputs replace the file.

    Raises:
        DirectoryCollisionError: If the target path is an existing directory.
        ConfigReadError: If a merge target exists but is not valid JSON.
    """
    path = Path(generated.file_path)
    if path.is_dir():
        raise DirectoryCollisionError(path)

    content = generated.content
    if generated.merge and generated.format == "json":
        existing = load_json(path)
        if existing is not None:
            merged = _merge_top_level(
                existing, json.loads(content), generated.keep_existing, replace
            )
            content = dump_json(merged)

    atomic_write(path, content)
    logger.debug("Wrote %s", path)
    return path


def _merge_top_level(
    existing: dict[str, Any],
    update: dict[str, Any],
    keep_existing: Collection[str],
    replace: Collection[str],
) -> dict[str, Any]:
    merged = dict(existing)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            section = dict(current)
            for name, entry in value.items():
                if key in keep_existing and name in section and name not in replace:
                    continue
                section[name] = entry
            merged[key] = section
        elif current is None or isinstance(value, dict):
            merged[key] = value
    return merged
