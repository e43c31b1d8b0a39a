"""Non-destructive merging of vendor extensions into an OpenAPI node.

Extension entries are keyed by name (``x-amazon-apigateway-*``). Merging follows
three rules:

1. A key missing from the target is inserted as-is.
2. When both the existing and the new value are objects, the new object's
   fields overwrite the existing ones one level deep. Fields only present on
   the existing object are preserved.
3. Any other combination replaces the existing value wholesale.

Applying the same updates twice leaves the target unchanged the second time.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

logger = logging.getLogger(__name__)

ExtensionMap = MutableMapping[str, Any]
PendingExtensions = Mapping[str, Any]


def merge_extensions(target: ExtensionMap, updates: PendingExtensions) -> None:
    """Merge ``updates`` into ``target`` in place."""

    if not isinstance(target, MutableMapping):
        raise TypeError(f"extension target must be a mutable mapping, got {type(target).__name__}")

    for key, value in updates.items():
        if key not in target:
            logger.debug("inserting extension %s", key)
            target[key] = _detach(value)
            continue

        existing = target[key]
        if isinstance(existing, MutableMapping) and isinstance(value, Mapping):
            logger.debug("merging fields %s into extension %s", sorted(value), key)
            existing.update(value)
        else:
            logger.debug("replacing extension %s", key)
            target[key] = _detach(value)


def _detach(value: Any) -> Any:
    # Later merges write into inserted objects; keep the caller's mapping intact.
    if isinstance(value, Mapping):
        return dict(value)
    return value
