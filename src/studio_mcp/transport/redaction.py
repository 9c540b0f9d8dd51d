"""Log-safe copies of peer payloads that may embed base64 images."""

from __future__ import annotations

import json
from typing import Any

MAX_LOGGED_STRING = 100


def truncate_long_strings(value: Any, limit: int = MAX_LOGGED_STRING) -> Any:
    """Return a copy of ``value`` with every string longer than ``limit`` replaced."""
    if isinstance(value, str):
        if len(value) > limit:
            return f"[IMAGE_DATA_TRUNCATED:{len(value)}_chars]"
        return value
    if isinstance(value, dict):
        return {key: truncate_long_strings(item, limit) for key, item in value.items()}
    if isinstance(value, list):
        return [truncate_long_strings(item, limit) for item in value]
    return value


def redact_image_payload(raw: str, limit: int = MAX_LOGGED_STRING) -> str:
    """Render ``raw`` for logging with oversized string fields replaced by a marker."""
    try:
        document = json.loads(raw)
    except ValueError:
        if len(raw) > limit:
            return f"[UNPARSEABLE_PAYLOAD:{len(raw)}_chars]"
        return raw
    return json.dumps(truncate_long_strings(document, limit), ensure_ascii=False)
