from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable

logger = logging.getLogger(__name__)

FENCED_JSON_RE = re.compile(r"```json\s*([\s\S]*?)\s*```")

RecoveryStrategy = Callable[[str], Any]


def _from_fenced_block(raw: str) -> Any:
    match = FENCED_JSON_RE.search(raw)
    if not match:
        raise ValueError("no ```json fenced block found")
    return json.loads(match.group(1))


def _from_whole_string(raw: str) -> Any:
    return json.loads(raw)


RECOVERY_STRATEGIES: tuple[RecoveryStrategy, ...] = (
    _from_fenced_block,
    _from_whole_string,
)


def recover_json(raw: str, strategies: tuple[RecoveryStrategy, ...] = RECOVERY_STRATEGIES) -> Any | None:
    """Recover a JSON value from free-form model output.

    Each strategy either returns the parsed value or raises; the first one that
    succeeds wins. Returns ``None`` when none of them can parse ``raw``.
    """
    failures: list[str] = []
    for strategy in strategies:
        try:
            return strategy(raw or "")
        except Exception as exc:  # noqa: BLE001 - includes RecursionError on deeply nested input
            failures.append(f"{strategy.__name__.lstrip('_')}: {exc}")
    logger.warning("json_recovery_failed raw_len=%s attempts=%s", len(raw or ""), failures)
    return None
