from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from ..application.interfaces import ObservabilityRecorder

LOGGER_NAME = "app_catalog"


class LoggingObservabilityRecorder(ObservabilityRecorder):
    """Adapter that writes structured events to Python logging."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def record_event(
        self,
        stage: str,
        details: Mapping[str, Any] | None = None,
        trace_id: str | None = None,
    ) -> None:
        log_parts = [f"stage={stage}"]
        if trace_id:
            log_parts.append(f"trace_id={trace_id}")
        if details:
            log_parts.append(f"details={json.dumps(details, ensure_ascii=False, default=str)}")
        self._logger.info(" ".join(log_parts))
