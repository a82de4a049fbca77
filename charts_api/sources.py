"""Source readers for tick logs."""

from __future__ import annotations

import logging
from typing import Optional

from common.config import Settings, get_settings

from .core.errors import SourceUnavailable

logger = logging.getLogger(__name__)


class FileSourceReader:
    """Reads a whole log file; relative paths resolve against the data dir."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def __call__(self, source: str) -> bytes:
        path = source
        try:
            path = self.settings.resolve_source(source)
            return path.read_bytes()
        except (OSError, ValueError, RuntimeError) as e:
            logger.error("[Source] READ_FAILED source=%s path=%s error=%s", source, path, e)
            reason = getattr(e, "strerror", None) or str(e)
            raise SourceUnavailable(source, f"open {source}: {reason.lower()}") from e
