from __future__ import annotations

import logging

from cecalc.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging once for the app and the CLI scripts.
    - Level defaults to settings.LOG_LEVEL (env: CECALC_LOG_LEVEL).
    - Repeated calls are harmless: basicConfig is a no-op once handlers exist.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
