"""
Logging setup shared by entry points and tests
"""

import logging
from typing import Optional

from config.settings import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the root logger once"""
    global _configured
    root = logging.getLogger()
    root.setLevel((level or Settings.LOG_LEVEL).upper())
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
