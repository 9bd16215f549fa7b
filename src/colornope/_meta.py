from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("colornope")

logger = logging.getLogger("colornope")

__all__ = ["__version__", "logger"]
