# core/logging_setup.py
from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# marks the handler we own so repeated calls don't stack handlers
_HANDLER_NAME = "unit_converter"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return root
