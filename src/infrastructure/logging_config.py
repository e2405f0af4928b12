"""
Logging setup for the device layer.

Components log through standard ``logging`` loggers and attach structured
data as ``extra={"context": {...}}``. ``ContextFormatter`` renders that
context as compact JSON after the message.
"""

import json
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVEL_ALIASES = {"warn": "WARNING"}


class ContextFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return message

        rendered = json.dumps(context, default=str, sort_keys=True)
        # Keep the traceback, if any, below the context.
        head, sep, tail = message.partition("\n")
        return f"{head} {rendered}{sep}{tail}"


def configure_logging(level: str = "info") -> None:
    """
    Attach a stdout handler to the root logger and set its level.

    Only the first call adds a handler; later calls just adjust the level.
    """
    root = logging.getLogger()
    name = _LEVEL_ALIASES.get(level.lower(), level.upper())
    root.setLevel(getattr(logging, name, logging.INFO))

    if any(getattr(handler, "_device_layer", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(LOG_FORMAT))
    handler._device_layer = True
    root.addHandler(handler)
